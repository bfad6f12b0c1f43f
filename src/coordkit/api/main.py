"""
Main FastAPI application instance.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from coordkit import __version__
from coordkit.api.coordinates import router as coordinates_router
from coordkit.api.error_handlers import register_error_handlers
from coordkit.core.config import settings
from coordkit.core.logging_config import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    Lifespan context manager for FastAPI application.

    Configures logging on startup and logs shutdown.
    """
    setup_logging(enable_console=True)
    logger.info(f"Starting coordkit API v{__version__} in {settings.environment} mode")

    yield

    logger.info("Shutting down coordkit API")


app = FastAPI(
    title="coordkit API",
    description="Parse, validate and convert geographic coordinates",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

app.include_router(coordinates_router, prefix=settings.api_v1_prefix)


@app.get("/")
async def root() -> dict[str, str]:
    """
    Root endpoint returning API information.

    Returns:
        dict[str, str]: API information including name and version.
    """
    return {
        "name": "coordkit API",
        "version": __version__,
        "description": "Coordinate parsing and conversion",
    }


@app.get("/health")
async def health_check() -> dict[str, str]:
    """
    Health check endpoint.

    Returns:
        dict[str, str]: Health status.
    """
    return {"status": "healthy"}


def run() -> None:
    """Serve the API with uvicorn on the configured port."""
    uvicorn.run(
        "coordkit.api.main:app",
        host="0.0.0.0",
        port=settings.port,
        reload=settings.environment == "development",
    )


if __name__ == "__main__":
    run()
