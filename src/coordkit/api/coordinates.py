"""
Coordinate conversion API endpoints.
"""

import logging

from fastapi import APIRouter, status

from coordkit.core.config import settings
from coordkit.core.coordinate import create_coordinate
from coordkit.core.errors import CoordinateParseError
from coordkit.core.systems import coordinate_systems
from coordkit.models.conversion import (
    ConvertRequest,
    ConvertResponse,
    SystemInfo,
    SystemsResponse,
)
from coordkit.models.coordinate import Format
from coordkit.models.errors import ErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/coordinates", tags=["coordinates"])


@router.get(
    "/systems",
    response_model=SystemsResponse,
    summary="List coordinate notations",
    description="Notations that can be parsed and rendered, with the configured defaults",
)
async def list_systems() -> SystemsResponse:
    """
    List the available coordinate notations.

    Returns:
        SystemsResponse with every notation and the default system/format
    """
    return SystemsResponse(
        systems=[
            SystemInfo(name=system.name, label=system.label)
            for system in coordinate_systems
        ],
        default_system=settings.default_system,
        default_format=settings.default_format,
    )


@router.post(
    "/convert",
    response_model=ConvertResponse,
    status_code=status.HTTP_200_OK,
    responses={
        422: {"model": ErrorResponse, "description": "Coordinate could not be parsed"},
        500: {"model": ErrorResponse, "description": "Internal server error"},
    },
    summary="Convert a coordinate",
    description="Parse a coordinate and render it in every notation and axis ordering",
)
async def convert_coordinate(request: ConvertRequest) -> ConvertResponse:
    """
    Parse a coordinate and render it in every notation.

    Args:
        request: Input, its notation and its axis ordering

    Returns:
        ConvertResponse with the signed degrees and every rendering

    Raises:
        CoordinateParseError: If the input is not a valid coordinate
    """
    create = create_coordinate(request.system, request.format)
    coordinate = create(request.input)

    if not coordinate.valid:
        raise CoordinateParseError(
            message=f"Invalid {request.system} coordinate",
            errors=list(coordinate.errors),
            system=request.system,
        )

    formats = {
        name: {
            fmt.value: getattr(coordinate, name)(fmt)
            for fmt in Format
        }
        for name in coordinate_systems._fields
    }

    logger.debug(f"Converted {request.system} coordinate {request.input!r}")

    return ConvertResponse(valid=True, raw=dict(coordinate.raw), formats=formats)
