"""
Configuration settings for the coordkit application.
"""

from typing import Literal, Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Characters that already carry meaning inside a coordinate string.
RESERVED_DIVIDER_CHARACTERS = "°'\"+-.,"


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    Attributes:
        divider: Symbol separating the two axis halves of a coordinate string
        default_system: Notation used when none is requested
        default_format: Axis ordering used when none is requested
        mgrs_precision: Number of easting/northing digits rendered for MGRS
        environment: Deployment environment name
        log_level: Explicit log level, derived from the environment when unset
        json_logs: Whether file logs are written as JSON
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_prefix="COORDKIT_",
    )

    # Parsing settings
    divider: str = "/"
    default_system: Literal["dd", "ddm", "dms", "mgrs", "utm"] = "dd"
    default_format: Literal["LATLON", "LONLAT"] = "LATLON"

    # Grid settings
    mgrs_precision: int = 5

    # API settings
    api_v1_prefix: str = "/api/v1"
    port: int = 8000

    # CORS settings
    cors_origins: str = "http://localhost:5173,http://localhost:3000"

    # Logging
    log_level: Optional[str] = None
    json_logs: bool = False

    # Environment
    environment: Literal["development", "staging", "production"] = "development"

    @field_validator("divider")
    @classmethod
    def validate_divider(cls, value: str) -> str:
        """Ensure the divider is a single character that cannot be confused with a coordinate part."""
        if len(value) != 1:
            raise ValueError(f"Divider must be a single character, got {value!r}")
        if value.isalnum() or value.isspace() or value in RESERVED_DIVIDER_CHARACTERS:
            raise ValueError(f"Divider {value!r} conflicts with coordinate syntax")
        return value

    @field_validator("mgrs_precision")
    @classmethod
    def validate_mgrs_precision(cls, value: int) -> int:
        """Ensure the MGRS precision is between 1 and 5 digits."""
        if not 1 <= value <= 5:
            raise ValueError(f"MGRS precision must be between 1 and 5, got {value}")
        return value

    @property
    def cors_origins_list(self) -> list[str]:
        """Get CORS origins as a list."""
        return [origin.strip() for origin in self.cors_origins.split(",")]


# Global settings instance
settings = Settings()
