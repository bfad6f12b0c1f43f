"""
Data models and schemas.
"""

from .conversion import (
    ConvertRequest,
    ConvertResponse,
    SystemInfo,
    SystemsResponse,
)
from .coordinate import (
    EMPTY_RAW,
    Axis,
    Coordinate,
    CoordinateSystem,
    Format,
    FormatLike,
    ParseResult,
)
from .errors import ErrorDetail, ErrorResponse

__all__ = [
    # Coordinate models
    "Axis",
    "Coordinate",
    "CoordinateSystem",
    "EMPTY_RAW",
    "Format",
    "FormatLike",
    "ParseResult",
    # Conversion API models
    "ConvertRequest",
    "ConvertResponse",
    "SystemInfo",
    "SystemsResponse",
    # Error models
    "ErrorDetail",
    "ErrorResponse",
]
