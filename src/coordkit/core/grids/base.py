"""
Interface between the coordinate engine and grid math libraries.
"""

from typing import Protocol, Tuple

from coordkit.core.parsers import decimal_degrees
from coordkit.core.parsers.parse import violation
from coordkit.models.coordinate import Format, FormatLike, ParseResult

# Grid notations are only defined between these latitudes
MIN_GRID_LATITUDE = -80.0
MAX_GRID_LATITUDE = 84.0


class GridBackend(Protocol):
    """Converts between WGS84 points and grid reference strings."""

    def point_to_grid(self, lat: float, lon: float) -> str:
        """Grid reference of a point; raises GridConversionError on failure."""
        ...

    def grid_to_point(self, text: str) -> Tuple[float, float]:
        """``(lat, lon)`` of a grid reference; raises GridConversionError on failure."""
        ...


def in_grid_domain(lat: float) -> bool:
    return MIN_GRID_LATITUDE <= lat <= MAX_GRID_LATITUDE


def lat_lon(fmt: FormatLike, values: Tuple[float, float]) -> Tuple[float, float]:
    """Reorder two values given in ``fmt`` order to ``(lat, lon)``."""
    first, second = values
    if Format(fmt) is Format.LATLON:
        return first, second
    return second, first


def point_to_tokens(fmt: FormatLike, lat: float, lon: float) -> ParseResult:
    """
    Express a converted point as Decimal Degrees tokens in ``fmt`` order.

    Args:
        fmt: Axis ordering wanted for the tokens
        lat: Latitude in decimal degrees
        lon: Longitude in decimal degrees

    Returns:
        ParseResult with the tokens, as the Decimal Degrees parser gives them
    """
    fmt = Format(fmt)
    values = (lat, lon) if fmt is Format.LATLON else (lon, lat)
    return decimal_degrees.parse(decimal_degrees.to_format(fmt, values), fmt)


def grid_violation(message: str, expected: str) -> str:
    """Prefix a grid message and append the expected shape."""
    return violation(f"{message}; expected format {expected}.")
