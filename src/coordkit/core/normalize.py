"""
Normalization of tuple and mapping coordinate input.
"""

from collections.abc import Mapping
from numbers import Real
from typing import Any, Dict, Optional, Sequence, Tuple

from coordkit.models.coordinate import Format, FormatLike

LAT_KEYS = ("lat", "latitude")
LON_KEYS = ("lon", "longitude")


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def is_coordinate_tuple(value: Any) -> bool:
    """Check for a list or tuple of exactly two numbers."""
    return (
        isinstance(value, (list, tuple))
        and len(value) == 2
        and all(_is_number(item) for item in value)
    )


def is_coordinate_object(value: Any) -> bool:
    """Check for a mapping with a latitude and a longitude key in any case."""
    if not isinstance(value, Mapping):
        return False

    keys = {str(key).lower() for key in value}
    return any(key in keys for key in LAT_KEYS) and any(key in keys for key in LON_KEYS)


def normalize_object_to_lat_lon(obj: Mapping) -> Optional[Dict[str, Any]]:
    """
    Extract latitude and longitude from a mapping with case-insensitive keys.

    Aliases are tried in order (``lat`` before ``latitude``, ``lon`` before
    ``longitude``).

    Args:
        obj: Mapping such as ``{"Latitude": 45.5, "LON": -122.6}``

    Returns:
        ``{"lat": ..., "lon": ...}`` or None when either is missing
    """
    normalized = {str(key).lower(): value for key, value in obj.items()}

    lat_key = next((key for key in LAT_KEYS if key in normalized), None)
    lon_key = next((key for key in LON_KEYS if key in normalized), None)
    if lat_key is None or lon_key is None:
        return None

    lat, lon = normalized[lat_key], normalized[lon_key]
    if lat is None or lon is None:
        return None

    return {"lat": lat, "lon": lon}


def tuple_to_lat_lon(fmt: FormatLike, values: Sequence[Any]) -> Tuple[Any, Any]:
    """Read a pair as ``(lat, lon)``; LONLAT pairs list longitude first."""
    if Format(fmt) is Format.LATLON:
        return values[0], values[1]
    return values[1], values[0]
