"""
Range and finiteness checks for numeric latitude/longitude input.
"""

import math
from numbers import Real
from typing import Any, List, Optional

from coordkit.core.parsers.checks import format_number
from coordkit.core.parsers.parse import violation

LAT_LIMIT = 90
LON_LIMIT = 180


def is_finite_number(value: Any) -> bool:
    """
    Check that a value is a real number that is neither NaN nor infinite.

    Booleans are not numbers here even though Python treats them as such.
    """
    return (
        isinstance(value, Real)
        and not isinstance(value, bool)
        and math.isfinite(value)
    )


def _describe(value: Any) -> str:
    if isinstance(value, Real) and not isinstance(value, bool):
        return format_number(float(value))
    return str(value)


def validate_signed_range(label: str, value: Any, limit: float) -> Optional[str]:
    """
    Validate that a value lies within ``-limit`` to ``limit``.

    Args:
        label: Name used in messages, e.g. ``Latitude``
        value: Value to check
        limit: Absolute limit

    Returns:
        Error message, or None when the value is valid

    Example:
        >>> validate_signed_range("Latitude", 95, 90)
        '[ERROR] Latitude value (95) is outside valid range (-90 to 90).'
    """
    if not is_finite_number(value):
        return violation(
            f"Invalid {label.lower()} value ({_describe(value)}); expected a finite number."
        )

    if value < -limit or value > limit:
        return violation(
            f"{label} value ({_describe(value)}) is outside valid range "
            f"(-{format_number(limit)} to {format_number(limit)})."
        )

    return None


def validate_numeric_coordinate(lat: Any, lon: Any) -> List[str]:
    """
    Validate a latitude/longitude pair, reporting both axes.

    Args:
        lat: Latitude, must be within -90 to 90
        lon: Longitude, must be within -180 to 180

    Returns:
        Error messages, empty when both values are valid
    """
    errors = [
        validate_signed_range("Latitude", lat, LAT_LIMIT),
        validate_signed_range("Longitude", lon, LON_LIMIT),
    ]
    return [error for error in errors if error]
