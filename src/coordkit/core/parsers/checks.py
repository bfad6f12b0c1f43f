"""
Number handling and range checks shared by the degree based parsers.
"""

import math
import re
from decimal import Decimal
from typing import Optional, Sequence, Tuple

from coordkit.core.symbols import BEARINGS, DIVIDER, SYMBOL_PATTERNS
from coordkit.models.coordinate import Format, FormatLike

_LEADING_NUMBER = re.compile(r"^[+-]?(?:\d+(?:\.\d*)?|\.\d+)")


def to_number(value: str) -> float:
    """
    Read the leading number of a token, ignoring any trailing glyph.

    Args:
        value: Token such as ``-79°`` or ``46.302"``

    Returns:
        The numeric value, NaN when the token does not start with a number
    """
    match = _LEADING_NUMBER.match(value.strip())
    if match is None:
        return math.nan
    return float(match.group(0))


def format_number(value: float) -> str:
    """
    Render a number the short way: no trailing ``.0`` and no exponent.

    >>> format_number(45.0)
    '45'
    >>> format_number(74.006)
    '74.006'
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == int(value):
        return str(int(value))

    text = repr(value)
    if "e" in text or "E" in text:
        text = format(Decimal(text), "f")
    return text


def check_degrees(deg: str, limit: int, integral: bool = False) -> Optional[str]:
    """
    Check a degrees value against the limit of its axis.

    Args:
        deg: Degrees token as typed (may carry the degree glyph)
        limit: 90 or 180
        integral: Whether decimal degrees are forbidden

    Returns:
        Error message or None
    """
    if to_number(deg) > limit:
        return f"Degrees value ({deg}) exceeds max value ({limit})."

    if integral and "." in deg:
        return f"Degrees value ({deg}) must not include decimal value."

    return None


def in_range(
    label: str, value: str, limit: float, integral: bool = False
) -> Optional[str]:
    """
    Check a minutes or seconds value.

    Args:
        label: ``Minutes`` or ``Seconds``
        value: Token as typed
        limit: Largest accepted value
        integral: Whether a decimal part is forbidden

    Returns:
        Error message or None
    """
    if value.startswith("-"):
        return "Negative value for non-degrees value found."

    if to_number(value) > limit:
        return f"{label} value ({value}) exceeds max value ({format_number(limit)})."

    if integral and "." in value:
        return f"{label} value ({value}) must not include decimal value."

    return None


def glyph_not_allowed(text: str, glyph: str, label: str, notation: str) -> Optional[str]:
    """Report a unit glyph that does not belong to a notation."""
    if glyph in text:
        return f"{label} indicator ({glyph}) not valid in {notation}."
    return None


def apply_sign(fmt: Format, index: int, bear: str, deg: str) -> Tuple[str, str, Optional[str]]:
    """
    Reconcile a degrees sign with the bearing letter of one half.

    Without a bearing, or with a negative degrees value, the bearing is taken
    from the sign and degrees become the absolute value. A bearing that
    contradicts a negative value is an error.

    Args:
        fmt: Axis ordering of the text
        index: Position of the half (0 or 1)
        bear: Bearing letter as typed, possibly empty
        deg: Degrees token as typed

    Returns:
        Tuple of (bearing, degrees, conflict message or None)
    """
    negative = SYMBOL_PATTERNS["NEGATIVE_SIGN"].match(deg) is not None
    positive_letter, negative_letter = BEARINGS[fmt][index]

    if bear and negative and bear != negative_letter:
        return bear, deg, f"Bearing ({bear}) conflicts with negative number ({deg})."

    if not bear or negative:
        bear = negative_letter if negative else positive_letter
        deg = format_number(abs(to_number(deg)))

    return bear, deg, None


def bearing_for(fmt: FormatLike, index: int, value: float) -> str:
    """Bearing letter for a signed value at a position of a format."""
    return BEARINGS[Format(fmt)][index][1 if value < 0 else 0]


def signed(magnitude: float, bear: str) -> float:
    """Apply the sign a bearing letter implies; south and west are negative."""
    return -magnitude if bear in ("S", "W") else magnitude


def join_halves(parts: Sequence[str]) -> str:
    """Join rendered halves with the divider flanked by spaces."""
    return f" {DIVIDER} ".join(parts)
