"""
Degrees Decimal Minutes (DDM), e.g. ``40° 42.768' N / 74° 0.36' W``.
"""

from typing import Callable, Dict, List, Optional, Sequence, Tuple

from coordkit.core.parsers.checks import (
    apply_sign,
    bearing_for,
    check_degrees,
    format_number,
    glyph_not_allowed,
    in_range,
    join_halves,
    signed,
)
from coordkit.core.parsers.parse import INVALID_VALUE, create_parser
from coordkit.core.parsers.patterning import from_template
from coordkit.core.parsers.pieces import (
    BEARING_HINT,
    DEGREES_HINT,
    MINUTES_HINT,
    assign_pieces,
)
from coordkit.core.symbols import DIVIDER, LIMITS, PARTIAL_PATTERNS, SECONDS
from coordkit.models.coordinate import Format, FormatLike, ParseResult

NOTATION = "Degree Decimal Minutes"
MAX_MINUTES = 59.999999999

FORMATS = {
    Format.LATLON: from_template(
        PARTIAL_PATTERNS, f"degLat minDec NS {DIVIDER} degLon minDec EW"
    ),
    Format.LONLAT: from_template(
        PARTIAL_PATTERNS, f"degLon minDec EW {DIVIDER} degLat minDec NS"
    ),
}


def identify_pieces(half: List[str]) -> Optional[Dict[str, str]]:
    """
    Assign the tokens of one half to degrees, minutes and bearing.

    >>> identify_pieces(["122°", "25.164'", "W"])
    {'bear': 'W', 'deg': '122°', 'min': "25.164'"}
    """
    return assign_pieces(
        half,
        hints=(BEARING_HINT, DEGREES_HINT, MINUTES_HINT),
        fallback=("deg", "min"),
        max_tokens=3,
    )


def identify_errors(
    fmt: FormatLike,
) -> Callable[[Optional[Dict[str, str]], int], ParseResult]:
    """
    Build the validator for halves of text in the given format.

    Degrees must be whole and minutes at most 59.999999999; a seconds
    glyph is rejected.
    """
    fmt = Format(fmt)

    def validate(pieces: Optional[Dict[str, str]], index: int) -> ParseResult:
        if pieces is None:
            return ParseResult([], [INVALID_VALUE])

        typed = "".join(pieces.values())
        minutes = pieces["min"] or "0"
        bear, deg, conflict = apply_sign(fmt, index, pieces["bear"], pieces["deg"] or "0")
        if conflict:
            return ParseResult([], [conflict])

        errors = [
            error
            for error in (
                check_degrees(deg, LIMITS[fmt][index], integral=True),
                in_range("Minutes", minutes, MAX_MINUTES),
                glyph_not_allowed(typed, SECONDS, "Seconds", NOTATION),
            )
            if error
        ]
        if errors:
            return ParseResult([], errors)

        return ParseResult([deg, minutes, bear], [])

    return validate


parse_degrees_decimal_minutes = create_parser(FORMATS, identify_pieces, identify_errors)


def to_float(tokens: Sequence[str]) -> float:
    """``[deg, min, bear]`` to signed decimal degrees, rounded to 9 places."""
    deg, minutes, bear = tokens[0], tokens[1], tokens[-1]
    return signed(round(float(deg) + float(minutes) / 60, 9), bear)


def to_format(fmt: FormatLike, values: Tuple[float, float]) -> str:
    """
    Render two values, ordered by ``fmt``, as Degrees Decimal Minutes.

    >>> to_format("LATLON", (40.7128, -74.006))
    '40 42.768 N / 74 0.36 W'
    """
    parts = []
    for i, value in enumerate(values):
        magnitude = abs(value)
        degrees = int(magnitude)
        minutes = round((magnitude - degrees) * 60, 10)
        if minutes >= 60:
            degrees, minutes = degrees + 1, 0.0

        parts.append(f"{degrees} {format_number(minutes)} {bearing_for(fmt, i, value)}")

    return join_halves(parts)
