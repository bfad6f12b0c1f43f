"""
Degrees Minutes Seconds (DMS), e.g. ``40° 42' 46.08" N / 74° 0' 21.6" W``.
"""

from typing import Callable, Dict, List, Optional, Sequence, Tuple

from coordkit.core.parsers.checks import (
    apply_sign,
    bearing_for,
    check_degrees,
    format_number,
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
    SECONDS_HINT,
    assign_pieces,
)
from coordkit.core.symbols import DIVIDER, LIMITS, PARTIAL_PATTERNS
from coordkit.models.coordinate import Format, FormatLike, ParseResult

MAX_MINUTES = 59
MAX_SECONDS = 59.999999999

FORMATS = {
    Format.LATLON: from_template(
        PARTIAL_PATTERNS, f"degLat min secDec NS {DIVIDER} degLon min secDec EW"
    ),
    Format.LONLAT: from_template(
        PARTIAL_PATTERNS, f"degLon min secDec EW {DIVIDER} degLat min secDec NS"
    ),
}


def identify_pieces(half: List[str]) -> Optional[Dict[str, str]]:
    """
    Assign the tokens of one half to degrees, minutes, seconds and bearing.

    Glyphs decide first, position second, so ``['1°', '2"']`` is one degree
    and two seconds while ``['12°', '56']`` is twelve degrees and 56 minutes.
    """
    return assign_pieces(
        half,
        hints=(BEARING_HINT, DEGREES_HINT, MINUTES_HINT, SECONDS_HINT),
        fallback=("deg", "min", "sec"),
        max_tokens=4,
    )


def identify_errors(
    fmt: FormatLike,
) -> Callable[[Optional[Dict[str, str]], int], ParseResult]:
    """
    Build the validator for halves of text in the given format.

    Args:
        fmt: Axis ordering of the text

    Returns:
        Function validating the pieces of the half at an index
    """
    fmt = Format(fmt)

    def validate(pieces: Optional[Dict[str, str]], index: int) -> ParseResult:
        if pieces is None:
            return ParseResult([], [INVALID_VALUE])

        minutes = pieces["min"] or "0"
        seconds = pieces["sec"] or "0"
        bear, deg, conflict = apply_sign(fmt, index, pieces["bear"], pieces["deg"] or "0")
        if conflict:
            return ParseResult([], [conflict])

        errors = [
            error
            for error in (
                check_degrees(deg, LIMITS[fmt][index], integral=True),
                in_range("Minutes", minutes, MAX_MINUTES, integral=True),
                in_range("Seconds", seconds, MAX_SECONDS),
            )
            if error
        ]
        if errors:
            return ParseResult([], errors)

        return ParseResult([deg, minutes, seconds, bear], [])

    return validate


parse_degrees_minutes_seconds = create_parser(FORMATS, identify_pieces, identify_errors)


def to_float(tokens: Sequence[str]) -> float:
    """``[deg, min, sec, bear]`` to signed decimal degrees, rounded to 9 places."""
    deg, minutes, seconds, bear = tokens[0], tokens[1], tokens[2], tokens[-1]
    return signed(
        round(float(deg) + float(minutes) / 60 + float(seconds) / 3600, 9), bear
    )


def to_format(fmt: FormatLike, values: Tuple[float, float]) -> str:
    """
    Render two values, ordered by ``fmt``, as Degrees Minutes Seconds.

    >>> to_format("LATLON", (40.7128, -74.006))
    '40 42 46.08 N / 74 0 21.6 W'
    """
    parts = []
    for i, value in enumerate(values):
        magnitude = abs(value)
        degrees = int(magnitude)
        total_minutes = (magnitude - degrees) * 60
        minutes = int(total_minutes)
        seconds = round((total_minutes - minutes) * 60, 10)

        # Rounding may produce a full minute or degree
        if seconds >= 60:
            minutes, seconds = minutes + 1, 0.0
        if minutes >= 60:
            degrees, minutes = degrees + 1, 0

        parts.append(
            f"{degrees} {minutes} {format_number(seconds)} {bearing_for(fmt, i, value)}"
        )

    return join_halves(parts)
