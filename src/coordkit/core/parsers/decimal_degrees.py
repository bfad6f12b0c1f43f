"""
Decimal Degrees (DD), e.g. ``40.7128 N / 74.006 W``.
"""

from typing import Callable, Dict, List, Optional, Sequence, Tuple

from coordkit.core.parsers.checks import (
    apply_sign,
    bearing_for,
    check_degrees,
    format_number,
    glyph_not_allowed,
    join_halves,
    signed,
)
from coordkit.core.parsers.parse import INVALID_VALUE, create_parser
from coordkit.core.parsers.patterning import from_template
from coordkit.core.symbols import (
    DIVIDER,
    LIMITS,
    MINUTES,
    PARTIAL_PATTERNS,
    SECONDS,
    SYMBOL_PATTERNS,
)
from coordkit.models.coordinate import Format, FormatLike, ParseResult

NOTATION = "Decimal Degrees"

FORMATS = {
    Format.LATLON: from_template(
        PARTIAL_PATTERNS, f"degLatDec NS {DIVIDER} degLonDec EW"
    ),
    Format.LONLAT: from_template(
        PARTIAL_PATTERNS, f"degLonDec EW {DIVIDER} degLatDec NS"
    ),
}


def identify_pieces(half: List[str]) -> Optional[Dict[str, str]]:
    """
    Separate the bearing letter from the degrees of one half.

    A half holds one degrees value; a second number has no slot and fails
    identification.

    >>> identify_pieces(["45.5", "N"])
    {'bear': 'N', 'deg': '45.5'}
    >>> identify_pieces(["45.5", "99"]) is None
    True
    """
    if not 1 <= len(half) <= 2:
        return None

    pieces = {"bear": "", "deg": ""}
    for token in half:
        if SYMBOL_PATTERNS["NSEW"].match(token) and not pieces["bear"]:
            pieces["bear"] = token
        elif pieces["deg"]:
            return None
        else:
            pieces["deg"] = token

    return pieces


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

        typed = "".join(pieces.values())
        bear, deg, conflict = apply_sign(fmt, index, pieces["bear"], pieces["deg"] or "0")
        if conflict:
            return ParseResult([], [conflict])

        errors = [
            error
            for error in (
                check_degrees(deg, LIMITS[fmt][index]),
                glyph_not_allowed(typed, MINUTES, "Minutes", NOTATION),
                glyph_not_allowed(typed, SECONDS, "Seconds", NOTATION),
            )
            if error
        ]
        if errors:
            return ParseResult([], errors)

        return ParseResult([deg, bear], [])

    return validate


parse_decimal_degrees = create_parser(FORMATS, identify_pieces, identify_errors)


def parse(text: str, fmt: FormatLike = Format.LATLON) -> ParseResult:
    """Parse Decimal Degrees text, LATLON unless told otherwise."""
    return parse_decimal_degrees(fmt, text)


def to_float(tokens: Sequence[str]) -> float:
    """``[deg, bear]`` to signed decimal degrees."""
    return signed(float(tokens[0]), tokens[-1])


def to_format(fmt: FormatLike, values: Tuple[float, float]) -> str:
    """
    Render two values, ordered by ``fmt``, as Decimal Degrees.

    >>> to_format("LATLON", (40.7128, -74.006))
    '40.7128 N / 74.006 W'
    """
    return join_halves(
        [
            f"{format_number(abs(value))} {bearing_for(fmt, i, value)}"
            for i, value in enumerate(values)
        ]
    )
