"""
Generic parse orchestration for the degree based notations.

Each notation supplies its format grammars, a piece identifier and an
error identifier; ``create_parser`` wires them into a
``parse(format, text) -> ParseResult`` function. Failures inside a parse
attempt raise ``CoordinateParseError`` and are turned into error messages
before the function returns.
"""

import logging
from typing import Callable, Dict, Iterable, List, Mapping, Optional

from coordkit.core import symbols
from coordkit.core.errors import CoordinateParseError
from coordkit.core.parsers import lexer
from coordkit.core.parsers.checks import format_number, to_number
from coordkit.core.parsers.lexer import Token
from coordkit.core.parsers.patterning import Grammar
from coordkit.core.symbols import DIVIDER_CLASS, NUMBER, SYMBOL_PATTERNS
from coordkit.models.coordinate import Format, FormatLike, ParseResult

logger = logging.getLogger(__name__)

ERROR_PREFIX = "[ERROR] "

INVALID_VALUE = "Invalid coordinate value."
TOO_MANY_BEARINGS = "Too many bearings."
TOO_MANY_NUMBERS = "Too many numbers."
AMBIGUOUS_GROUPING = "Ambiguous grouping of numbers with no divider."
NEGATIVE_NON_DEGREES = "Negative value for non-degrees value found."

Pieces = Dict[str, str]
IdentifyPieces = Callable[[List[str]], Optional[Pieces]]
IdentifyErrors = Callable[[Format], Callable[[Optional[Pieces], int], ParseResult]]
Parser = Callable[[FormatLike, str], ParseResult]


def violation(message: str) -> str:
    """Prefix a message the way every reported problem is prefixed."""
    return f"{ERROR_PREFIX}{message}"


def unique(messages: Iterable[str]) -> List[str]:
    """Drop repeated messages, keeping the first occurrence of each."""
    return list(dict.fromkeys(messages))


def clean_token(value: str) -> str:
    """Strip unit glyphs from a token and write numbers in their shortest form."""
    value = SYMBOL_PATTERNS["GLYPHS"].sub("", value)
    if SYMBOL_PATTERNS["NSEW"].match(value):
        return value
    return format_number(to_number(value))


def _unsplittable(tokens: List[Token], numbers_per_half: int) -> str:
    if lexer.count_letters(tokens) > 2:
        return TOO_MANY_BEARINGS
    if lexer.count_numbers(tokens) > 2 * numbers_per_half:
        return TOO_MANY_NUMBERS
    return AMBIGUOUS_GROUPING


def _unmatched(tokens: List[Token], numbers_per_half: int) -> str:
    if lexer.count_letters(tokens) > 2:
        return TOO_MANY_BEARINGS
    if sum(1 for token in tokens if token.kind == DIVIDER_CLASS) > 1:
        return INVALID_VALUE
    if lexer.count_numbers(tokens) > 2 * numbers_per_half:
        return TOO_MANY_NUMBERS
    return INVALID_VALUE


def _has_negative_non_degrees(half: List[Token]) -> bool:
    numbers = [token for token in half if token.kind == NUMBER]
    return any(token.value.startswith(symbols.NEGATIVE) for token in numbers[1:])


def create_parser(
    formats: Mapping[Format, Grammar],
    identify_pieces: IdentifyPieces,
    identify_errors: IdentifyErrors,
) -> Parser:
    """
    Build a parser for one notation.

    Args:
        formats: Grammar per axis ordering
        identify_pieces: Assigns the tokens of one half to named slots
        identify_errors: Given a format, validates the slots of one half

    Returns:
        ``parse(format, text) -> ParseResult``
    """

    def run(fmt: Format, text: str) -> List[str]:
        tokens = lexer.tokenize(text)
        expected = formats[fmt]
        alternate = formats[fmt.other]

        if not lexer.count_numbers(tokens):
            raise CoordinateParseError(errors=[INVALID_VALUE])

        halves = lexer.split_halves(tokens)
        if halves is None:
            raise CoordinateParseError(
                errors=[_unsplittable(tokens, expected.numbers)]
            )

        token_mask = DIVIDER_CLASS.join(lexer.mask(half) for half in halves)
        matches_expected = expected.matches(token_mask)
        matches_alternate = alternate.matches(token_mask)

        if not (matches_expected or matches_alternate):
            raise CoordinateParseError(errors=[_unmatched(tokens, expected.numbers)])

        if any(_has_negative_non_degrees(half) for half in halves):
            raise CoordinateParseError(errors=[NEGATIVE_NON_DEGREES])

        if not matches_expected:
            raise CoordinateParseError(
                errors=[
                    f'Mismatched formats: "{fmt.value}" expected, '
                    f'"{fmt.other.value}" found.'
                ]
            )

        validate = identify_errors(fmt)
        results = [
            validate(identify_pieces([token.value for token in half]), i)
            for i, half in enumerate(halves)
        ]

        errors = [error for result in results for error in result.errors]
        if errors:
            raise CoordinateParseError(errors=errors)

        first, second = (
            [clean_token(value) for value in result.tokens] for result in results
        )
        return first + [symbols.DIVIDER] + second

    def parse(fmt: FormatLike, text: str) -> ParseResult:
        fmt = Format(fmt)
        try:
            tokens = run(fmt, text)
        except CoordinateParseError as exc:
            errors = unique(exc.errors)
            logger.debug(f"Rejected {text!r} as {fmt.value}: {errors}")
            return ParseResult([], [violation(error) for error in errors])

        return ParseResult(tokens, [])

    return parse
