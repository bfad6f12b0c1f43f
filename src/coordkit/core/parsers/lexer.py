"""
Tokenizer for free-form latitude/longitude text.

Turns text such as ``40°26'46"N, 79°58'56"W`` into typed tokens and splits
them into the two axis halves, inferring the divider when it is missing.
"""

import re
from functools import lru_cache
from typing import Iterator, List, NamedTuple, Optional, Tuple

from coordkit.core import symbols
from coordkit.core.symbols import (
    DEGREES,
    DIVIDER_CLASS,
    LAT_BEARING,
    LON_BEARING,
    NUMBER,
    SECONDS,
    WORD,
)


class Token(NamedTuple):
    """A lexed piece of coordinate text and its class."""

    kind: str
    value: str


@lru_cache(maxsize=None)
def _token_pattern(divider: str) -> "re.Pattern[str]":
    return re.compile(
        r"""
        (?P<number>[+-]?\s*(?:\d+(?:\.\d*)?|\.\d+))(?:\s*(?P<unit>[°'"]))?
        | (?P<divider>{divider})
        | (?P<letters>[^\W\d_]+)
        | (?P<space>\s+)
        | (?P<other>.)
        """.format(divider=re.escape(divider)),
        re.VERBOSE,
    )


def normalize_text(text: str, divider: str) -> str:
    """Replace alternate glyphs with canonical ones and commas with the divider."""
    for alternate, glyph in symbols.ALTERNATE_GLYPHS:
        text = text.replace(alternate, glyph)
    return text.replace(",", divider)


def tokenize(text: str, divider: Optional[str] = None) -> List[Token]:
    """
    Split coordinate text into typed tokens.

    A sign may be separated from its digits by spaces and a unit glyph
    following a number (even after spaces) belongs to that number, so
    ``+ 89  °`` becomes the single token ``+89°``.

    Args:
        text: Raw coordinate text
        divider: Divider symbol, the configured one by default

    Returns:
        Tokens in input order
    """
    divider = divider or symbols.DIVIDER
    return list(_scan(_token_pattern(divider), normalize_text(text, divider)))


def _scan(pattern: "re.Pattern[str]", text: str) -> Iterator[Token]:
    for match in pattern.finditer(text):
        if match.group("number") is not None:
            value = re.sub(r"\s+", "", match.group("number"))
            yield Token(NUMBER, value + (match.group("unit") or ""))
        elif match.group("divider") is not None:
            yield Token(DIVIDER_CLASS, match.group("divider"))
        elif match.group("letters") is not None:
            letters = match.group("letters").upper()
            if letters in ("N", "S"):
                yield Token(LAT_BEARING, letters)
            elif letters in ("E", "W"):
                yield Token(LON_BEARING, letters)
            else:
                yield Token(WORD, match.group("letters"))
        elif match.group("other") is not None:
            yield Token(WORD, match.group("other"))


def mask(tokens: List[Token]) -> str:
    """Class string of a token list, e.g. ``nna/nno``."""
    return "".join(token.kind for token in tokens)


def is_bearing(token: Token) -> bool:
    return token.kind in (LAT_BEARING, LON_BEARING)


def count_letters(tokens: List[Token]) -> int:
    """Number of bearing letters and words made of letters."""
    return sum(
        1 for token in tokens if is_bearing(token) or token.value.isalpha()
    )


def count_numbers(tokens: List[Token]) -> int:
    return sum(1 for token in tokens if token.kind == NUMBER)


def infer_split(tokens: List[Token]) -> Optional[int]:
    """
    Find where the second half starts in text without a divider.

    Boundaries are taken from a bearing that is not last, a degree marked
    number that is not first and a seconds marked number that is not last
    (the boundary moves past a bearing right after it). Without any such
    hint exactly two numbers split one and one. Every hint has to agree.

    Args:
        tokens: Tokens containing no divider

    Returns:
        Index of the first token of the second half, or None when ambiguous
    """
    last = len(tokens) - 1
    candidates = set()

    for i, token in enumerate(tokens):
        if is_bearing(token) and i < last:
            candidates.add(i + 1)
        elif token.kind == NUMBER:
            if DEGREES in token.value and i > 0:
                candidates.add(i)
            if SECONDS in token.value and i < last:
                end = i + 1
                if is_bearing(tokens[end]):
                    end += 1
                candidates.add(end)

    candidates = {index for index in candidates if 0 < index <= last}

    if not candidates:
        numbers = [i for i, token in enumerate(tokens) if token.kind == NUMBER]
        if len(numbers) == 2:
            return numbers[1]
        return None

    if len(candidates) > 1:
        return None

    return candidates.pop()


def split_halves(
    tokens: List[Token],
) -> Optional[Tuple[List[Token], List[Token]]]:
    """
    Split tokens into the two axis halves.

    An explicit divider splits at its first occurrence; later dividers stay
    in the second half. Otherwise the split is inferred.

    Returns:
        The two halves, or None when no split can be determined
    """
    for i, token in enumerate(tokens):
        if token.kind == DIVIDER_CLASS:
            return tokens[:i], tokens[i + 1 :]

    index = infer_split(tokens)
    if index is None:
        return None

    return tokens[:index], tokens[index:]
