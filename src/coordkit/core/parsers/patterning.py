"""
Grammars built from format templates.

A template names the pieces of both halves, e.g.
``degLat min secDec NS / degLon min secDec EW``. It is compiled into a
regular expression over the token class string produced by the lexer: the
numeric pieces of a half become one run of numbers and a bearing piece
becomes an optional bearing of the matching axis. How many numbers a half
really holds is settled afterwards by piece identification.
"""

import re
from typing import Dict, List, NamedTuple

from coordkit.core import symbols
from coordkit.core.symbols import DIVIDER_CLASS, NUMBER


class Grammar(NamedTuple):
    """A compiled format template."""

    template: str
    pattern: "re.Pattern[str]"
    numbers: int

    def matches(self, token_mask: str) -> bool:
        return self.pattern.match(token_mask) is not None


def from_template(partials: Dict[str, str], template: str) -> Grammar:
    """
    Compile a format template.

    Args:
        partials: Mapping of piece names to token classes
        template: Whitespace separated piece names and the divider

    Returns:
        Grammar matching token class strings of that shape

    Raises:
        KeyError: If the template names an unknown piece
    """
    parts: List[str] = []
    numbers = 0
    half_numbers = 0

    for name in template.split():
        if name == symbols.DIVIDER:
            parts.append(re.escape(DIVIDER_CLASS))
            numbers = max(numbers, half_numbers)
            half_numbers = 0
            continue

        token_class = partials[name]
        if token_class == NUMBER:
            half_numbers += 1
            if half_numbers == 1:
                parts.append(f"{NUMBER}+")
        else:
            parts.append(f"{token_class}?")

    numbers = max(numbers, half_numbers)
    pattern = re.compile("^" + "".join(parts) + "$")

    return Grammar(template=template, pattern=pattern, numbers=numbers)
