"""
Format cache seeding.

The text a coordinate was created from is kept as the rendering of its own
notation. The opposite axis ordering is derived by swapping the two halves
of that text rather than by recomputing it from floats, so flipping the
order never introduces rounding.
"""

from typing import Dict

from coordkit.core.symbols import DIVIDER
from coordkit.models.coordinate import Format, FormatLike


def swap_halves(value: str) -> str:
    """
    Swap the two divider separated halves of a rendered coordinate.

    >>> swap_halves("40.7128 N / 74.006 W")
    '74.006 W / 40.7128 N'
    """
    separator = f" {DIVIDER} "
    return separator.join(reversed(value.split(separator)))


def create_cache(fmt: FormatLike, value: str) -> Dict[Format, str]:
    """
    Cache entry for a notation seeded from text in ``fmt`` order.

    Args:
        fmt: Axis ordering of ``value``
        value: Rendered coordinate

    Returns:
        Both axis orderings of the rendering
    """
    fmt = Format(fmt)
    return {fmt: value, fmt.other: swap_halves(value)}
