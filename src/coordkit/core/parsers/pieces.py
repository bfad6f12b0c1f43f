"""
Assignment of the tokens of one coordinate half to named slots.
"""

from typing import Dict, List, Optional, Sequence, Tuple

from coordkit.core.symbols import SYMBOL_PATTERNS

# Position marker for "the last token of the half"
LAST = -1

Hint = Tuple[str, str, int]

BEARING_HINT: Hint = ("bear", "NSEW", LAST)
DEGREES_HINT: Hint = ("deg", "DEGREES", 0)
MINUTES_HINT: Hint = ("min", "MINUTES", 1)
SECONDS_HINT: Hint = ("sec", "SECONDS", 2)


def assign_pieces(
    half: List[str],
    hints: Sequence[Hint],
    fallback: Sequence[str],
    max_tokens: int,
) -> Optional[Dict[str, str]]:
    """
    Assign tokens to slots, symbols first and position second.

    Each token is tested against the hints in order. A token carrying a
    hint's symbol takes that slot, and a second token carrying the same
    symbol fails identification. A token sitting at a hint's position, when
    the symbol appears elsewhere in the half, takes the slot only while it is
    empty. Tokens without a matching hint fill the first empty fallback slot.

    Args:
        half: Tokens of one half as typed
        hints: ``(slot, symbol pattern name, position)`` in precedence order
        fallback: Slots filled in order by unhinted tokens
        max_tokens: Largest token count the notation accepts

    Returns:
        Slot values (empty string when unfilled), or None when the token count
        is out of range or a token finds no empty slot
    """
    if not 1 <= len(half) <= max_tokens:
        return None

    last = len(half) - 1
    pieces = {slot: "" for slot, _, _ in hints}
    pieces.update({slot: "" for slot in fallback})

    for i, token in enumerate(half):
        marked = next(
            (slot for slot, name, _ in hints if SYMBOL_PATTERNS[name].search(token)),
            None,
        )
        if marked is not None:
            if pieces[marked]:
                return None
            pieces[marked] = token
            continue

        placed = next(
            (
                slot
                for slot, name, position in hints
                if i == (last if position == LAST else position)
                and not pieces[slot]
                and any(SYMBOL_PATTERNS[name].search(other) for other in half)
            ),
            None,
        )
        if placed is None:
            placed = next((key for key in fallback if not pieces[key]), None)
        if placed is None:
            return None
        pieces[placed] = token

    return pieces
