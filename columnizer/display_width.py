"""Terminal column widths for table cells.

Cells are measured and padded in display columns, not code points, so
that CJK text, emoji and combining sequences line up in a monospaced
terminal.

Environment Variables:
    COLUMNIZER_AMBIGUOUS_WIDTH: Columns used for East Asian Ambiguous
        characters, 1 (default) or 2 for CJK terminals.
"""

import os
import unicodedata
from typing import Iterator, Tuple

import wcwidth

AMBIGUOUS_WIDTH_ENV_VAR = "COLUMNIZER_AMBIGUOUS_WIDTH"

_WIDE = frozenset(("F", "W"))


def ambiguous_width() -> int:
    """Columns for an ambiguous-width character, from the environment."""
    return 2 if os.environ.get(AMBIGUOUS_WIDTH_ENV_VAR, "").strip() == "2" else 1


def char_width(char: str, ambiguous: int = 1) -> int:
    """Width of one code point: 0, 1 or 2 columns.

    wcwidth decides which characters take no space at all (combining
    marks, joiners, control characters). The East Asian Width property
    decides between narrow, wide and ambiguous for the rest.

    Args:
        char: A single code point.
        ambiguous: Columns for East Asian Ambiguous characters.
    """
    measured = wcwidth.wcwidth(char)
    if measured <= 0:
        return 0
    category = unicodedata.east_asian_width(char)
    if category in _WIDE:
        return 2
    if category == "A":
        return ambiguous
    # Emoji that wcwidth already knows to be wide
    return measured


def display_width(text: str) -> int:
    """Columns needed to show text; the widest line for multi-line text.

    Args:
        text: Cell or line text.

    Returns:
        Width in terminal columns.
    """
    if "\n" in text:
        return max(display_width(line) for line in text.split("\n"))
    return sum(width for _, width in iter_char_widths(text))


def iter_char_widths(text: str) -> Iterator[Tuple[str, int]]:
    """Yield (char, width) pairs for a single line of text."""
    ambiguous = ambiguous_width()
    for char in text:
        yield char, char_width(char, ambiguous)


def pad_to_width(text: str, target_width: int, align: str = "left") -> str:
    """Pad text with spaces to target_width display columns.

    Text at or beyond the target is returned as is.

    Args:
        text: A single line.
        target_width: Width to pad to.
        align: 'left', 'right' or 'center'. Centering puts the odd
            column on the right.

    Returns:
        The padded line.
    """
    gap = target_width - display_width(text)
    if gap <= 0:
        return text
    if align == "right":
        before = gap
    elif align == "center":
        before = gap // 2
    else:
        before = 0
    return f"{' ' * before}{text}{' ' * (gap - before)}"
