"""Text framing: truncation, word wrap and alignment by display width.

Line-level functions (truncate_line, wrap_line) are what the cell
formatter uses. The text-level functions (truncate, wrap, align_left,
align_right, align_center) clean multi-line input first and then apply
the line-level operation to every line; they back the `truncate`,
`wrap`, `left`, `right` and `center` commands.
"""

from typing import List, Optional

from .config import Frame
from .display_width import display_width, iter_char_widths, pad_to_width
from .grid import clean

ELLIPSIS = "..."


def truncate_line(line: str, width: int, ellipsis: bool = True) -> str:
    """Cut a line to fit a display width.

    The cut happens at the last character boundary that fits within
    width minus the ellipsis width, trailing whitespace is trimmed and
    the ellipsis appended. Widths of 3 or less never get an ellipsis.

    Args:
        line: A single line of text.
        width: Target display width; 0 means unlimited.
        ellipsis: Append "..." when the line is cut.

    Returns:
        The line, shortened if it was wider than width.
    """
    if width <= 0 or display_width(line) <= width:
        return line

    use_ellipsis = ellipsis and width > len(ELLIPSIS)
    budget = width - len(ELLIPSIS) if use_ellipsis else width

    kept: List[str] = []
    used = 0
    for char, char_w in iter_char_widths(line):
        if used + char_w > budget:
            break
        kept.append(char)
        used += char_w

    truncated = "".join(kept).rstrip()
    return truncated + ELLIPSIS if use_ellipsis else truncated


def _break_word(word: str, width: int) -> List[str]:
    """Hard-break a word wider than width into width-sized pieces."""
    pieces: List[str] = []
    current: List[str] = []
    used = 0
    for char, char_w in iter_char_widths(word):
        # A piece always takes at least one character, even a wide one
        if current and used + char_w > width:
            pieces.append("".join(current))
            current, used = [], 0
        current.append(char)
        used += char_w
    if current:
        pieces.append("".join(current))
    return pieces


def wrap_line(line: str, width: int) -> List[str]:
    """Greedy word-wrap of a single line to a display width.

    Breaks on whitespace where possible and mid-word only when a single
    word is wider than width.

    Args:
        line: A single line of text.
        width: Target display width; 0 means unlimited.

    Returns:
        Wrapped lines, each at most width columns wide (a lone character
        wider than width is the only exception).
    """
    if width <= 0 or display_width(line) <= width:
        return [line]

    lines: List[str] = []
    current = ""
    current_w = 0

    for word in line.split():
        word_w = display_width(word)

        if word_w > width:
            if current:
                lines.append(current)
            pieces = _break_word(word, width)
            lines.extend(pieces[:-1])
            current = pieces[-1]
            current_w = display_width(current)
            continue

        if not current:
            current, current_w = word, word_w
        elif current_w + 1 + word_w <= width:
            current += " " + word
            current_w += 1 + word_w
        else:
            lines.append(current)
            current, current_w = word, word_w

    if current:
        lines.append(current)
    return lines or [""]


def frame_line(line: str, width: int, frame: Frame, ellipsis: bool = True) -> str:
    """Apply a frame mode to a single line.

    Returns a single line for TRUNCATE and NONE, and newline-joined lines
    for WRAP.
    """
    if frame == Frame.TRUNCATE:
        return truncate_line(line, width, ellipsis)
    if frame == Frame.WRAP:
        return "\n".join(wrap_line(line, width))
    return line


# ==================== Multi-line Text Commands ====================


def _effective_width(lines: List[str], width: Optional[int]) -> int:
    """Requested width, widened to the longest line."""
    widest = max((display_width(line) for line in lines), default=0)
    if width is not None and width > 0:
        return max(width, widest)
    return widest


def truncate(text: str, width: int, ellipsis: bool = True) -> str:
    """Clean text and truncate every line to width."""
    cleaned = clean(text)
    if not cleaned:
        return ""
    return "\n".join(truncate_line(line, width, ellipsis) for line in cleaned.split("\n"))


def wrap(text: str, width: int) -> str:
    """Clean text and word-wrap every line to width."""
    cleaned = clean(text)
    if not cleaned:
        return ""
    wrapped: List[str] = []
    for line in cleaned.split("\n"):
        wrapped.extend(wrap_line(line, width))
    return "\n".join(wrapped)


def align_left(text: str) -> str:
    """Clean text; left alignment needs no padding."""
    return clean(text)


def align_right(text: str, width: Optional[int] = None) -> str:
    """Clean text and right-align every line.

    Args:
        text: Input text, possibly multi-line.
        width: Target width; widened to the longest line. None or 0 uses
            the longest line.
    """
    cleaned = clean(text)
    if not cleaned:
        return ""
    lines = cleaned.split("\n")
    target = _effective_width(lines, width)
    return "\n".join(pad_to_width(line, target, "right") for line in lines)


def align_center(text: str, width: Optional[int] = None) -> str:
    """Clean text and center every line, odd padding on the right."""
    cleaned = clean(text)
    if not cleaned:
        return ""
    lines = cleaned.split("\n")
    target = _effective_width(lines, width)
    return "\n".join(pad_to_width(line, target, "center") for line in lines)
