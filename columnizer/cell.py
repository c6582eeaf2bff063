"""Cell formatting: numeric detection, number formatting and text framing.

Every raw field becomes one of two cell kinds:

- NumericCell: the text parsed as a float (inf and NaN included) once
  the configured thousands separator was stripped and the decimal
  separator mapped to '.'. Its text is the re-formatted number, which
  is never truncated.
- TextCell: anything else, shortened according to the frame mode.

Example:
    from columnizer.cell import format_cell
    from columnizer.config import CellFormat

    fmt = CellFormat(pad_decimal_digits=True, use_thousand_separator=True)
    format_cell("1234.5", fmt).text   # "1,234.50"
    format_cell("Hello World", CellFormat(width=5)).text   # "He..."
"""

import re
import string
from dataclasses import dataclass
from decimal import Decimal
from math import isinf, isnan
from typing import List, Optional, Union

from .config import Alignment, CellFormat
from .display_width import display_width, pad_to_width
from .grid import clean
from .text import frame_line

# Plain decimal literal: sign, digits, optional fraction and exponent.
# ASCII digits only; no underscores.
NUMBER_RE = re.compile(r"^[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?$")
# inf, infinity and nan in any case, optionally signed
SPECIAL_RE = re.compile(r"^[+-]?(?:inf|infinity|nan)$", re.IGNORECASE)


@dataclass(frozen=True)
class TextCell:
    """A cell holding framed text (possibly several wrapped lines)."""
    text: str

    @property
    def is_numeric(self) -> bool:
        return False

    @property
    def lines(self) -> List[str]:
        return self.text.split("\n")

    @property
    def width(self) -> int:
        return display_width(self.text)


@dataclass(frozen=True)
class NumericCell:
    """A cell holding a parsed number and its formatted text."""
    value: float
    text: str

    @property
    def is_numeric(self) -> bool:
        return True

    @property
    def lines(self) -> List[str]:
        return [self.text]

    @property
    def width(self) -> int:
        return display_width(self.text)


Cell = Union[NumericCell, TextCell]


# ==================== Numbers ====================


def parse_number(
    text: str,
    decimal_separator: str = ".",
    thousand_separator: str = ",",
) -> Optional[float]:
    """Parse text as a number using the configured separators.

    Args:
        text: Raw cell text.
        decimal_separator: Character used as the decimal point.
        thousand_separator: Grouping character, removed before parsing.

    Returns:
        The float value, or None if the text is not a number.
    """
    normalized = text.strip()
    if thousand_separator:
        normalized = normalized.replace(thousand_separator, "")
    if decimal_separator and decimal_separator != ".":
        normalized = normalized.replace(decimal_separator, ".")

    if not (NUMBER_RE.match(normalized) or SPECIAL_RE.match(normalized)):
        return None
    # Literals like 1e999 overflow to inf
    return float(normalized)


def _native_repr(value: float) -> str:
    """Shortest round-trip decimal, without exponent or trailing '.0'."""
    plain = format(Decimal(repr(value)), "f")
    if "." in plain:
        plain = plain.rstrip("0").rstrip(".")
    return plain


def group_thousands(digits: str, separator: str) -> str:
    """Insert separator between every three digits, from the right."""
    groups: List[str] = []
    while len(digits) > 3:
        groups.insert(0, digits[-3:])
        digits = digits[:-3]
    groups.insert(0, digits)
    return separator.join(groups)


def format_number(value: float, fmt: CellFormat) -> str:
    """Format a number with the configured precision and separators.

    Args:
        value: The parsed number.
        fmt: Precision and separator settings.

    Returns:
        The formatted number, e.g. "1,234.50".
    """
    if isnan(value):
        return "NaN"
    if isinf(value):
        return "-inf" if value < 0 else "inf"

    if fmt.pad_decimal_digits:
        plain = f"{value:.{fmt.max_decimal_digits}f}"
    else:
        plain = _native_repr(value)

    sign = ""
    if plain.startswith("-"):
        sign, plain = "-", plain[1:]

    integer, _, fraction = plain.partition(".")
    if fmt.use_thousand_separator:
        integer = group_thousands(integer, fmt.thousand_separator)

    result = sign + integer
    if fraction:
        result += fmt.decimal_separator + fraction
    return result


def is_numeric(
    text: str,
    decimal_separator: str = ".",
    thousand_separator: str = ",",
) -> bool:
    """Return True if the cleaned text parses as a number."""
    return parse_number(clean(text), decimal_separator, thousand_separator) is not None


def is_hex(text: str) -> bool:
    """Return True if the cleaned text is a non-empty run of hex digits."""
    cleaned = clean(text)
    return bool(cleaned) and all(c in string.hexdigits for c in cleaned)


# ==================== Cells ====================


def format_cell(raw: str, fmt: CellFormat) -> Cell:
    """Format one raw data field.

    Numbers are re-formatted and never shortened; text is truncated,
    wrapped or left alone according to fmt.frame at fmt.width.

    Args:
        raw: Trimmed field text.
        fmt: Cell settings, including the target width.

    Returns:
        NumericCell or TextCell.
    """
    value = parse_number(raw, fmt.decimal_separator, fmt.thousand_separator)
    if value is not None:
        return NumericCell(value=value, text=format_number(value, fmt))
    return TextCell(text=frame_line(raw, fmt.width, fmt.frame, fmt.ellipsis))


def format_header(raw: str, fmt: CellFormat) -> TextCell:
    """Format one header field; headers are always text."""
    return TextCell(text=frame_line(raw, fmt.width, fmt.frame, fmt.ellipsis))


def resolve_alignment(alignment: Alignment, numeric: bool) -> str:
    """Map an Alignment to 'left', 'right' or 'center'.

    AUTO right-aligns numeric content and left-aligns everything else.
    """
    if alignment == Alignment.RIGHT or (alignment == Alignment.AUTO and numeric):
        return "right"
    if alignment == Alignment.CENTER:
        return "center"
    return "left"


def format_value(text: str, fmt: CellFormat) -> str:
    """Format a standalone value, as the `format` command does.

    The text is cleaned, formatted like a data cell and then aligned to
    fmt.width (widened to the content). Left-aligned output is not padded.

    Args:
        text: Raw value, possibly multi-line.
        fmt: Cell settings.

    Returns:
        Formatted, aligned text.
    """
    cleaned = clean(text)
    value = parse_number(cleaned, fmt.decimal_separator, fmt.thousand_separator)
    if value is not None:
        cell: Cell = NumericCell(value=value, text=format_number(value, fmt))
    else:
        framed = [frame_line(line, fmt.width, fmt.frame, fmt.ellipsis)
                  for line in cleaned.split("\n")]
        cell = TextCell(text="\n".join(framed))

    align = resolve_alignment(fmt.alignment, cell.is_numeric)
    if align == "left":
        return cell.text
    target = max(fmt.width, cell.width)
    return "\n".join(pad_to_width(line, target, align) for line in cell.lines)
