"""Parser for delimiter-separated text into a grid of fields.

The grid is the raw material for a table build: rows of trimmed field
strings in input order. Rows are not padded to a common length; the
column count is simply the length of the longest row.
"""

from dataclasses import dataclass, field
from typing import List


@dataclass
class Grid:
    """Rows of raw field strings."""
    rows: List[List[str]] = field(default_factory=list)

    @property
    def column_count(self) -> int:
        return max((len(row) for row in self.rows), default=0)

    @property
    def row_count(self) -> int:
        return len(self.rows)

    def __bool__(self) -> bool:
        return bool(self.rows)


def clean(text: str) -> str:
    """Trim every line and drop blank lines.

    Idempotent: cleaning cleaned text returns it unchanged.

    Args:
        text: Raw input text.

    Returns:
        The non-blank lines, stripped, joined with newlines.
    """
    lines = (line.strip() for line in text.splitlines())
    return "\n".join(line for line in lines if line)


def split_fields(line: str, separator: str) -> List[str]:
    """Split a line on a literal separator and trim each field.

    An empty separator leaves the whole line as a single field.
    """
    if not separator:
        return [line.strip()]
    return [part.strip() for part in line.split(separator)]


def parse(text: str, separator: str = " ") -> Grid:
    """Parse raw text into a Grid.

    Never fails; empty or all-blank input yields an empty grid.

    Args:
        text: Raw input text.
        separator: Literal input field separator (not a regex).

    Returns:
        Grid with one row per non-blank input line.
    """
    cleaned = clean(text)
    if not cleaned:
        return Grid()
    return Grid(rows=[split_fields(line, separator) for line in cleaned.split("\n")])
