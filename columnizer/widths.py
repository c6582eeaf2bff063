"""Column width resolution and numeric column tracking."""

from typing import List, Sequence

from .cell import Cell
from .config import Frame
from .display_width import display_width


class NumericColumns:
    """Per-column numeric flags, AND-reduced over data cells.

    Every column starts numeric. A single non-numeric data cell makes
    the column textual for the rest of the build. Headers are never
    observed, and neither are the missing cells of short rows.
    """

    def __init__(self, column_count: int):
        self._flags = [True] * column_count

    def observe(self, index: int, numeric: bool) -> None:
        self._flags[index] = self._flags[index] and numeric

    def observe_row(self, cells: Sequence[Cell]) -> None:
        for i, cell in enumerate(cells):
            self.observe(i, cell.is_numeric)

    def __getitem__(self, index: int) -> bool:
        return self._flags[index]

    def __len__(self) -> int:
        return len(self._flags)

    def as_list(self) -> List[bool]:
        return list(self._flags)


def clamp(width: int, limit: int) -> int:
    """Clamp width to limit; a limit of 0 means unlimited."""
    return min(width, limit) if limit > 0 else width


def resolve_widths(
    header_rows: Sequence[Sequence[str]],
    data_rows: Sequence[Sequence[Cell]],
    limits: Sequence[int],
    frame: Frame,
) -> List[int]:
    """Compute the display width of every column.

    Header widths are measured on the raw header text, data widths on
    the formatted cells; both are clamped to the column limit, except
    numeric cells which are never cut and so never clamped.

    TRUNCATE and NONE size a column to fit both its headers and its data.
    WRAP sizes it to its data alone (headers wrap to fit), falling back
    to the header width for a column with no data.

    Args:
        header_rows: Raw header fields per header row.
        data_rows: Formatted cells per data row.
        limits: Per-column maximum width, 0 for unlimited.
        frame: The frame mode of the build.

    Returns:
        One width per column.
    """
    column_count = len(limits)
    header_widths = [0] * column_count
    data_widths = [0] * column_count

    for row in header_rows:
        for i, text in enumerate(row[:column_count]):
            header_widths[i] = max(header_widths[i], clamp(display_width(text), limits[i]))

    for cells in data_rows:
        for i, cell in enumerate(cells[:column_count]):
            width = cell.width if cell.is_numeric else clamp(cell.width, limits[i])
            data_widths[i] = max(data_widths[i], width)

    if frame == Frame.WRAP:
        return [data_w or header_w for header_w, data_w in zip(header_widths, data_widths)]
    return [max(header_w, data_w) for header_w, data_w in zip(header_widths, data_widths)]
