"""Row classification: header block, column-limit row and data block.

Row indexes in the configuration are 1-based, with 0 meaning "none".
The header block is the half-open 0-based range
[header_index - 1, header_index - 1 + header_count); the limit row is
row column_limit_index - 1. Every other row is data, in input order.

When the limit row falls inside the header range, the header wins: the
row is kept as a header and no limits are read from it.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from .grid import Grid

logger = logging.getLogger(__name__)


@dataclass
class RowBlocks:
    """A grid split into its header, limit and data rows."""
    headers: List[List[str]] = field(default_factory=list)
    data: List[List[str]] = field(default_factory=list)
    limit_row: Optional[List[str]] = None


def classify(
    grid: Grid,
    header_index: int = 1,
    header_count: int = 1,
    column_limit_index: int = 0,
) -> RowBlocks:
    """Split grid rows into headers, an optional limit row and data.

    Args:
        grid: Parsed input.
        header_index: 1-based first header row, 0 for no header.
        header_count: Number of header rows (at least 1 when enabled).
        column_limit_index: 1-based limit row, 0 for none.

    Returns:
        RowBlocks with rows in input order.
    """
    if header_index > 0:
        header_start = header_index - 1
        header_end = header_start + max(header_count, 1)
    else:
        header_start = header_end = 0
    limit_pos = column_limit_index - 1 if column_limit_index > 0 else None

    if limit_pos is not None and header_start <= limit_pos < header_end:
        logger.warning(
            "Column limit row %d is inside the header rows %d-%d; treating it as a header",
            column_limit_index, header_index, header_end,
        )
        limit_pos = None

    blocks = RowBlocks()
    for i, row in enumerate(grid.rows):
        if header_start <= i < header_end:
            blocks.headers.append(row)
        elif i == limit_pos:
            blocks.limit_row = row
        else:
            blocks.data.append(row)
    return blocks


def parse_limit(value: str, default: int) -> int:
    """Parse one limit field; invalid or zero falls back to default."""
    try:
        width = int(value.strip())
    except ValueError:
        return default
    if width <= 0:
        return default
    return width


def column_limits(
    limit_row: Optional[List[str]],
    column_count: int,
    max_cell_width: int,
) -> List[int]:
    """Per-column maximum widths.

    Columns without a usable entry in the limit row use max_cell_width.
    A result of 0 means the column is unlimited.

    Args:
        limit_row: Raw fields of the limit row, or None.
        column_count: Number of columns in the grid.
        max_cell_width: Global maximum cell width.

    Returns:
        One limit per column.
    """
    limits = [max_cell_width] * column_count
    if limit_row is None:
        return limits
    for i, value in enumerate(limit_row[:column_count]):
        limits[i] = parse_limit(value, max_cell_width)
    return limits
