"""Table builder: the parse, classify, format, resolve and render pipeline.

A build is a single eager pass; the result is an immutable BuiltTable and
the builder keeps no state between builds, so one builder can format any
number of inputs.

Example:
    from columnizer import TableBuilder, TableConfig, format_table

    table = TableBuilder(TableConfig(input_separator=",")).build(csv_text)
    print(table.text)
    print(table.column_widths, table.numeric_columns)

    print(format_table(text, pad_decimal_digits=True))
"""

import logging
from dataclasses import dataclass
from typing import Any, List, Optional, Tuple

from .cell import Cell, format_cell
from .config import TableConfig
from .grid import parse
from .renderer import render
from .rows import classify, column_limits
from .trace import trace
from .widths import NumericColumns, resolve_widths

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BuiltTable:
    """Immutable result of one table build.

    Attributes:
        headers: Raw header fields per header row.
        data: Formatted cells per data row (short rows stay short).
        column_widths: Resolved display width per column.
        numeric_columns: Whether every data cell of a column is numeric.
        text: The rendered table.
    """
    headers: Tuple[Tuple[str, ...], ...]
    data: Tuple[Tuple[Cell, ...], ...]
    column_widths: Tuple[int, ...]
    numeric_columns: Tuple[bool, ...]
    text: str

    @property
    def column_count(self) -> int:
        return len(self.column_widths)

    def __str__(self) -> str:
        return self.text


class TableBuilder:
    """Formats delimiter-separated text into an aligned table."""

    def __init__(self, config: Optional[TableConfig] = None):
        self._config = config or TableConfig()

    @property
    def config(self) -> TableConfig:
        return self._config

    def build(self, text: str) -> BuiltTable:
        """Run the full pipeline over one input.

        Args:
            text: Raw delimiter-separated text.

        Returns:
            The BuiltTable holding intermediates and the rendered text.
        """
        config = self._config
        grid = parse(text, config.input_separator)
        column_count = grid.column_count
        trace("TableBuilder", f"parsed {grid.row_count} rows x {column_count} columns")

        blocks = classify(grid, config.header_index, config.header_count,
                          config.column_limit_index)
        limits = column_limits(blocks.limit_row, column_count, config.max_cell_width)

        numeric = NumericColumns(column_count)
        data: List[Tuple[Cell, ...]] = []
        for row in blocks.data:
            cells = tuple(format_cell(raw, config.cell_format(limits[i]))
                          for i, raw in enumerate(row))
            numeric.observe_row(cells)
            data.append(cells)

        widths = resolve_widths(blocks.headers, data, limits, config.frame)
        numeric_columns = numeric.as_list()
        rendered = render(blocks.headers, data, widths, numeric_columns, config)

        logger.debug(
            "Built table: %d header rows, %d data rows, widths=%s, numeric=%s",
            len(blocks.headers), len(data), widths, numeric_columns,
        )
        trace("TableBuilder", f"widths={widths} numeric={numeric_columns}")

        return BuiltTable(
            headers=tuple(tuple(row) for row in blocks.headers),
            data=tuple(data),
            column_widths=tuple(widths),
            numeric_columns=tuple(numeric_columns),
            text=rendered,
        )


def format_table(text: str, config: Optional[TableConfig] = None, **overrides: Any) -> str:
    """Format text as a table in one call.

    Args:
        text: Raw delimiter-separated text.
        config: Base configuration; defaults to TableConfig().
        **overrides: Options replacing those of config.

    Returns:
        The rendered table.
    """
    config = config or TableConfig()
    if overrides:
        config = config.replace(**overrides)
    return TableBuilder(config).build(text).text
