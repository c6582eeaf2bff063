"""Table renderer: header block, divider and data block as aligned text."""

from typing import List, Sequence

from .cell import Cell, format_header, resolve_alignment
from .config import TableConfig
from .display_width import display_width, pad_to_width


def _render_row(
    cells: Sequence[Cell],
    widths: Sequence[int],
    aligns: Sequence[str],
    separator: str,
) -> List[str]:
    """Render one logical row as one or more physical lines.

    Missing trailing cells render as empty; a wrapped cell adds lines
    and the other cells of the row are padded with blank lines.
    """
    column_lines = []
    for i in range(len(widths)):
        column_lines.append(cells[i].lines if i < len(cells) else [""])

    height = max((len(lines) for lines in column_lines), default=1)
    out: List[str] = []
    for n in range(height):
        parts = []
        for lines, width, align in zip(column_lines, widths, aligns):
            text = lines[n] if n < len(lines) else ""
            parts.append(pad_to_width(text, width, align))
        out.append(separator.join(parts).rstrip())
    return out


def _divider_segment(char: str, width: int) -> str:
    """Repeat char to fill width columns; a wide char leaves a space over."""
    return pad_to_width(char * (width // max(display_width(char), 1)), width)


def render(
    header_rows: Sequence[Sequence[str]],
    data_rows: Sequence[Sequence[Cell]],
    widths: Sequence[int],
    numeric_columns: Sequence[bool],
    config: TableConfig,
) -> str:
    """Assemble the final table text.

    Emits each header row, then the divider (unless config.no_divider),
    then each data row. Headers are framed to their column width and
    aligned like the rest of their column.

    Args:
        header_rows: Raw header fields per header row.
        data_rows: Formatted cells per data row.
        widths: Resolved column widths.
        numeric_columns: Per-column numeric flags.
        config: Separator, divider and alignment options.

    Returns:
        The rendered table with trailing whitespace trimmed.
    """
    if not widths:
        return ""

    aligns = [resolve_alignment(config.alignment, numeric) for numeric in numeric_columns]
    lines: List[str] = []

    for row in header_rows:
        cells: List[Cell] = []
        for i, text in enumerate(row[:len(widths)]):
            cells.append(format_header(text, config.cell_format(widths[i])))
        lines.extend(_render_row(cells, widths, aligns, config.output_separator))

    if not config.no_divider:
        segments = (_divider_segment(config.divider_char, w) for w in widths)
        divider = config.output_separator.join(segments)
        lines.append(divider.rstrip())

    for cells in data_rows:
        lines.extend(_render_row(cells, widths, aligns, config.output_separator))

    return "\n".join(lines).rstrip()
