"""Format delimiter-separated text into aligned, Unicode-aware columns.

Example:
    from columnizer import format_table

    print(format_table("Name Price\nWidget 9.5\nGadget 12", pad_decimal_digits=True))
    # Name   Price
    # ------ -----
    # Widget  9.50
    # Gadget 12.00
"""

from .builder import BuiltTable, TableBuilder, format_table
from .cell import (
    Cell,
    NumericCell,
    TextCell,
    format_cell,
    format_number,
    format_value,
    is_hex,
    is_numeric,
)
from .config import Alignment, CellFormat, Frame, TableConfig, load_config
from .display_width import display_width, pad_to_width
from .errors import (
    BinaryInputError,
    ColumnizerError,
    ConfigValidationError,
    InputReadError,
)
from .grid import Grid, clean, parse
from .text import align_center, align_left, align_right, truncate, wrap

__version__ = "0.1.0"

__all__ = [
    "Alignment",
    "BinaryInputError",
    "BuiltTable",
    "Cell",
    "CellFormat",
    "ColumnizerError",
    "ConfigValidationError",
    "Frame",
    "Grid",
    "InputReadError",
    "NumericCell",
    "TableBuilder",
    "TableConfig",
    "TextCell",
    "align_center",
    "align_left",
    "align_right",
    "clean",
    "display_width",
    "format_cell",
    "format_number",
    "format_table",
    "format_value",
    "is_hex",
    "is_numeric",
    "load_config",
    "pad_to_width",
    "parse",
    "truncate",
    "wrap",
]
