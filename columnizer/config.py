"""Configuration models for table formatting.

TableConfig carries every option of a formatting run. It can be built
directly, from a dict (e.g. parsed CLI options), or from a JSON/YAML
config file:

    from columnizer.config import TableConfig, load_config

    config = TableConfig(input_separator=",", pad_decimal_digits=True)
    config = TableConfig.from_dict({"frame": "wrap", "max_cell_width": 20})
    config = load_config("table.yaml").replace(header_index=0)
"""

import dataclasses
import json
import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Union

import yaml

from .display_width import display_width
from .errors import ConfigValidationError

logger = logging.getLogger(__name__)


class Frame(Enum):
    """How over-width text cells are shortened."""
    TRUNCATE = "TRUNCATE"  # Cut to width, optionally with an ellipsis
    WRAP = "WRAP"          # Word-wrap onto several lines
    NONE = "NONE"          # Leave unchanged

    @classmethod
    def parse(cls, value: Union[str, "Frame"]) -> "Frame":
        """Parse a frame name case-insensitively."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().upper())
        except ValueError:
            raise ValueError(f"Invalid frame type: {value}") from None


class Alignment(Enum):
    """How cells are padded to their column width."""
    AUTO = "AUTO"      # Right for numeric columns, left otherwise
    CENTER = "CENTER"
    LEFT = "LEFT"
    RIGHT = "RIGHT"

    @classmethod
    def parse(cls, value: Union[str, "Alignment"]) -> "Alignment":
        """Parse an alignment name case-insensitively."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().upper())
        except ValueError:
            raise ValueError(f"Invalid alignment: {value}") from None


_CHAR_FIELDS = ("divider_char", "decimal_separator", "thousand_separator")
_INT_FIELDS = ("header_index", "header_count", "column_limit_index",
               "max_cell_width", "max_decimal_digits")
_BOOL_FIELDS = ("no_divider", "ellipsis", "pad_decimal_digits",
                "use_thousand_separator")


@dataclass(frozen=True)
class CellFormat:
    """Per-cell formatting settings.

    Attributes:
        width: Target display width; 0 means unlimited.
        frame: How over-width text is shortened.
        ellipsis: Append "..." to truncated text.
        pad_decimal_digits: Format numbers with exactly max_decimal_digits.
        max_decimal_digits: Fraction digits used when padding.
        decimal_separator: Decimal point character, on input and output.
        use_thousand_separator: Group integer digits in threes on output.
        thousand_separator: Grouping character, stripped on input.
        alignment: How the cell is padded to its width.
    """
    width: int = 0
    frame: Frame = Frame.TRUNCATE
    ellipsis: bool = True
    pad_decimal_digits: bool = False
    max_decimal_digits: int = 2
    decimal_separator: str = "."
    use_thousand_separator: bool = False
    thousand_separator: str = ","
    alignment: Alignment = Alignment.AUTO


@dataclass(frozen=True)
class TableConfig:
    """Options for one table formatting run.

    Row indexes are 1-based; 0 disables the feature.

    Attributes:
        input_separator: Literal field separator in the input.
        output_separator: Text placed between cells in the output.
        header_index: First header row, or 0 for no header.
        header_count: Number of consecutive header rows.
        column_limit_index: Row holding per-column max widths, or 0.
        no_divider: Suppress the divider row after the headers.
        divider_char: Character repeated to draw the divider.
        max_cell_width: Global max cell width; 0 means unlimited.
        frame: How over-width text cells are shortened.
        ellipsis: Append "..." to truncated text.
        pad_decimal_digits: Format numbers with exactly max_decimal_digits.
        max_decimal_digits: Fraction digits used when padding.
        decimal_separator: Decimal point character, on input and output.
        use_thousand_separator: Group integer digits in threes on output.
        thousand_separator: Grouping character, stripped on input.
        alignment: AUTO, LEFT, RIGHT or CENTER.
    """
    input_separator: str = " "
    output_separator: str = " "
    header_index: int = 1
    header_count: int = 1
    column_limit_index: int = 0
    no_divider: bool = False
    divider_char: str = "-"
    max_cell_width: int = 40
    frame: Frame = Frame.TRUNCATE
    ellipsis: bool = True
    pad_decimal_digits: bool = False
    max_decimal_digits: int = 2
    decimal_separator: str = "."
    use_thousand_separator: bool = False
    thousand_separator: str = ","
    alignment: Alignment = Alignment.AUTO

    def __post_init__(self) -> None:
        errors: List[str] = []

        # Enum fields accept names so dict/CLI input can pass strings through
        for name, enum_cls in (("frame", Frame), ("alignment", Alignment)):
            try:
                object.__setattr__(self, name, enum_cls.parse(getattr(self, name)))
            except ValueError as e:
                errors.append(f"{name}: {e}")

        for name in _INT_FIELDS:
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                errors.append(f"{name}: expected an integer, got {value!r}")
            elif value < 0:
                errors.append(f"{name}: must be >= 0, got {value}")

        for name in _BOOL_FIELDS:
            if not isinstance(getattr(self, name), bool):
                errors.append(f"{name}: expected a boolean, got {getattr(self, name)!r}")

        for name in _CHAR_FIELDS:
            value = getattr(self, name)
            if not isinstance(value, str) or len(value) != 1:
                errors.append(f"{name}: expected a single character, got {value!r}")
            elif name == "divider_char" and display_width(value) == 0:
                errors.append(f"{name}: expected a printable character, got {value!r}")

        for name in ("input_separator", "output_separator"):
            if not isinstance(getattr(self, name), str):
                errors.append(f"{name}: expected a string, got {getattr(self, name)!r}")

        if errors:
            raise ConfigValidationError(errors)

        # A header needs at least one row
        if self.header_index > 0 and self.header_count < 1:
            object.__setattr__(self, "header_count", 1)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TableConfig":
        """Create a TableConfig from a dict of option values.

        Unknown keys are logged and ignored. Keys may use dashes
        ("max-cell-width") as well as underscores.

        Args:
            data: Option names mapped to values.

        Returns:
            The validated TableConfig.

        Raises:
            ConfigValidationError: If any value is invalid.
        """
        known = {f.name for f in dataclasses.fields(cls)}
        kwargs: Dict[str, Any] = {}
        for key, value in data.items():
            name = str(key).replace("-", "_")
            if name not in known:
                logger.warning("Ignoring unknown config option: %s", key)
                continue
            kwargs[name] = value
        return cls(**kwargs)

    def replace(self, **overrides: Any) -> "TableConfig":
        """Return a copy with the given options changed."""
        return dataclasses.replace(self, **overrides)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to a JSON/YAML friendly dict."""
        data = dataclasses.asdict(self)
        data["frame"] = self.frame.value
        data["alignment"] = self.alignment.value
        return data

    def cell_format(self, width: int) -> CellFormat:
        """Derive the per-cell settings for a given target width."""
        return CellFormat(
            width=width,
            frame=self.frame,
            ellipsis=self.ellipsis,
            pad_decimal_digits=self.pad_decimal_digits,
            max_decimal_digits=self.max_decimal_digits,
            decimal_separator=self.decimal_separator,
            use_thousand_separator=self.use_thousand_separator,
            thousand_separator=self.thousand_separator,
            alignment=self.alignment,
        )


def load_config(path: Union[str, Path]) -> TableConfig:
    """Load a TableConfig from a JSON or YAML file.

    Args:
        path: Path to a .json, .yaml or .yml file holding a mapping of
            option names to values.

    Returns:
        The validated TableConfig.

    Raises:
        ConfigValidationError: If the file can't be read or parsed, or
            holds invalid values.
    """
    file_path = Path(path)
    try:
        content = file_path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigValidationError([f"cannot read config file {file_path}: {e}"]) from e

    try:
        if file_path.suffix in (".yaml", ".yml"):
            data = yaml.safe_load(content)
        elif file_path.suffix == ".json":
            data = json.loads(content)
        else:
            raise ConfigValidationError(
                [f"unsupported config file type '{file_path.suffix}' (use .json, .yaml or .yml)"]
            )
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ConfigValidationError([f"invalid config file {file_path}: {e}"]) from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigValidationError([f"config file must contain a mapping: {file_path}"])

    logger.debug("Loaded config from %s (%d options)", file_path, len(data))
    return TableConfig.from_dict(data)
