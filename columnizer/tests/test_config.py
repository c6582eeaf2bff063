# columnizer/tests/test_config.py
"""Tests for TableConfig validation and config file loading."""

import json
import logging

import pytest

from columnizer.config import Alignment, CellFormat, Frame, TableConfig, load_config
from columnizer.errors import ConfigValidationError


class TestEnums:
    """Tests for Frame.parse() and Alignment.parse()."""

    def test_case_insensitive(self):
        assert Frame.parse("wrap") is Frame.WRAP
        assert Alignment.parse(" Center ") is Alignment.CENTER

    def test_invalid(self):
        with pytest.raises(ValueError, match="Invalid frame type"):
            Frame.parse("squiggle")
        with pytest.raises(ValueError, match="Invalid alignment"):
            Alignment.parse("diagonal")


class TestTableConfig:
    """Tests for TableConfig."""

    def test_defaults(self):
        config = TableConfig()
        assert config.input_separator == " "
        assert config.header_index == 1
        assert config.header_count == 1
        assert config.column_limit_index == 0
        assert config.max_cell_width == 40
        assert config.frame is Frame.TRUNCATE
        assert config.alignment is Alignment.AUTO
        assert config.ellipsis is True
        assert config.max_decimal_digits == 2

    def test_enum_names_coerced(self):
        config = TableConfig(frame="none", alignment="right")
        assert config.frame is Frame.NONE
        assert config.alignment is Alignment.RIGHT

    def test_header_count_at_least_one(self):
        assert TableConfig(header_index=2, header_count=0).header_count == 1

    def test_collects_all_errors(self):
        with pytest.raises(ConfigValidationError) as exc_info:
            TableConfig(frame="bogus", divider_char="==", max_cell_width=-1)
        errors = exc_info.value.errors
        assert len(errors) == 3
        assert any("frame" in e for e in errors)
        assert any("divider_char" in e for e in errors)
        assert any("max_cell_width" in e for e in errors)

    def test_zero_width_divider_rejected(self):
        with pytest.raises(ConfigValidationError, match="printable"):
            TableConfig(divider_char="\u0301")

    def test_from_dict_accepts_dashes(self):
        config = TableConfig.from_dict({"max-cell-width": 12, "use_thousand_separator": True})
        assert config.max_cell_width == 12
        assert config.use_thousand_separator is True

    def test_from_dict_ignores_unknown_keys(self, caplog):
        with caplog.at_level(logging.WARNING, logger="columnizer.config"):
            config = TableConfig.from_dict({"colour": "red"})
        assert config == TableConfig()
        assert "colour" in caplog.text

    def test_replace_and_to_dict(self):
        config = TableConfig().replace(frame=Frame.WRAP, output_separator=" | ")
        data = config.to_dict()
        assert data["frame"] == "WRAP"
        assert data["output_separator"] == " | "
        assert TableConfig.from_dict(data) == config

    def test_cell_format(self):
        config = TableConfig(pad_decimal_digits=True, decimal_separator=",")
        fmt = config.cell_format(7)
        assert fmt == CellFormat(width=7, pad_decimal_digits=True, decimal_separator=",")


class TestLoadConfig:
    """Tests for load_config()."""

    def test_yaml(self, tmp_path):
        path = tmp_path / "table.yaml"
        path.write_text("input_separator: ','\nframe: wrap\nmax-cell-width: 20\n")
        config = load_config(path)
        assert config.input_separator == ","
        assert config.frame is Frame.WRAP
        assert config.max_cell_width == 20

    def test_json(self, tmp_path):
        path = tmp_path / "table.json"
        path.write_text(json.dumps({"no_divider": True, "alignment": "left"}))
        config = load_config(str(path))
        assert config.no_divider is True
        assert config.alignment is Alignment.LEFT

    def test_empty_yaml_is_defaults(self, tmp_path):
        path = tmp_path / "empty.yml"
        path.write_text("")
        assert load_config(path) == TableConfig()

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigValidationError, match="cannot read"):
            load_config(tmp_path / "missing.yaml")

    def test_unsupported_suffix(self, tmp_path):
        path = tmp_path / "table.toml"
        path.write_text("x = 1")
        with pytest.raises(ConfigValidationError, match="unsupported"):
            load_config(path)

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "table.json"
        path.write_text("{not json")
        with pytest.raises(ConfigValidationError, match="invalid config file"):
            load_config(path)

    def test_not_a_mapping(self, tmp_path):
        path = tmp_path / "table.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ConfigValidationError, match="mapping"):
            load_config(path)
