# columnizer/tests/test_cli.py
"""Tests for the command line interface."""

import io
import sys

import pytest

from columnizer.cli import build_parser, main


def _run(capsys, *argv):
    code = main(list(argv))
    out, err = capsys.readouterr()
    return code, out, err


class TestTableCommand:
    """Tests for `columnizer table`."""

    def test_literal_input(self, capsys):
        code, out, _ = _run(capsys, "table", "Name Price\nWidget 9.5\nGadget 12",
                            "--pad-decimal-digits")
        assert code == 0
        assert out == "Name   Price\n------ -----\nWidget  9.50\nGadget 12.00\n"

    def test_file_input_and_options(self, capsys, tmp_path):
        path = tmp_path / "data.csv"
        path.write_text("a,b\n1234.5,x\n", encoding="utf-8")
        code, out, _ = _run(capsys, "table", str(path), "--ifs", ",", "--ofs", " | ",
                            "--use-thousand-separator", "--no-divider")
        assert code == 0
        assert out == "      a | b\n1,234.5 | x\n"

    def test_stdin_input(self, capsys, monkeypatch):
        monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(b"x y\n1 2\n")))
        code, out, _ = _run(capsys, "table", "--header-row", "0", "--no-divider")
        assert code == 0
        assert out == "x y\n1 2\n"

    def test_config_file_with_override(self, capsys, tmp_path):
        config = tmp_path / "table.yaml"
        config.write_text("input_separator: ';'\nno_divider: true\nalignment: right\n")
        code, out, _ = _run(capsys, "table", "ab;c\nd;efg", "--config", str(config),
                            "--alignment", "left")
        assert code == 0
        assert out == "ab c\nd  efg\n"

    def test_invalid_config_exits_1(self, capsys, tmp_path):
        config = tmp_path / "table.json"
        config.write_text('{"divider_char": "=="}')
        code, out, err = _run(capsys, "table", "a b", "--config", str(config))
        assert code == 1
        assert out == ""
        assert "divider_char" in err

    def test_invalid_frame_rejected_by_parser(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["table", "--frame", "squiggle"])


class TestFormatCommand:
    """Tests for `columnizer format`."""

    def test_number(self, capsys):
        code, out, _ = _run(capsys, "format", "1234.5", "--width", "10",
                            "--use-thousand-separator", "--pad-decimal-digits")
        assert code == 0
        assert out == "  1,234.50\n"

    def test_quote(self, capsys):
        _, out, _ = _run(capsys, "format", "Hello World", "--width", "5", "--quote")
        assert out == '"He..."\n'

    def test_single_quote(self, capsys):
        _, out, _ = _run(capsys, "format", "Hello", "--single-quote")
        assert out == "'Hello'\n"

    def test_quote_options_exclusive(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["format", "x", "--quote", "--single-quote"])


class TestTextCommands:
    """Tests for clean, alignment, wrap and truncate commands."""

    def test_clean(self, capsys):
        _, out, _ = _run(capsys, "clean", "  a  \n\n b ")
        assert out == "a\nb\n"

    def test_right(self, capsys):
        _, out, _ = _run(capsys, "right", "a\nbbb")
        assert out == "  a\nbbb\n"

    def test_center_with_width(self, capsys):
        _, out, _ = _run(capsys, "center", "ab", "--width", "5")
        assert out == " ab  \n"

    def test_wrap(self, capsys):
        _, out, _ = _run(capsys, "wrap", "the quick brown fox", "-w", "10")
        assert out == "the quick\nbrown fox\n"

    def test_truncate_no_ellipsis(self, capsys):
        _, out, _ = _run(capsys, "truncate", "Hello World", "-w", "5", "--no-ellipsis")
        assert out == "Hello\n"


class TestIsCommand:
    """Tests for `columnizer is`."""

    @pytest.mark.parametrize("argv,expected", [
        (["is", "numeric", "1,234.50"], "true"),
        (["is", "numeric", "abc"], "false"),
        (["is", "hex", "DEADbeef"], "true"),
        (["is", "hex", "xyz"], "false"),
    ])
    def test_predicates(self, capsys, argv, expected):
        code, out, _ = _run(capsys, *argv)
        assert code == 0
        assert out == expected + "\n"

    def test_empty_stdin_exits_1(self, capsys, monkeypatch):
        monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(b"")))
        code, _, err = _run(capsys, "is", "numeric")
        assert code == 1
        assert "Failed to read input from stdin" in err

    def test_bad_retry_env_exits_1(self, capsys, monkeypatch):
        monkeypatch.setenv("COLUMNIZER_READ_ATTEMPTS", "five")
        monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(b"12")))
        code, out, err = _run(capsys, "is", "numeric")
        assert code == 1
        assert out == ""
        assert "COLUMNIZER_READ_ATTEMPTS" in err
        assert "Traceback" not in err
