# columnizer/tests/test_renderer.py
"""Tests for the table renderer."""

from columnizer.cell import NumericCell, TextCell
from columnizer.config import TableConfig
from columnizer.display_width import display_width
from columnizer.renderer import render


class TestRender:
    """Tests for render()."""

    def test_headers_divider_data(self):
        text = render(
            [["id", "name"]],
            [[NumericCell(1.0, "1"), TextCell("ann")]],
            [2, 4],
            [True, False],
            TableConfig(),
        )
        assert text == "id name\n-- ----\n 1 ann"

    def test_custom_divider_char(self):
        text = render([["a"]], [], [3], [True], TableConfig(divider_char="="))
        assert text == "  a\n==="

    def test_wide_divider_char_keeps_columns(self):
        """A double-width divider char fills each column without overrunning it."""
        text = render([["abc", "defg"], ["x", "y"]], [], [3, 4], [False, False],
                      TableConfig(divider_char="一"))
        divider = text.split("\n")[2]
        assert divider == "一  一一"
        assert display_width(divider) == display_width("abc defg")

    def test_multiline_cell_pads_row(self):
        """Shorter cells of a wrapped row get blank lines."""
        text = render(
            [],
            [[TextCell("ab\ncd"), TextCell("x")]],
            [2, 1],
            [False, False],
            TableConfig(no_divider=True),
        )
        assert text == "ab x\ncd"

    def test_header_truncated_to_column(self):
        text = render([["Description"]], [[TextCell("abcde")]], [5], [False],
                      TableConfig(no_divider=True))
        assert text.split("\n")[0] == "De..."

    def test_no_columns(self):
        assert render([], [], [], [], TableConfig()) == ""
