"""Tests for table content formatting."""

from fractions import Fraction

import pytest

from typtab import (
    InvalidBreakIndicator,
    format_cell,
    table_content,
    table_content_with_breaks,
)
from typtab.format import ROW_SEPARATOR, check_break_indicator


class TestTableContent:
    def test_integers_and_strings(self, users):
        expected = '"John", "200", "10",\n  "Mary", "500", "100"'
        assert table_content(users) == expected

    def test_backslashes_become_line_breaks(self):
        data = [
            ["John", "Software\\Engineer", "USA"],
            ["Mary", "Product\\Manager", "Canada"],
        ]
        expected = (
            '"John", [Software \\\nEngineer], "USA",\n'
            '  "Mary", [Product \\\nManager], "Canada"'
        )
        assert table_content(data) == expected

    def test_raw_string_backslash(self):
        data = [["John", r"Software\Engineer", "USA"]]
        assert table_content(data) == '"John", [Software \\\nEngineer], "USA"'

    def test_empty_input(self):
        assert table_content([]) == ""

    def test_empty_text_is_quoted(self):
        assert table_content([[""]]) == '""'

    def test_empty_row_is_empty_segment(self):
        assert table_content([["a"], [], ["b"]]) == '"a",\n  ,\n  "b"'

    def test_ragged_rows(self):
        result = table_content([["a", 1, 2], ["b"]])
        assert result.split(ROW_SEPARATOR) == ['"a", "1", "2"', '"b"']

    def test_separator_count(self):
        rows = [[i, f"row{i}"] for i in range(7)]
        assert table_content(rows).count(ROW_SEPARATOR) == len(rows) - 1

    def test_accepts_generators_and_tuples(self):
        rows = (tuple(row) for row in [["x", 1], ["y", 2]])
        assert table_content(rows) == '"x", "1",\n  "y", "2"'

    def test_pipe_is_plain_text_by_default(self):
        assert table_content([["a|b"]]) == '"a|b"'

    def test_plain_rows_split_back_into_cells(self):
        rows = [["John", 200], ["Mary", 500]]
        segments = table_content(rows).split(ROW_SEPARATOR)
        cells = [segment.split(", ") for segment in segments]
        assert cells == [['"John"', '"200"'], ['"Mary"', '"500"']]


class TestTableContentWithBreaks:
    def test_custom_indicator(self):
        data = [
            ["John", "Software|Engineer", "USA"],
            ["Mary", "Product|Manager", "Canada"],
        ]
        expected = (
            '"John", [Software \\\nEngineer], "USA",\n'
            '  "Mary", [Product \\\nManager], "Canada"'
        )
        assert table_content_with_breaks(data, "|") == expected

    def test_pipe_is_default(self):
        data = [["Alice", "Frontend|Developer", "UK"]]
        assert table_content_with_breaks(data) == '"Alice", [Frontend \\\nDeveloper], "UK"'

    def test_backslash_kept_with_custom_indicator(self):
        assert table_content_with_breaks([["C:\\temp"]], "|") == '"C:\\temp"'

    def test_multi_character_indicator(self):
        result = table_content_with_breaks([["one<br>two<br>three"]], "<br>")
        assert result == "[one \\\ntwo \\\nthree]"

    @pytest.mark.parametrize("indicator", ["", None, 1])
    def test_invalid_indicator_rejected(self, indicator):
        with pytest.raises(InvalidBreakIndicator):
            table_content_with_breaks([["a"]], indicator)

    def test_invalid_indicator_is_value_error(self):
        with pytest.raises(ValueError, match="non-empty string"):
            table_content_with_breaks([], "")


class TestFormatCell:
    def test_integer(self):
        assert format_cell(10) == '"10"'

    def test_negative_and_large_integers(self):
        assert format_cell(-42) == '"-42"'
        assert format_cell(10**20) == '"100000000000000000000"'

    def test_plain_text(self):
        assert format_cell("USA") == '"USA"'

    def test_indicator_at_edges(self):
        assert format_cell("\\edge\\") == "[ \\\nedge \\\n]"

    def test_multiple_indicators_single_block(self):
        assert format_cell("a\\b\\c") == "[a \\\nb \\\nc]"

    def test_indicator_consumed(self):
        assert "|" not in format_cell("a|b", "|")

    def test_existing_break_token_without_indicator(self):
        assert format_cell("a \\\nb", "|") == '"a \\\nb"'

    def test_other_values_use_repr(self):
        assert format_cell(1.5) == '"1.5"'
        assert format_cell(None) == '"None"'
        assert format_cell(Fraction(1, 3)) == '"Fraction(1, 3)"'

    def test_bool_is_not_integer(self):
        assert format_cell(True) == '"True"'

    def test_empty_indicator_rejected(self):
        with pytest.raises(InvalidBreakIndicator):
            format_cell("a", "")


@pytest.mark.parametrize("indicator", ["", None, 5, ["|"]])
def test_check_break_indicator_rejects(indicator):
    with pytest.raises(InvalidBreakIndicator):
        check_break_indicator(indicator)


def test_check_break_indicator_accepts_text():
    check_break_indicator("|")
    check_break_indicator("<br>")
