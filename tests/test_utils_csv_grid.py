"""
Tests for fixed-position CSV grid parsing
"""
from utils.csv_grid import cell, parse_grid


class TestParseGrid:
    """Test delimited text splitting."""

    def test_simple_rows(self):
        """Test plain comma separated rows."""
        assert parse_grid("a,b\nc,d") == [["a", "b"], ["c", "d"]]

    def test_trailing_newline_adds_no_row(self):
        """Test that a terminated final row is not followed by an empty row."""
        assert parse_grid("a,b\n") == [["a", "b"]]

    def test_crlf_line_endings(self):
        """Test Windows line endings."""
        assert parse_grid("a,b\r\nc,d\r\n") == [["a", "b"], ["c", "d"]]

    def test_empty_cells_are_kept(self):
        """Test that empty cells keep their column positions."""
        assert parse_grid("a,,b,") == [["a", "", "b", ""]]
        assert parse_grid('"","",""') == [["", "", ""]]

    def test_quoted_delimiter_and_newline(self):
        """Test that delimiters and newlines inside quotes are literal."""
        assert parse_grid('"a,b",c') == [["a,b", "c"]]
        assert parse_grid('"line1\nline2",x') == [["line1\nline2", "x"]]

    def test_escaped_quote(self):
        """Test doubled quotes inside a quoted field."""
        assert parse_grid('"say ""hi""",x') == [['say "hi"', "x"]]

    def test_quote_inside_unquoted_field_is_literal(self):
        """Test that a quote after field start is plain text."""
        assert parse_grid('ab"c,d') == [['ab"c', "d"]]

    def test_unterminated_quote_is_literal(self):
        """Test recovery from a quote that is never closed."""
        assert parse_grid('a,"b\nc,d') == [["a", '"b'], ["c", "d"]]

    def test_blank_line_is_single_empty_cell(self):
        """Test that blank lines survive as rows."""
        assert parse_grid("a\n\nb") == [["a"], [""], ["b"]]

    def test_empty_input(self):
        """Test empty text."""
        assert parse_grid("") == []

    def test_custom_delimiter(self):
        """Test tab separated input."""
        assert parse_grid("a\tb\n1\t2", delimiter="\t") == [["a", "b"], ["1", "2"]]

    def test_repeated_parse_is_identical(self):
        """Test that the same text always splits the same way."""
        text = 'a,"b,c"\n"x""y",\n"open'
        assert parse_grid(text) == parse_grid(text)


class TestCell:
    """Test safe cell access."""

    def test_reads_stripped_value(self):
        grid = [[" 46 ", "楊鈞睿"]]
        assert cell(grid, 0, 0) == "46"
        assert cell(grid, 0, 1) == "楊鈞睿"

    def test_out_of_range_is_blank(self):
        """Test that ragged rows and missing rows read as blank."""
        grid = [["a"], ["b", "c"]]
        assert cell(grid, 0, 1) == ""
        assert cell(grid, 5, 0) == ""
        assert cell(grid, -1, 0) == ""
        assert cell([], 0, 0) == ""
