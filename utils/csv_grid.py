"""
Fixed-position CSV grid parsing

Splits raw delimited text into a 2-D grid of string cells. Empty cells are
kept as empty strings so that downstream parsers can keep addressing values
by row/column index. The parser never raises: spreadsheet exports are
hand-maintained and occasionally carry broken quoting.
"""
from typing import List, Sequence

Grid = List[List[str]]


def parse_grid(text: str, delimiter: str = ',') -> Grid:
    """
    Parse delimited text into rows of cells.

    Args:
        text: Raw CSV text (``\\n`` or ``\\r\\n`` line endings)
        delimiter: Cell separator

    Returns:
        List of rows, each a list of cell strings. A final row without a line
        terminator is still returned; empty input returns an empty list.

    Quoting rules:
        - A quote at the start of a field opens a quoted section in which the
          delimiter and line breaks are literal.
        - ``""`` inside a quoted section is a literal quote.
        - A quote that is never closed is re-read as a literal character, so
          the rest of the input still parses as normal rows.
    """
    if not text:
        return []

    literal_quotes = set()

    while True:
        rows: Grid = []
        row: List[str] = []
        cell: List[str] = []
        field_started = False
        in_quotes = False
        quote_start = -1
        i = 0
        length = len(text)

        while i < length:
            char = text[i]

            if in_quotes:
                if char == '"':
                    if i + 1 < length and text[i + 1] == '"':
                        cell.append('"')
                        i += 2
                        continue
                    in_quotes = False
                elif char != '\r':
                    cell.append(char)
                i += 1
                continue

            if char == '"' and not field_started and i not in literal_quotes:
                in_quotes = True
                field_started = True
                quote_start = i
            elif char == delimiter:
                row.append(''.join(cell))
                cell = []
                field_started = False
            elif char == '\n' or (char == '\r' and i + 1 < length and text[i + 1] == '\n'):
                row.append(''.join(cell))
                rows.append(row)
                row = []
                cell = []
                field_started = False
                if char == '\r':
                    i += 1
            elif char != '\r':
                cell.append(char)
                field_started = True
            i += 1

        if in_quotes:
            # Unterminated quote: treat it as a literal and parse again
            literal_quotes.add(quote_start)
            continue

        if field_started or row:
            row.append(''.join(cell))
            rows.append(row)

        return rows


def cell(grid: Sequence[Sequence[str]], row: int, col: int) -> str:
    """
    Read a stripped cell, or an empty string when outside the grid.

    Ragged rows are common in scoresheet exports, so out-of-range
    coordinates are treated as blank cells.
    """
    if row < 0 or col < 0 or row >= len(grid):
        return ''
    cells = grid[row]
    if col >= len(cells):
        return ''
    value = cells[col]
    return value.strip() if value else ''
