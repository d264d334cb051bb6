"""Lightweight sheets for driving a view without the evaluation engine."""

from __future__ import annotations

from tinysheet._protocol import UpdateResponse, ViewElement
from tinysheet.calc._errors import ParseError
from tinysheet.calc._expression import Expression
from tinysheet.calc._protocol import Parser


def _check_bounds(row: int, column: int, rows: int, columns: int) -> None:
    if not (0 <= row < rows and 0 <= column < columns):
        raise IndexError(
            f"Requires: 0 <= row < {rows}, 0 <= column < {columns}; got ({row}, {column})"
        )


class DisplaySheet:
    """Stores parsed formulas and shows their rendering; nothing is evaluated."""

    __slots__ = ("_parser", "_default", "_rows", "_columns", "_cells")

    def __init__(self, parser: Parser, default_expression: Expression, rows: int, columns: int) -> None:
        if rows <= 0 or columns <= 0:
            raise ValueError("Requires: rows > 0, columns > 0")
        self._parser = parser
        self._default = default_expression
        self._rows = rows
        self._columns = columns
        self._cells: dict[tuple[int, int], Expression] = {}

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def columns(self) -> int:
        return self._columns

    def update_cell(self, row: int, column: int, text: str) -> UpdateResponse:
        _check_bounds(row, column, self._rows, self._columns)
        try:
            self._cells[(row, column)] = self._parser.parse(text)
        except ParseError:
            return UpdateResponse.fail(f"Unable to parse: {text}")
        return UpdateResponse.success()

    def value_view(self, row: int, column: int) -> ViewElement:
        return self.formula_view(row, column)

    def formula_view(self, row: int, column: int) -> ViewElement:
        _check_bounds(row, column, self._rows, self._columns)
        return ViewElement(self._cells.get((row, column), self._default).render())


class FixedSheet:
    """A 6x6 view-only sheet with a green 2x2 block in the middle."""

    rows = 6
    columns = 6

    def update_cell(self, row: int, column: int, text: str) -> UpdateResponse:
        _check_bounds(row, column, self.rows, self.columns)
        return UpdateResponse.fail("Sheet is view only.")

    def value_view(self, row: int, column: int) -> ViewElement:
        _check_bounds(row, column, self.rows, self.columns)
        if self._in_block(row, column):
            return ViewElement("W", "green", "black")
        return ViewElement("", "white", "black")

    def formula_view(self, row: int, column: int) -> ViewElement:
        _check_bounds(row, column, self.rows, self.columns)
        if self._in_block(row, column):
            return ViewElement("GREEN", "green", "black")
        return ViewElement("", "white", "black")

    @staticmethod
    def _in_block(row: int, column: int) -> bool:
        return 2 <= row <= 3 and 2 <= column <= 3
