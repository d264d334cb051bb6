"""Sheet: a fixed grid of formula cells with atomic updates and live evaluation."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType

from tinysheet._location import MAX_COLUMNS, CellLocation
from tinysheet._protocol import UpdateResponse, ViewElement
from tinysheet.calc._errors import FormulaTypeError, ParseError
from tinysheet.calc._expression import Expression, Reference
from tinysheet.calc._graph import DependencyGraph
from tinysheet.calc._protocol import Parser

logger = logging.getLogger(__name__)


class Sheet:
    """A rows x columns grid where every cell holds a formula.

    Two maps are kept in step: ``CellLocation -> formula`` and the evaluation
    environment ``identifier -> Expression`` (built-ins plus every cell under
    its ``"B5"``-style name).  Values are never cached; every read evaluates
    the stored formula against the current environment.

    Usage::

        sheet = SheetBuilder(SimpleParser(CoreFactory()), Empty()).empty(3, 3)
        sheet.update_cell(0, 0, "5")
        sheet.update_cell(0, 1, "A0 + 3")
        sheet.value_view(0, 1).content   # "8"
    """

    __slots__ = ("_parser", "_builtins", "_default", "_rows", "_columns", "_formulas", "_environment")

    def __init__(
        self,
        parser: Parser,
        builtins: Mapping[str, Expression],
        default_expression: Expression,
        rows: int,
        columns: int,
    ) -> None:
        if rows <= 0 or columns <= 0:
            raise ValueError("Requires: rows > 0, columns > 0")
        if columns > MAX_COLUMNS:
            raise ValueError(f"Requires: columns <= {MAX_COLUMNS}")
        for name in builtins:
            if CellLocation.maybe_reference(name) is not None:
                raise ValueError(f"Built-in {name!r} collides with a cell location")

        self._parser = parser
        self._builtins: Mapping[str, Expression] = MappingProxyType(dict(builtins))
        self._default = default_expression
        self._rows = rows
        self._columns = columns
        self._formulas: dict[CellLocation, Expression] = {}
        self._environment: dict[str, Expression] = dict(self._builtins)
        for row in range(rows):
            for column in range(columns):
                self._install(CellLocation(row, column), default_expression)

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def columns(self) -> int:
        return self._columns

    @property
    def builtins(self) -> Mapping[str, Expression]:
        """Read-only snapshot of the built-ins this sheet was created with."""
        return self._builtins

    # ------------------------------------------------------------------
    # Updates
    # ------------------------------------------------------------------

    def update(self, location: CellLocation, expression: Expression) -> None:
        """Replace the formula at *location*, or leave the sheet untouched.

        The new formula is evaluated, then every cell that depends on
        *location* and evaluated cleanly before the change.  If any of them
        now raises, the previous formula is restored and the error re-raised.
        """
        self._check_location(location)
        previous = self._formulas[location]
        healthy = sorted(cell for cell in self.used_by(location) if self._evaluates(cell))

        self._install(location, expression)
        try:
            self._evaluate(location)
            for cell in healthy:
                self._evaluate(cell)
        except Exception as e:
            self._install(location, previous)
            logger.debug("Rolled back %s to %r: %s", location, previous.render(), e)
            raise

    def clear(self, location: CellLocation) -> None:
        """Reset *location* to the sheet's default expression (same rules as update)."""
        self.update(location, self._default)

    def update_cell(self, row: int, column: int, text: str) -> UpdateResponse:
        """Parse *text* and store it at (row, column).

        Parse failures and type errors come back as failed responses with the
        sheet unchanged; out-of-range coordinates raise IndexError.
        """
        location = self._location(row, column)
        try:
            expression = self._parser.parse(text)
        except ParseError:
            return UpdateResponse.fail(f"Unable to parse: {text}")
        try:
            self.update(location, expression)
        except FormulaTypeError as e:
            return UpdateResponse.fail(f"Type error: {e}")
        return UpdateResponse.success()

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def formula_at(self, location: CellLocation) -> Expression:
        """The formula stored at *location*, unevaluated."""
        self._check_location(location)
        return self._formulas[location]

    def value_at(self, location: CellLocation) -> Expression:
        """Evaluate *location* now; fall back to its formula on a type error."""
        self._check_location(location)
        try:
            return self._evaluate(location)
        except FormulaTypeError as e:
            logger.debug("Cannot evaluate %s: %s", location, e)
            return self._formulas[location]

    def used_by(self, location: CellLocation) -> set[CellLocation]:
        """Every cell whose formula reads *location*, directly or indirectly.

        *location* itself is included only if it sits on a reference cycle.
        """
        self._check_location(location)
        by_name = {str(cell): cell for cell in self._formulas}
        graph = DependencyGraph.from_formulas(
            {name: self._formulas[cell] for name, cell in by_name.items()}
        )
        return {by_name[name] for name in graph.affected_cells({str(location)})}

    def value_view(self, row: int, column: int) -> ViewElement:
        return ViewElement(self.value_at(self._location(row, column)).render())

    def formula_view(self, row: int, column: int) -> ViewElement:
        return ViewElement(self.formula_at(self._location(row, column)).render())

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _install(self, location: CellLocation, expression: Expression) -> None:
        self._formulas[location] = expression
        self._environment[str(location)] = expression

    def _evaluate(self, location: CellLocation) -> Expression:
        # Resolving through a Reference seeds the cycle guard with the cell itself.
        return Reference(str(location)).value(MappingProxyType(self._environment))

    def _evaluates(self, location: CellLocation) -> bool:
        try:
            self._evaluate(location)
        except FormulaTypeError:
            return False
        return True

    def _location(self, row: int, column: int) -> CellLocation:
        if not (0 <= row < self._rows and 0 <= column < self._columns):
            raise IndexError(
                f"Requires: 0 <= row < {self._rows}, 0 <= column < {self._columns}; "
                f"got ({row}, {column})"
            )
        return CellLocation(row, column)

    def _check_location(self, location: CellLocation) -> None:
        self._location(location.row, location.column)

    def __repr__(self) -> str:
        return f"<Sheet {self._rows}x{self._columns} builtins={sorted(self._builtins)}>"
