"""SheetBuilder: configures parser, default expression and built-ins for new sheets."""

from __future__ import annotations

from tinysheet._location import CellLocation
from tinysheet._sheet import Sheet
from tinysheet.calc._expression import Expression
from tinysheet.calc._protocol import Parser


class SheetBuilder:
    """Collects built-ins and stamps out sheets that share them.

    Each sheet gets its own copy of the built-ins, so including more
    built-ins later does not change sheets already built::

        builder = SheetBuilder(SimpleParser(CoreFactory()), Empty())
        builder.include_builtin("ten", Constant(10))
        sheet = builder.empty(4, 4)
    """

    def __init__(self, parser: Parser, default_expression: Expression) -> None:
        self._parser = parser
        self._default = default_expression
        self._builtins: dict[str, Expression] = {}

    def include_builtin(self, identifier: str, expression: Expression) -> SheetBuilder:
        """Register *identifier* for every sheet built afterwards.

        Identifiers that read as a cell location (``A0``, ``Z12``) are
        rejected with ValueError so names and coordinates never overlap.
        """
        if not identifier:
            raise ValueError("Built-in identifier must be non-empty")
        if CellLocation.maybe_reference(identifier) is not None:
            raise ValueError(f"Identifier {identifier!r} cannot be a valid cell location reference")
        self._builtins[identifier] = expression
        return self

    @property
    def builtins(self) -> dict[str, Expression]:
        return dict(self._builtins)

    def empty(self, rows: int, columns: int) -> Sheet:
        """A new sheet with every cell set to the default expression."""
        return Sheet(self._parser, dict(self._builtins), self._default, rows, columns)

    def __repr__(self) -> str:
        return f"<SheetBuilder builtins={sorted(self._builtins)}>"
