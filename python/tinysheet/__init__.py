"""tinysheet: a small spreadsheet engine with lazily evaluated formula cells.

Usage::

    from tinysheet import Constant, empty_sheet

    sheet = empty_sheet(4, 4, builtins={"ten": Constant(10)})
    sheet.update_cell(0, 0, "5")
    sheet.update_cell(0, 1, "A0 + ten")
    print(sheet.value_view(0, 1).content)   # 15
    print(sheet.formula_view(0, 1).content) # A0 + ten
"""

from __future__ import annotations

from collections.abc import Mapping

from tinysheet._builder import SheetBuilder
from tinysheet._display import DisplaySheet, FixedSheet
from tinysheet._location import CellLocation
from tinysheet._protocol import SheetUpdate, SheetView, UpdateResponse, ViewElement
from tinysheet._sheet import Sheet
from tinysheet.calc import (
    CircularReferenceError,
    Constant,
    CoreFactory,
    DivisionByZeroError,
    Empty,
    Expression,
    FormulaTypeError,
    InvalidExpression,
    Operator,
    ParseError,
    Reference,
    SimpleParser,
    parse,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "CellLocation",
    "CircularReferenceError",
    "Constant",
    "CoreFactory",
    "DisplaySheet",
    "DivisionByZeroError",
    "Empty",
    "Expression",
    "FixedSheet",
    "FormulaTypeError",
    "InvalidExpression",
    "Operator",
    "ParseError",
    "Reference",
    "Sheet",
    "SheetBuilder",
    "SheetUpdate",
    "SheetView",
    "SimpleParser",
    "UpdateResponse",
    "ViewElement",
    "empty_sheet",
    "parse",
]


def empty_sheet(
    rows: int,
    columns: int,
    builtins: Mapping[str, Expression] | None = None,
    default: Expression | None = None,
) -> Sheet:
    """Build a sheet with the stock parser and factory.

    Cells start as ``default`` (``Empty()`` when omitted).  Built-in names go
    through :meth:`SheetBuilder.include_builtin`, so names that look like cell
    locations raise ValueError.
    """
    builder = SheetBuilder(SimpleParser(CoreFactory()), default if default is not None else Empty())
    for name, expression in (builtins or {}).items():
        builder.include_builtin(name, expression)
    return builder.empty(rows, columns)
