"""CoreFactory: the single place that builds validated expression nodes."""

from __future__ import annotations

from collections.abc import Sequence

from tinysheet.calc._errors import InvalidExpression
from tinysheet.calc._expression import Constant, Empty, Expression, Operator, Reference
from tinysheet.calc._operators import is_operator


class CoreFactory:
    """Builds expression nodes, rejecting anything that breaks their contracts.

    Every rejection raises :class:`InvalidExpression`.
    """

    def create_empty(self) -> Expression:
        return Empty()

    def create_constant(self, value: int) -> Expression:
        return Constant(value)

    def create_reference(self, identifier: str) -> Expression:
        if not identifier:
            raise InvalidExpression('Requires: identifier != ""')
        return Reference(identifier)

    def create_operator(self, symbol: str, operands: Sequence[object]) -> Expression:
        if not is_operator(symbol):
            raise InvalidExpression(f"Unknown operator name: {symbol}")
        if not operands:
            raise InvalidExpression("Didn't give any arguments")
        return Operator(symbol, tuple(operands))  # type: ignore[arg-type]
