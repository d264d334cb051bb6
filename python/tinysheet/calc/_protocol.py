"""Parser and ExpressionFactory protocols."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from tinysheet.calc._expression import Expression


@runtime_checkable
class Parser(Protocol):
    """Turns formula text into an expression tree."""

    def parse(self, text: str) -> Expression:
        """Parse *text*.

        Raises ParseError when the text matches no formula syntax.
        """
        ...


@runtime_checkable
class ExpressionFactory(Protocol):
    """Builds validated expression nodes."""

    def create_empty(self) -> Expression:
        ...

    def create_constant(self, value: int) -> Expression:
        ...

    def create_reference(self, identifier: str) -> Expression:
        ...

    def create_operator(self, symbol: str, operands: Sequence[object]) -> Expression:
        """Build an operator node.

        Raises InvalidExpression for unknown symbols or missing operands.
        """
        ...
