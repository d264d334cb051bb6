"""Exception taxonomy for parsing, construction and evaluation faults."""

from __future__ import annotations


class ParseError(ValueError):
    """Formula text does not match any recognized syntax."""


class InvalidExpression(ValueError):
    """An expression node was built in violation of its contract.

    Raised at construction time (unknown operator, missing operands, empty
    identifier), never during evaluation.
    """


class FormulaTypeError(Exception):
    """A formula could not be reduced to a concrete value.

    Covers operators combining non-constants (empty cells, unresolved
    references), numeric access on a non-constant, circular references and
    division by zero.
    """


class CircularReferenceError(FormulaTypeError):
    """A reference chain led back to an identifier already being resolved."""

    def __init__(self, identifier: str) -> None:
        self.identifier = identifier
        super().__init__(f"circular reference through {identifier}")


class DivisionByZeroError(FormulaTypeError, ZeroDivisionError):
    """Division by a zero operand."""

    def __init__(self) -> None:
        super().__init__("division by zero")
