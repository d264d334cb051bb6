"""tinysheet.calc - Expression model, parser and dependency tracking."""

from tinysheet.calc._errors import (
    CircularReferenceError,
    DivisionByZeroError,
    FormulaTypeError,
    InvalidExpression,
    ParseError,
)
from tinysheet.calc._expression import Constant, Empty, Expression, Operator, Reference
from tinysheet.calc._factory import CoreFactory
from tinysheet.calc._graph import DependencyGraph
from tinysheet.calc._operators import OPERATOR_RULES, OPERATOR_SYMBOLS, apply_operator, is_operator
from tinysheet.calc._parser import SimpleParser, parse
from tinysheet.calc._protocol import ExpressionFactory, Parser

__all__ = [
    "CircularReferenceError",
    "Constant",
    "CoreFactory",
    "DependencyGraph",
    "DivisionByZeroError",
    "Empty",
    "Expression",
    "ExpressionFactory",
    "FormulaTypeError",
    "InvalidExpression",
    "OPERATOR_RULES",
    "OPERATOR_SYMBOLS",
    "Operator",
    "ParseError",
    "Parser",
    "Reference",
    "SimpleParser",
    "apply_operator",
    "is_operator",
    "parse",
]
