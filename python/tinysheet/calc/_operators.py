"""Operator whitelist and numeric rules for formula evaluation."""

from __future__ import annotations

from typing import Callable

from tinysheet.calc._errors import DivisionByZeroError

# ---------------------------------------------------------------------------
# Whitelist: symbols the parser tries, in priority order.
# ---------------------------------------------------------------------------

OPERATOR_SYMBOLS: tuple[str, ...] = ("=", "<", "+", "-", "*", "/")

# Minimum operand count per symbol (comparisons need a pair).
MIN_OPERANDS: dict[str, int] = {
    "=": 1,
    "<": 2,
    "+": 1,
    "-": 1,
    "*": 1,
    "/": 1,
}


def is_operator(symbol: str) -> bool:
    """Return True if *symbol* is one of the supported operators."""
    return symbol in MIN_OPERANDS


# ---------------------------------------------------------------------------
# Numeric rules (applied left-to-right over reduced operand values)
# ---------------------------------------------------------------------------


def _rule_plus(args: list[int]) -> int:
    return sum(args)


def _rule_minus(args: list[int]) -> int:
    result = args[0]
    for arg in args[1:]:
        result -= arg
    return result


def _rule_times(args: list[int]) -> int:
    result = 1
    for arg in args:
        result *= arg
    return result


def _truncating_div(a: int, b: int) -> int:
    """Integer division rounding toward zero (``-7 / 2 == -3``)."""
    if b == 0:
        raise DivisionByZeroError()
    q = abs(a) // abs(b)
    return -q if (a < 0) != (b < 0) else q


def _rule_divide(args: list[int]) -> int:
    result = args[0]
    for arg in args[1:]:
        result = _truncating_div(result, arg)
    return result


def _rule_less(args: list[int]) -> int:
    for left, right in zip(args, args[1:]):
        if left >= right:
            return 0
    return 1


def _rule_equal(args: list[int]) -> int:
    first = args[0]
    return 1 if all(arg == first for arg in args[1:]) else 0


OPERATOR_RULES: dict[str, Callable[[list[int]], int]] = {
    "+": _rule_plus,
    "-": _rule_minus,
    "*": _rule_times,
    "/": _rule_divide,
    "<": _rule_less,
    "=": _rule_equal,
}


def apply_operator(symbol: str, args: list[int]) -> int:
    """Apply the rule for *symbol* to already-reduced operand values."""
    return OPERATOR_RULES[symbol](args)
