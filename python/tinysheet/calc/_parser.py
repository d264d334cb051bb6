"""Formula parser: naive left-to-right operator splitting into expression trees."""

from __future__ import annotations

import logging
import re

from tinysheet.calc._errors import InvalidExpression, ParseError
from tinysheet.calc._expression import Expression
from tinysheet.calc._factory import CoreFactory
from tinysheet.calc._operators import OPERATOR_SYMBOLS
from tinysheet.calc._protocol import ExpressionFactory

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Token patterns
# ---------------------------------------------------------------------------

# Signed decimal integer, ASCII digits only: 42, -7, +3
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")

# Identifiers: letters and digits only (A0, B12, pi, TAX2)
_IDENTIFIER_RE = re.compile(r"[^\W_]+")


class SimpleParser:
    """Parses formula text by splitting on operator symbols.

    Operators are tried in :data:`OPERATOR_SYMBOLS` order; the first symbol
    present in the text splits it on every occurrence and each piece is
    parsed recursively.  There are no parentheses and no precedence beyond
    that order, so ``1 + 2 * 3`` is ``1 + (2 * 3)`` and ``2 * 3 + 1`` is
    ``(2 * 3) + 1``.

    Usage::

        parser = SimpleParser(CoreFactory())
        parser.parse("A0 + 3")   # Operator("+", (Reference("A0"), Constant(3)))
    """

    def __init__(self, factory: ExpressionFactory) -> None:
        self._factory = factory

    def parse(self, text: str) -> Expression:
        text = text.strip()
        if not text:
            return self._factory.create_empty()

        if _INTEGER_RE.fullmatch(text):
            return self._factory.create_constant(int(text))

        for symbol in OPERATOR_SYMBOLS:
            if symbol not in text:
                continue
            operands = [self.parse(part) for part in text.split(symbol)]
            try:
                return self._factory.create_operator(symbol, operands)
            except InvalidExpression as e:
                logger.debug("Cannot build %r from %r: %s", symbol, text, e)

        if _IDENTIFIER_RE.fullmatch(text):
            return self._factory.create_reference(text)

        raise ParseError(f"Unable to parse: {text}")


def parse(text: str) -> Expression:
    """Parse *text* with the stock :class:`SimpleParser` and :class:`CoreFactory`."""
    return SimpleParser(CoreFactory()).parse(text)
