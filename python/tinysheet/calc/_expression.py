"""Expression tree for cell formulas: constants, empties, references, operators.

Evaluation is a reduction: ``expr.value(environment)`` follows references
through *environment* (identifier -> Expression) and folds operators into a
new :class:`Constant`.  Results live only for one ``value`` call; each call
re-walks the tree.

Reference chains are resolved with the set of identifiers on the current
path, so ``A0 = A1``, ``A1 = A0`` raises :class:`CircularReferenceError`
rather than recursing forever.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass

from tinysheet.calc._errors import (
    CircularReferenceError,
    FormulaTypeError,
    InvalidExpression,
)
from tinysheet.calc._operators import MIN_OPERANDS, apply_operator

Environment = Mapping[str, "Expression"]


class Expression(ABC):
    """Base class for every formula node."""

    __slots__ = ()

    @abstractmethod
    def dependencies(self) -> set[str]:
        """Identifiers this expression reads, including nested operands."""

    @abstractmethod
    def number(self) -> int:
        """Numeric value of a fully reduced node.

        Raises FormulaTypeError for anything but a :class:`Constant`.
        """

    def value(self, environment: Environment) -> Expression:
        """Reduce this expression against *environment*.

        Each identifier is resolved at most once per call.  Chains nested
        deeper than the interpreter stack allows raise FormulaTypeError.
        """
        try:
            return self._reduce(environment, frozenset(), {})
        except RecursionError:
            raise FormulaTypeError("reference chain too deep to evaluate") from None

    @abstractmethod
    def _reduce(
        self,
        environment: Environment,
        resolving: frozenset[str],
        resolved: dict[str, Expression],
    ) -> Expression:
        ...

    @abstractmethod
    def render(self) -> str:
        """Display text for this expression."""


@dataclass(frozen=True)
class Empty(Expression):
    """A cell with nothing in it."""

    def dependencies(self) -> set[str]:
        return set()

    def number(self) -> int:
        raise FormulaTypeError("empty cell has no numeric value")

    def _reduce(
        self,
        environment: Environment,
        resolving: frozenset[str],
        resolved: dict[str, Expression],
    ) -> Expression:
        return self

    def render(self) -> str:
        return ""


@dataclass(frozen=True)
class Constant(Expression):
    """An integer literal."""

    integer: int

    def __post_init__(self) -> None:
        if isinstance(self.integer, bool) or not isinstance(self.integer, int):
            raise InvalidExpression(f"Constant requires an int, got {self.integer!r}")

    def dependencies(self) -> set[str]:
        return set()

    def number(self) -> int:
        return self.integer

    def _reduce(
        self,
        environment: Environment,
        resolving: frozenset[str],
        resolved: dict[str, Expression],
    ) -> Expression:
        return self

    def render(self) -> str:
        return str(self.integer)


@dataclass(frozen=True)
class Reference(Expression):
    """A named lookup into the environment (a cell coordinate or a built-in)."""

    identifier: str

    def __post_init__(self) -> None:
        if not self.identifier:
            raise InvalidExpression("Reference identifier must be non-empty")

    def dependencies(self) -> set[str]:
        return {self.identifier}

    def number(self) -> int:
        raise FormulaTypeError(f"reference {self.identifier} is not a number")

    def _reduce(
        self,
        environment: Environment,
        resolving: frozenset[str],
        resolved: dict[str, Expression],
    ) -> Expression:
        bound = environment.get(self.identifier)
        if bound is None:
            return self
        if self.identifier in resolving:
            raise CircularReferenceError(self.identifier)
        cached = resolved.get(self.identifier)
        if cached is None:
            cached = bound._reduce(environment, resolving | {self.identifier}, resolved)  # noqa: SLF001
            resolved[self.identifier] = cached
        return cached

    def render(self) -> str:
        return self.identifier


@dataclass(frozen=True)
class Operator(Expression):
    """An n-ary arithmetic or comparison node.

    ``symbol`` is one of ``+ - * / < =``; ``operands`` holds at least one
    expression (two for ``<``).
    """

    symbol: str
    operands: tuple[Expression, ...]

    def __post_init__(self) -> None:
        minimum = MIN_OPERANDS.get(self.symbol)
        if minimum is None:
            raise InvalidExpression(f"Unknown operator: {self.symbol!r}")
        # Accept any sequence but store a tuple so the node stays hashable.
        object.__setattr__(self, "operands", tuple(self.operands))
        if len(self.operands) < minimum:
            raise InvalidExpression(
                f"Operator {self.symbol!r} needs at least {minimum} operand(s), "
                f"got {len(self.operands)}"
            )
        for operand in self.operands:
            if not isinstance(operand, Expression):
                raise InvalidExpression(f"Operand is not an expression: {operand!r}")

    def dependencies(self) -> set[str]:
        deps: set[str] = set()
        for operand in self.operands:
            deps |= operand.dependencies()
        return deps

    def number(self) -> int:
        raise FormulaTypeError(f"unevaluated operator {self.render()!r} is not a number")

    def _reduce(
        self,
        environment: Environment,
        resolving: frozenset[str],
        resolved: dict[str, Expression],
    ) -> Expression:
        args: list[int] = []
        for operand in self.operands:
            reduced = operand._reduce(environment, resolving, resolved)  # noqa: SLF001
            if isinstance(reduced, Empty):
                raise FormulaTypeError(f"operator {self.symbol!r} applied to an empty cell")
            if not isinstance(reduced, Constant):
                raise FormulaTypeError(
                    f"operator {self.symbol!r} applied to unresolved {reduced.render()!r}"
                )
            args.append(reduced.number())
        return Constant(apply_operator(self.symbol, args))

    def render(self) -> str:
        return f" {self.symbol} ".join(operand.render() for operand in self.operands)
