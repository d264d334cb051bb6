"""Dependency graph over formula identifiers with transitive dependent queries."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Mapping

from tinysheet.calc._expression import Expression


class DependencyGraph:
    """Tracks which identifiers each formula reads and who reads each identifier.

    Identifiers are the textual cell coordinates ("A0", "B3") or built-in
    names.  The graph is a snapshot: build a new one after formulas change.
    """

    __slots__ = ("dependencies", "dependents")

    def __init__(self) -> None:
        # identifier -> identifiers its formula reads
        self.dependencies: dict[str, set[str]] = {}
        # identifier -> identifiers whose formulas read it (reverse edges)
        self.dependents: dict[str, set[str]] = {}

    def add_formula(self, identifier: str, formula: Expression) -> None:
        """Register a formula and its transitive reference set."""
        for old in self.dependencies.get(identifier, ()):
            self.dependents[old].discard(identifier)

        refs = formula.dependencies()
        self.dependencies[identifier] = refs

        for ref in refs:
            if ref not in self.dependents:
                self.dependents[ref] = set()
            self.dependents[ref].add(identifier)

    def affected_cells(self, changed: Iterable[str]) -> set[str]:
        """Every formula that reads any of *changed*, directly or indirectly.

        Breadth-first over the reverse edges.  A changed identifier is only
        part of the result when it is reached again through a cycle.
        """
        affected: set[str] = set()
        queue: deque[str] = deque(changed)
        visited: set[str] = set(queue)

        while queue:
            current = queue.popleft()
            for dep in self.dependents.get(current, ()):
                affected.add(dep)
                if dep not in visited:
                    visited.add(dep)
                    queue.append(dep)

        return affected

    @classmethod
    def from_formulas(cls, formulas: Mapping[str, Expression]) -> DependencyGraph:
        """Build a graph by scanning every formula in *formulas*."""
        graph = cls()
        for identifier, formula in formulas.items():
            graph.add_formula(identifier, formula)
        return graph
