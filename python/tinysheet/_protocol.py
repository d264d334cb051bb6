"""View/update protocols and their result dataclasses."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@dataclass(frozen=True)
class ViewElement:
    """A styled piece of display text for one cell."""

    content: str
    background: str = "white"
    foreground: str = "black"


@dataclass(frozen=True)
class UpdateResponse:
    """Outcome of a textual cell update."""

    is_success: bool
    message: str | None = None

    @classmethod
    def success(cls) -> UpdateResponse:
        return cls(True)

    @classmethod
    def fail(cls, message: str) -> UpdateResponse:
        return cls(False, message)


@runtime_checkable
class SheetView(Protocol):
    """Read-only projection of a grid for display."""

    @property
    def rows(self) -> int:
        ...

    @property
    def columns(self) -> int:
        ...

    def value_view(self, row: int, column: int) -> ViewElement:
        """Evaluated content of a cell."""
        ...

    def formula_view(self, row: int, column: int) -> ViewElement:
        """Formula text of a cell, as entered."""
        ...


@runtime_checkable
class SheetUpdate(Protocol):
    """Accepts textual cell edits."""

    def update_cell(self, row: int, column: int, text: str) -> UpdateResponse:
        """Parse *text* into the cell at (row, column).

        Out-of-range coordinates raise IndexError.
        """
        ...
