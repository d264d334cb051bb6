"""CellLocation: a (row, column) grid coordinate with ``B5``-style text form."""

from __future__ import annotations

import re
from dataclasses import dataclass

MAX_COLUMNS = 26

# One uppercase letter, then the row number: A0, B5, Z12
_LOCATION_RE = re.compile(r"([A-Z])([0-9]+)")


@dataclass(frozen=True, order=True)
class CellLocation:
    """A cell coordinate.  Columns are letters in text form, ``A`` being 0.

    Note the row is written as-is, so ``CellLocation(5, 1)`` is ``"B5"``.
    """

    row: int
    column: int

    def __post_init__(self) -> None:
        if self.row < 0:
            raise ValueError(f"row must be >= 0, got {self.row}")
        if not 0 <= self.column < MAX_COLUMNS:
            raise ValueError(f"column must be in [0, {MAX_COLUMNS}), got {self.column}")

    @classmethod
    def from_letter(cls, row: int, letter: str) -> CellLocation:
        """``CellLocation.from_letter(5, "B")`` -> B5."""
        if len(letter) != 1 or not "A" <= letter <= "Z":
            raise ValueError(f"column letter must be A-Z, got {letter!r}")
        return cls(row, ord(letter) - ord("A"))

    @classmethod
    def maybe_reference(cls, text: str | None) -> CellLocation | None:
        """Parse *text* as a location, or return None if it is not one.

        Never raises: anything other than one uppercase ASCII letter followed
        by ASCII digits (no sign, no spaces) is simply not a location.
        """
        if not text:
            return None
        m = _LOCATION_RE.fullmatch(text)
        if m is None:
            return None
        return cls.from_letter(int(m.group(2)), m.group(1))

    def __str__(self) -> str:
        return f"{chr(ord('A') + self.column)}{self.row}"
