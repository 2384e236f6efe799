"""Marks, cells and the three-in-a-row matcher shared by both board levels."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Protocol

from .config import EMPTY_SYMBOL, O_SYMBOL, X_SYMBOL
from .errors import CellOccupied


class Mark(Enum):
    X = "x"
    O = "o"

    @property
    def symbol(self) -> str:
        return X_SYMBOL if self is Mark.X else O_SYMBOL

    def flip(self) -> "Mark":
        return Mark.O if self is Mark.X else Mark.X

    def __str__(self) -> str:
        return self.symbol


class Owned(Protocol):
    """Anything that may be claimed by a mark: a cell, or a decided sub-board."""

    @property
    def owner(self) -> Optional[Mark]: ...


@dataclass
class Cell:
    """A write-once board position."""

    occupant: Optional[Mark] = None

    @property
    def owner(self) -> Optional[Mark]:
        return self.occupant

    @property
    def is_empty(self) -> bool:
        return self.occupant is None

    def place(self, mark: Mark, index: int) -> None:
        """Claim the cell for ``mark``; ``index`` is only used for the error."""

        if self.occupant is not None:
            raise CellOccupied(index)
        self.occupant = mark

    def __str__(self) -> str:
        return self.occupant.symbol if self.occupant is not None else EMPTY_SYMBOL


def check_match(a: Owned, b: Owned, c: Owned) -> Optional[Mark]:
    """Return the mark owning all three positions, or ``None``.

    Unowned positions never match, so three empty cells yield ``None``.
    """

    owner = a.owner
    if owner is not None and owner == b.owner == c.owner:
        return owner
    return None
