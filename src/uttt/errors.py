"""Exceptions raised by the rules engine.

Every error is recoverable: the board is left exactly as it was before the
rejected call, so the caller only has to report the message and ask again.
"""

from __future__ import annotations

from .config import GRID_SIZE


class UltimateError(ValueError):
    """Base class for all rule violations."""


class IndexOutOfRange(UltimateError):
    def __init__(self, value: int) -> None:
        self.value = value
        super().__init__(f"Index {value} is not in range (0-{GRID_SIZE})")


class CellOccupied(UltimateError):
    def __init__(self, index: int) -> None:
        self.index = index
        super().__init__(f"Square {index} is not empty")


class BoardClosed(UltimateError):
    """Raised when a move targets a sub-board that is already won or drawn."""

    def __init__(self, index: int) -> None:
        self.index = index
        super().__init__("Board is already decided")


class WrongBoard(UltimateError):
    def __init__(self, required: int) -> None:
        self.required = required
        super().__init__(f"Move must be in board {required}")


class BoardError(UltimateError):
    """A sub-board error annotated with the outer board it happened in."""

    def __init__(self, outer: int, error: UltimateError) -> None:
        self.outer = outer
        self.error = error
        super().__init__(f"Board {outer}: {error}")


class GameOver(UltimateError):
    def __init__(self) -> None:
        super().__init__("The game is already over")
