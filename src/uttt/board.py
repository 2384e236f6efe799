"""Board model for Ultimate Tic-Tac-Toe.

Both levels of the game use the same rules: a 3x3 grid is won by the first
of the eight lines whose three positions share an owner, and drawn once every
position is settled without such a line. At the inner level a position is a
:class:`~uttt.cell.Cell`; at the outer level it is a :class:`SubBoard`, owned
only when that sub-board has been won.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, List, Optional, Sequence, Tuple

from .cell import Cell, Mark, Owned, check_match
from .config import GRID_SIZE, WIN_LINES
from .errors import (
    BoardClosed,
    BoardError,
    CellOccupied,
    GameOver,
    IndexOutOfRange,
    UltimateError,
    WrongBoard,
)
from .logging_config import get_logger

logger = get_logger("board")

Move = Tuple[int, int]


@dataclass(frozen=True)
class Index:
    """A position in ``[0, 9)`` on either board level, numbered row-major."""

    value: int

    def __post_init__(self) -> None:
        value = self.value
        if not isinstance(value, int) or isinstance(value, bool) or not 0 <= value < GRID_SIZE:
            raise IndexOutOfRange(value)

    @classmethod
    def new(cls, raw: int) -> "Index":
        return cls(raw)

    def __index__(self) -> int:
        return self.value

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)


class Outcome(Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAWN = "drawn"


@dataclass(frozen=True)
class BoardStatus:
    """``InProgress``, ``Won(mark)`` or ``Drawn``; the last two are terminal."""

    outcome: Outcome = Outcome.IN_PROGRESS
    winner: Optional[Mark] = None

    @classmethod
    def in_progress(cls) -> "BoardStatus":
        return cls()

    @classmethod
    def won(cls, mark: Mark) -> "BoardStatus":
        return cls(Outcome.WON, mark)

    @classmethod
    def drawn(cls) -> "BoardStatus":
        return cls(Outcome.DRAWN)

    @property
    def is_terminal(self) -> bool:
        return self.outcome is not Outcome.IN_PROGRESS

    def __str__(self) -> str:
        if self.outcome is Outcome.WON:
            return f"Winner: {self.winner}"
        if self.outcome is Outcome.DRAWN:
            return "Draw"
        return "In progress"


IN_PROGRESS = BoardStatus.in_progress()
DRAWN = BoardStatus.drawn()


def find_winner(positions: Sequence[Owned]) -> Optional[Mark]:
    """Return the owner of the first completed line in ``WIN_LINES`` order."""

    for a, b, c in WIN_LINES:
        winner = check_match(positions[a], positions[b], positions[c])
        if winner is not None:
            return winner
    return None


def evaluate(positions: Sequence[Owned], full: bool) -> BoardStatus:
    """Compute a grid's status from scratch.

    ``full`` tells whether every position is settled; it is supplied by the
    caller because "settled" means occupied for cells but decided for
    sub-boards.
    """

    winner = find_winner(positions)
    if winner is not None:
        return BoardStatus.won(winner)
    if full:
        return DRAWN
    return IN_PROGRESS


@dataclass
class SubBoard:
    """A 3x3 grid of cells with its own win/draw status."""

    cells: List[Cell] = field(default_factory=lambda: [Cell() for _ in range(GRID_SIZE)])
    status: BoardStatus = IN_PROGRESS

    # ------------------------------------------------------------------
    # Query helpers
    # ------------------------------------------------------------------
    def state(self) -> BoardStatus:
        return self.status

    @property
    def owner(self) -> Optional[Mark]:
        return self.status.winner

    def cell(self, index: Index) -> Cell:
        return self.cells[index]

    def is_full(self) -> bool:
        return all(not cell.is_empty for cell in self.cells)

    def empty_indices(self) -> Iterable[int]:
        return (idx for idx, cell in enumerate(self.cells) if cell.is_empty)

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------
    def do_move(self, mark: Mark, index: Index) -> None:
        """Place ``mark`` at ``index`` and refresh the status.

        Raises :class:`CellOccupied` for a filled cell and
        :class:`BoardClosed` once the board has been won or drawn. Nothing is
        written when either is raised.
        """

        target = self.cells[index]
        if not target.is_empty:
            raise CellOccupied(index.value)
        if self.status.is_terminal:
            raise BoardClosed(index.value)
        target.place(mark, index.value)
        self._update_status()

    def _update_status(self) -> None:
        # Decided boards stay decided.
        if self.status.is_terminal:
            return
        self.status = evaluate(self.cells, self.is_full())


@dataclass
class MetaBoard:
    """The outer 3x3 grid of sub-boards; the whole state of one game."""

    boards: List[SubBoard] = field(
        default_factory=lambda: [SubBoard() for _ in range(GRID_SIZE)]
    )
    status: BoardStatus = IN_PROGRESS
    _required: Optional[Index] = None

    # ------------------------------------------------------------------
    # Query helpers
    # ------------------------------------------------------------------
    def state(self) -> BoardStatus:
        return self.status

    @property
    def required_index(self) -> Optional[Index]:
        """The sub-board the next move must target, or ``None`` when free."""

        return self._required

    def sub_board(self, index: Index) -> SubBoard:
        return self.boards[index]

    def is_full(self) -> bool:
        return all(board.status.is_terminal for board in self.boards)

    def playable_boards(self) -> List[int]:
        """Outer indices the next move may target."""

        if self.status.is_terminal:
            return []
        if self._required is not None:
            return [self._required.value]
        return [idx for idx, board in enumerate(self.boards) if not board.status.is_terminal]

    def legal_moves(self) -> List[Move]:
        return [
            (outer, inner)
            for outer in self.playable_boards()
            for inner in self.boards[outer].empty_indices()
        ]

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------
    def do_move(self, mark: Mark, outer: Index, inner: Index) -> None:
        """Play ``mark`` in cell ``inner`` of sub-board ``outer``.

        Raises :class:`GameOver` once the game is decided,
        :class:`WrongBoard` when ``outer`` differs from the required board and
        :class:`BoardError` wrapping the sub-board's own error. A rejected
        move leaves the board untouched.
        """

        if self.status.is_terminal:
            raise GameOver()
        if self._required is not None and outer != self._required:
            raise WrongBoard(self._required.value)

        try:
            self.boards[outer].do_move(mark, inner)
        except UltimateError as exc:
            raise BoardError(outer.value, exc) from exc

        logger.debug("%s played %s/%s", mark, outer, inner)
        self._update_status()
        self._required = inner if not self.boards[inner].status.is_terminal else None

    def _update_status(self) -> None:
        if self.status.is_terminal:
            return
        self.status = evaluate(self.boards, self.is_full())
        if self.status.is_terminal:
            logger.debug("game decided: %s", self.status)
