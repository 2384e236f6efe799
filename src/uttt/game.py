"""Game session: turn order, move log and status text around a MetaBoard."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from .board import BoardStatus, Index, MetaBoard, Outcome
from .cell import Mark
from .config import LOG_CAPACITY
from .errors import UltimateError
from .logging_config import get_logger

logger = get_logger("game")


@dataclass(frozen=True)
class MoveRecord:
    mark: Mark
    outer: int
    inner: int
    status: BoardStatus

    def __str__(self) -> str:
        return f"{self.mark} -> board {self.outer}, square {self.inner}"


@dataclass
class Game:
    """State manager for a two-player Ultimate Tic-Tac-Toe match."""

    board: MetaBoard = field(default_factory=MetaBoard)
    current_mark: Mark = Mark.X
    last_move: Optional[MoveRecord] = None
    info_message: Optional[str] = None
    history: List[MoveRecord] = field(default_factory=list)
    action_log: List[str] = field(default_factory=list)
    _log_capacity: int = LOG_CAPACITY

    @classmethod
    def new(cls, first: Mark = Mark.X) -> "Game":
        return cls(current_mark=first)

    # ------------------------------------------------------------------
    # Move application
    # ------------------------------------------------------------------
    def play(self, outer_raw: int, inner_raw: int) -> MoveRecord:
        """Play the current mark at the raw coordinates.

        Raw values are validated through :class:`Index`; any rule violation
        propagates as an :class:`UltimateError` and leaves the game unchanged.
        The turn passes to the other mark only after an accepted move.
        """

        try:
            outer = Index.new(outer_raw)
            inner = Index.new(inner_raw)
            self.board.do_move(self.current_mark, outer, inner)
        except UltimateError as exc:
            logger.info("rejected %s at %s/%s: %s", self.current_mark, outer_raw, inner_raw, exc)
            raise

        record = MoveRecord(
            mark=self.current_mark,
            outer=outer.value,
            inner=inner.value,
            status=self.board.state(),
        )
        self.history.append(record)
        self.last_move = record
        self.info_message = None
        self._log_action(str(record))

        if self.is_finished:
            logger.info("game over after %d moves: %s", len(self.history), self.status_message())
            self._log_action(self.status_message())
        else:
            self.current_mark = self.current_mark.flip()
        return record

    def reset(self) -> None:
        self.board = MetaBoard()
        self.current_mark = Mark.X
        self.last_move = None
        self.info_message = None
        self.history.clear()
        self.action_log.clear()
        self._log_action("New game")

    # ------------------------------------------------------------------
    # Status helpers
    # ------------------------------------------------------------------
    @property
    def is_finished(self) -> bool:
        return self.board.state().is_terminal

    @property
    def winner(self) -> Optional[Mark]:
        return self.board.state().winner

    def status_message(self) -> str:
        status = self.board.state()
        if status.outcome is Outcome.WON:
            return f"Winner: {status.winner}"
        if status.outcome is Outcome.DRAWN:
            return "Draw"
        return f"{self.current_mark}'s turn"

    def _log_action(self, message: str) -> None:
        self.action_log.append(message)
        if len(self.action_log) > self._log_capacity:
            del self.action_log[0 : len(self.action_log) - self._log_capacity]
