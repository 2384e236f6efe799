"""Controller responsible for interpreting user commands."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional

from .game import Game


class Command:
    DIGIT_PREFIX = "digit:"
    CLEAR = "clear"
    RESET = "reset"


@dataclass
class Controller:
    """Translate symbolic commands into game actions.

    A move is entered as two digits: the outer board first, then the square
    inside it.
    """

    game: Game
    pending_outer: Optional[int] = None

    def __post_init__(self) -> None:
        self._handlers: Dict[str, Callable[[], None]] = {
            Command.CLEAR: self.clear_pending,
            Command.RESET: self.reset,
        }
        for digit in range(10):
            self._handlers[f"{Command.DIGIT_PREFIX}{digit}"] = (
                lambda value=digit: self.enter_digit(value)
            )

    def handle_input(self, command: str) -> None:
        if self.game.is_finished and command != Command.RESET:
            return

        handler = self._handlers.get(command)
        if handler is None:
            raise ValueError("Invalid input")
        handler()

    def enter_digit(self, value: int) -> None:
        if self.pending_outer is None:
            self.pending_outer = value
            return
        outer, self.pending_outer = self.pending_outer, None
        self.game.play(outer, value)

    def clear_pending(self) -> None:
        self.pending_outer = None

    def reset(self) -> None:
        self.pending_outer = None
        self.game.reset()
