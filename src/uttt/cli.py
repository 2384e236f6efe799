"""Command-line entry point for the Ultimate Tic-Tac-Toe game."""

from __future__ import annotations

from typing import Optional

import colorama

from .board import BoardStatus
from .controller import Command, Controller
from .errors import UltimateError
from .game import Game
from .logging_config import get_logger, setup_logging
from .ui import input as input_mod
from .ui.renderer import render, render_board

logger = get_logger("cli")

QUIT = "quit"


def main() -> None:  # pragma: no cover - interactive loop
    """Launch an interactive two-player game in the terminal."""

    colorama.just_fix_windows_console()
    setup_logging()
    game = Game.new()
    controller = Controller(game)
    logger.info("session started")

    while True:
        print("\033[H\033[J", end="")  # Clear terminal
        print(render(game, controller.pending_outer))

        key = input_mod.get_key()
        command = _map_key_to_command(key)
        if command == QUIT:
            break
        if command is None:
            game.info_message = "Invalid input"
            continue
        try:
            controller.handle_input(command)
        except UltimateError as exc:
            game.info_message = f"Invalid move: {exc}"
        except ValueError as exc:
            game.info_message = str(exc)

    print(render_board(game.board))
    print(_final_message(game.board.state()))
    logger.info("session ended after %d moves", len(game.history))


def _map_key_to_command(key: Optional[str]) -> Optional[str]:
    if not key:
        return None
    if key.isdigit() and len(key) == 1:
        return f"{Command.DIGIT_PREFIX}{key}"
    mapping = {
        input_mod.BACKSPACE: Command.CLEAR,
        input_mod.ESCAPE: Command.CLEAR,
        "r": Command.RESET,
        "R": Command.RESET,
        "q": QUIT,
        "Q": QUIT,
    }
    return mapping.get(key)


def _final_message(status: BoardStatus) -> str:
    if status.is_terminal:
        return str(status)
    return "Game abandoned"


if __name__ == "__main__":  # pragma: no cover
    main()
