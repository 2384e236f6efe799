"""Top-level package for the Ultimate Tic-Tac-Toe terminal game."""

__all__ = [
    "config",
    "errors",
    "cell",
    "board",
    "game",
    "controller",
]
