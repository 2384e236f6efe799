"""Keyboard input for the terminal UI."""

from __future__ import annotations

import readchar

BACKSPACE = readchar.key.BACKSPACE
ESCAPE = readchar.key.ESC


def get_key() -> str:
    """Block until the player presses a key and return it."""

    return readchar.readkey()
