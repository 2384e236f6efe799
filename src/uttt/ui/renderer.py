"""Rendering helpers for the terminal UI."""

from __future__ import annotations

import re
import unicodedata
from typing import Callable, List, Optional, Set

from ..board import Index, MetaBoard, Move
from ..cell import Cell, Mark
from ..config import GRID_SIZE, PLAYABLE_SYMBOL, ROW_LENGTH
from ..game import Game

RESET = "\033[0m"
BOLD = "\033[1m"
DIM = "\033[2m"
FG_CYAN = "\033[36m"
FG_YELLOW = "\033[33m"
FG_GREEN = "\033[32m"
FG_RED = "\033[31m"
FG_MAGENTA = "\033[35m"
FG_BLUE = "\033[34m"
FG_WHITE = "\033[37m"

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;]*m")

BOARD_SEP = " | "
DIVIDER = "-" * (ROW_LENGTH * ROW_LENGTH * 3 + len(BOARD_SEP) * (ROW_LENGTH - 1))
MARK_COLORS = {Mark.X: FG_RED, Mark.O: FG_CYAN}

# Receives the cell and whether the next move may take it.
CellFormatter = Callable[[Cell, bool], str]


def render(game: Game, pending_outer: Optional[int] = None) -> str:
    lines: List[str] = []
    lines.extend(_render_hud(game, pending_outer))

    board_lines = _board_lines(game.board, _render_colored_cell)
    board_width = max(_visible_width(line) for line in board_lines)
    log_lines = _render_action_log_panel(game, len(board_lines))
    for idx, board_line in enumerate(board_lines):
        combined = f"{_pad(board_line, board_width)}   {log_lines[idx]}"
        lines.append(combined.rstrip())

    lines.append(_color(render_summary(game), BOLD))
    lines.append(_render_controls_line())
    return "\n".join(lines)


def render_board(board: MetaBoard) -> str:
    """Plain-text nested grid: nine rows of ``[a][b][c] | ...`` in three bands."""

    return "\n".join(_board_lines(board, _render_plain_cell))


def render_summary(game: Game) -> str:
    if game.is_finished:
        return game.status_message()
    required = game.board.required_index
    target = str(required) if required is not None else "free"
    return f"Board: {target} | Turn: {game.current_mark}"


def _board_lines(board: MetaBoard, fmt: CellFormatter) -> List[str]:
    playable: Set[Move] = set(board.legal_moves())
    lines: List[str] = []
    for band in range(0, GRID_SIZE, ROW_LENGTH):
        for row in range(ROW_LENGTH):
            segments = [
                _sub_board_row(board, outer, row, playable, fmt)
                for outer in range(band, band + ROW_LENGTH)
            ]
            lines.append(BOARD_SEP.join(segments))
        lines.append(DIVIDER)
    return lines


def _sub_board_row(
    board: MetaBoard, outer: int, row: int, playable: Set[Move], fmt: CellFormatter
) -> str:
    sub = board.sub_board(Index(outer))
    start = row * ROW_LENGTH
    return "".join(
        f"[{fmt(sub.cell(Index(inner)), (outer, inner) in playable)}]"
        for inner in range(start, start + ROW_LENGTH)
    )


def _render_plain_cell(cell: Cell, playable: bool) -> str:
    return str(cell)


def _render_colored_cell(cell: Cell, playable: bool) -> str:
    if cell.occupant is not None:
        return _color(str(cell), BOLD, MARK_COLORS[cell.occupant])
    if playable:
        return _color(PLAYABLE_SYMBOL, FG_GREEN, DIM)
    return str(cell)


def _render_hud(game: Game, pending_outer: Optional[int]) -> List[str]:
    info_message = game.info_message or "—"
    last_move = str(game.last_move) if game.last_move else "—"
    entry = f"{pending_outer} _" if pending_outer is not None else "_ _"
    playable = ", ".join(str(idx) for idx in game.board.playable_boards()) or "—"
    status_text = f"Status: {game.status_message()} | Input: {entry} | Playable: {playable}"
    summary_text = f"Info: {info_message} | Last move: {last_move}"
    return [
        _color(status_text, BOLD, FG_CYAN),
        _color(summary_text, FG_YELLOW),
    ]


def _render_action_log_panel(game: Game, height: int) -> List[str]:
    lines: List[str] = [_color("Recent moves", BOLD, FG_MAGENTA)]
    if game.action_log:
        for entry in reversed(game.action_log):
            lines.append(_color(entry, FG_BLUE))
    else:
        lines.append(_color("—", FG_WHITE, DIM))

    if len(lines) < height:
        lines.extend([""] * (height - len(lines)))
    return lines[:height]


def _render_controls_line() -> str:
    return _color(
        "Controls: two digits 0-8 = board, square | Backspace clear | R new game | Q quit",
        FG_CYAN,
    )


def _color(text: str, *codes: str) -> str:
    if not codes:
        return text
    prefix = "".join(codes)
    return f"{prefix}{text}{RESET}"


def _strip_ansi(text: str) -> str:
    return ANSI_ESCAPE_RE.sub("", text)


def _char_width(ch: str) -> int:
    if unicodedata.combining(ch):
        return 0
    return 2 if unicodedata.east_asian_width(ch) in ("F", "W") else 1


def _visible_width(text: str) -> int:
    return sum(_char_width(ch) for ch in _strip_ansi(text))


def _pad(text: str, width: int) -> str:
    return text + " " * max(0, width - _visible_width(text))
