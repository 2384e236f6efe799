"""Shared test fixtures for the Ultimate Tic-Tac-Toe tests."""

import pytest

from uttt.board import Index, MetaBoard, SubBoard
from uttt.cell import Mark
from uttt.game import Game

X, O = Mark.X, Mark.O

# A legal game in which X takes sub-boards 0, 4 and 8; the last move wins.
DIAGONAL_WIN = [
    (4, 4), (4, 0), (0, 1), (1, 0), (0, 2), (2, 0), (0, 0),
    (1, 4), (4, 3), (3, 4), (4, 5), (5, 8), (8, 0), (3, 8),
    (8, 4), (6, 8), (8, 8),
]

# X O X / X O O / O X X: every square filled, no line.
DRAW_PATTERN = {0: X, 1: O, 2: X, 3: X, 4: O, 5: O, 6: O, 7: X, 8: X}


def _fill(board, placements):
    for index, mark in placements.items():
        board.do_move(mark, Index(index))
    return board


@pytest.fixture
def diagonal_win():
    return list(DIAGONAL_WIN)


@pytest.fixture
def game():
    """Fresh game with X to move."""
    return Game.new()


@pytest.fixture
def meta():
    return MetaBoard()


@pytest.fixture
def sub_board_factory():
    """Build a sub-board from an ``{index: mark}`` mapping."""

    def build(placements=None):
        return _fill(SubBoard(), placements or {})

    return build


@pytest.fixture
def won_board(sub_board_factory):
    def build(mark):
        return sub_board_factory({0: mark, 1: mark, 2: mark})

    return build


@pytest.fixture
def drawn_board(sub_board_factory):
    def build():
        return sub_board_factory(DRAW_PATTERN)

    return build


@pytest.fixture
def play_moves():
    """Play raw (outer, inner) pairs on a game in order."""

    def play(game, moves):
        for outer, inner in moves:
            game.play(outer, inner)
        return game

    return play
