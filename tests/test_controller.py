import pytest

from uttt.cell import Mark
from uttt.controller import Command, Controller
from uttt.errors import IndexOutOfRange


def digit(value):
    return f"{Command.DIGIT_PREFIX}{value}"


@pytest.fixture
def controller(game):
    return Controller(game)


def test_two_digits_make_one_move(controller):
    controller.handle_input(digit(0))
    assert controller.pending_outer == 0
    assert controller.game.history == []

    controller.handle_input(digit(4))
    assert controller.pending_outer is None
    assert controller.game.last_move.outer == 0
    assert controller.game.last_move.inner == 4
    assert controller.game.current_mark is Mark.O


def test_clear_drops_half_entered_move(controller):
    controller.handle_input(digit(3))
    controller.handle_input(Command.CLEAR)
    assert controller.pending_outer is None


def test_nine_is_rejected_by_index_validation(controller):
    controller.handle_input(digit(9))
    with pytest.raises(IndexOutOfRange):
        controller.handle_input(digit(1))
    assert controller.pending_outer is None
    assert controller.game.history == []


def test_unknown_command_is_invalid_input(controller):
    with pytest.raises(ValueError, match="Invalid input"):
        controller.handle_input("jump")


def test_finished_game_only_accepts_reset(controller, play_moves, diagonal_win):
    play_moves(controller.game, diagonal_win)
    controller.handle_input(digit(5))
    assert controller.pending_outer is None

    controller.handle_input(Command.RESET)
    assert not controller.game.is_finished
    assert controller.game.history == []
