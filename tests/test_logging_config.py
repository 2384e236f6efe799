import logging

import pytest

from uttt.logging_config import LOGGER_NAME, get_logger, setup_logging


@pytest.fixture
def quiet_logging():
    yield
    setup_logging(log_file="")


def test_moves_are_written_to_log_file(tmp_path, game, quiet_logging):
    log_file = tmp_path / "uttt.log"
    setup_logging(level="debug", log_file=str(log_file))
    game.play(0, 4)
    content = log_file.read_text(encoding="utf-8")
    assert "DEBUG | uttt.board | X played 0/4" in content


def test_empty_log_file_disables_output(quiet_logging):
    root = setup_logging(log_file="")
    assert [type(h) for h in root.handlers] == [logging.NullHandler]


def test_component_loggers_live_under_package_logger():
    assert get_logger("game").name == f"{LOGGER_NAME}.game"
