import pytest

from uttt.board import Index
from uttt.errors import IndexOutOfRange, UltimateError


@pytest.mark.parametrize("raw", [0, 4, 8])
def test_in_range_values_are_wrapped(raw):
    index = Index.new(raw)
    assert index.value == raw
    assert int(index) == raw


@pytest.mark.parametrize("raw", [9, 10, 81, -1])
def test_out_of_range_values_are_rejected(raw):
    with pytest.raises(IndexOutOfRange) as excinfo:
        Index.new(raw)
    assert excinfo.value.value == raw
    assert str(excinfo.value) == f"Index {raw} is not in range (0-9)"


def test_errors_are_value_errors():
    with pytest.raises(ValueError):
        Index(9)
    assert issubclass(IndexOutOfRange, UltimateError)


def test_indexes_lists_directly():
    assert ["a", "b", "c"][Index(2)] == "c"


@pytest.mark.parametrize("raw", [3.0, "3", True, None])
def test_non_integers_are_rejected(raw):
    with pytest.raises(IndexOutOfRange):
        Index.new(raw)
