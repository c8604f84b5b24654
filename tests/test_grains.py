import pytest

from katas.grains import BOARD_SQUARES, square, total


def test_first_square():
    assert square(1) == 1


def test_last_square():
    assert square(64) == 2**63


@pytest.mark.parametrize("index", range(1, BOARD_SQUARES))
def test_each_square_doubles(index):
    assert square(index + 1) == 2 * square(index)


def test_total_fills_64_bits():
    assert total() == 2**64 - 1


def test_total_is_sum_of_squares():
    assert total() == sum(square(i) for i in range(1, BOARD_SQUARES + 1))


@pytest.mark.parametrize("index", [0, -1, 65])
def test_out_of_range_square(index):
    with pytest.raises(ValueError):
        square(index)