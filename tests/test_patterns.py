import pytest

from katas.patterns import descending_counts, zero_padded_countdown


def test_descending_counts_documented_pattern():
    assert descending_counts(5) == ["012345", "01234", "0123", "012", "01", "0"]


@pytest.mark.parametrize("n", range(0, 9))
def test_descending_counts_shape(n):
    rows = descending_counts(n)
    assert len(rows) == n + 1
    assert [len(row) for row in rows] == list(range(n + 1, 0, -1))
    assert all(row.startswith("0") for row in rows)


def test_descending_counts_rows_are_prefixes():
    rows = descending_counts(6)
    assert all(rows[k].startswith(rows[k + 1]) for k in range(len(rows) - 1))


def test_zero_padded_countdown_documented_pattern():
    assert zero_padded_countdown(4) == ["0004", "003", "02", "1"]


@pytest.mark.parametrize("n", range(1, 9))
def test_zero_padded_countdown_shape(n):
    rows = zero_padded_countdown(n)
    assert len(rows) == n
    assert [int(row) for row in rows] == list(range(n, 0, -1))
    assert all(len(row) == int(row) for row in rows)


def test_zero_padded_countdown_empty():
    assert zero_padded_countdown(0) == []