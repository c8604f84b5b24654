import pytest

from katas.parity import describe_parity, odd, parity_report, sum_by_parity


def test_describe_even():
    assert describe_parity(4) == "4 is even number"


def test_describe_odd():
    assert describe_parity(7) == "7 is odd number"


def test_report_default_range():
    report = parity_report()
    assert len(report) == 11
    assert report[0] == describe_parity(0)
    assert report[-1] == describe_parity(10)


def test_report_alternates():
    report = parity_report(5)
    assert [line.endswith("even number") for line in report] == [True, False] * 3


@pytest.mark.parametrize("number", [1, 5, -3, 99])
def test_odd_returns_number(number):
    assert odd(number) == number


@pytest.mark.parametrize("number", [0, 2, -4, 100])
def test_odd_returns_zero_for_even(number):
    assert odd(number) == 0


def test_sum_by_parity_sample():
    assert sum_by_parity([1, 2, 3, 4]) == (4, 6)


def test_sum_by_parity_totals():
    values = [5, -2, 7, 10, 0, 13, -9, 8, 4, 1]
    odd_sum, even_sum = sum_by_parity(values)
    assert odd_sum + even_sum == sum(values)
    assert even_sum == sum(v for v in values if odd(v) == 0)


def test_sum_by_parity_empty():
    assert sum_by_parity([]) == (0, 0)