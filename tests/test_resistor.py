import pytest

from katas.resistor import ResistorBand, color_to_string, color_value, list_colors


def test_black_name():
    assert color_to_string(ResistorBand.BLACK) == "Black"


def test_white_name_from_int():
    assert color_to_string(9) == "White"


@pytest.mark.parametrize("value", [-1, 10, 42])
def test_unknown_name(value):
    assert color_to_string(value) == "Unknown"


@pytest.mark.parametrize("value", range(10))
def test_color_value_round_trip(value):
    assert color_value(value) == value
    assert color_value(ResistorBand(value)) == value


@pytest.mark.parametrize("value", [-1, 10])
def test_color_value_out_of_range(value):
    with pytest.raises(ValueError):
        color_value(value)


def test_list_colors_order_and_names():
    colors = list_colors()
    assert len(colors) == 10
    assert colors[0] == ("Black", 0)
    assert [value for _, value in colors] == list(range(10))
    assert all(name == color_to_string(value) for name, value in colors)