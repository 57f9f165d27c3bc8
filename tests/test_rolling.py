import pytest

from rcdrive.rolling import RollingAverage


def test_empty_average_is_zero():
    assert RollingAverage(4).average() == 0.0


def test_average_of_partial_window():
    rolling = RollingAverage(5)
    for value in (10, 20, 30):
        rolling.push(value)
    assert rolling.average() == pytest.approx(20.0)
    assert len(rolling) == 3


def test_oldest_values_drop_out():
    rolling = RollingAverage(3)
    for value in (10, 20, 30, 40):
        rolling.push(value)
    assert rolling.average() == pytest.approx(30.0)
    assert len(rolling) == 3


def test_constant_input_gives_constant_average():
    rolling = RollingAverage(4)
    for _ in range(11):
        rolling.push(2.5)
    assert rolling.average() == pytest.approx(2.5)


def test_invalid_size():
    with pytest.raises(ValueError):
        RollingAverage(0)