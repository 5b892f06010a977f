from datetime import datetime
from types import SimpleNamespace
import pytest
from services.availability_service import day_and_time, is_within


def hours(open_time="11:00", close_time="23:00", is_open=True):
    return SimpleNamespace(open_time=open_time, close_time=close_time, is_open=is_open)


@pytest.mark.parametrize("current, expected", [
    ("15:00", True),
    ("23:30", False),
    ("10:59", False),
    ("11:00", True),
    ("23:00", True),
])
def test_window_is_inclusive(current, expected):
    assert is_within(hours(), current) is expected


def test_missing_row_is_closed():
    assert is_within(None, "15:00") is False


def test_closed_day_is_closed():
    assert is_within(hours(is_open=False), "15:00") is False


def test_end_of_day_close():
    assert is_within(hours("18:00", "24:00"), "23:59") is True


@pytest.mark.parametrize("moment, expected", [
    (datetime(2024, 1, 7, 9, 5), (0, "09:05")),     # Sunday
    (datetime(2024, 1, 8, 23, 59, 59), (1, "23:59")),  # Monday, seconds dropped
    (datetime(2024, 1, 13, 0, 0), (6, "00:00")),    # Saturday
])
def test_day_and_time(moment, expected):
    assert day_and_time(moment) == expected
