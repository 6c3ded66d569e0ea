from datetime import date, datetime, time, timedelta

import pytest

from weekly_goals.core.week_utils import (
    get_last_n_weeks,
    get_week_boundaries,
    is_current_week,
    now_local,
)

WEEK_SPAN = timedelta(days=6, hours=23, minutes=59, seconds=59, milliseconds=999)


def test_every_day_of_a_week_maps_to_its_monday():
    monday = date(2025, 1, 6)
    for offset in range(7):
        start, end = get_week_boundaries(monday + timedelta(days=offset))
        assert start == datetime(2025, 1, 6, 0, 0, 0)
        assert end == datetime(2025, 1, 12, 23, 59, 59, 999000)


@pytest.mark.parametrize(
    "d",
    [
        date(2024, 2, 29),
        date(2024, 12, 31),
        date(2025, 1, 1),
        datetime(2025, 3, 30, 23, 59, 59),
        datetime(2025, 10, 26, 2, 30),
    ],
)
def test_start_is_monday_midnight_and_end_is_sunday_last_millisecond(d):
    start, end = get_week_boundaries(d)
    assert start.weekday() == 0
    assert start.time() == time.min
    assert end - start == WEEK_SPAN
    assert end.weekday() == 6

    as_dt = d if isinstance(d, datetime) else datetime.combine(d, time.min)
    assert start <= as_dt <= end


def test_sunday_belongs_to_week_that_started_the_previous_monday():
    start, end = get_week_boundaries(date(2025, 1, 12))  # Sunday
    assert start == datetime(2025, 1, 6)
    assert end.date() == date(2025, 1, 12)


def test_week_spanning_new_year():
    start, end = get_week_boundaries(date(2025, 1, 1))  # Wednesday
    assert start == datetime(2024, 12, 30)
    assert end.date() == date(2025, 1, 5)


def test_last_n_weeks_are_contiguous_and_end_with_now():
    now = datetime(2025, 3, 12, 15, 30)
    weeks = get_last_n_weeks(10, now=now)

    assert len(weeks) == 10
    for prev, nxt in zip(weeks, weeks[1:]):
        assert nxt.week_start - prev.week_start == timedelta(days=7)
        # no gap, no overlap
        assert nxt.week_start - prev.week_end == timedelta(milliseconds=1)

    assert weeks[-1].week_start <= now <= weeks[-1].week_end
    assert weeks[0].week_start == datetime(2025, 1, 6)


def test_last_n_weeks_has_no_upper_bound():
    weeks = get_last_n_weeks(60, now=datetime(2025, 3, 12))
    assert len(weeks) == 60
    assert len({w.week_start for w in weeks}) == 60


def test_single_week_is_the_current_one():
    now = datetime(2025, 3, 16, 22, 0)  # Sunday evening
    assert get_last_n_weeks(1, now=now) == [get_week_boundaries(now)]


def test_last_n_weeks_rejects_non_positive():
    with pytest.raises(ValueError):
        get_last_n_weeks(0)


def test_is_current_week():
    now = datetime(2025, 3, 12, 9, 0)
    assert is_current_week(date(2025, 3, 10), now=now)
    assert is_current_week(datetime(2025, 3, 16, 23, 59), now=now)
    assert not is_current_week(date(2025, 3, 17), now=now)
    assert not is_current_week(date(2025, 3, 9), now=now)


def test_now_local_is_naive_for_named_timezone():
    assert now_local("UTC").tzinfo is None
    assert now_local("local").tzinfo is None
