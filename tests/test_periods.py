from datetime import date, timedelta

from payroll_seed.periods import (
    add_months,
    biweekly_periods,
    date_range,
    monthly_periods,
    weekly_periods,
)

START = date(2024, 1, 1)
END = date(2025, 1, 1)


def test_add_months_overflow_rolls_forward():
    assert add_months(date(2024, 1, 31), 1) == date(2024, 3, 2)


def test_add_months_year_round_trip():
    assert add_months(START, 12) == END
    assert add_months(add_months(START, 5), -5) == START


def test_monthly_periods_cover_year():
    periods = list(monthly_periods(START, END))
    assert len(periods) == 12
    assert periods[0] == (START, date(2024, 1, 31))
    assert periods[-1][1] == END - timedelta(days=1)
    for (_, prev_end), (next_start, _) in zip(periods, periods[1:]):
        assert next_start == prev_end + timedelta(days=1)


def test_biweekly_periods_chain():
    periods = list(biweekly_periods(START, END))
    assert periods[0][0] == START
    for start, end in periods:
        assert end - start == timedelta(days=14)
    for (_, prev_end), (next_start, _) in zip(periods, periods[1:]):
        assert next_start == prev_end
    assert periods[-1][0] < END <= periods[-1][1]


def test_weekly_periods_chain():
    periods = list(weekly_periods(START, END))
    for start, end in periods:
        assert end - start == timedelta(days=7)
    for (_, prev_end), (next_start, _) in zip(periods, periods[1:]):
        assert next_start == prev_end
    assert periods[-1][0] < END <= periods[-1][1]


def test_empty_when_start_not_before_end():
    assert list(weekly_periods(END, START)) == []
    assert list(monthly_periods(END, END)) == []
    assert list(date_range(END, END)) == []


def test_date_range_excludes_end():
    days = list(date_range(START, START + timedelta(days=7)))
    assert days[0] == START
    assert days[-1] == START + timedelta(days=6)
    assert len(set(days)) == len(days) == 7