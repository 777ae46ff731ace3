from datetime import date

from components.core.dates import (
    add_months,
    add_one_month,
    days_in_month,
    month_window,
    next_registration_date,
    year_window,
)


def test_days_in_month():
    assert days_in_month(2024, 2) == 29
    assert days_in_month(2023, 2) == 28
    assert days_in_month(2024, 12) == 31


def test_add_one_month_same_day():
    assert add_one_month(date(2024, 3, 15)) == date(2024, 4, 15)


def test_add_one_month_rollover_leap_year():
    assert add_one_month(date(2024, 1, 31)) == date(2024, 2, 29)


def test_add_one_month_rollover_non_leap_year():
    assert add_one_month(date(2023, 1, 31)) == date(2023, 2, 28)


def test_add_one_month_crosses_year():
    assert add_one_month(date(2024, 12, 15)) == date(2025, 1, 15)


def test_add_one_month_returns_to_anchor_day():
    # A 31st category clamped to February fires on the 31st again in March.
    assert add_one_month(date(2024, 2, 29), anchor_day=31) == date(2024, 3, 31)
    assert add_one_month(date(2024, 3, 31), anchor_day=31) == date(2024, 4, 30)


def test_add_months_multiple():
    assert add_months(date(2024, 11, 30), 3, 30) == date(2025, 2, 28)


def test_next_registration_date_later_this_month():
    assert next_registration_date(20, date(2024, 3, 15)) == date(2024, 3, 20)


def test_next_registration_date_today_moves_to_next_month():
    assert next_registration_date(15, date(2024, 3, 15)) == date(2024, 4, 15)


def test_next_registration_date_past_day_clamped():
    assert next_registration_date(31, date(2023, 2, 28)) == date(2023, 3, 31)
    assert next_registration_date(31, date(2023, 2, 10)) == date(2023, 2, 28)


def test_month_window():
    assert month_window(date(2024, 2, 17)) == (date(2024, 2, 1), date(2024, 3, 1))
    assert month_window(date(2024, 12, 5)) == (date(2024, 12, 1), date(2025, 1, 1))


def test_year_window():
    assert year_window(date(2024, 7, 4)) == (date(2024, 1, 1), date(2025, 1, 1))
