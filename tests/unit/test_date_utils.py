"""Unit tests for date helpers"""

from datetime import date
from debt_planner.utils.date_utils import add_months, first_of_month


def test_add_months_normalizes_to_first_day():
    assert add_months(date(2024, 1, 31), 1) == date(2024, 2, 1)


def test_add_months_crosses_year_boundary():
    assert add_months(date(2024, 11, 15), 3) == date(2025, 2, 1)
    assert add_months(date(2024, 12, 1), 600) == date(2074, 12, 1)


def test_add_zero_months():
    assert add_months(date(2024, 5, 20), 0) == date(2024, 5, 1)


def test_first_of_month():
    assert first_of_month(date(2024, 2, 29)) == date(2024, 2, 1)
