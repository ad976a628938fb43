"""Date manipulation utilities"""

from datetime import date


def first_of_month(value: date) -> date:
    """Normalize a date to the first day of its month"""
    return value.replace(day=1)


def add_months(from_date: date, months: int) -> date:
    """Move forward by whole calendar months, landing on day 1"""
    month_index = from_date.month - 1 + months
    return date(from_date.year + month_index // 12, month_index % 12 + 1, 1)
