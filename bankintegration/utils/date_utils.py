"""Date manipulation utilities"""

import calendar
from datetime import date


def first_of_month(day: date) -> date:
    """First calendar day of the month containing day"""
    return date(day.year, day.month, 1)


def last_of_month(day: date) -> date:
    """Last calendar day of the month containing day (leap-year aware)"""
    return date(day.year, day.month, calendar.monthrange(day.year, day.month)[1])
