"""
Core calendar modules для datecalc

Календарная арифметика пролептического григорианского календаря:
чистые функции без состояния, детерминированные при заданном now.
"""

# Gregorian primitives
from src.core.calendar.gregorian import (
    # Constants
    DAYS_IN_MONTH_BASE,
    DAYS_PER_WEEK,
    MONTHS_PER_QUARTER,
    MONTHS_PER_YEAR,
    WEEKDAY_NAMES,
    # Leap years and month lengths
    days_in_month,
    days_in_year,
    is_leap_year,
    previous_month,
    # Derived date values
    day_of_year,
    days_remaining_in_year,
    quarter_of_year,
    sunday_based_weekday,
    week_of_year,
    weekday_name,
    # Normalization
    as_calendar_date,
    as_instant,
)

# Deltas
from src.core.calendar.deltas import (
    DateOrderViolation,
    ElapsedCounter,
    TimeSpan,
    add_delta,
    count_leap_years,
    date_delta,
    elapsed_counter,
    order_dates,
    time_span,
    total_days,
    total_months,
    total_weeks,
)

# Birthday
from src.core.calendar.birthday import (
    LeapDayPolicy,
    NextBirthday,
    anniversary_in_year,
    next_birthday,
)

# Zodiac
from src.core.calendar.zodiac import ZODIAC_BOUNDARIES, zodiac_sign

# Formatting
from src.core.calendar.formatting import (
    THOUSANDS_SEPARATOR,
    format_number,
    format_percentage,
)

__all__ = [
    # Gregorian — Constants
    "DAYS_IN_MONTH_BASE",
    "DAYS_PER_WEEK",
    "MONTHS_PER_QUARTER",
    "MONTHS_PER_YEAR",
    "WEEKDAY_NAMES",
    # Gregorian — Leap years and month lengths
    "days_in_month",
    "days_in_year",
    "is_leap_year",
    "previous_month",
    # Gregorian — Derived date values
    "day_of_year",
    "days_remaining_in_year",
    "quarter_of_year",
    "sunday_based_weekday",
    "week_of_year",
    "weekday_name",
    # Gregorian — Normalization
    "as_calendar_date",
    "as_instant",
    # Deltas — Exceptions
    "DateOrderViolation",
    # Deltas — Types
    "ElapsedCounter",
    "TimeSpan",
    # Deltas — Functions
    "add_delta",
    "count_leap_years",
    "date_delta",
    "elapsed_counter",
    "order_dates",
    "time_span",
    "total_days",
    "total_months",
    "total_weeks",
    # Birthday
    "LeapDayPolicy",
    "NextBirthday",
    "anniversary_in_year",
    "next_birthday",
    # Zodiac
    "ZODIAC_BOUNDARIES",
    "zodiac_sign",
    # Formatting
    "THOUSANDS_SEPARATOR",
    "format_number",
    "format_percentage",
]
