"""
Birthday — Ближайший день рождения

Кандидат строится в текущем году (год now) с месяцем/днём рождения.
Если кандидат (полночь) строго раньше now, берётся следующий год.

Политика для 29 февраля в невисокосном году задаётся LeapDayPolicy:
- MARCH_1 (по умолчанию): день рождения переносится на 1 марта
- FEBRUARY_28: день рождения отмечается 28 февраля
"""

from datetime import date
from enum import Enum
from typing import NamedTuple

from src.core.calendar.deltas import total_days
from src.core.calendar.gregorian import as_instant, is_leap_year, weekday_name


class LeapDayPolicy(str, Enum):
    """Куда переносится 29 февраля в невисокосном году"""

    MARCH_1 = "march_1"
    FEBRUARY_28 = "february_28"


class NextBirthday(NamedTuple):
    """Ближайший день рождения."""
    date: date
    days_until: int  # total_days(now, date)
    day_of_week: str  # Английское название дня недели


def anniversary_in_year(
    anchor: date,
    year: int,
    policy: LeapDayPolicy = LeapDayPolicy.MARCH_1,
) -> date:
    """
    Годовщина даты anchor в году year.

    Args:
        anchor: Исходная дата (например, дата рождения)
        year: Целевой год
        policy: Политика для 29 февраля в невисокосном году

    Examples:
        >>> anniversary_in_year(date(2000, 2, 29), 2023)
        datetime.date(2023, 3, 1)
        >>> anniversary_in_year(date(2000, 2, 29), 2023, LeapDayPolicy.FEBRUARY_28)
        datetime.date(2023, 2, 28)
    """
    if anchor.month == 2 and anchor.day == 29 and not is_leap_year(year):
        if policy == LeapDayPolicy.FEBRUARY_28:
            return date(year, 2, 28)
        return date(year, 3, 1)

    return date(year, anchor.month, anchor.day)


def next_birthday(
    birth_date: date,
    now: date,
    policy: LeapDayPolicy = LeapDayPolicy.MARCH_1,
) -> NextBirthday:
    """
    Ближайший день рождения относительно now.

    Args:
        birth_date: Дата рождения
        now: Текущий момент (date = полночь)
        policy: Политика для 29 февраля

    Returns:
        NextBirthday(date, days_until, day_of_week)

    Note:
        Если now является datetime позже полуночи дня рождения, кандидат этого года
        уже "прошёл" и возвращается день рождения следующего года.
    """
    candidate = anniversary_in_year(birth_date, now.year, policy)

    if as_instant(candidate) < as_instant(now):
        candidate = anniversary_in_year(birth_date, now.year + 1, policy)

    return NextBirthday(
        date=candidate,
        days_until=total_days(now, candidate),
        day_of_week=weekday_name(candidate),
    )
