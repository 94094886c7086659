"""
Gregorian — Календарные примитивы пролептического григорианского календаря

Модуль содержит базовые функции, на которых строится вся календарная арифметика:
- Правило високосного года (4/100/400)
- Таблица длин месяцев с поправкой на февраль
- Производные величины: день года, неделя года, квартал, день недели

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Месяцы на границе модуля 1-based (как в datetime и calendar)
2. Все функции чистые и детерминированные
3. Названия дней недели не зависят от локали хоста
"""

import math
from datetime import date, datetime, time
from typing import Final

# =============================================================================
# КАЛЕНДАРНЫЕ КОНСТАНТЫ
# =============================================================================

# Длины месяцев невисокосного года, индекс 0 = январь
DAYS_IN_MONTH_BASE: Final[tuple[int, ...]] = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

MONTHS_PER_YEAR: Final[int] = 12
DAYS_PER_WEEK: Final[int] = 7
MONTHS_PER_QUARTER: Final[int] = 3

# Фиксированные английские названия, индекс = date.weekday() (0 = Monday)
WEEKDAY_NAMES: Final[tuple[str, ...]] = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)


# =============================================================================
# ВИСОКОСНЫЕ ГОДЫ И ДЛИНЫ МЕСЯЦЕВ
# =============================================================================


def is_leap_year(year: int) -> bool:
    """
    Проверка високосного года по григорианскому правилу.

    Високосный: делится на 4 и не делится на 100, либо делится на 400.

    Examples:
        >>> is_leap_year(2000)
        True
        >>> is_leap_year(1900)
        False
        >>> is_leap_year(2024)
        True
    """
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def days_in_month(year: int, month: int) -> int:
    """
    Количество дней в месяце.

    Args:
        year: Год
        month: Месяц 1-12

    Returns:
        Значение из DAYS_IN_MONTH_BASE, 29 для февраля високосного года

    Raises:
        ValueError: Если month вне диапазона 1-12
    """
    if not 1 <= month <= MONTHS_PER_YEAR:
        raise ValueError(f"month must be in [1, 12], got {month}")

    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH_BASE[month - 1]


def days_in_year(year: int) -> int:
    """366 для високосного года, иначе 365."""
    return 366 if is_leap_year(year) else 365


def previous_month(year: int, month: int) -> tuple[int, int]:
    """
    Месяц, предшествующий (year, month), с переходом через январь.

    Examples:
        >>> previous_month(2025, 1)
        (2024, 12)
        >>> previous_month(2025, 3)
        (2025, 2)
    """
    if month == 1:
        return year - 1, MONTHS_PER_YEAR
    return year, month - 1


# =============================================================================
# ПРОИЗВОДНЫЕ ВЕЛИЧИНЫ ДАТЫ
# =============================================================================


def day_of_year(value: date) -> int:
    """
    Порядковый номер дня в году (1 = 1 января).

    Examples:
        >>> day_of_year(date(2024, 1, 1))
        1
        >>> day_of_year(date(2024, 12, 31))
        366
    """
    days_before = sum(days_in_month(value.year, m) for m in range(1, value.month))
    return days_before + value.day


def days_remaining_in_year(value: date) -> int:
    """Сколько дней года осталось после value (31 декабря → 0)."""
    return days_in_year(value.year) - day_of_year(value)


def sunday_based_weekday(value: date) -> int:
    """День недели с отсчётом от воскресенья: Sunday = 0 ... Saturday = 6."""
    return (value.weekday() + 1) % DAYS_PER_WEEK


def week_of_year(value: date) -> int:
    """
    Номер недели в году (недели начинаются с воскресенья).

    Формула: ceil((day_of_year + weekday(1 января)) / 7),
    где weekday считается от воскресенья. Это НЕ ISO-неделя:
    первая неделя всегда содержит 1 января.

    Examples:
        >>> week_of_year(date(2024, 1, 1))  # Monday
        1
        >>> week_of_year(date(2024, 1, 7))  # Sunday
        2
    """
    jan_first = date(value.year, 1, 1)
    offset = sunday_based_weekday(jan_first)
    return math.ceil((day_of_year(value) + offset) / DAYS_PER_WEEK)


def quarter_of_year(value: date) -> int:
    """Квартал 1-4: ceil(month / 3)."""
    return math.ceil(value.month / MONTHS_PER_QUARTER)


def weekday_name(value: date) -> str:
    """
    Английское название дня недели, независимо от локали.

    strftime("%A") зависит от LC_TIME, поэтому используется фиксированная таблица.
    """
    return WEEKDAY_NAMES[value.weekday()]


# =============================================================================
# НОРМАЛИЗАЦИЯ
# =============================================================================


def as_instant(value: date) -> datetime:
    """
    Приведение даты к моменту времени.

    datetime возвращается без изменений, date → полночь этого дня
    (naive, локальный календарь хоста).
    """
    if isinstance(value, datetime):
        return value
    return datetime.combine(value, time.min)


def as_calendar_date(value: date) -> date:
    """Календарная дата без времени суток."""
    if isinstance(value, datetime):
        return value.date()
    return value
