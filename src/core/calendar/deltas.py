"""
Deltas — Календарная разница дат и производные счётчики

Модуль вычисляет разницу между двумя датами двумя принципиально разными способами:
- Календарно (date_delta): годы/месяцы/дни с заимствованием через границы месяцев
- Линейно (total_days, total_weeks, time_span): по абсолютному интервалу времени

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. date_delta требует start <= end, иначе DateOrderViolation
2. Результат date_delta: 0 <= months <= 11, 0 <= days <= 30
3. add_delta(a, date_delta(a, b)) == b для любых a <= b
4. total_days симметрична (не зависит от порядка аргументов)
5. total_months наивна и может расходиться с date_delta у границ месяцев

ФОРМУЛЫ:
    years  = end.year  - start.year
    months = end.month - start.month
    days   = end.day   - start.day
    days < 0   → months -= 1, days += days_in_month(месяц перед end)
    months < 0 → years -= 1, months += 12
"""

from datetime import date, timedelta
from typing import Final, NamedTuple

from src.core.calendar.gregorian import (
    MONTHS_PER_YEAR,
    DAYS_PER_WEEK,
    as_calendar_date,
    as_instant,
    days_in_month,
    is_leap_year,
    previous_month,
)
from src.core.domain.date_delta import DateDelta

ONE_DAY: Final[timedelta] = timedelta(days=1)
ONE_SECOND: Final[timedelta] = timedelta(seconds=1)

SECONDS_PER_MINUTE: Final[int] = 60
MINUTES_PER_HOUR: Final[int] = 60
HOURS_PER_DAY: Final[int] = 24


# =============================================================================
# EXCEPTIONS
# =============================================================================


class DateOrderViolation(ValueError):
    """
    start > end в календарной разнице.

    date_delta не переставляет аргументы самостоятельно: вызывающий код
    упорядочивает их через order_dates и сам решает, как показать "обратную" разницу.
    """
    pass


# =============================================================================
# УПОРЯДОЧИВАНИЕ
# =============================================================================


def order_dates(first: date, second: date) -> tuple[date, date, bool]:
    """
    Упорядочивание пары дат.

    Returns:
        (earlier, later, was_swapped)

    Examples:
        >>> order_dates(date(2024, 5, 1), date(2023, 1, 1))
        (datetime.date(2023, 1, 1), datetime.date(2024, 5, 1), True)
    """
    if as_instant(second) < as_instant(first):
        return second, first, True
    return first, second, False


# =============================================================================
# КАЛЕНДАРНАЯ РАЗНИЦА
# =============================================================================


def date_delta(start: date, end: date) -> DateDelta:
    """
    Календарная разница (years, months, days) от start до end.

    Учитываются только календарные компоненты (время суток datetime отбрасывается).

    Если дни отрицательны, заимствуется месяц: к дням прибавляется длина месяца,
    предшествующего месяцу end. Для стартов в конце месяца (например, 31 января
    → 1 марта) одного заимствования недостаточно, и заимствуется ещё один месяц,
    чтобы дни остались в [0, 30].

    Args:
        start: Более ранняя дата
        end: Более поздняя дата

    Returns:
        DateDelta

    Raises:
        DateOrderViolation: Если start позже end

    Examples:
        >>> date_delta(date(2024, 2, 29), date(2025, 2, 28)).as_tuple()
        (0, 11, 30)
    """
    start_day = as_calendar_date(start)
    end_day = as_calendar_date(end)

    if start_day > end_day:
        raise DateOrderViolation(
            f"date_delta requires start <= end, got start={start_day.isoformat()} "
            f"end={end_day.isoformat()} (use order_dates)"
        )

    years = end_day.year - start_day.year
    months = end_day.month - start_day.month
    days = end_day.day - start_day.day

    borrow_year, borrow_month = end_day.year, end_day.month
    while days < 0:
        # Не более двух итераций: февраль + соседний месяц >= 59 дней
        borrow_year, borrow_month = previous_month(borrow_year, borrow_month)
        months -= 1
        days += days_in_month(borrow_year, borrow_month)

    if months < 0:
        years -= 1
        months += MONTHS_PER_YEAR

    return DateDelta(years=years, months=months, days=days)


def add_delta(start: date, delta: DateDelta) -> date:
    """
    Прибавление календарной разницы к дате (обратная операция к date_delta).

    Сначала прибавляются годы и месяцы. Если день start не существует в целевом
    месяце, дата переносится вперёд (31 января + 1 месяц → 2 или 3 марта).
    Затем прибавляются дни.

    Для datetime время суток сохраняется.
    """
    month_index = start.month - 1 + delta.years * MONTHS_PER_YEAR + delta.months
    year = start.year + month_index // MONTHS_PER_YEAR
    month = month_index % MONTHS_PER_YEAR + 1

    month_start = start.replace(year=year, month=month, day=1)
    return month_start + timedelta(days=start.day - 1 + delta.days)


# =============================================================================
# ЛИНЕЙНЫЕ СЧЁТЧИКИ
# =============================================================================


def total_days(start: date, end: date) -> int:
    """
    Число полных суток между двумя моментами: floor(|end - start| / 1 day).

    Симметрична. date интерпретируется как полночь.

    Examples:
        >>> total_days(date(2024, 1, 1), date(2025, 1, 1))
        366
    """
    interval = abs(as_instant(end) - as_instant(start))
    return interval // ONE_DAY


def total_weeks(start: date, end: date) -> int:
    """Полные недели: floor(total_days / 7)."""
    return total_days(start, end) // DAYS_PER_WEEK


def total_months(start: date, end: date) -> int:
    """
    Наивное число календарных месяцев: (ey - sy) * 12 + (em - sm).

    День месяца не учитывается, поэтому результат грубее date_delta
    и у границ месяцев может отличаться от неё даже знаком.

    Examples:
        >>> total_months(date(2023, 11, 1), date(2024, 2, 1))
        3
    """
    return (end.year - start.year) * MONTHS_PER_YEAR + (end.month - start.month)


def count_leap_years(start: date, end: date) -> int:
    """
    Количество високосных годов y, start.year <= y <= end.year.

    Считаются номера годов, а не попадание 29 февраля в интервал:
    count_leap_years(2024-03-01, 2024-04-01) == 1.
    """
    return sum(1 for year in range(start.year, end.year + 1) if is_leap_year(year))


# =============================================================================
# РАЗБИВКА ИНТЕРВАЛА ВРЕМЕНИ
# =============================================================================


class TimeSpan(NamedTuple):
    """
    Разбивка интервала между двумя моментами.

    days/hours/minutes/seconds: остатки для отображения "D д H ч M мин S с",
    total_*: полные единицы всего интервала.
    """
    days: int
    hours: int  # 0-23
    minutes: int  # 0-59
    seconds: int  # 0-59
    total_hours: int
    total_minutes: int
    total_seconds: int


class ElapsedCounter(NamedTuple):
    """Полные единицы времени, прошедшие с заданного момента."""
    total_days: int
    total_hours: int
    total_minutes: int
    total_seconds: int


def elapsed_counter(since: date, now: date) -> ElapsedCounter:
    """
    Счётчик прошедшего времени от since до now.

    Каждая единица получается целочисленным делением предыдущей:
    seconds → minutes → hours → days.
    """
    seconds = (as_instant(now) - as_instant(since)) // ONE_SECOND
    minutes = seconds // SECONDS_PER_MINUTE
    hours = minutes // MINUTES_PER_HOUR
    days = hours // HOURS_PER_DAY
    return ElapsedCounter(
        total_days=days,
        total_hours=hours,
        total_minutes=minutes,
        total_seconds=seconds,
    )


def time_span(start: date, end: date) -> TimeSpan:
    """
    Разбивка интервала end - start на дни, часы, минуты и секунды.

    Args:
        start: Начальный момент (start <= end, см. order_dates)
        end: Конечный момент

    Raises:
        DateOrderViolation: Если start позже end
    """
    if as_instant(start) > as_instant(end):
        raise DateOrderViolation(
            f"time_span requires start <= end, got start={start.isoformat()} "
            f"end={end.isoformat()} (use order_dates)"
        )

    counter = elapsed_counter(start, end)
    return TimeSpan(
        days=counter.total_days,
        hours=counter.total_hours % HOURS_PER_DAY,
        minutes=counter.total_minutes % MINUTES_PER_HOUR,
        seconds=counter.total_seconds % SECONDS_PER_MINUTE,
        total_hours=counter.total_hours,
        total_minutes=counter.total_minutes,
        total_seconds=counter.total_seconds,
    )
