"""
Sanity-тест для календарных примитивов (gregorian)

Проверяет:
1. Правило високосного года 4/100/400
2. Таблицу длин месяцев и поправку на февраль
3. День года, неделю года (от воскресенья), квартал
4. Независимость названий дней недели от локали
"""

from datetime import date, datetime

import pytest

from src.core.calendar.gregorian import (
    DAYS_IN_MONTH_BASE,
    WEEKDAY_NAMES,
    as_calendar_date,
    as_instant,
    day_of_year,
    days_in_month,
    days_in_year,
    days_remaining_in_year,
    is_leap_year,
    previous_month,
    quarter_of_year,
    sunday_based_weekday,
    week_of_year,
    weekday_name,
)


class TestIsLeapYear:
    """Тесты для is_leap_year"""

    @pytest.mark.parametrize(
        "year, expected",
        [
            (2000, True),
            (1900, False),
            (2024, True),
            (2023, False),
            (2400, True),
            (2100, False),
            (1600, True),
            (4, True),
        ],
    )
    def test_reference_years(self, year: int, expected: bool) -> None:
        """Эталонные годы по правилу 4/100/400"""
        assert is_leap_year(year) is expected

    def test_days_in_year(self) -> None:
        assert days_in_year(2024) == 366
        assert days_in_year(2023) == 365
        assert days_in_year(1900) == 365


class TestDaysInMonth:
    """Тесты для days_in_month"""

    def test_base_table(self) -> None:
        """Невисокосный год совпадает с базовой таблицей"""
        assert DAYS_IN_MONTH_BASE == (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
        for month in range(1, 13):
            assert days_in_month(2023, month) == DAYS_IN_MONTH_BASE[month - 1]

    def test_february_leap(self) -> None:
        """Февраль високосного года — 29 дней"""
        assert days_in_month(2024, 2) == 29
        assert days_in_month(2000, 2) == 29

    def test_february_non_leap(self) -> None:
        assert days_in_month(2023, 2) == 28
        assert days_in_month(1900, 2) == 28

    def test_only_february_changes_in_leap_year(self) -> None:
        for month in (1, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12):
            assert days_in_month(2024, month) == days_in_month(2023, month)

    @pytest.mark.parametrize("month", [0, 13, -1])
    def test_month_out_of_range(self, month: int) -> None:
        with pytest.raises(ValueError, match="month must be in"):
            days_in_month(2024, month)

    def test_previous_month_wraps_january(self) -> None:
        assert previous_month(2025, 1) == (2024, 12)
        assert previous_month(2025, 3) == (2025, 2)
        assert previous_month(2025, 12) == (2025, 11)


class TestDayOfYear:
    """Тесты для day_of_year и days_remaining_in_year"""

    def test_first_day(self) -> None:
        assert day_of_year(date(2024, 1, 1)) == 1

    def test_last_day_leap(self) -> None:
        assert day_of_year(date(2024, 12, 31)) == 366

    def test_last_day_regular(self) -> None:
        assert day_of_year(date(2023, 12, 31)) == 365

    def test_march_first_shifts_in_leap_year(self) -> None:
        """1 марта: 60-й день обычного года, 61-й — високосного"""
        assert day_of_year(date(2023, 3, 1)) == 60
        assert day_of_year(date(2024, 3, 1)) == 61

    def test_matches_timetuple(self) -> None:
        """Совпадает с tm_yday стандартной библиотеки"""
        for value in (date(1999, 7, 4), date(2000, 2, 29), date(2024, 10, 17)):
            assert day_of_year(value) == value.timetuple().tm_yday

    def test_days_remaining(self) -> None:
        assert days_remaining_in_year(date(2024, 12, 31)) == 0
        assert days_remaining_in_year(date(2024, 1, 1)) == 365
        assert days_remaining_in_year(date(2023, 1, 1)) == 364


class TestWeekOfYear:
    """Тесты для week_of_year (недели от воскресенья, 1 января всегда в неделе 1)"""

    def test_first_day_is_week_one(self) -> None:
        assert week_of_year(date(2024, 1, 1)) == 1
        assert week_of_year(date(2023, 1, 1)) == 1

    def test_week_changes_on_sunday(self) -> None:
        """2024-01-01 — понедельник, 2024-01-07 — воскресенье начинает неделю 2"""
        assert week_of_year(date(2024, 1, 6)) == 1
        assert week_of_year(date(2024, 1, 7)) == 2

    def test_year_starting_on_sunday(self) -> None:
        """2023-01-01 — воскресенье: неделя 1 занимает полные 7 дней"""
        assert sunday_based_weekday(date(2023, 1, 1)) == 0
        assert week_of_year(date(2023, 1, 7)) == 1
        assert week_of_year(date(2023, 1, 8)) == 2

    def test_last_days_of_year(self) -> None:
        assert week_of_year(date(2024, 12, 31)) == 53
        assert week_of_year(date(2023, 12, 31)) == 53


class TestQuarterAndWeekday:
    """Тесты для quarter_of_year и weekday_name"""

    @pytest.mark.parametrize(
        "month, quarter",
        [(1, 1), (3, 1), (4, 2), (6, 2), (7, 3), (9, 3), (10, 4), (12, 4)],
    )
    def test_quarter(self, month: int, quarter: int) -> None:
        assert quarter_of_year(date(2024, month, 1)) == quarter

    def test_weekday_name(self) -> None:
        assert weekday_name(date(2024, 1, 1)) == "Monday"
        assert weekday_name(date(2000, 1, 1)) == "Saturday"
        assert weekday_name(date(2023, 1, 1)) == "Sunday"

    def test_weekday_names_table(self) -> None:
        assert len(WEEKDAY_NAMES) == 7
        assert WEEKDAY_NAMES[0] == "Monday"
        assert WEEKDAY_NAMES[6] == "Sunday"


class TestNormalization:
    """Тесты приведения date/datetime"""

    def test_date_becomes_midnight(self) -> None:
        assert as_instant(date(2024, 5, 1)) == datetime(2024, 5, 1, 0, 0)

    def test_datetime_unchanged(self) -> None:
        moment = datetime(2024, 5, 1, 13, 45, 10)
        assert as_instant(moment) is moment

    def test_calendar_date_drops_time(self) -> None:
        assert as_calendar_date(datetime(2024, 5, 1, 13, 45)) == date(2024, 5, 1)
        assert as_calendar_date(date(2024, 5, 1)) == date(2024, 5, 1)
