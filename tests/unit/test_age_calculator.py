"""Тесты Age Calculator.

Покрывает:
- Календарный возраст и прожитое время
- Ближайший день рождения, зодиак, високосные годы
- Процент жизни и ограничение progress bar
- Конфигурацию (lifespan, политика 29 февраля)
"""

import dataclasses
import logging
from datetime import date, datetime

import jsonschema
import pydantic
import pytest

from src.calculators import AgeCalculator, AgeResult, CalculatorConfig
from src.core.calendar import DateOrderViolation, LeapDayPolicy
from src.core.domain import AgeRequest, DateDelta, ZodiacSign


@pytest.fixture
def now():
    return datetime(2024, 6, 15, 12, 0)


@pytest.fixture
def calculator():
    return AgeCalculator()


class TestAgeCalculator:
    """Тесты AgeCalculator.evaluate"""

    def test_age_breakdown(self, calculator, now):
        result = calculator.evaluate(date(1990, 8, 20), now)

        assert isinstance(result, AgeResult)
        assert result.age == DateDelta(years=33, months=9, days=26)

    def test_lived_totals(self, calculator, now):
        birth = date(1990, 8, 20)
        result = calculator.evaluate(birth, now)

        expected_days = (now.date() - birth).days
        assert result.total_days == expected_days == 12353
        assert result.total_months == 406
        assert result.total_hours == expected_days * 24
        assert result.total_minutes == expected_days * 24 * 60
        assert result.total_seconds == expected_days * 24 * 60 * 60

    def test_leap_years_zodiac_next_birthday(self, calculator, now):
        result = calculator.evaluate(date(1990, 8, 20), now)

        assert result.leap_years == 9
        assert result.zodiac == ZodiacSign.LEO
        assert result.next_birthday.date == date(2024, 8, 20)
        assert result.next_birthday.days_until == 65
        assert result.next_birthday.day_of_week == "Tuesday"

    def test_life_percentage(self, calculator, now):
        result = calculator.evaluate(date(1990, 8, 20), now)
        assert result.life_percentage == pytest.approx(41.25)
        assert result.life_progress_pct == pytest.approx(41.25)

    def test_born_today(self, calculator, now):
        result = calculator.evaluate(date(2024, 6, 15), now)
        assert result.age.is_zero()
        assert result.total_days == 0
        assert result.life_percentage == 0.0

    def test_future_birth_date_rejected(self, calculator, now):
        """Калькулятор не переставляет даты: будущая дата отклоняется ещё в AgeRequest"""
        with pytest.raises(DateOrderViolation):
            calculator.evaluate(date(2024, 6, 16), now)

    def test_evaluate_request(self, calculator):
        request = AgeRequest(now="2024-06-15T12:00:00", birth_date="1990-08-20")
        result = calculator.evaluate_request(request)
        assert result.age.as_tuple() == (33, 9, 26)

    def test_evaluate_payload(self, calculator):
        result = calculator.evaluate_payload(
            {"now": "2024-06-15T12:00:00", "birth_date": "1990-08-20"}
        )
        assert result.age.as_tuple() == (33, 9, 26)
        assert result.total_days == 12353

    def test_payload_extra_field_rejected_by_contract(self, calculator):
        payload = {"now": "2024-06-15T12:00:00", "birth_date": "1990-08-20", "theme": "dark"}
        with pytest.raises(jsonschema.ValidationError, match="Additional properties"):
            calculator.evaluate_payload(payload)

    def test_payload_future_birth_date_rejected_by_model(self, calculator):
        payload = {"now": "2024-06-15T12:00:00", "birth_date": "2024-06-16"}
        with pytest.raises(pydantic.ValidationError, match="Birth date cannot be in the future"):
            calculator.evaluate_payload(payload)

    def test_result_frozen(self, calculator, now):
        result = calculator.evaluate(date(1990, 8, 20), now)
        with pytest.raises(dataclasses.FrozenInstanceError):
            result.total_days = 0

    def test_logs_debug_record(self, calculator, now, caplog):
        caplog.set_level(logging.DEBUG, logger="src.calculators.age")
        calculator.evaluate(date(1990, 8, 20), now)
        assert "age evaluated" in caplog.text


class TestAgeCalculatorConfig:
    """Тесты конфигурации калькулятора возраста"""

    def test_progress_capped_at_100(self, now):
        calculator = AgeCalculator(CalculatorConfig(average_lifespan_years=20))
        result = calculator.evaluate(date(1990, 8, 20), now)

        assert result.life_percentage == pytest.approx(165.0)
        assert result.life_progress_pct == 100.0

    def test_percentage_rounding(self):
        calculator = AgeCalculator()
        # 1 / 80 * 100 = 1.25; 1 / 3 лет при lifespan=3 → 33.33
        assert calculator.life_percentage(1) == 1.25
        assert AgeCalculator(CalculatorConfig(average_lifespan_years=3)).life_percentage(1) == 33.33

    def test_leap_day_policy_applied(self):
        now = datetime(2023, 1, 10, 9, 0)
        birth = date(2000, 2, 29)

        default = AgeCalculator().evaluate(birth, now)
        feb28 = AgeCalculator(
            CalculatorConfig(leap_day_policy=LeapDayPolicy.FEBRUARY_28)
        ).evaluate(birth, now)

        assert default.next_birthday.date == date(2023, 3, 1)
        assert feb28.next_birthday.date == date(2023, 2, 28)

    def test_defaults(self):
        config = CalculatorConfig()
        assert config.average_lifespan_years == 80
        assert config.leap_day_policy == LeapDayPolicy.MARCH_1
        assert config.percentage_decimals == 2

    def test_invalid_lifespan(self):
        with pytest.raises(ValueError, match="average_lifespan_years must be positive"):
            CalculatorConfig(average_lifespan_years=0)

    def test_invalid_decimals(self):
        with pytest.raises(ValueError, match="percentage_decimals must be non-negative"):
            CalculatorConfig(percentage_decimals=-1)

    def test_config_frozen(self):
        config = CalculatorConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.average_lifespan_years = 90
