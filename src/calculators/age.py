"""Age Calculator — возраст по дате рождения.

Результат:
- Календарный возраст (years, months, days)
- Прожитое время в днях, месяцах, часах, минутах, секундах
- Число високосных годов в диапазоне лет жизни
- Ближайший день рождения и знак зодиака
- Процент прожитой жизни относительно средней продолжительности (80 лет)

Валидация (дата в будущем, некорректная дата) выполняется до калькулятора:
см. src.core.domain.requests.AgeRequest.
"""

import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Dict, Optional

from src.calculators.config import CalculatorConfig
from src.core.calendar import (
    NextBirthday,
    count_leap_years,
    date_delta,
    next_birthday,
    total_days,
    total_months,
    zodiac_sign,
)
from src.core.calendar.deltas import HOURS_PER_DAY, MINUTES_PER_HOUR, SECONDS_PER_MINUTE
from src.core.contracts import parse_request
from src.core.domain.date_delta import DateDelta
from src.core.domain.requests import AgeRequest
from src.core.domain.zodiac import ZodiacSign

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AgeResult:
    """Результат калькулятора возраста."""

    birth_date: date
    age: DateDelta

    # Прожитое время
    total_days: int
    total_months: int
    total_hours: int
    total_minutes: int
    total_seconds: int

    leap_years: int
    next_birthday: NextBirthday
    zodiac: ZodiacSign

    # Прогресс жизни
    life_percentage: float
    life_progress_pct: float  # life_percentage, ограниченный 100 для progress bar


class AgeCalculator:
    """Калькулятор возраста.

    Stateless: все входы, включая now, передаются в evaluate.
    """

    def __init__(self, config: Optional[CalculatorConfig] = None):
        """
        Args:
            config: Конфигурация калькуляторов (default: CalculatorConfig())
        """
        self.config = config or CalculatorConfig()

    def evaluate(self, birth_date: date, now: datetime) -> AgeResult:
        """Расчёт возраста на момент now.

        Args:
            birth_date: дата рождения (не позже now)
            now: текущий момент вызывающей стороны

        Returns:
            AgeResult

        Raises:
            DateOrderViolation: если birth_date позже now
        """
        age = date_delta(birth_date, now)
        days = total_days(birth_date, now)

        # Часы/минуты/секунды считаются от целых дней, как в счётчике "прожито"
        hours = days * HOURS_PER_DAY
        minutes = hours * MINUTES_PER_HOUR
        seconds = minutes * SECONDS_PER_MINUTE

        life_percentage = self.life_percentage(age.years)

        result = AgeResult(
            birth_date=birth_date,
            age=age,
            total_days=days,
            total_months=total_months(birth_date, now),
            total_hours=hours,
            total_minutes=minutes,
            total_seconds=seconds,
            leap_years=count_leap_years(birth_date, now),
            next_birthday=next_birthday(birth_date, now, self.config.leap_day_policy),
            zodiac=zodiac_sign(birth_date.month, birth_date.day),
            life_percentage=life_percentage,
            life_progress_pct=min(life_percentage, 100.0),
        )

        logger.debug(
            "age evaluated: birth_date=%s age=%s total_days=%d",
            birth_date.isoformat(),
            age.as_tuple(),
            days,
        )
        return result

    def evaluate_request(self, request: AgeRequest) -> AgeResult:
        """Расчёт по провалидированному AgeRequest."""
        return self.evaluate(request.birth_date, request.now)

    def evaluate_payload(self, payload: Dict[str, Any]) -> AgeResult:
        """Расчёт по сырому payload (контракт age_request)."""
        return self.evaluate_request(parse_request("age_request", payload))

    def life_percentage(self, years: int) -> float:
        """Процент прожитой жизни: years / average_lifespan_years * 100."""
        pct = years / self.config.average_lifespan_years * 100
        return round(pct, self.config.percentage_decimals)
