"""Week Info Calculator — неделя, день года и квартал для даты."""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Any, Dict

from src.core.calendar import (
    day_of_year,
    days_in_year,
    days_remaining_in_year,
    is_leap_year,
    quarter_of_year,
    week_of_year,
    weekday_name,
)
from src.core.contracts import parse_request
from src.core.domain.requests import SingleDateRequest

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WeekInfoResult:
    """Результат калькулятора недели."""

    target_date: date
    week_of_year: int
    day_of_year: int
    quarter: int  # 1-4
    days_remaining: int
    day_of_week: str
    is_leap_year: bool
    days_in_year: int

    @property
    def quarter_label(self) -> str:
        """'Q1' ... 'Q4'"""
        return f"Q{self.quarter}"


class WeekInfoCalculator:
    """Калькулятор информации о дате (stateless)."""

    def evaluate(self, target_date: date) -> WeekInfoResult:
        result = WeekInfoResult(
            target_date=target_date,
            week_of_year=week_of_year(target_date),
            day_of_year=day_of_year(target_date),
            quarter=quarter_of_year(target_date),
            days_remaining=days_remaining_in_year(target_date),
            day_of_week=weekday_name(target_date),
            is_leap_year=is_leap_year(target_date.year),
            days_in_year=days_in_year(target_date.year),
        )

        logger.debug(
            "week info evaluated: date=%s week=%d day_of_year=%d quarter=%d",
            target_date.isoformat(),
            result.week_of_year,
            result.day_of_year,
            result.quarter,
        )
        return result

    def evaluate_request(self, request: SingleDateRequest) -> WeekInfoResult:
        return self.evaluate(request.target_date)

    def evaluate_payload(self, payload: Dict[str, Any]) -> WeekInfoResult:
        return self.evaluate_request(parse_request("single_date_request", payload))
