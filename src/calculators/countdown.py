"""Countdown Calculator — обратный отсчёт до даты.

Три исхода:
- TODAY: дата совпадает с календарной датой now
- PASSED: дата в прошлом, возвращается число прошедших дней
- UPCOMING: календарная разница, полные дни/недели и день недели цели
"""

import logging
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Any, Dict, Optional

from src.core.calendar import (
    as_calendar_date,
    as_instant,
    date_delta,
    total_days,
    total_weeks,
    weekday_name,
)
from src.core.contracts import parse_request
from src.core.domain.date_delta import DateDelta
from src.core.domain.requests import SingleDateRequest

logger = logging.getLogger(__name__)


class CountdownStatus(str, Enum):
    """Положение целевой даты относительно now"""

    TODAY = "TODAY"
    PASSED = "PASSED"
    UPCOMING = "UPCOMING"


@dataclass(frozen=True)
class CountdownResult:
    """Результат обратного отсчёта.

    Поля difference/total_weeks/day_of_week заполнены только для UPCOMING,
    days_passed заполнено только для PASSED.
    """

    target_date: date
    status: CountdownStatus

    days_passed: Optional[int] = None

    difference: Optional[DateDelta] = None
    total_days: Optional[int] = None
    total_weeks: Optional[int] = None
    day_of_week: Optional[str] = None


class CountdownCalculator:
    """Калькулятор обратного отсчёта (stateless)."""

    def evaluate(self, target_date: date, now: datetime) -> CountdownResult:
        if as_calendar_date(target_date) == as_calendar_date(now):
            logger.debug("countdown evaluated: date=%s status=TODAY", target_date.isoformat())
            return CountdownResult(target_date=target_date, status=CountdownStatus.TODAY)

        if as_instant(target_date) < as_instant(now):
            days_passed = total_days(target_date, now)
            logger.debug(
                "countdown evaluated: date=%s status=PASSED days_passed=%d",
                target_date.isoformat(),
                days_passed,
            )
            return CountdownResult(
                target_date=target_date,
                status=CountdownStatus.PASSED,
                days_passed=days_passed,
            )

        result = CountdownResult(
            target_date=target_date,
            status=CountdownStatus.UPCOMING,
            difference=date_delta(now, target_date),
            total_days=total_days(now, target_date),
            total_weeks=total_weeks(now, target_date),
            day_of_week=weekday_name(target_date),
        )

        logger.debug(
            "countdown evaluated: date=%s status=UPCOMING total_days=%d",
            target_date.isoformat(),
            result.total_days,
        )
        return result

    def evaluate_request(self, request: SingleDateRequest, now: datetime) -> CountdownResult:
        return self.evaluate(request.target_date, now)

    def evaluate_payload(self, payload: Dict[str, Any], now: datetime) -> CountdownResult:
        return self.evaluate_request(parse_request("single_date_request", payload), now)
