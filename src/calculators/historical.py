"""Historical Date Calculator — анализ даты относительно now.

Дата может быть как в прошлом ("ago"), так и в будущем ("from now").
Календарная разница всегда считается от более ранней даты к более поздней.
"""

import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Dict

from src.core.calendar import (
    as_instant,
    date_delta,
    total_days,
    total_months,
    total_weeks,
)
from src.core.contracts import parse_request
from src.core.domain.date_delta import DateDelta
from src.core.domain.requests import SingleDateRequest

logger = logging.getLogger(__name__)

YEARS_PER_DECADE = 10
YEARS_PER_CENTURY = 100


@dataclass(frozen=True)
class HistoricalDateResult:
    """Результат анализа исторической даты."""

    target_date: date
    is_past: bool

    difference: DateDelta
    total_days: int
    total_weeks: int
    total_months: int

    decades: int
    centuries: int

    @property
    def time_label(self) -> str:
        """'ago' для прошлого, 'from now' для будущего."""
        return "ago" if self.is_past else "from now"


class HistoricalDateCalculator:
    """Калькулятор исторической даты (stateless)."""

    def evaluate(self, target_date: date, now: datetime) -> HistoricalDateResult:
        is_past = as_instant(target_date) < as_instant(now)

        if is_past:
            earlier, later = target_date, now
        else:
            earlier, later = now, target_date

        difference = date_delta(earlier, later)

        result = HistoricalDateResult(
            target_date=target_date,
            is_past=is_past,
            difference=difference,
            total_days=total_days(target_date, now),
            total_weeks=total_weeks(target_date, now),
            total_months=total_months(earlier, later),
            decades=difference.years // YEARS_PER_DECADE,
            centuries=difference.years // YEARS_PER_CENTURY,
        )

        logger.debug(
            "historical date evaluated: date=%s is_past=%s difference=%s",
            target_date.isoformat(),
            is_past,
            difference.as_tuple(),
        )
        return result

    def evaluate_request(
        self, request: SingleDateRequest, now: datetime
    ) -> HistoricalDateResult:
        return self.evaluate(request.target_date, now)

    def evaluate_payload(
        self, payload: Dict[str, Any], now: datetime
    ) -> HistoricalDateResult:
        return self.evaluate_request(parse_request("single_date_request", payload), now)
