"""Date Difference Calculator — разница между двумя датами.

Даты принимаются в любом порядке: если вторая раньше первой,
они переставляются (was_swapped=True).
"""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Any, Dict

from src.core.calendar import (
    date_delta,
    order_dates,
    total_days,
    total_months,
    total_weeks,
)
from src.core.contracts import parse_request
from src.core.domain.date_delta import DateDelta
from src.core.domain.requests import DateRangeRequest

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DateDifferenceResult:
    """Результат калькулятора разницы дат."""

    start_date: date  # Более ранняя дата
    end_date: date  # Более поздняя дата
    was_swapped: bool

    difference: DateDelta
    total_days: int
    total_weeks: int
    total_months: int

    is_same_date: bool


class DateDifferenceCalculator:
    """Калькулятор разницы между двумя датами (stateless)."""

    def evaluate(self, first: date, second: date) -> DateDifferenceResult:
        """Разница между first и second.

        Args:
            first: первая дата
            second: вторая дата (может быть раньше first)

        Returns:
            DateDifferenceResult
        """
        start, end, was_swapped = order_dates(first, second)
        days = total_days(start, end)

        result = DateDifferenceResult(
            start_date=start,
            end_date=end,
            was_swapped=was_swapped,
            difference=date_delta(start, end),
            total_days=days,
            total_weeks=total_weeks(start, end),
            total_months=total_months(start, end),
            is_same_date=(days == 0),
        )

        logger.debug(
            "date difference evaluated: start=%s end=%s swapped=%s delta=%s",
            start.isoformat(),
            end.isoformat(),
            was_swapped,
            result.difference.as_tuple(),
        )
        return result

    def evaluate_request(self, request: DateRangeRequest) -> DateDifferenceResult:
        """Расчёт по провалидированному DateRangeRequest."""
        return self.evaluate(request.start_date, request.end_date)

    def evaluate_payload(self, payload: Dict[str, Any]) -> DateDifferenceResult:
        """Расчёт по сырому payload (контракт date_range_request)."""
        return self.evaluate_request(parse_request("date_range_request", payload))
