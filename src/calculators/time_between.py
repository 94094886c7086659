"""Time Between Calculator — интервал между двумя моментами (дата + время суток).

Моменты принимаются в любом порядке и упорядочиваются перед расчётом.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict

from src.core.calendar import TimeSpan, order_dates, time_span
from src.core.contracts import parse_request
from src.core.domain.requests import DateTimeRangeRequest

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TimeBetweenResult:
    """Результат калькулятора интервала времени."""

    start: datetime
    end: datetime
    was_swapped: bool
    span: TimeSpan


class TimeBetweenCalculator:
    """Калькулятор интервала между двумя моментами (stateless)."""

    def evaluate(self, first: datetime, second: datetime) -> TimeBetweenResult:
        """Интервал между first и second.

        Returns:
            TimeBetweenResult с разбивкой на дни/часы/минуты/секунды
        """
        start, end, was_swapped = order_dates(first, second)
        span = time_span(start, end)

        logger.debug(
            "time between evaluated: start=%s end=%s total_seconds=%d",
            start.isoformat(),
            end.isoformat(),
            span.total_seconds,
        )
        return TimeBetweenResult(start=start, end=end, was_swapped=was_swapped, span=span)

    def evaluate_request(self, request: DateTimeRangeRequest) -> TimeBetweenResult:
        """Расчёт по провалидированному DateTimeRangeRequest."""
        return self.evaluate(request.start, request.end)

    def evaluate_payload(self, payload: Dict[str, Any]) -> TimeBetweenResult:
        """Расчёт по сырому payload (контракт datetime_range_request)."""
        return self.evaluate_request(parse_request("datetime_range_request", payload))
