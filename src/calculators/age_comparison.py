"""Age Comparison Calculator — сравнение возраста двух людей.

Старшим считается человек с более ранней датой рождения.
При одинаковых датах старшим помечается Person 2 (is_same_birth_date=True
позволяет отобразить этот случай отдельно).
"""

import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Dict
from enum import Enum

from src.core.calendar import date_delta, order_dates, total_days
from src.core.contracts import parse_request
from src.core.domain.date_delta import DateDelta
from src.core.domain.requests import AgeComparisonRequest

logger = logging.getLogger(__name__)


class ComparedPerson(str, Enum):
    """Участник сравнения"""

    PERSON_1 = "Person 1"
    PERSON_2 = "Person 2"


@dataclass(frozen=True)
class AgeComparisonResult:
    """Результат сравнения возраста."""

    person1_age: DateDelta
    person2_age: DateDelta

    older: ComparedPerson
    age_difference: DateDelta
    days_difference: int

    is_same_birth_date: bool


class AgeComparisonCalculator:
    """Калькулятор сравнения возраста (stateless)."""

    def evaluate(
        self,
        person1_birth_date: date,
        person2_birth_date: date,
        now: datetime,
    ) -> AgeComparisonResult:
        """Сравнение возраста на момент now.

        Args:
            person1_birth_date: дата рождения первого (не позже now)
            person2_birth_date: дата рождения второго (не позже now)
            now: текущий момент

        Raises:
            DateOrderViolation: если одна из дат рождения позже now
        """
        earlier, later, _ = order_dates(person1_birth_date, person2_birth_date)

        if person1_birth_date < person2_birth_date:
            older = ComparedPerson.PERSON_1
        else:
            older = ComparedPerson.PERSON_2

        result = AgeComparisonResult(
            person1_age=date_delta(person1_birth_date, now),
            person2_age=date_delta(person2_birth_date, now),
            older=older,
            age_difference=date_delta(earlier, later),
            days_difference=total_days(earlier, later),
            is_same_birth_date=(person1_birth_date == person2_birth_date),
        )

        logger.debug(
            "age comparison evaluated: older=%s difference=%s",
            older.value,
            result.age_difference.as_tuple(),
        )
        return result

    def evaluate_request(self, request: AgeComparisonRequest) -> AgeComparisonResult:
        """Расчёт по провалидированному AgeComparisonRequest."""
        return self.evaluate(
            request.person1_birth_date,
            request.person2_birth_date,
            request.now,
        )

    def evaluate_payload(self, payload: Dict[str, Any]) -> AgeComparisonResult:
        """Расчёт по сырому payload (контракт age_comparison_request)."""
        return self.evaluate_request(parse_request("age_comparison_request", payload))
