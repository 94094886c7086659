"""
Requests — Модели входных данных калькуляторов

Immutable Pydantic модели, в которые разбираются сырые payload'ы внешнего
вызывающего кода (после проверки JSON Schema контрактом из src.core.contracts).

Pydantic отвечает за то, что JSON Schema выразить не может:
- Существование даты (2023-02-30 отклоняется)
- Сравнение с now (дата рождения не может быть в будущем)
"""

from datetime import date, datetime

from pydantic import BaseModel, Field, field_validator


# =============================================================================
# HELPERS
# =============================================================================


def _ensure_not_future(value: date, info, message: str) -> date:
    """Проверка value <= now.date(), если now уже провалидирован."""
    if "now" in info.data:
        now: datetime = info.data["now"]
        if value > now.date():
            raise ValueError(message)
    return value


# =============================================================================
# REQUEST MODELS
# =============================================================================


class AgeRequest(BaseModel):
    """Запрос калькулятора возраста."""

    now: datetime = Field(..., description="Текущий момент вызывающей стороны")
    birth_date: date = Field(..., description="Дата рождения")

    model_config = {"frozen": True}

    @field_validator("birth_date")
    @classmethod
    def validate_birth_date_not_future(cls, v: date, info) -> date:
        """Дата рождения не позже сегодняшнего дня"""
        return _ensure_not_future(v, info, "Birth date cannot be in the future!")


class DateRangeRequest(BaseModel):
    """
    Запрос разницы между двумя датами.

    Порядок дат произвольный: калькулятор упорядочивает их сам.
    """

    start_date: date = Field(..., description="Первая дата")
    end_date: date = Field(..., description="Вторая дата")

    model_config = {"frozen": True}


class DateTimeRangeRequest(BaseModel):
    """Запрос разницы между двумя моментами времени (дата + время суток)."""

    start: datetime = Field(..., description="Первый момент")
    end: datetime = Field(..., description="Второй момент")

    model_config = {"frozen": True}


class SingleDateRequest(BaseModel):
    """
    Запрос с одной датой.

    Используется калькуляторами недели, исторической даты и обратного отсчёта.
    """

    target_date: date = Field(..., description="Анализируемая дата")

    model_config = {"frozen": True}


class AgeComparisonRequest(BaseModel):
    """Запрос сравнения возраста двух людей."""

    now: datetime = Field(..., description="Текущий момент вызывающей стороны")
    person1_birth_date: date = Field(..., description="Дата рождения первого человека")
    person2_birth_date: date = Field(..., description="Дата рождения второго человека")

    model_config = {"frozen": True}

    @field_validator("person1_birth_date", "person2_birth_date")
    @classmethod
    def validate_birth_dates_not_future(cls, v: date, info) -> date:
        """Обе даты рождения не позже сегодняшнего дня"""
        return _ensure_not_future(v, info, "Birth dates cannot be in the future!")
