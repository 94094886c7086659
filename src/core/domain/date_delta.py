"""
DateDelta — Календарная разница между двумя датами

Immutable Pydantic модель (years, months, days), полученная счётом вперёд
от более ранней даты к более поздней с переносом через границы месяцев и лет.
Никогда не вычисляется делением числа дней.
"""

from pydantic import BaseModel, Field


class DateDelta(BaseModel):
    """
    Календарная разница (years, months, days).

    Инварианты:
    - years >= 0
    - 0 <= months <= 11
    - 0 <= days <= 30 (ограничено максимальной длиной месяца)
    """

    years: int = Field(..., ge=0, description="Полные годы")
    months: int = Field(..., ge=0, le=11, description="Полные месяцы сверх лет")
    days: int = Field(..., ge=0, le=30, description="Дни сверх месяцев")

    model_config = {"frozen": True}

    @classmethod
    def zero(cls) -> "DateDelta":
        """Нулевая разница (одна и та же дата)."""
        return cls(years=0, months=0, days=0)

    def is_zero(self) -> bool:
        return self.years == 0 and self.months == 0 and self.days == 0

    def total_calendar_months(self) -> int:
        """years * 12 + months (дни не учитываются)."""
        return self.years * 12 + self.months

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.years, self.months, self.days)

    def describe(self) -> str:
        """Текстовое представление: '1 years, 2 months, 3 days'."""
        return f"{self.years} years, {self.months} months, {self.days} days"
