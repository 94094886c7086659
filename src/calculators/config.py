"""Конфигурация калькуляторов.

Общие параметры, которые раньше были зашиты в отображение:
средняя продолжительность жизни для прогресса и политика 29 февраля.
"""

from dataclasses import dataclass

from src.core.calendar.birthday import LeapDayPolicy


@dataclass(frozen=True)
class CalculatorConfig:
    """Конфигурация калькуляторов.

    - average_lifespan_years: база для процента прожитой жизни (80 лет)
    - leap_day_policy: куда переносится день рождения 29 февраля
    - percentage_decimals: знаков после запятой в процентах
    """

    average_lifespan_years: int = 80
    leap_day_policy: LeapDayPolicy = LeapDayPolicy.MARCH_1
    percentage_decimals: int = 2

    def __post_init__(self):
        if self.average_lifespan_years <= 0:
            raise ValueError(
                f"average_lifespan_years must be positive, got {self.average_lifespan_years}"
            )
        if self.percentage_decimals < 0:
            raise ValueError(
                f"percentage_decimals must be non-negative, got {self.percentage_decimals}"
            )
