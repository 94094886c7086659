"""Calculators — калькуляторы поверх календарной арифметики.

- Age: возраст, прожитое время, ближайший день рождения, зодиак
- Date Difference: разница между двумя датами
- Time Between: интервал между двумя моментами времени
- Week Info: неделя, день года, квартал
- Age Comparison: сравнение возраста двух людей
- Historical Date: анализ даты в прошлом или будущем
- Countdown: обратный отсчёт до даты
- Live Counter: снимок прожитого времени для внешнего таймера
"""

from .config import CalculatorConfig
from .age import AgeCalculator, AgeResult
from .date_difference import DateDifferenceCalculator, DateDifferenceResult
from .time_between import TimeBetweenCalculator, TimeBetweenResult
from .week_info import WeekInfoCalculator, WeekInfoResult
from .age_comparison import AgeComparisonCalculator, AgeComparisonResult, ComparedPerson
from .historical import HistoricalDateCalculator, HistoricalDateResult
from .countdown import CountdownCalculator, CountdownResult, CountdownStatus
from .live_counter import LiveCounter

__all__ = [
    "CalculatorConfig",
    "AgeCalculator",
    "AgeResult",
    "DateDifferenceCalculator",
    "DateDifferenceResult",
    "TimeBetweenCalculator",
    "TimeBetweenResult",
    "WeekInfoCalculator",
    "WeekInfoResult",
    "AgeComparisonCalculator",
    "AgeComparisonResult",
    "ComparedPerson",
    "HistoricalDateCalculator",
    "HistoricalDateResult",
    "CountdownCalculator",
    "CountdownResult",
    "CountdownStatus",
    "LiveCounter",
]
