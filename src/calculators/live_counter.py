"""Live Counter — счётчик прожитого времени.

Счётчик не владеет таймером: вызывающая сторона сама опрашивает snapshot(now)
с нужной частотой (например, раз в секунду), останавливает опрос при очистке
формы и создаёт новый LiveCounter при повторном расчёте возраста.
"""

import logging
from datetime import date, datetime

from src.core.calendar import ElapsedCounter, as_instant, elapsed_counter

logger = logging.getLogger(__name__)


class LiveCounter:
    """Счётчик времени, прошедшего с фиксированного момента since.

    Единственное состояние: неизменяемый момент отсчёта.
    """

    def __init__(self, since: date):
        """
        Args:
            since: момент отсчёта (date = полночь)
        """
        self._since = as_instant(since)

    @property
    def since(self) -> datetime:
        return self._since

    def snapshot(self, now: datetime) -> ElapsedCounter:
        """Полные дни/часы/минуты/секунды от since до now."""
        counter = elapsed_counter(self._since, now)
        logger.debug(
            "live counter tick: since=%s total_seconds=%d",
            self._since.isoformat(),
            counter.total_seconds,
        )
        return counter
