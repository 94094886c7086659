"""
Zodiac lookup — Табличное определение знака зодиака по (month, day)

Таблица упорядочена по календарю, каждая строка задаёт включительную верхнюю границу
знака. Последняя строка (12, 31) замыкает год обратно на Capricorn.
"""

from typing import Final

from src.core.calendar.gregorian import MONTHS_PER_YEAR
from src.core.domain.zodiac import ZodiacSign

# (end_month, end_day) включительно → знак
ZODIAC_BOUNDARIES: Final[tuple[tuple[tuple[int, int], ZodiacSign], ...]] = (
    ((1, 19), ZodiacSign.CAPRICORN),
    ((2, 18), ZodiacSign.AQUARIUS),
    ((3, 20), ZodiacSign.PISCES),
    ((4, 19), ZodiacSign.ARIES),
    ((5, 20), ZodiacSign.TAURUS),
    ((6, 20), ZodiacSign.GEMINI),
    ((7, 22), ZodiacSign.CANCER),
    ((8, 22), ZodiacSign.LEO),
    ((9, 22), ZodiacSign.VIRGO),
    ((10, 22), ZodiacSign.LIBRA),
    ((11, 21), ZodiacSign.SCORPIO),
    ((12, 21), ZodiacSign.SAGITTARIUS),
    ((12, 31), ZodiacSign.CAPRICORN),
)


def zodiac_sign(month: int, day: int) -> ZodiacSign:
    """
    Знак зодиака для дня (month, day).

    Возвращает первый знак, чья граница (end_month, end_day) >= (month, day)
    в календарном порядке.

    Args:
        month: Месяц 1-12
        day: День месяца

    Raises:
        ValueError: Если month вне 1-12

    Examples:
        >>> zodiac_sign(1, 19)
        <ZodiacSign.CAPRICORN: 'Capricorn'>
        >>> zodiac_sign(1, 20)
        <ZodiacSign.AQUARIUS: 'Aquarius'>
    """
    if not 1 <= month <= MONTHS_PER_YEAR:
        raise ValueError(f"month must be in [1, 12], got {month}")

    for boundary, sign in ZODIAC_BOUNDARIES:
        if (month, day) <= boundary:
            return sign

    # day > 31 в декабре: за пределами таблицы, замыкаем на Capricorn
    return ZodiacSign.CAPRICORN
