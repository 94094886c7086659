"""Zodiac — Знаки зодиака (западная тропическая система).

Immutable enum из 12 значений. Граничные даты знаков живут в
src.core.calendar.zodiac (ZODIAC_BOUNDARIES).
"""

from enum import Enum


class ZodiacSign(str, Enum):
    """Знак зодиака.

    Значение enum: английское название, отображается как есть.
    """

    CAPRICORN = "Capricorn"
    AQUARIUS = "Aquarius"
    PISCES = "Pisces"
    ARIES = "Aries"
    TAURUS = "Taurus"
    GEMINI = "Gemini"
    CANCER = "Cancer"
    LEO = "Leo"
    VIRGO = "Virgo"
    LIBRA = "Libra"
    SCORPIO = "Scorpio"
    SAGITTARIUS = "Sagittarius"

    @property
    def symbol(self) -> str:
        """Юникод-символ знака (♑, ♒, ...)."""
        return _SYMBOLS[self]

    @property
    def label(self) -> str:
        """Символ и название: '♑ Capricorn'."""
        return f"{self.symbol} {self.value}"


_SYMBOLS = {
    ZodiacSign.CAPRICORN: "♑",
    ZodiacSign.AQUARIUS: "♒",
    ZodiacSign.PISCES: "♓",
    ZodiacSign.ARIES: "♈",
    ZodiacSign.TAURUS: "♉",
    ZodiacSign.GEMINI: "♊",
    ZodiacSign.CANCER: "♋",
    ZodiacSign.LEO: "♌",
    ZodiacSign.VIRGO: "♍",
    ZodiacSign.LIBRA: "♎",
    ZodiacSign.SCORPIO: "♏",
    ZodiacSign.SAGITTARIUS: "♐",
}
