"""
Тесты для Zodiac — табличное определение знака зодиака

Граничные даты включительные; после 21 декабря год замыкается на Capricorn.
"""

import pytest

from src.core.calendar.zodiac import ZODIAC_BOUNDARIES, zodiac_sign
from src.core.domain.zodiac import ZodiacSign


class TestZodiacSign:
    """Тесты zodiac_sign"""

    @pytest.mark.parametrize(
        "month, day, expected",
        [
            (12, 25, ZodiacSign.CAPRICORN),
            (1, 1, ZodiacSign.CAPRICORN),
            (1, 19, ZodiacSign.CAPRICORN),
            (1, 20, ZodiacSign.AQUARIUS),
            (2, 18, ZodiacSign.AQUARIUS),
            (2, 19, ZodiacSign.PISCES),
            (2, 29, ZodiacSign.PISCES),
            (3, 21, ZodiacSign.ARIES),
            (4, 20, ZodiacSign.TAURUS),
            (6, 21, ZodiacSign.CANCER),
            (7, 23, ZodiacSign.LEO),
            (8, 20, ZodiacSign.LEO),
            (9, 22, ZodiacSign.VIRGO),
            (10, 23, ZodiacSign.SCORPIO),
            (11, 22, ZodiacSign.SAGITTARIUS),
            (12, 21, ZodiacSign.SAGITTARIUS),
            (12, 22, ZodiacSign.CAPRICORN),
            (12, 31, ZodiacSign.CAPRICORN),
        ],
    )
    def test_boundaries(self, month, day, expected):
        assert zodiac_sign(month, day) == expected

    def test_value_is_display_name(self):
        assert zodiac_sign(12, 25) == "Capricorn"
        assert zodiac_sign(1, 20).value == "Aquarius"

    def test_label_has_symbol(self):
        assert ZodiacSign.CAPRICORN.label == "♑ Capricorn"
        assert ZodiacSign.LEO.symbol == "♌"

    def test_every_sign_has_symbol(self):
        for sign in ZodiacSign:
            assert sign.label.endswith(sign.value)

    def test_month_out_of_range(self):
        with pytest.raises(ValueError, match="month must be in"):
            zodiac_sign(13, 1)


class TestZodiacTable:
    """Тесты таблицы ZODIAC_BOUNDARIES"""

    def test_table_size_and_wrap(self):
        assert len(ZODIAC_BOUNDARIES) == 13
        assert ZODIAC_BOUNDARIES[0] == ((1, 19), ZodiacSign.CAPRICORN)
        assert ZODIAC_BOUNDARIES[-1] == ((12, 31), ZodiacSign.CAPRICORN)

    def test_table_is_calendar_ordered(self):
        boundaries = [boundary for boundary, _ in ZODIAC_BOUNDARIES]
        assert boundaries == sorted(boundaries)

    def test_all_twelve_signs_present(self):
        assert {sign for _, sign in ZODIAC_BOUNDARIES} == set(ZodiacSign)
