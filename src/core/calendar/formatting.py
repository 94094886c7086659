"""
Formatting — Форматирование чисел для отображения

Группировка разрядов фиксирована (запятая, группы по 3 цифры справа)
и не зависит от локали хоста.
"""

from typing import Final

THOUSANDS_SEPARATOR: Final[str] = ","
DIGIT_GROUP_SIZE: Final[int] = 3


def format_number(value: int) -> str:
    """
    Целое число с разделителем тысяч.

    Raises:
        TypeError: Если value не int (дробная часть не отбрасывается молча)

    Examples:
        >>> format_number(1234567)
        '1,234,567'
        >>> format_number(-1000)
        '-1,000'
        >>> format_number(999)
        '999'
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"format_number expects int, got {type(value).__name__}")

    digits = str(abs(value))
    head = len(digits) % DIGIT_GROUP_SIZE or DIGIT_GROUP_SIZE
    groups = [digits[:head]]
    groups.extend(
        digits[i:i + DIGIT_GROUP_SIZE] for i in range(head, len(digits), DIGIT_GROUP_SIZE)
    )

    sign = "-" if value < 0 else ""
    return sign + THOUSANDS_SEPARATOR.join(groups)


def format_percentage(value: float, decimals: int = 2) -> str:
    """
    Процент с фиксированным числом знаков после запятой.

    Examples:
        >>> format_percentage(42.5)
        '42.50'
    """
    if decimals < 0:
        raise ValueError(f"decimals must be non-negative, got {decimals}")
    return f"{value:.{decimals}f}"
