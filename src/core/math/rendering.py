"""
Decimal Rendering — десятичная запись огромных целых

str(int) в Python 3.11+ ограничен sys.get_int_max_str_digits() (4300 цифр
по умолчанию) и выбрасывает ValueError на больших результатах. Конверсия
через decimal.Decimal точна и этим ограничением не покрыта. Стоимость
конверсии растёт квадратично: сотни тысяч цифр занимают секунды, миллионы
цифр занимают минуты. Потолки прикладного слоя держат результаты в первом
диапазоне.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. to_decimal_string(v) == str(v) для любого v, где str(v) допустим
2. from_decimal_string(to_decimal_string(v)) == v
3. decimal_digit_count(v) == len(to_decimal_string(abs(v)))
"""

import re
from decimal import Decimal
from typing import Final

_DECIMAL_INTEGER_RE: Final = re.compile(r"^-?[0-9]+$")


def to_decimal_string(value: int) -> str:
    """
    Десятичная запись целого без ограничения на число цифр.

    Examples:
        >>> to_decimal_string(-120)
        '-120'
        >>> len(to_decimal_string(10 ** 5000))
        5001
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"value must be an integer, got {type(value).__name__}")

    # Decimal(int) имеет нулевой показатель → запись без экспоненты
    return str(Decimal(value))


def from_decimal_string(text: str) -> int:
    """
    Разбор десятичной записи целого без ограничения на число цифр.

    Raises:
        ValueError: если text не является записью целого

    Examples:
        >>> from_decimal_string('-120')
        -120
    """
    if not _DECIMAL_INTEGER_RE.fullmatch(text):
        raise ValueError(f"not a decimal integer: {text[:32]!r}")
    return int(Decimal(text))


def decimal_digit_count(value: int) -> int:
    """
    Точное число десятичных цифр |value| без построения строки.

    Оценка floor(log10) через bit_length, затем коррекция степенью 10.

    Examples:
        >>> decimal_digit_count(0)
        1
        >>> decimal_digit_count(-999)
        3
        >>> decimal_digit_count(1000)
        4
    """
    value = abs(value)
    if value == 0:
        return 1

    # log10(2) ≈ 0.30103
    estimate = (value.bit_length() * 30103) // 100000
    power = 10 ** estimate
    while value < power:
        estimate -= 1
        power //= 10
    power *= 10
    while value >= power:
        estimate += 1
        power *= 10
    return estimate + 1
