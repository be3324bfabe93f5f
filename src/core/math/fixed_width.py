"""
Fixed-Width Arithmetic — эмуляция знакового 64-битного целого

Python int не переполняется, поэтому bounded-режим комбинаторных функций
эмулирует поведение long (Int64) явно:
- Все промежуточные умножения выполняются по модулю 2**64
- Финальное значение переводится в знаковое представление (two's complement)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. wrap_int64(x) всегда лежит в [INT64_MIN, INT64_MAX]
2. wrap_int64(x) == x для любого x, который помещается в Int64
3. wrap_int64(a * b) == wrap_int64(wrap_int64(a) * wrap_int64(b))
   (кольцевой гомоморфизм, поэтому редукция на каждом шаге корректна)
4. Переполнение НЕ является ошибкой: значение молча «заворачивается»
"""

from typing import Final

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

INT64_BITS: Final[int] = 64

# Модуль кольца Z / 2**64
INT64_MODULUS: Final[int] = 1 << INT64_BITS

INT64_MIN: Final[int] = -(1 << (INT64_BITS - 1))
INT64_MAX: Final[int] = (1 << (INT64_BITS - 1)) - 1


# =============================================================================
# WRAPAROUND
# =============================================================================


def reduce_mod64(value: int) -> int:
    """
    Редукция по модулю 2**64 (беззнаковый остаток).

    Используется для промежуточных значений bounded-вычислений.

    Examples:
        >>> reduce_mod64(-1)
        18446744073709551615
        >>> reduce_mod64(1 << 64)
        0
    """
    return value % INT64_MODULUS


def wrap_int64(value: int) -> int:
    """
    Перевод произвольного целого в знаковое 64-битное представление.

    Эквивалентно результату умножения/сложения long без checked-контекста.

    Args:
        value: Произвольное целое (может быть огромным или отрицательным)

    Returns:
        Значение в диапазоне [INT64_MIN, INT64_MAX]

    Examples:
        >>> wrap_int64(120)
        120
        >>> wrap_int64(INT64_MAX + 1)
        -9223372036854775808
        >>> wrap_int64(1 << 64)
        0
    """
    unsigned = reduce_mod64(value)
    if unsigned > INT64_MAX:
        return unsigned - INT64_MODULUS
    return unsigned


def fits_int64(value: int) -> bool:
    """
    Проверка, помещается ли значение в Int64 без wraparound.

    Examples:
        >>> fits_int64(2432902008176640000)  # 20!
        True
        >>> fits_int64(51090942171709440000)  # 21!
        False
    """
    return INT64_MIN <= value <= INT64_MAX
