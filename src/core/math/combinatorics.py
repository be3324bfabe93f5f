"""
Combinatorics — факториалоподобные функции с двойной точностью

Модуль вычисляет точные значения семейства факториалоподобных функций:
- Factorial, OddFactorial, EvenFactorial, PrimeFactorial, DoubleFactorial
- Subfactorial (число беспорядков)
- RisingFactorial, FallingFactorial, MultiFactorial
- Superfactorial, Hyperfactorial, Superduperfactorial

Каждая функция принимает явный аргумент precision (PrecisionMode):
- ARBITRARY: точный Python int
- BOUNDED: точный результат, приведённый к знаковому Int64 (wraparound).
  Умножения редуцируются по модулю 2**64 на каждом шаге, поэтому
  bounded-режим не строит огромных промежуточных значений.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Проверка домена выполняется ДО вычислений → CombinatorialDomainError
2. Пустое произведение = 1 (кроме Subfactorial(1) = 0)
3. BOUNDED и ARBITRARY совпадают, пока результат помещается в Int64
4. Переполнение в BOUNDED не является ошибкой
5. Все функции чистые и детерминированные

ФОРМУЛЫ:
    n!          = 1·2·…·n
    D(n)        = (n−1)·(D(n−1) + D(n−2)),  D(0) = 1, D(1) = 0
    x^(n)       = x·(x+1)·…·(x+n−1)
    (x)_n       = x·(x−1)·…·(x−n+1)
    x!^(n)      = x·(x−n)·(x−2n)·…  (пока множитель > 0)
    sf(n)       = Π_{i=1..n} i!
    H(n)        = Π_{i=1..n} i^i
    sdf(n)      = Π_{i=1..n} i^(i!)
"""

from typing import Iterable, Optional

from src.core.domain.precision import PrecisionMode
from src.core.math.fixed_width import INT64_MODULUS, reduce_mod64, wrap_int64
from src.core.math.primes import sieve_of_eratosthenes


# =============================================================================
# EXCEPTIONS
# =============================================================================


class CombinatorialDomainError(ValueError):
    """
    Аргумент вне домена функции.

    Выбрасывается синхронно до начала вычислений. Атрибуты:
        argument: имя аргумента ("n", "x", ...)
        value: отвергнутое значение
    """

    def __init__(self, argument: str, value: int, message: str):
        super().__init__(message)
        self.argument = argument
        self.value = value


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def _require_int(value: int, name: str) -> None:
    # bool является подклассом int, но не является допустимым входом
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")


def _require_non_negative(value: int, name: str, function: str) -> None:
    _require_int(value, name)
    if value < 0:
        raise CombinatorialDomainError(
            name, value, f"{function} requires non-negative {name}, got {value}"
        )


def _require_positive(value: int, name: str, function: str) -> None:
    _require_int(value, name)
    if value <= 0:
        raise CombinatorialDomainError(
            name, value, f"{function} requires positive {name}, got {value}"
        )


# =============================================================================
# АРИФМЕТИЧЕСКИЙ КОНТЕКСТ
# =============================================================================


def _int_pow(base: int, exponent: int, modulus: Optional[int] = None) -> int:
    """
    Целочисленное возведение в степень (repeated squaring).

    O(log exponent) умножений. Для Superduperfactorial показатель равен i!,
    поэтому линейное возведение неприменимо.

    Args:
        base: Основание
        exponent: Неотрицательный показатель
        modulus: Если задан, все умножения редуцируются по модулю

    Returns:
        base ** exponent (или base ** exponent % modulus)
    """
    result = 1
    if modulus is not None:
        base %= modulus

    while exponent > 0:
        if exponent & 1:
            result = result * base
            if modulus is not None:
                result %= modulus
        exponent >>= 1
        if exponent:
            base = base * base
            if modulus is not None:
                base %= modulus

    return result


class _Arithmetic:
    """Умножение и степень для выбранного режима точности."""

    __slots__ = ("bounded",)

    def __init__(self, precision: PrecisionMode):
        self.bounded = PrecisionMode(precision) is PrecisionMode.BOUNDED

    def mul(self, a: int, b: int) -> int:
        product = a * b
        return reduce_mod64(product) if self.bounded else product

    def power(self, base: int, exponent: int) -> int:
        return _int_pow(base, exponent, INT64_MODULUS if self.bounded else None)

    def finish(self, value: int) -> int:
        """Финальное приведение: Int64 для BOUNDED, без изменений иначе."""
        return wrap_int64(value) if self.bounded else value

    def product(self, terms: Iterable[int]) -> int:
        acc = 1
        for term in terms:
            acc = self.mul(acc, term)
        return self.finish(acc)


# =============================================================================
# ПРОСТЫЕ ПРОИЗВЕДЕНИЯ
# =============================================================================


def factorial(n: int, precision: PrecisionMode = PrecisionMode.ARBITRARY) -> int:
    """
    n! = 1·2·…·n

    Raises:
        CombinatorialDomainError: если n < 0
        TypeError: если n не int

    Examples:
        >>> factorial(5)
        120
        >>> factorial(0)
        1
        >>> factorial(21, PrecisionMode.BOUNDED)
        -4249290049419214848
    """
    _require_non_negative(n, "n", "factorial")
    return _Arithmetic(precision).product(range(2, n + 1))


def odd_factorial(n: int, precision: PrecisionMode = PrecisionMode.ARBITRARY) -> int:
    """
    Произведение нечётных чисел в [1, n].

    Examples:
        >>> odd_factorial(7)
        105
        >>> odd_factorial(8)
        105
    """
    _require_non_negative(n, "n", "odd_factorial")
    return _Arithmetic(precision).product(range(1, n + 1, 2))


def even_factorial(n: int, precision: PrecisionMode = PrecisionMode.ARBITRARY) -> int:
    """
    Произведение чётных чисел в [2, n].

    Examples:
        >>> even_factorial(8)
        384
        >>> even_factorial(1)
        1
    """
    _require_non_negative(n, "n", "even_factorial")
    return _Arithmetic(precision).product(range(2, n + 1, 2))


def prime_factorial(n: int, precision: PrecisionMode = PrecisionMode.ARBITRARY) -> int:
    """
    Праймориал: произведение всех простых ≤ n.

    Простые перечисляются решетом Эратосфена.

    Examples:
        >>> prime_factorial(5)
        30
        >>> prime_factorial(1)
        1
    """
    _require_non_negative(n, "n", "prime_factorial")
    return _Arithmetic(precision).product(sieve_of_eratosthenes(n))


def double_factorial(n: int, precision: PrecisionMode = PrecisionMode.ARBITRARY) -> int:
    """
    n!! = n·(n−2)·(n−4)·… до 1 или 2.

    Examples:
        >>> double_factorial(7)
        105
        >>> double_factorial(8)
        384
    """
    _require_non_negative(n, "n", "double_factorial")
    return _Arithmetic(precision).product(range(n, 0, -2))


def subfactorial(n: int, precision: PrecisionMode = PrecisionMode.ARBITRARY) -> int:
    """
    !n — число беспорядков (перестановок без неподвижных точек).

    Рекуррентность D(n) = (n−1)·(D(n−1) + D(n−2)) вычисляется итеративно,
    глубина стека не зависит от n.

    Examples:
        >>> subfactorial(4)
        9
        >>> subfactorial(5)
        44
        >>> subfactorial(1)
        0
    """
    _require_non_negative(n, "n", "subfactorial")
    arithmetic = _Arithmetic(precision)

    if n == 0:
        return 1
    if n == 1:
        return 0

    before_previous, previous = 1, 0  # D(0), D(1)
    for i in range(2, n + 1):
        before_previous, previous = previous, arithmetic.mul(i - 1, previous + before_previous)

    return arithmetic.finish(previous)


# =============================================================================
# ДВУХАРГУМЕНТНЫЕ ФОРМЫ
# =============================================================================


def rising_factorial(
    x: int, n: int, precision: PrecisionMode = PrecisionMode.ARBITRARY
) -> int:
    """
    Возрастающий факториал x·(x+1)·…·(x+n−1).

    x может быть любым целым, n ≥ 0.

    Examples:
        >>> rising_factorial(3, 4)
        360
        >>> rising_factorial(-3, 2)
        6
        >>> rising_factorial(42, 0)
        1
    """
    _require_int(x, "x")
    _require_non_negative(n, "n", "rising_factorial")
    return _Arithmetic(precision).product(range(x, x + n))


def falling_factorial(
    x: int, n: int, precision: PrecisionMode = PrecisionMode.ARBITRARY
) -> int:
    """
    Убывающий факториал x·(x−1)·…·(x−n+1).

    Examples:
        >>> falling_factorial(5, 3)
        60
        >>> falling_factorial(2, 4)
        0
    """
    _require_int(x, "x")
    _require_non_negative(n, "n", "falling_factorial")
    return _Arithmetic(precision).product(range(x, x - n, -1))


def multi_factorial(
    x: int, n: int, precision: PrecisionMode = PrecisionMode.ARBITRARY
) -> int:
    """
    Мультифакториал x·(x−n)·(x−2n)·… пока множитель > 0.

    Шаг n обязан быть положительным. При x ≤ 0 произведение пустое → 1.

    Raises:
        CombinatorialDomainError: если n ≤ 0 (проверяется и при x ≤ 0)

    Examples:
        >>> multi_factorial(7, 2)
        105
        >>> multi_factorial(10, 3)
        280
        >>> multi_factorial(-5, 2)
        1
    """
    _require_int(x, "x")
    _require_positive(n, "n", "multi_factorial")
    return _Arithmetic(precision).product(range(x, 0, -n))


# =============================================================================
# ВЛОЖЕННЫЕ ПРОИЗВЕДЕНИЯ
# =============================================================================


def superfactorial(n: int, precision: PrecisionMode = PrecisionMode.ARBITRARY) -> int:
    """
    sf(n) = Π_{i=1..n} i!

    i! накапливается между итерациями: (i)! = (i−1)!·i.

    Examples:
        >>> superfactorial(3)
        12
        >>> superfactorial(4)
        288
    """
    _require_non_negative(n, "n", "superfactorial")
    arithmetic = _Arithmetic(precision)

    running_factorial = 1
    acc = 1
    for i in range(1, n + 1):
        running_factorial = arithmetic.mul(running_factorial, i)
        acc = arithmetic.mul(acc, running_factorial)

    return arithmetic.finish(acc)


def hyperfactorial(n: int, precision: PrecisionMode = PrecisionMode.ARBITRARY) -> int:
    """
    H(n) = Π_{i=1..n} i^i

    Examples:
        >>> hyperfactorial(3)
        108
        >>> hyperfactorial(4)
        27648
    """
    _require_non_negative(n, "n", "hyperfactorial")
    arithmetic = _Arithmetic(precision)

    acc = 1
    for i in range(1, n + 1):
        acc = arithmetic.mul(acc, arithmetic.power(i, i))

    return arithmetic.finish(acc)


def superduperfactorial(
    n: int, precision: PrecisionMode = PrecisionMode.ARBITRARY
) -> int:
    """
    sdf(n) = Π_{i=1..n} i^(i!)

    Показатель i! всегда точный (даже в BOUNDED), иначе wraparound
    показателя исказил бы результат по модулю 2**64.

    ВНИМАНИЕ: в ARBITRARY режиме результат растёт сверхэкспоненциально
    (sdf(10) содержит ~3.6 млн цифр).

    Examples:
        >>> superduperfactorial(3)
        2916
    """
    _require_non_negative(n, "n", "superduperfactorial")
    arithmetic = _Arithmetic(precision)

    exact_factorial = 1
    acc = 1
    for i in range(1, n + 1):
        exact_factorial *= i
        acc = arithmetic.mul(acc, arithmetic.power(i, exact_factorial))
        # В BOUNDED режиме множитель 2**64 набирается уже при i = 6
        if acc == 0:
            break

    return arithmetic.finish(acc)
