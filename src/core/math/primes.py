"""
Prime Enumeration — перечисление простых чисел ≤ limit

Два эквивалентных алгоритма:
- sieve_of_eratosthenes: O(n log log n) время, O(n) память (основной)
- primes_by_trial_division: проверка нечётными делителями до √m (эталон для сверки)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Для любого limit оба алгоритма возвращают один и тот же список
2. Список отсортирован по возрастанию
3. limit < 2 → пустой список
"""

from math import isqrt


def sieve_of_eratosthenes(limit: int) -> list[int]:
    """
    Решето Эратосфена.

    Алгоритм:
        1. Маркер для каждого целого в [0, limit], изначально True
        2. 0 и 1 помечаются как составные
        3. Для каждого i ≥ 2, если i ещё простое, помечаются кратные i,
           начиная с i², как составные
        4. Оставшиеся помеченные — простые

    Args:
        limit: Верхняя граница (включительно)

    Returns:
        Простые числа ≤ limit в порядке возрастания

    Examples:
        >>> sieve_of_eratosthenes(10)
        [2, 3, 5, 7]
        >>> sieve_of_eratosthenes(1)
        []
    """
    if limit < 2:
        return []

    is_prime_marker = [True] * (limit + 1)
    is_prime_marker[0] = False
    is_prime_marker[1] = False

    for i in range(2, isqrt(limit) + 1):
        if is_prime_marker[i]:
            # Кратные меньше i² уже вычеркнуты меньшими простыми
            for multiple in range(i * i, limit + 1, i):
                is_prime_marker[multiple] = False

    return [value for value, marked in enumerate(is_prime_marker) if marked]


def is_prime(m: int) -> bool:
    """
    Проверка простоты делением на нечётные кандидаты до √m.

    Examples:
        >>> is_prime(2)
        True
        >>> is_prime(9)
        False
        >>> is_prime(1)
        False
    """
    if m < 2:
        return False
    if m % 2 == 0:
        return m == 2

    for divisor in range(3, isqrt(m) + 1, 2):
        if m % divisor == 0:
            return False
    return True


def primes_by_trial_division(limit: int) -> list[int]:
    """
    Перечисление простых ≤ limit пробным делением.

    Асимптотически хуже решета, оставлен для сверки результатов.

    Examples:
        >>> primes_by_trial_division(10)
        [2, 3, 5, 7]
    """
    return [m for m in range(2, limit + 1) if is_prime(m)]
