"""
Core math modules для FactorialForge

Точные комбинаторные функции и целочисленные примитивы.
"""

# Fixed-width arithmetic
from src.core.math.fixed_width import (
    INT64_MAX,
    INT64_MIN,
    INT64_MODULUS,
    fits_int64,
    reduce_mod64,
    wrap_int64,
)

# Prime enumeration
from src.core.math.primes import (
    is_prime,
    primes_by_trial_division,
    sieve_of_eratosthenes,
)

# Decimal rendering
from src.core.math.rendering import (
    decimal_digit_count,
    from_decimal_string,
    to_decimal_string,
)

# Combinatorics
from src.core.math.combinatorics import (
    CombinatorialDomainError,
    double_factorial,
    even_factorial,
    factorial,
    falling_factorial,
    hyperfactorial,
    multi_factorial,
    odd_factorial,
    prime_factorial,
    rising_factorial,
    subfactorial,
    superduperfactorial,
    superfactorial,
)

__all__ = [
    # Fixed-width — Constants
    "INT64_MAX",
    "INT64_MIN",
    "INT64_MODULUS",
    # Fixed-width — Functions
    "fits_int64",
    "reduce_mod64",
    "wrap_int64",
    # Primes
    "is_prime",
    "primes_by_trial_division",
    "sieve_of_eratosthenes",
    # Rendering
    "decimal_digit_count",
    "from_decimal_string",
    "to_decimal_string",
    # Combinatorics — Exceptions
    "CombinatorialDomainError",
    # Combinatorics — Functions
    "double_factorial",
    "even_factorial",
    "factorial",
    "falling_factorial",
    "hyperfactorial",
    "multi_factorial",
    "odd_factorial",
    "prime_factorial",
    "rising_factorial",
    "subfactorial",
    "superduperfactorial",
    "superfactorial",
]
