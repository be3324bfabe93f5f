"""
Тесты для Combinatorics — факториалоподобные функции с двойной точностью

Проверяемые инварианты:
1. Эталонные значения каждой функции
2. Пустое произведение = 1, Subfactorial(1) = 0
3. CombinatorialDomainError до вычислений при n < 0 (n ≤ 0 для шага multi)
4. BOUNDED совпадает с ARBITRARY, пока результат помещается в Int64
5. BOUNDED == wrap_int64(ARBITRARY) после переполнения (молчаливый wraparound)
6. Детерминизм (чистые функции)
"""

import pytest

from src.core.domain.precision import PrecisionMode
from src.core.math.combinatorics import (
    CombinatorialDomainError,
    _int_pow,
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
from src.core.math.fixed_width import INT64_MAX, INT64_MIN, fits_int64, wrap_int64

BOUNDED = PrecisionMode.BOUNDED
ARBITRARY = PrecisionMode.ARBITRARY

SINGLE_ARGUMENT_FUNCTIONS = [
    factorial,
    odd_factorial,
    even_factorial,
    prime_factorial,
    subfactorial,
    double_factorial,
    superfactorial,
    hyperfactorial,
    superduperfactorial,
]


# =============================================================================
# ТЕСТЫ: Factorial
# =============================================================================


class TestFactorial:
    """Тесты factorial: эталоны и согласованность режимов."""

    def test_base_cases(self):
        """0! = 1! = 1 в обоих режимах."""
        for precision in PrecisionMode:
            assert factorial(0, precision) == 1
            assert factorial(1, precision) == 1

    def test_known_values(self):
        assert factorial(5) == 120
        assert factorial(10) == 3628800
        assert factorial(20) == 2432902008176640000

    def test_modes_agree_up_to_20(self):
        """20! — наибольший факториал, помещающийся в Int64."""
        for n in range(21):
            assert factorial(n, BOUNDED) == factorial(n, ARBITRARY)

    def test_21_wraps_silently(self):
        """21! переполняет Int64 без исключения."""
        exact = factorial(21)
        assert not fits_int64(exact)
        assert factorial(21, BOUNDED) == -4249290049419214848
        assert factorial(21, BOUNDED) == wrap_int64(exact)

    def test_bounded_becomes_zero_with_64_factors_of_two(self):
        """65! содержит 2**63, 66! содержит 2**64 → 0 по модулю 2**64."""
        assert factorial(65, BOUNDED) != 0
        assert factorial(66, BOUNDED) == 0
        assert factorial(1000, BOUNDED) == 0

    def test_precision_accepts_string_value(self):
        assert factorial(5, "bounded") == 120
        assert factorial(5, "arbitrary") == 120

    def test_unknown_precision_rejected(self):
        with pytest.raises(ValueError):
            factorial(5, "quad")


# =============================================================================
# ТЕСТЫ: Odd / Even / Double / Prime
# =============================================================================


class TestSimpleProducts:
    """Тесты произведений по арифметическим прогрессиям и простым."""

    def test_odd_factorial(self):
        assert odd_factorial(0) == 1
        assert odd_factorial(1) == 1
        assert odd_factorial(7) == 105
        assert odd_factorial(8) == 105
        assert odd_factorial(9) == 945

    def test_even_factorial(self):
        assert even_factorial(0) == 1
        assert even_factorial(1) == 1
        assert even_factorial(8) == 384
        assert even_factorial(10) == 3840

    def test_double_factorial(self):
        assert double_factorial(0) == 1
        assert double_factorial(1) == 1
        assert double_factorial(7) == 105
        assert double_factorial(8) == 384
        assert double_factorial(9) == 945

    def test_double_factorial_matches_odd_even(self):
        """n!! совпадает с odd(n) для нечётных n и even(n) для чётных."""
        for n in range(0, 40):
            expected = odd_factorial(n) if n % 2 else even_factorial(n)
            assert double_factorial(n) == expected

    def test_prime_factorial(self):
        assert prime_factorial(0) == 1
        assert prime_factorial(1) == 1
        assert prime_factorial(2) == 2
        assert prime_factorial(5) == 30
        assert prime_factorial(10) == 210
        assert prime_factorial(13) == 30030

    def test_factorial_splits_into_odd_and_even(self):
        for n in range(0, 50):
            assert odd_factorial(n) * even_factorial(n) == factorial(n)


# =============================================================================
# ТЕСТЫ: Subfactorial
# =============================================================================


class TestSubfactorial:
    """Тесты subfactorial: рекуррентность беспорядков."""

    def test_base_cases(self):
        assert subfactorial(0) == 1
        assert subfactorial(1) == 0

    def test_known_values(self):
        expected = [1, 0, 1, 2, 9, 44, 265, 1854, 14833, 133496, 1334961]
        assert [subfactorial(n) for n in range(11)] == expected

    def test_base_cases_bounded(self):
        assert subfactorial(0, BOUNDED) == 1
        assert subfactorial(1, BOUNDED) == 0

    def test_large_n_is_iterative(self):
        """Глубина рекурсии не ограничивает n."""
        result = subfactorial(5000)
        assert result > 0
        # !n = round(n!/e) ⇒ n! / !n → e
        assert abs(factorial(5000) // result - 2) <= 1

    def test_bounded_matches_wrapped_exact(self):
        for n in range(0, 80):
            assert subfactorial(n, BOUNDED) == wrap_int64(subfactorial(n))


# =============================================================================
# ТЕСТЫ: Rising / Falling / Multi
# =============================================================================


class TestTwoArgumentForms:
    """Тесты rising, falling и multi факториалов."""

    def test_rising_factorial(self):
        assert rising_factorial(3, 4) == 360
        assert rising_factorial(1, 5) == factorial(5)
        assert rising_factorial(-5, 2) == 20
        assert rising_factorial(-3, 4) == 0

    def test_falling_factorial(self):
        assert falling_factorial(5, 3) == 60
        assert falling_factorial(5, 5) == factorial(5)
        assert falling_factorial(2, 4) == 0
        assert falling_factorial(-2, 3) == -24

    def test_zero_count_is_empty_product(self):
        for x in (-7, -1, 0, 1, 42):
            assert rising_factorial(x, 0) == 1
            assert falling_factorial(x, 0) == 1

    def test_rising_falling_duality(self):
        """x^(n) = (x+n−1)_n."""
        for x in range(-5, 10):
            for n in range(0, 8):
                assert rising_factorial(x, n) == falling_factorial(x + n - 1, n)

    def test_multi_factorial(self):
        assert multi_factorial(7, 2) == 105
        assert multi_factorial(10, 3) == 280
        assert multi_factorial(9, 3) == 162
        assert multi_factorial(5, 1) == factorial(5)

    def test_multi_factorial_non_positive_x(self):
        for x in (0, -1, -100):
            assert multi_factorial(x, 2) == 1

    def test_multi_factorial_step_must_be_positive(self):
        for n in (0, -1):
            with pytest.raises(CombinatorialDomainError) as exc_info:
                multi_factorial(7, n)
            assert exc_info.value.argument == "n"
            assert exc_info.value.value == n

    def test_multi_factorial_step_checked_even_for_non_positive_x(self):
        with pytest.raises(CombinatorialDomainError):
            multi_factorial(-3, 0)

    def test_negative_count_rejected(self):
        for func in (rising_factorial, falling_factorial):
            with pytest.raises(CombinatorialDomainError) as exc_info:
                func(3, -1)
            assert exc_info.value.argument == "n"

    def test_bounded_negative_products(self):
        """Отрицательные результаты корректно представлены в Int64."""
        assert falling_factorial(-2, 3, BOUNDED) == -24
        assert rising_factorial(-20, 21, BOUNDED) == 0
        exact = falling_factorial(-10, 25)
        assert falling_factorial(-10, 25, BOUNDED) == wrap_int64(exact)


# =============================================================================
# ТЕСТЫ: Super / Hyper / Superduper
# =============================================================================


class TestNestedProducts:
    """Тесты вложенных произведений."""

    def test_superfactorial(self):
        assert superfactorial(0) == 1
        assert superfactorial(3) == 12
        assert superfactorial(4) == 288
        assert superfactorial(5) == 34560

    def test_hyperfactorial(self):
        assert hyperfactorial(0) == 1
        assert hyperfactorial(3) == 108
        assert hyperfactorial(4) == 27648
        assert hyperfactorial(5) == 86400000

    def test_superduperfactorial(self):
        assert superduperfactorial(0) == 1
        assert superduperfactorial(1) == 1
        assert superduperfactorial(3) == 2916
        assert superduperfactorial(4) == 820781032088272896

    def test_superduperfactorial_fits_int64_at_4(self):
        assert superduperfactorial(4, BOUNDED) == superduperfactorial(4)

    def test_superduperfactorial_bounded_collapses_to_zero(self):
        """6^720 содержит 2**720 → произведение ≡ 0 (mod 2**64)."""
        assert superduperfactorial(6, BOUNDED) == 0
        assert superduperfactorial(6, BOUNDED) == wrap_int64(superduperfactorial(6))
        assert superduperfactorial(5000, BOUNDED) == 0

    def test_superduperfactorial_5_bounded_matches_wrapped_exact(self):
        assert superduperfactorial(5, BOUNDED) == wrap_int64(superduperfactorial(5))

    def test_bounded_matches_wrapped_exact(self):
        for n in range(0, 40):
            assert superfactorial(n, BOUNDED) == wrap_int64(superfactorial(n))
            assert hyperfactorial(n, BOUNDED) == wrap_int64(hyperfactorial(n))


# =============================================================================
# ТЕСТЫ: Integer Power
# =============================================================================


class TestIntPow:
    """Тесты _int_pow: repeated squaring."""

    def test_matches_builtin_pow(self):
        for base in (-3, 0, 1, 2, 7, 10):
            for exponent in (0, 1, 2, 5, 17, 64):
                assert _int_pow(base, exponent) == base ** exponent

    def test_modular(self):
        modulus = 1 << 64
        assert _int_pow(3, 1000, modulus) == pow(3, 1000, modulus)
        assert _int_pow(2, 64, modulus) == 0

    def test_zero_exponent(self):
        assert _int_pow(12345, 0) == 1
        assert _int_pow(12345, 0, 1 << 64) == 1


# =============================================================================
# ТЕСТЫ: Domain validation
# =============================================================================


class TestDomainValidation:
    """Тесты проверки домена и типов."""

    @pytest.mark.parametrize("func", SINGLE_ARGUMENT_FUNCTIONS)
    def test_minus_one_rejected(self, func):
        for precision in PrecisionMode:
            with pytest.raises(CombinatorialDomainError) as exc_info:
                func(-1, precision)
            assert exc_info.value.argument == "n"
            assert exc_info.value.value == -1

    @pytest.mark.parametrize("func", SINGLE_ARGUMENT_FUNCTIONS)
    def test_zero_accepted(self, func):
        for precision in PrecisionMode:
            assert func(0, precision) == 1

    def test_domain_error_is_value_error(self):
        with pytest.raises(ValueError, match="non-negative n"):
            factorial(-5)

    @pytest.mark.parametrize("bad", [3.0, "3", None, True])
    def test_non_integer_rejected(self, bad):
        with pytest.raises(TypeError):
            factorial(bad)

    def test_non_integer_x_rejected(self):
        with pytest.raises(TypeError):
            rising_factorial(2.5, 3)
        with pytest.raises(TypeError):
            multi_factorial("7", 2)


# =============================================================================
# ТЕСТЫ: Детерминизм и диапазон
# =============================================================================


class TestPurity:
    """Повторный вызов даёт идентичный результат."""

    @pytest.mark.parametrize("func", SINGLE_ARGUMENT_FUNCTIONS)
    def test_idempotent(self, func):
        for precision in PrecisionMode:
            assert func(7, precision) == func(7, precision)

    @pytest.mark.parametrize("func", SINGLE_ARGUMENT_FUNCTIONS)
    def test_bounded_always_in_int64_range(self, func):
        for n in (0, 5, 21, 30, 64, 100):
            value = func(n, BOUNDED)
            assert INT64_MIN <= value <= INT64_MAX
