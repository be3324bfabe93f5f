"""Каталог функций — выбор функции по имени и диспетчеризация вызова.

UI/CLI слой выбирает функцию по публичному имени (CombinatorialFunction),
передаёт аргументы и режим точности и получает ComputationResult.

Порядок evaluate:
1. Проверка арности
2. Проверка потолка входов (если передан ForgeConfig)
3. Вызов библиотечной функции (домен проверяет сама функция)
4. Десятичная запись + опциональная гистограмма цифр
"""

import time
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from src.analysis.digit_stats import analyze_digits
from src.app.config import ForgeConfig
from src.app.logging_setup import get_logger
from src.core.domain.computation import CombinatorialFunction, ComputationResult
from src.core.domain.precision import PrecisionMode
from src.core.math import combinatorics
from src.core.math.rendering import decimal_digit_count, to_decimal_string

logger = get_logger(__name__)


class InputCeilingExceeded(ValueError):
    """Аргумент превышает настроенный потолок прикладного слоя."""

    def __init__(self, function: CombinatorialFunction, argument: str, value: int, ceiling: int):
        super().__init__(
            f"{function.value}: |{argument}| = {abs(value)} exceeds the configured ceiling {ceiling}"
        )
        self.function = function
        self.argument = argument
        self.value = value
        self.ceiling = ceiling


@dataclass(frozen=True)
class CatalogEntry:
    """Описание функции каталога."""

    function: CombinatorialFunction
    implementation: Callable[..., int]
    parameters: tuple[str, ...]
    title: str

    @property
    def arity(self) -> int:
        return len(self.parameters)


CATALOG: dict[CombinatorialFunction, CatalogEntry] = {
    entry.function: entry
    for entry in (
        CatalogEntry(CombinatorialFunction.FACTORIAL, combinatorics.factorial, ("n",), "Factorial"),
        CatalogEntry(CombinatorialFunction.ODD, combinatorics.odd_factorial, ("n",), "Odd Factorial"),
        CatalogEntry(CombinatorialFunction.EVEN, combinatorics.even_factorial, ("n",), "Even Factorial"),
        CatalogEntry(CombinatorialFunction.PRIME, combinatorics.prime_factorial, ("n",), "Prime Factorial"),
        CatalogEntry(CombinatorialFunction.SUBFACTORIAL, combinatorics.subfactorial, ("n",), "Subfactorial"),
        CatalogEntry(CombinatorialFunction.DOUBLE, combinatorics.double_factorial, ("n",), "Double Factorial"),
        CatalogEntry(CombinatorialFunction.RISING, combinatorics.rising_factorial, ("x", "n"), "Rising Factorial"),
        CatalogEntry(CombinatorialFunction.FALLING, combinatorics.falling_factorial, ("x", "n"), "Falling Factorial"),
        CatalogEntry(CombinatorialFunction.MULTI, combinatorics.multi_factorial, ("x", "n"), "Multifactorial"),
        CatalogEntry(CombinatorialFunction.SUPER, combinatorics.superfactorial, ("n",), "Superfactorial"),
        CatalogEntry(CombinatorialFunction.HYPER, combinatorics.hyperfactorial, ("n",), "Hyperfactorial"),
        CatalogEntry(
            CombinatorialFunction.SUPERDUPER,
            combinatorics.superduperfactorial,
            ("n",),
            "Superduperfactorial",
        ),
    )
}


def get_entry(function: CombinatorialFunction | str) -> CatalogEntry:
    """Запись каталога по enum или публичному имени.

    Raises:
        ValueError: если имя неизвестно
    """
    try:
        return CATALOG[CombinatorialFunction(function)]
    except ValueError:
        known = ", ".join(f.value for f in CombinatorialFunction)
        raise ValueError(f"unknown function {function!r}; expected one of: {known}") from None


def check_ceiling(
    entry: CatalogEntry,
    args: Sequence[int],
    precision: PrecisionMode,
    config: ForgeConfig,
) -> None:
    """Проверка потолка прикладного слоя для каждого аргумента.

    Raises:
        InputCeilingExceeded: если |аргумент| больше потолка
    """
    ceiling = config.ceiling_for(entry.function, precision)
    for name, value in zip(entry.parameters, args):
        if abs(value) > ceiling:
            raise InputCeilingExceeded(entry.function, name, value, ceiling)


def evaluate(
    function: CombinatorialFunction | str,
    args: Sequence[int],
    precision: PrecisionMode = PrecisionMode.ARBITRARY,
    with_histogram: bool = False,
    config: Optional[ForgeConfig] = None,
) -> ComputationResult:
    """Вычисление функции каталога.

    Args:
        function: Функция (enum или публичное имя)
        args: Аргументы в порядке CatalogEntry.parameters
        precision: Режим точности
        with_histogram: Построить гистограмму цифр результата
        config: Если задан, применяются потолки входов

    Returns:
        ComputationResult

    Raises:
        ValueError: неизвестная функция или неверное число аргументов
        InputCeilingExceeded: аргумент выше потолка
        CombinatorialDomainError: аргумент вне домена функции
    """
    entry = get_entry(function)
    precision = PrecisionMode(precision)

    if len(args) != entry.arity:
        raise ValueError(
            f"{entry.function.value} expects {entry.arity} argument(s) "
            f"({', '.join(entry.parameters)}), got {len(args)}"
        )

    if config is not None:
        check_ceiling(entry, args, precision, config)

    logger.debug("Evaluating %s%s [%s]", entry.function.value, tuple(args), precision.value)
    started = time.perf_counter()
    value = entry.implementation(*args, precision)
    elapsed_ms = (time.perf_counter() - started) * 1000.0

    rendered = to_decimal_string(value)
    digit_count = decimal_digit_count(value)
    histogram = analyze_digits(rendered) if with_histogram else None
    logger.info(
        "%s%s [%s]: %d digits in %.1f ms",
        entry.function.value,
        tuple(args),
        precision.value,
        digit_count,
        elapsed_ms,
    )

    return ComputationResult(
        function=entry.function,
        arguments=dict(zip(entry.parameters, args)),
        precision=precision,
        value=rendered,
        digit_count=digit_count,
        histogram=histogram,
        elapsed_ms=elapsed_ms,
    )
