"""Конфигурация прикладного слоя (CLI / UI адаптеры).

Потолки входов защищают интерактивный слой от вычислений, которые в
ARBITRARY режиме займут минуты и гигабайты. Библиотека сама потолков не
знает: это ответственность вызывающего.

Переменные окружения:
- FORGE_DEFAULT_PRECISION: bounded | arbitrary
- FORGE_MAX_INPUT: потолок для линейных функций
- FORGE_MAX_INPUT_NESTED: потолок для super / hyper
- FORGE_MAX_INPUT_SUPERDUPER: потолок для superduper (только ARBITRARY)
- FORGE_TIMEOUT_SECONDS: таймаут ожидания воркера (пусто = без таймаута)
- FORGE_LOG_LEVEL: уровень логирования
"""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from src.core.domain.computation import CombinatorialFunction
from src.core.domain.precision import PrecisionMode


_NESTED_FUNCTIONS = frozenset({CombinatorialFunction.SUPER, CombinatorialFunction.HYPER})


@dataclass(frozen=True)
class ForgeConfig:
    """Конфигурация потолков, таймаута и логирования."""

    default_precision: PrecisionMode = PrecisionMode.ARBITRARY
    max_input: int = 5000
    max_input_nested: int = 500
    max_input_superduper: int = 9
    timeout_seconds: Optional[float] = None
    log_level: str = "WARNING"

    def __post_init__(self):
        for name in ("max_input", "max_input_nested", "max_input_superduper"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be non-negative, got {getattr(self, name)}")
        if self.timeout_seconds is not None and self.timeout_seconds <= 0:
            raise ValueError(f"timeout_seconds must be positive, got {self.timeout_seconds}")
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ValueError(f"unknown log_level: {self.log_level}")

    def ceiling_for(
        self, function: CombinatorialFunction, precision: PrecisionMode
    ) -> int:
        """Потолок модуля любого аргумента функции.

        В BOUNDED режиме вложенные функции редуцируются по модулю 2**64 и
        остаются дешёвыми, поэтому для них действует общий потолок.
        """
        if function is CombinatorialFunction.SUPERDUPER and precision is PrecisionMode.ARBITRARY:
            return self.max_input_superduper
        if function in _NESTED_FUNCTIONS and precision is PrecisionMode.ARBITRARY:
            return self.max_input_nested
        return self.max_input

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ForgeConfig":
        """Загрузка конфигурации из FORGE_* переменных окружения.

        Raises:
            ValueError: если значение переменной не разбирается
        """
        env = os.environ if environ is None else environ
        defaults = cls()

        def _int(name: str, default: int) -> int:
            raw = env.get(name)
            if raw is None or raw == "":
                return default
            try:
                return int(raw)
            except ValueError:
                raise ValueError(f"{name} must be an integer, got {raw!r}") from None

        raw_precision = env.get("FORGE_DEFAULT_PRECISION")
        try:
            precision = (
                PrecisionMode(raw_precision.lower()) if raw_precision
                else defaults.default_precision
            )
        except ValueError:
            raise ValueError(
                f"FORGE_DEFAULT_PRECISION must be 'bounded' or 'arbitrary', got {raw_precision!r}"
            ) from None

        raw_timeout = env.get("FORGE_TIMEOUT_SECONDS")
        try:
            timeout = float(raw_timeout) if raw_timeout else None
        except ValueError:
            raise ValueError(
                f"FORGE_TIMEOUT_SECONDS must be a number, got {raw_timeout!r}"
            ) from None

        return cls(
            default_precision=precision,
            max_input=_int("FORGE_MAX_INPUT", defaults.max_input),
            max_input_nested=_int("FORGE_MAX_INPUT_NESTED", defaults.max_input_nested),
            max_input_superduper=_int("FORGE_MAX_INPUT_SUPERDUPER", defaults.max_input_superduper),
            timeout_seconds=timeout,
            log_level=env.get("FORGE_LOG_LEVEL") or defaults.log_level,
        )
