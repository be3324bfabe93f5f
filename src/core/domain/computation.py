"""
ComputationResult — результат одного вычисления комбинаторной функции

Immutable Pydantic модель для передачи результата в UI/CLI слой.
Полная совместимость с JSON Schema (src/core/contracts/schema/computation_result.json).

Значение хранится как десятичная строка: результат в ARBITRARY режиме может
содержать миллионы цифр и не представим как JSON number.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from src.core.domain.digit_histogram import DigitHistogram
from src.core.domain.precision import PrecisionMode
from src.core.math.rendering import from_decimal_string


# =============================================================================
# ENUMS
# =============================================================================


class CombinatorialFunction(str, Enum):
    """Публичные имена функций библиотеки."""

    FACTORIAL = "factorial"
    ODD = "odd"
    EVEN = "even"
    PRIME = "prime"
    SUBFACTORIAL = "subfactorial"
    DOUBLE = "double"
    RISING = "rising"
    FALLING = "falling"
    MULTI = "multi"
    SUPER = "super"
    HYPER = "hyper"
    SUPERDUPER = "superduper"


# =============================================================================
# COMPUTATION RESULT MODEL
# =============================================================================


class ComputationResult(BaseModel):
    """
    Результат вычисления.

    - function / arguments / precision: что вычислялось
    - value: десятичная запись результата
    - digit_count: число цифр (без знака)
    - histogram: опциональная гистограмма цифр value
    - elapsed_ms: время вычисления
    """

    function: CombinatorialFunction = Field(..., description="Вычисленная функция")
    arguments: dict[str, int] = Field(..., description="Аргументы по именам")
    precision: PrecisionMode = Field(..., description="Режим точности")
    value: str = Field(..., pattern=r"^-?[0-9]+$", description="Десятичная запись результата")
    digit_count: int = Field(..., ge=1, description="Число цифр результата")
    histogram: Optional[DigitHistogram] = Field(None, description="Гистограмма цифр (nullable)")
    elapsed_ms: float = Field(..., ge=0, description="Время вычисления (мс)")

    model_config = {"frozen": True}

    @field_validator("arguments")
    @classmethod
    def validate_arguments(cls, v: dict[str, int]) -> dict[str, int]:
        """Хотя бы один аргумент."""
        if not v:
            raise ValueError("arguments must not be empty")
        return v

    @property
    def as_int(self) -> int:
        return from_decimal_string(self.value)
