"""
DigitHistogram — частотная гистограмма десятичных цифр

Immutable Pydantic модель, результат анализатора цифр.
Полная совместимость с JSON Schema (src/core/contracts/schema/digit_histogram.json).
"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator

DIGITS = "0123456789"


class DigitHistogram(BaseModel):
    """
    Гистограмма вхождений цифр '0'–'9' в строке.

    Инварианты:
    - counts содержит ровно 10 неотрицательных значений (индекс = цифра)
    - total == sum(counts)
    - mean = total / (число цифр с count > 0); None если цифр нет
    """

    counts: tuple[int, ...] = Field(
        ..., min_length=10, max_length=10, description="Число вхождений цифр 0..9"
    )
    total: int = Field(..., ge=0, description="Сумма всех вхождений")
    mean: Optional[float] = Field(
        None, ge=0, description="Среднее по встретившимся цифрам (None если цифр нет)"
    )

    model_config = {"frozen": True}

    @field_validator("counts")
    @classmethod
    def validate_counts(cls, v: tuple[int, ...]) -> tuple[int, ...]:
        """Все счётчики неотрицательные."""
        if any(count < 0 for count in v):
            raise ValueError(f"counts must be non-negative, got {v}")
        return v

    @model_validator(mode="after")
    def validate_totals(self) -> "DigitHistogram":
        """total и mean согласованы с counts."""
        if self.total != sum(self.counts):
            raise ValueError(
                f"total ({self.total}) must equal sum of counts ({sum(self.counts)})"
            )
        if self.total == 0 and self.mean is not None:
            raise ValueError("mean must be None when no digits occurred")
        if self.total > 0 and self.mean is None:
            raise ValueError("mean is required when digits occurred")
        return self

    def count_of(self, digit: str) -> int:
        """Число вхождений цифры ('0'–'9')."""
        if len(digit) != 1 or digit not in DIGITS:
            raise ValueError(f"digit must be one of '0'-'9', got {digit!r}")
        return self.counts[int(digit)]

    @property
    def occurring_digits(self) -> str:
        """Цифры, встретившиеся хотя бы раз, по возрастанию."""
        return "".join(d for d, count in zip(DIGITS, self.counts) if count > 0)

    @property
    def has_digits(self) -> bool:
        return self.total > 0

    def as_mapping(self) -> dict[str, int]:
        return dict(zip(DIGITS, self.counts))
