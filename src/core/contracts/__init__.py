"""
Contract Validation Module

Модуль для валидации JSON контрактов, экспортируемых CLI/UI слоем.
"""

from .validators import (
    ComputationResultValidator,
    ContractValidator,
    DigitHistogramValidator,
    SchemaLoader,
    export_computation_result,
    validate_computation_result,
    validate_digit_histogram,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "DigitHistogramValidator",
    "ComputationResultValidator",
    # Functions
    "validate_digit_histogram",
    "validate_computation_result",
    "export_computation_result",
]
