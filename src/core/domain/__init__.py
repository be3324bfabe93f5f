"""
Domain models and value objects.

Contains PrecisionMode, CombinatorialFunction, DigitHistogram and ComputationResult.
"""

from src.core.domain.computation import CombinatorialFunction, ComputationResult
from src.core.domain.digit_histogram import DIGITS, DigitHistogram
from src.core.domain.precision import PrecisionMode

__all__ = [
    # Precision
    "PrecisionMode",
    # Computation
    "CombinatorialFunction",
    "ComputationResult",
    # Digit histogram
    "DIGITS",
    "DigitHistogram",
]
