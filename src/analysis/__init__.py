"""Analysis — статистика по десятичным записям результатов."""

from .digit_stats import analyze_digits, analyze_number, format_histogram

__all__ = [
    "analyze_digits",
    "analyze_number",
    "format_histogram",
]
