"""
Digit Statistics — частотный анализ цифр в произвольном тексте

Анализатор не зависит от того, как получена строка:
- Учитываются только символы '0'–'9'
- Знак, пробелы, разделители и любые другие символы игнорируются
- Строка без цифр даёт вырожденную гистограмму с mean=None

ФОРМУЛЫ:
    total = Σ counts[d]
    mean  = total / |{d : counts[d] > 0}|   (None если total == 0)
"""

from src.core.domain.digit_histogram import DIGITS, DigitHistogram
from src.core.math.rendering import to_decimal_string


def analyze_digits(text: str) -> DigitHistogram:
    """
    Построение гистограммы цифр.

    Args:
        text: Произвольная строка (обычно десятичная запись результата)

    Returns:
        DigitHistogram; ошибок для str не бывает

    Raises:
        TypeError: если text не str

    Examples:
        >>> h = analyze_digits("1210")
        >>> h.counts[:3], h.total
        ((1, 2, 1), 4)
        >>> analyze_digits("abc").mean is None
        True
    """
    if not isinstance(text, str):
        raise TypeError(f"text must be a str, got {type(text).__name__}")

    # str.count выполняется в C, быстрее посимвольного цикла на миллионах цифр
    counts = tuple(text.count(digit) for digit in DIGITS)
    total = sum(counts)
    occurring = sum(1 for count in counts if count > 0)

    mean = total / occurring if occurring else None

    return DigitHistogram(counts=counts, total=total, mean=mean)


def analyze_number(value: int) -> DigitHistogram:
    """Гистограмма цифр десятичной записи целого (знак игнорируется)."""
    return analyze_digits(to_decimal_string(value))


def format_histogram(histogram: DigitHistogram) -> str:
    """
    Текстовый отчёт: строка на каждую цифру, затем сумма и среднее.

    Examples:
        >>> print(format_histogram(analyze_digits("1210")))  # doctest: +NORMALIZE_WHITESPACE
        '0': 1
        '1': 2
        '2': 1
        '3': 0
        '4': 0
        '5': 0
        '6': 0
        '7': 0
        '8': 0
        '9': 0
        Sum: 4
        Average: 1.33
    """
    lines = [f"'{digit}': {count}" for digit, count in zip(DIGITS, histogram.counts)]
    lines.append(f"Sum: {histogram.total}")
    if histogram.mean is None:
        lines.append("Average: n/a")
    else:
        lines.append(f"Average: {histogram.mean:.2f}")
    return "\n".join(lines)
