"""
PrecisionMode — режим точности комбинаторных вычислений

BOUNDED: знаковое 64-битное целое, молчаливый wraparound при переполнении
ARBITRARY: точное целое произвольной длины
"""

from enum import Enum


class PrecisionMode(str, Enum):
    """
    Режим точности вычисления.

    Оба режима реализуют одно и то же математическое определение и совпадают,
    пока точный результат помещается в Int64.
    """

    BOUNDED = "bounded"
    ARBITRARY = "arbitrary"
