"""Логирование прикладного слоя.

Библиотечные модули (src.core, src.analysis) не логируют: это чистые функции.
"""

import logging
from typing import Dict

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_LOGGER_CACHE: Dict[str, logging.Logger] = {}


def get_logger(name: str) -> logging.Logger:
    """Логгер с одним stream handler (без дублирования при повторных вызовах)."""
    logger = _LOGGER_CACHE.get(name)
    if logger:
        return logger

    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False

    _LOGGER_CACHE[name] = logger
    return logger


def configure_logging(level: str) -> None:
    """Установка уровня для всех логгеров, выданных get_logger."""
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"unknown log level: {level}")

    # Уровень корневого логгера пакета наследуют и ещё не созданные логгеры
    logging.getLogger("src").setLevel(numeric_level)
    for logger in _LOGGER_CACHE.values():
        logger.setLevel(numeric_level)
