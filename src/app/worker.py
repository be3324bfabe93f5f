"""Вынос одного вычисления из интерактивного потока.

Библиотека не опрашивает отмену: вычисление нельзя прервать. По таймауту
вызывающий лишь перестаёт ждать. Брошенный поток доработает в фоне, а его
результат будет отброшен.

Поток воркера daemon: выход интерпретатора его не ждёт.

- run_in_worker: синхронное ожидание Future
- compute_async: asyncio-вариант поверх того же Future
"""

import asyncio
import threading
from concurrent.futures import Future
from concurrent.futures import TimeoutError as FutureTimeoutError
from typing import Callable, Optional, TypeVar

from src.app.logging_setup import get_logger

logger = get_logger(__name__)

T = TypeVar("T")

WORKER_THREAD_NAME = "forge-worker"


class ComputationTimeout(TimeoutError):
    """Вычисление не завершилось за отведённое время и было брошено."""

    def __init__(self, timeout: float):
        super().__init__(f"computation did not finish within {timeout:g} s")
        self.timeout = timeout


def start_worker(func: Callable[..., T], *args) -> "Future[T]":
    """Запуск func(*args) в daemon-потоке.

    Результат или исключение func доставляются через возвращённый Future.
    """
    future: "Future[T]" = Future()

    def _run() -> None:
        if not future.set_running_or_notify_cancel():
            return
        try:
            result = func(*args)
        except BaseException as exc:
            future.set_exception(exc)
        else:
            future.set_result(result)

    threading.Thread(target=_run, name=WORKER_THREAD_NAME, daemon=True).start()
    return future


def _raised_timeout(future: Future) -> bool:
    """TimeoutError бросила сама func, а не ожидание."""
    return future.done() and not future.cancelled() and isinstance(future.exception(), TimeoutError)


def _abandon(func: Callable, timeout: float) -> ComputationTimeout:
    logger.warning("Abandoning %s after %.3g s", getattr(func, "__name__", func), timeout)
    return ComputationTimeout(timeout)


def run_in_worker(func: Callable[..., T], *args, timeout: Optional[float] = None) -> T:
    """Выполнение func(*args) в отдельном потоке с ожиданием результата.

    Исключения func пробрасываются вызывающему без изменений.

    Raises:
        ComputationTimeout: если timeout истёк раньше завершения
    """
    future = start_worker(func, *args)
    try:
        return future.result(timeout=timeout)
    except FutureTimeoutError:
        if _raised_timeout(future):
            raise
        raise _abandon(func, timeout) from None


async def compute_async(func: Callable[..., T], *args, timeout: Optional[float] = None) -> T:
    """Асинхронный вариант run_in_worker.

    Ждёт тот же daemon-поток, что и run_in_worker.

    Raises:
        ComputationTimeout: если timeout истёк раньше завершения
    """
    future = start_worker(func, *args)
    try:
        return await asyncio.wait_for(asyncio.wrap_future(future), timeout=timeout)
    except asyncio.TimeoutError:
        if _raised_timeout(future):
            raise
        raise _abandon(func, timeout) from None
