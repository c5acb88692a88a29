"""Performance profiling utilities for ad_creative_tools algorithms."""

import inspect
import time
from collections.abc import Awaitable, Callable
from functools import wraps
from typing import ParamSpec, TypeVar, cast

from loguru import logger

P = ParamSpec("P")
R = TypeVar("R")


def timed(func: Callable[P, R]) -> Callable[P, R]:
    """Decorator to measure and log execution time of algorithm functions.

    Logs the function name and execution time at INFO level. Works for
    plain functions and coroutine functions alike.

    Usage:
        @timed
        def composite_resize(source, width, height):
            ...
    """

    if inspect.iscoroutinefunction(func):

        @wraps(func)
        async def async_wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            start_time = time.perf_counter()
            try:
                return await cast(Callable[P, Awaitable[R]], func)(*args, **kwargs)
            finally:
                _log_elapsed(func, start_time)

        return cast(Callable[P, R], async_wrapper)

    @wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        start_time = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            _log_elapsed(func, start_time)

    return wrapper


def _log_elapsed(func: Callable[..., object], start_time: float) -> None:
    elapsed_time = time.perf_counter() - start_time
    logger.info(f"[PROFILE] {func.__qualname__} took {elapsed_time:.3f}s")
