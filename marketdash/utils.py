"""Shared utilities."""

from __future__ import annotations

import asyncio
import contextvars
import math
from concurrent.futures import ThreadPoolExecutor
from contextlib import contextmanager
from functools import partial, wraps
from typing import Awaitable, Callable, Iterator, ParamSpec, TypeVar

_P = ParamSpec("_P")
_R = TypeVar("_R")

# Executor used by async_threadable calls; None means the loop's default pool.
_executor: contextvars.ContextVar[ThreadPoolExecutor | None] = contextvars.ContextVar(
    "marketdash_executor", default=None
)


def async_threadable(fn: Callable[_P, _R]) -> Callable[_P, Awaitable[_R]]:
    """Decorator that runs a blocking provider call in a worker thread.

    The decorated function becomes async, so several lookups can be in flight
    at once while the event loop stays free. Calls go to the executor set by
    ``dedicated_executor`` when one is active, else to the loop's default pool.
    """

    @wraps(fn)
    async def wrapper(*args: _P.args, **kwargs: _P.kwargs) -> _R:
        loop = asyncio.get_running_loop()
        ctx = contextvars.copy_context()
        call = partial(ctx.run, fn, *args, **kwargs)
        return await loop.run_in_executor(_executor.get(), call)

    return wrapper  # type: ignore[return-value]


@contextmanager
def dedicated_executor(max_workers: int, thread_name_prefix: str = "marketdash") -> Iterator[ThreadPoolExecutor]:
    """Route async_threadable calls made in this context to a private thread pool.

    Tasks created inside the block inherit the pool. On exit the pool is shut
    down without waiting, so calls still stuck upstream never hold a thread of
    the shared default pool.
    """
    pool = ThreadPoolExecutor(max_workers=max(1, max_workers), thread_name_prefix=thread_name_prefix)
    token = _executor.set(pool)
    try:
        yield pool
    finally:
        _executor.reset(token)
        pool.shutdown(wait=False, cancel_futures=True)


def safe_float(val: object, decimals: int | None = None, multiplier: float = 1) -> float | None:
    """Convert a provider value to a JSON-safe float, or None if missing/invalid."""
    if val is None or isinstance(val, bool):
        return None
    try:
        f = float(val)  # type: ignore[arg-type]  # Yahoo returns mixed types
    except (TypeError, ValueError):
        return None
    if math.isnan(f) or math.isinf(f):
        return None
    f *= multiplier
    return round(f, decimals) if decimals is not None else f
