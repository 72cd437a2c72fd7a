"""Замер времени генерации: декоратор timeit с размером результата."""

from __future__ import annotations

import functools
import logging
import time
from typing import Any, Callable, Optional, TypeVar, cast

F = TypeVar("F", bound=Callable[..., Any])

logger = logging.getLogger("graphgen.perf")


def timeit(
    name: str | None = None,
    count: Optional[Callable[[Any], int]] = None,
    unit: str = "edges",
) -> Callable[[F], F]:
    """Log wall time of the call in ms.

    ``count`` maps the return value to a size (e.g. ``len`` for an edge list),
    logged next to the duration as ``<n> <unit>`` together with the rate.
    Failures are logged with their duration and re-raised.
    """
    def deco(fn: F) -> F:
        label = name or fn.__qualname__

        @functools.wraps(fn)
        def wrapper(*args: Any, **kwargs: Any):
            t0 = time.perf_counter()
            try:
                result = fn(*args, **kwargs)
            except Exception as exc:
                dt = (time.perf_counter() - t0) * 1000.0
                logger.warning("%s: failed after %.1f ms (%s)", label, dt, type(exc).__name__)
                raise
            dt = (time.perf_counter() - t0) * 1000.0
            if count is None:
                logger.info("%s: %.1f ms", label, dt)
            else:
                size = int(count(result))
                rate = size / (dt / 1000.0) if dt > 0 else float("inf")
                logger.info("%s: %.1f ms, %d %s (%.0f %s/s)", label, dt, size, unit, rate, unit)
            return result

        return cast(F, wrapper)

    return deco
