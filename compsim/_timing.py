import time
from typing import Callable, TypeVar

T = TypeVar("T")


def measure(fn: Callable[..., T], *args, **kwargs) -> tuple[T, int]:
    """Call ``fn`` once and return ``(result, elapsed_ns)``.

    The clock is :func:`time.perf_counter_ns`, read immediately before and
    after the call. If ``fn`` raises, the exception propagates and no
    duration is produced.
    """
    start = time.perf_counter_ns()
    result = fn(*args, **kwargs)
    elapsed = time.perf_counter_ns() - start
    return result, elapsed


def ns_to_ms(ns: float) -> float:
    return ns / 1_000_000.0
