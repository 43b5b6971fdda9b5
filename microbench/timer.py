"""Measure how long a callable takes.

All durations are integer nanoseconds taken from a monotonic clock. The clock
can be swapped via the `clock` keyword of every function, which is mainly
useful for deterministic tests.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable

from microbench import config

Clock = Callable[[], int]
Operation = Callable[[], object]

_LOGGER = logging.getLogger(__name__)


def measure(func: Operation, *, clock: Clock = time.perf_counter_ns) -> int | None:
    """Time a single call of `func`.

    Parameters
    ----------
    func : callable
        Zero-argument callable to time. Its return value is ignored.

    clock : callable, optional
        Monotonic clock returning integer nanoseconds.

    Returns
    -------
    int or None
        Elapsed nanoseconds, or ``None`` if `func` raised an exception. A
        failed call does not produce a sample.

    """
    start = clock()
    try:
        func()
    except Exception as exc:
        _LOGGER.debug("Dropping sample, %r raised %r", func, exc)
        return None
    return clock() - start


def measure_loops(
    loops: int, func: Operation, *, clock: Clock = time.perf_counter_ns
) -> list[int]:
    """Call `func` `loops` times and return the duration of each call.

    Failed calls are skipped and the remaining loops still run, hence the
    result may contain fewer than `loops` entries. Order is execution order.
    """
    durations: list[int] = []
    for _ in range(loops):
        elapsed = measure(func, clock=clock)
        if elapsed is not None:
            durations.append(elapsed)
    return durations


def suggest_loops(
    func: Operation,
    *,
    clock: Clock = time.perf_counter_ns,
    max_exponent: int = config.SUGGEST_MAX_EXPONENT,
    target_ns: int = config.SUGGEST_TARGET_NS,
) -> int:
    """Suggest a loop count for `func`.

    Runs `func` ``10**0``, ``10**1``, ... times until the cumulative runtime of
    one probe reaches `target_ns` and returns the exponent index ``e`` (1-based)
    of that probe, i.e. ``e`` and not ``10**(e-1)``. If no probe up to
    `max_exponent` reaches the target, ``1`` is returned.

    Parameters
    ----------
    func : callable
        Zero-argument callable to time.

    clock : callable, optional
        Monotonic clock returning integer nanoseconds.

    max_exponent : int, optional
        Number of probes to run at most.

    target_ns : int, optional
        Cumulative runtime in nanoseconds that a probe has to reach.

    Returns
    -------
    int
        Suggested number of loops.

    """
    for exponent in range(1, max_exponent + 1):
        number = 10 ** (exponent - 1)
        elapsed = sum(measure_loops(number, func, clock=clock))
        if elapsed >= target_ns:
            _LOGGER.debug(
                "Probe of %d loops took %d ns, suggesting %d loops", number, elapsed, exponent
            )
            return exponent
    _LOGGER.debug("No probe reached %d ns, suggesting 1 loop", target_ns)
    return 1


__all__ = ["Clock", "Operation", "measure", "measure_loops", "suggest_loops"]
