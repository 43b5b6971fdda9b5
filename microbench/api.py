"""High level entry point that times a callable and prints a report."""

from __future__ import annotations

import logging
import sys
import time
from collections.abc import Iterable
from typing import TextIO

from tqdm import tqdm

from microbench import config
from microbench.result import StdDivisor, TimeitResult
from microbench.timer import Clock, Operation, measure_loops, suggest_loops
from microbench.validation import assert_positive

_LOGGER = logging.getLogger(__name__)


def benchmark(
    label: str,
    func: Operation,
    *,
    loops: int | None = None,
    iterations: int = config.DEFAULT_ITERATIONS,
    precision: int = config.DEFAULT_PRECISION,
    std_divisor: StdDivisor = "requested",
    progress: bool = False,
    file: TextIO | None = None,
    clock: Clock = time.perf_counter_ns,
) -> TimeitResult:
    """Time `func` over several iterations of loops and print the statistics.

    Good for measuring very fast functions.

    Example::

        benchmark("add", lambda: 2 + 2)
        benchmark("add", lambda: 2 + 2, loops=100, iterations=10)

    Parameters
    ----------
    label : str
        Name printed at the start of the report.

    func : callable
        Zero-argument callable to time. Calls that raise an exception are
        dropped from the statistics.

    loops : None or int, optional
        Number of calls per iteration. If ``None``, a value is picked via
        :func:`~microbench.timer.suggest_loops`.

    iterations : int, optional
        Number of independent passes of `loops` calls.

    precision : int, optional
        Significant digits of the printed times.

    std_divisor : {'requested', 'recorded'}, optional
        See :meth:`~microbench.result.TimeitResult.from_loop_times`.

    progress : bool, optional
        Whether to show a ``tqdm`` progress bar over the iterations.

    file : None or file-like, optional
        Where to print the report. Defaults to ``sys.stdout``.

    clock : callable, optional
        Monotonic clock returning integer nanoseconds.

    Returns
    -------
    TimeitResult
        The statistics that were printed.

    """
    assert_positive(precision, "precision")
    if iterations <= 0:
        raise ValueError("iterations must be > 0")
    if loops is not None and loops <= 0:
        raise ValueError("loops must be > 0")
    if loops is None:
        loops = suggest_loops(func, clock=clock)
        _LOGGER.debug("%s: using suggested loop count %d", label, loops)

    passes: Iterable[int] = range(iterations)
    if progress:
        passes = tqdm(passes, desc=label, unit="iter", leave=False, dynamic_ncols=True)

    iter_loop_times = [measure_loops(loops, func, clock=clock) for _ in passes]

    result = TimeitResult.from_loop_times(
        label,
        loops,
        iterations,
        iter_loop_times,
        precision=precision,
        std_divisor=std_divisor,
    )
    print(result, file=file if file is not None else sys.stdout)
    return result


__all__ = ["benchmark"]
