"""Descriptive statistics of a timing matrix."""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Literal

import numpy as np

from microbench import config
from microbench.formatting import format_time
from microbench.validation import assert_positive, assert_timing_matrix

StdDivisor = Literal["requested", "recorded"]

_LOGGER = logging.getLogger(__name__)

_CACHE_WARNING = (
    "The slowest run took {diff} times longer than the fastest.\n"
    "    This could mean that an intermediate result is being cached."
)


@dataclass(frozen=True)
class TimeitResult:
    """Statistics of the time a callable took over several iterations of loops.

    Instances are snapshots and should be created via
    :meth:`TimeitResult.from_loop_times`. All times are in nanoseconds.

    Attributes
    ----------
    label : str
        Name of the timed callable.

    loops : int
        Requested number of loops per iteration.

    iterations : int
        Requested number of iterations.

    success_count : int
        Number of samples that were actually recorded. Lower than
        ``loops * iterations`` if the callable failed in some loops.

    iter_loop_times : tuple of tuple of int
        Raw duration of each recorded loop, grouped by iteration.

    per_iter_time : tuple of int
        Sum of the durations of each iteration.

    per_iter_mean_time : tuple of float
        Mean duration of a loop within each iteration. ``nan`` for
        iterations without any recorded sample.

    total : int
        Sum of all durations.

    mean : float
        Unweighted mean of `per_iter_mean_time`, i.e. every iteration counts
        as one trial, no matter how many samples it recorded.

    std_dev : float
        Population standard deviation of all samples around `mean`.

    best, worst : int
        Lowest and highest single sample.

    diff : float or None
        ``worst / best`` rounded to two decimals. ``None`` if `best` is zero.

    warning : str or None
        Caching warning, set if `diff` exceeds
        :data:`~microbench.config.CACHE_WARNING_RATIO`.

    """

    label: str
    loops: int
    iterations: int
    success_count: int
    iter_loop_times: tuple[tuple[int, ...], ...] = field(repr=False)
    per_iter_time: tuple[int, ...] = field(repr=False)
    per_iter_mean_time: tuple[float, ...] = field(repr=False)
    total: int
    mean: float
    std_dev: float
    best: int
    worst: int
    diff: float | None
    warning: str | None
    precision: int = config.DEFAULT_PRECISION

    @classmethod
    def from_loop_times(
        cls,
        label: str,
        loops: int,
        iterations: int,
        iter_loop_times: Sequence[Sequence[int]],
        *,
        precision: int = config.DEFAULT_PRECISION,
        std_divisor: StdDivisor = "requested",
    ) -> TimeitResult:
        """Compute the statistics of a timing matrix.

        Parameters
        ----------
        label : str
            Name of the timed callable.

        loops : int
            Requested number of loops per iteration.

        iterations : int
            Requested number of iterations. Must equal ``len(iter_loop_times)``.

        iter_loop_times : sequence of sequence of int
            Durations in nanoseconds, one inner sequence per iteration. Must
            not be empty.

        precision : int, optional
            Significant digits used by ``str()``. Must be ``> 0``.

        std_divisor : {'requested', 'recorded'}, optional
            Divisor of the variance. ``requested`` divides by
            ``loops * iterations`` even if some loops failed and thereby
            underestimates the deviation in that case. ``recorded`` divides
            by `success_count`.

        Returns
        -------
        TimeitResult
            The computed statistics.

        """
        assert_timing_matrix(iter_loop_times, iterations)
        assert_positive(precision, "precision")
        if std_divisor not in ("requested", "recorded"):
            raise ValueError(
                f"Expected std_divisor to be 'requested' or 'recorded', got {std_divisor!r}."
            )

        # sums, best and worst stay exact python ints, numpy only sees floats
        loop_times_int = tuple(
            tuple(int(value) for value in loop_times) for loop_times in iter_loop_times
        )
        non_empty = [loop_times for loop_times in loop_times_int if loop_times]

        success_count = sum(len(loop_times) for loop_times in loop_times_int)
        per_iter_time = tuple(sum(loop_times) for loop_times in loop_times_int)
        per_iter_mean_time = tuple(
            iter_time / len(loop_times) if loop_times else math.nan
            for iter_time, loop_times in zip(per_iter_time, loop_times_int)
        )
        total = sum(per_iter_time)

        if non_empty:
            mean = float(np.mean([value for value in per_iter_mean_time if not math.isnan(value)]))
            samples = np.asarray(
                [value for loop_times in non_empty for value in loop_times], dtype=np.float64
            )
            best = min(min(loop_times) for loop_times in non_empty)
            worst = max(max(loop_times) for loop_times in non_empty)
        else:
            _LOGGER.debug("%s: no sample was recorded in any iteration", label)
            mean = 0.0
            samples = np.zeros((0,), dtype=np.float64)
            best = 0
            worst = 0

        divisor = loops * iterations if std_divisor == "requested" else success_count
        if divisor > 0:
            std_dev = math.sqrt(float(np.sum((samples - mean) ** 2)) / divisor)
        else:
            std_dev = 0.0

        diff = _diff_ratio(best, worst)
        if diff is None:
            _LOGGER.debug("%s: best run took 0 ns, worst/best ratio is undefined", label)
        warning = None
        if diff is not None and diff > config.CACHE_WARNING_RATIO:
            warning = _CACHE_WARNING.format(diff=diff)

        return cls(
            label=label,
            loops=loops,
            iterations=iterations,
            success_count=success_count,
            iter_loop_times=loop_times_int,
            per_iter_time=per_iter_time,
            per_iter_mean_time=per_iter_mean_time,
            total=total,
            mean=mean,
            std_dev=std_dev,
            best=best,
            worst=worst,
            diff=diff,
            warning=warning,
            precision=precision,
        )

    def __str__(self) -> str:
        fmt = self.precision
        desc = (
            f"{self.label}: Loops: {self.loops}. "
            f"Iterations: {self.iterations}. "
            f"Success count: {self.success_count}.\n"
            f"    Total time taken: {format_time(self.total, fmt)}. "
            f"Mean: {format_time(self.mean, fmt)}. "
            f"Std Dev: {format_time(self.std_dev, fmt)}.\n"
            f"    Best: {format_time(self.best, fmt)}. "
            f"Worst: {format_time(self.worst, fmt)}"
        )
        if self.warning is not None:
            return f"{desc}\n{self.warning}"
        return desc


def _diff_ratio(best: int, worst: int) -> float | None:
    if best == 0:
        return None
    # round half away from zero; both values are non-negative
    return math.floor(worst * 100 / best + 0.5) / 100


__all__ = ["StdDivisor", "TimeitResult"]
