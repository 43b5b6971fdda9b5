"""Helper functions to validate input data and produce error messages."""

from __future__ import annotations

import numbers
from collections.abc import Iterable, Sequence
from typing import Any

from microbench.errors import PreconditionError


def convert_iterable_to_string_of_types(iterable_var: Iterable[Any]) -> str:
    """Convert an iterable of values to a string of their types.

    Parameters
    ----------
    iterable_var : iterable
        An iterable of variables, e.g. a list of integers.

    Returns
    -------
    str
        String representation of the types in `iterable_var`. One per item
        in `iterable_var`. Separated by commas.

    """
    types = [type(var_i).__name__ for var_i in iterable_var]
    return ", ".join(types)


def assert_positive(value: int, name: str) -> None:
    """Assert that the integer `value` is ``> 0``.

    Parameters
    ----------
    value : int
        The value to check.

    name : str
        Name of the argument, used in the error message.

    """
    if not _is_single_integer(value) or value <= 0:
        raise PreconditionError(f"Expected {name} to be an integer > 0, got {value!r}.")


def assert_timing_matrix(iter_loop_times: Sequence[Sequence[int]], iterations: int) -> None:
    """Assert that `iter_loop_times` is a usable timing matrix.

    Parameters
    ----------
    iter_loop_times : sequence of sequence of int
        Recorded durations in nanoseconds, one inner sequence per iteration.
        Inner sequences may be shorter than the requested loop count (or even
        empty) when the measured callable failed.

    iterations : int
        Number of iterations that were requested. Must match the number of
        inner sequences.

    """
    if len(iter_loop_times) == 0:
        raise PreconditionError("Expected a non-empty timing matrix, got zero iterations.")

    if len(iter_loop_times) != iterations:
        raise PreconditionError(
            f"Expected {iterations} iterations in the timing matrix, "
            f"got {len(iter_loop_times)}."
        )

    for idx, loop_times in enumerate(iter_loop_times):
        bad = [value for value in loop_times if not _is_single_integer(value)]
        if bad:
            raise PreconditionError(
                f"Expected integer nanosecond durations in iteration {idx}. "
                f"Got values of types: {convert_iterable_to_string_of_types(bad)}."
            )
        negative = [value for value in loop_times if value < 0]
        if negative:
            raise PreconditionError(
                f"Expected non-negative durations in iteration {idx}, got {negative[0]}."
            )


def _is_single_integer(val: Any) -> bool:
    return isinstance(val, numbers.Integral) and not isinstance(val, bool)
