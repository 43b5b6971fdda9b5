"""Human readable rendering of nanosecond durations."""

from __future__ import annotations

from microbench import config
from microbench.validation import assert_positive

# (upper bound exclusive, divisor, suffix); the last entry catches the rest
_UNITS: tuple[tuple[float, float, str], ...] = (
    (1e3, 1.0, "ns"),
    (1e6, 1e3, "µs"),
    (1e9, 1e6, "ms"),
)


def format_time(nanoseconds: float, precision: int = config.DEFAULT_PRECISION) -> str:
    """Format a duration given in nanoseconds.

    The unit is picked from the magnitude of the value (``ns``, ``µs``,
    ``ms`` or ``s``) and the scaled value is rendered with `precision`
    significant digits (``%g`` style, trailing zeros removed).

    Parameters
    ----------
    nanoseconds : int or float
        Duration in nanoseconds. Integer counts, floats (e.g. means) and numpy
        scalars are all accepted.

    precision : int, optional
        Number of significant digits. Must be ``> 0``.

    Returns
    -------
    str
        E.g. ``"1.5 µs"`` for ``1500``.

    Examples
    --------
    >>> format_time(500)
    '500 ns'
    >>> format_time(2_500_000)
    '2.5 ms'

    """
    assert_positive(precision, "precision")

    value = float(nanoseconds)
    for upper, divisor, suffix in _UNITS:
        if value < upper:
            return "%.*g %s" % (precision, value / divisor, suffix)
    return "%.*g s" % (precision, value / 1e9)


__all__ = ["format_time"]
