"""Helpers for deterministic timing tests.

Some of these functions might be useful outside of the test suite, e.g. to
benchmark code against a simulated clock.
"""

from __future__ import annotations

from collections.abc import Container, Sequence


class FakeClock:
    """Manually advanced clock returning integer nanoseconds."""

    def __init__(self, start: int = 0) -> None:
        self.now = start
        self.reads = 0

    def __call__(self) -> int:
        self.reads += 1
        return self.now

    def advance(self, nanoseconds: int) -> None:
        self.now += nanoseconds


class TickingOperation:
    """Callable that advances a :class:`FakeClock` on each call.

    Parameters
    ----------
    clock : FakeClock
        Clock to advance.

    durations : sequence of int
        Nanoseconds that call ``i`` takes, cycled if shorter than the number
        of calls.

    fail_on : container of int, optional
        1-based call numbers that raise ``RuntimeError`` instead of advancing
        the clock.

    """

    def __init__(
        self,
        clock: FakeClock,
        durations: Sequence[int],
        fail_on: Container[int] = (),
    ) -> None:
        self.clock = clock
        self.durations = durations
        self.fail_on = fail_on
        self.calls = 0

    def __call__(self) -> None:
        self.calls += 1
        if self.calls in self.fail_on:
            raise RuntimeError(f"call {self.calls} failed")
        self.clock.advance(self.durations[(self.calls - 1) % len(self.durations)])
