"""Library-wide defaults.

Every value here can be overridden per call via the keyword arguments of the
corresponding function.
"""

from __future__ import annotations

# Number of independent passes that `benchmark()` runs.
DEFAULT_ITERATIONS: int = 7

# Significant digits used when rendering times.
DEFAULT_PRECISION: int = 3

# `suggest_loops()` probes 10**0 .. 10**(SUGGEST_MAX_EXPONENT - 1) runs.
SUGGEST_MAX_EXPONENT: int = 10

# Cumulative runtime (ns) a probe must reach before its exponent is accepted.
SUGGEST_TARGET_NS: int = 1_000_000_000

# worst/best above this ratio adds a caching warning to the report.
CACHE_WARNING_RATIO: float = 2.0
