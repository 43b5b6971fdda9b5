"""Imports for package microbench."""

from microbench.api import benchmark
from microbench.errors import MicrobenchError, PreconditionError
from microbench.formatting import format_time
from microbench.result import TimeitResult
from microbench.timer import measure, measure_loops, suggest_loops

import microbench.config as config

__version__ = "0.1.0"

__all__ = [
    "MicrobenchError",
    "PreconditionError",
    "TimeitResult",
    "benchmark",
    "config",
    "format_time",
    "measure",
    "measure_loops",
    "suggest_loops",
]
