#!/usr/bin/env python3
"""Command line front end.

Time one or more importable zero-argument callables given as
``module:function`` (attribute paths such as ``module:Class.method`` work too):

    python -m microbench os:getcwd
    python -m microbench -n 1000 -r 5 --label cwd os:getcwd time:monotonic
"""

from __future__ import annotations

import argparse
import functools
import importlib
import logging
from collections.abc import Callable, Sequence

from microbench import config
from microbench.api import benchmark


def resolve_target(target: str) -> Callable[[], object]:
    """Import the callable named by a ``module:attribute`` string.

    Parameters
    ----------
    target : str
        E.g. ``"os:getcwd"`` or ``"package.module:Class.method"``.

    Returns
    -------
    callable
        The resolved object.

    """
    module_name, sep, attr_path = target.partition(":")
    if not sep or not module_name or not attr_path:
        raise ValueError(f"Expected a target of the form 'module:function', got {target!r}.")

    module = importlib.import_module(module_name)
    try:
        func = functools.reduce(getattr, attr_path.split("."), module)
    except AttributeError as exc:
        raise ValueError(f"Could not resolve {attr_path!r} in module {module_name!r}.") from exc

    if not callable(func):
        raise ValueError(f"Expected {target!r} to be callable, got {type(func).__name__}.")
    return func


def _parse_args(argv: Sequence[str] | None) -> tuple[argparse.ArgumentParser, argparse.Namespace]:
    parser = argparse.ArgumentParser(
        prog="microbench",
        description="Time the execution of importable zero-argument callables.",
    )
    parser.add_argument("targets", nargs="+", metavar="MODULE:FUNCTION")
    parser.add_argument(
        "-n",
        "--loops",
        type=int,
        default=None,
        help="Calls per iteration; suggested automatically if omitted.",
    )
    parser.add_argument("-r", "--iterations", type=int, default=config.DEFAULT_ITERATIONS)
    parser.add_argument("-p", "--precision", type=int, default=config.DEFAULT_PRECISION)
    parser.add_argument(
        "--label",
        type=str,
        default="",
        help="Label of the report; defaults to the target. Only valid with a single target.",
    )
    parser.add_argument(
        "--std-divisor",
        choices=["requested", "recorded"],
        default="requested",
        help="Divide the variance by loops*iterations (requested) or by the "
        "number of successful calls (recorded).",
    )
    parser.add_argument("--progress", action="store_true")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser, parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> None:
    parser, args = _parse_args(argv)

    if args.label and len(args.targets) > 1:
        parser.error("--label can only be used with a single target")

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    # all targets are resolved before any of them is timed
    operations = []
    for target in args.targets:
        try:
            operations.append((target, resolve_target(target)))
        except (ImportError, ValueError) as exc:
            parser.error(str(exc))

    for target, operation in operations:
        benchmark(
            args.label or target,
            operation,
            loops=args.loops,
            iterations=args.iterations,
            precision=args.precision,
            std_divisor=args.std_divisor,
            progress=args.progress,
        )


if __name__ == "__main__":
    main()
