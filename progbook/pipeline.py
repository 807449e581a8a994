"""A three-stage pipeline: count, square and print."""

from __future__ import annotations

import argparse
import itertools
import sys
from typing import Iterable, Iterator, TextIO


def counter(limit: int | None = None) -> Iterator[int]:
    """Yield 0, 1, 2, ... below limit, or forever when limit is None."""
    return iter(range(limit)) if limit is not None else itertools.count()


def squarer(values: Iterable[int]) -> Iterator[int]:
    """Yield the square of each value."""
    for v in values:
        yield v * v


def printer(values: Iterable[int], out: TextIO | None = None) -> None:
    """Print each value on its own line."""
    out = out if out is not None else sys.stdout
    for v in values:
        print(v, file=out)


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(description="Print squares of natural numbers.")
    parser.add_argument("--limit", type=int, default=100)
    parser.add_argument("--infinite", action="store_true", help="never stop counting")
    args = parser.parse_args(argv)
    printer(squarer(counter(None if args.infinite else args.limit)))