"""Lazy iterators with a known length, and permutations built on them."""

from __future__ import annotations

import math
from typing import Generic, Iterable, Iterator, Sequence, TypeVar

T = TypeVar("T")


class Iter(Generic[T]):
    """An iterator that knows how many values it can produce.

    count is the number of values the iterator was created to produce.
    infinite marks an iterator that cannot be turned into a list.
    """

    def __init__(self, source: Iterable[T], count: int, infinite: bool = False):
        self._items: Iterator[T] = iter(source)
        self.count = count
        self.infinite = infinite
        self._closed = False

    def __iter__(self) -> "Iter[T]":
        return self

    def __next__(self) -> T:
        if self._closed:
            raise StopIteration
        return next(self._items)

    def to_list(self) -> list[T]:
        """Return the remaining values as a list."""
        if self.infinite:
            raise ValueError("an infinite iterator cannot be a list")
        return list(self)

    def close(self) -> None:
        """Stop the iterator; it produces no further values."""
        self._closed = True
        closer = getattr(self._items, "close", None)
        if closer is not None:
            closer()


def new(*args: T) -> Iter[T]:
    """Return an iterator over the given values."""
    return Iter(args, len(args))


def empty() -> Iter:
    """Return an iterator that is already exhausted."""
    result: Iter = Iter((), 0)
    result.close()
    return result


def permutation_count(n: int, k: int) -> int:
    """Return the number of ordered selections of k out of n elements: n!/(n-k)!."""
    return math.prod(range(n - k + 1, n + 1))


def permutations(symbols: Sequence[T], limit: int) -> Iter[list[T]]:
    """Return an iterator over every ordered selection of limit symbols."""
    if limit < 0:
        raise ValueError(f"limit must not be negative: {limit}")
    if limit > len(symbols):
        return empty()
    symbols = list(symbols)
    arr = list(range(len(symbols)))

    def backtrack(first: int) -> Iterator[list[T]]:
        if first == limit:
            yield [symbols[i] for i in arr[:limit]]
            return
        for i in range(first, len(arr)):
            arr[first], arr[i] = arr[i], arr[first]
            yield from backtrack(first + 1)
            arr[first], arr[i] = arr[i], arr[first]

    return Iter(backtrack(0), permutation_count(len(symbols), limit))