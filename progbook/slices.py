"""In-place list and byte-string manipulations: reverse, rotate, dedupe, squeeze."""

from __future__ import annotations

import itertools
import re
from typing import MutableSequence

# The characters that count as Unicode white space.
_SPACE_RUN = re.compile(
    "[\t\n\v\f\r \x85\xa0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000]+"
)


def reverse(values: MutableSequence) -> None:
    """Reverse values in place."""
    values[:] = values[::-1]


def _shift(values: MutableSequence, r: int) -> int:
    if r < 0:
        raise ValueError(f"rotation must not be negative: {r}")
    if not values:
        raise ValueError("cannot rotate an empty sequence")
    return r % len(values)


def rotate_left(values: MutableSequence, r: int) -> None:
    """Rotate values left by r positions in place."""
    m = _shift(values, r)
    if m:
        values[:] = values[m:] + values[:m]


def rotate_right(values: MutableSequence, r: int) -> None:
    """Rotate values right by r positions in place."""
    m = _shift(values, r)
    if m:
        values[:] = values[-m:] + values[:-m]


def deduplicate(strings: MutableSequence[str]) -> MutableSequence[str]:
    """Remove adjacent duplicates from strings in place and return it."""
    strings[:] = [key for key, _ in itertools.groupby(strings)]
    return strings


def trim_space_string(text: str) -> str:
    """Replace each run of Unicode white space with one ASCII space."""
    return _SPACE_RUN.sub(" ", text)


def trim_space(data: bytes | bytearray) -> bytes | bytearray:
    """Squeeze white-space runs in UTF-8 data; a bytearray is changed in place."""
    text = bytes(data).decode("utf-8", "surrogateescape")
    squeezed = trim_space_string(text).encode("utf-8", "surrogateescape")
    if isinstance(data, bytearray):
        data[:] = squeezed
        return data
    return squeezed