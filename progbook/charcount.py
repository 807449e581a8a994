"""Count Unicode character categories and word frequencies."""

from __future__ import annotations

import argparse
import sys
import unicodedata
from collections import Counter
from enum import Enum
from typing import IO

from .slices import _SPACE_RUN

_UTF_MAX = 4
_REPLACEMENT = "\ufffd"


class Category(Enum):
    CONTROL = "Control"
    LETTER = "Letter"
    MARK = "Mark"
    NUMBER = "Number"
    SPACE = "Space"
    SYMBOL = "Symbol"

    def __str__(self) -> str:
        return self.value


def _read_text(stream: IO) -> str:
    data = stream.read()
    if isinstance(data, str):
        return data
    return bytes(data).decode("utf-8", "surrogateescape")


def _is_space(ch: str) -> bool:
    return ch in "\t\n\v\f\r \x85\xa0" or unicodedata.category(ch) in ("Zs", "Zl", "Zp")


def _classify(ch: str) -> Category | None:
    major = unicodedata.category(ch)
    if major == "Cc":
        return Category.CONTROL
    if major[0] == "L":
        return Category.LETTER
    if major[0] == "M":
        return Category.MARK
    if major[0] == "N":
        return Category.NUMBER
    if _is_space(ch):
        return Category.SPACE
    if major[0] == "S":
        return Category.SYMBOL
    return None


def char_count(stream: IO) -> tuple[dict[Category, int], list[int]]:
    """Count characters by category and UTF-8 encodings by length.

    Returns the non-zero category counts and a list whose element i is the
    number of characters encoded in i bytes (i from 0 to 4). Invalid bytes
    count as one-byte replacement characters.
    """
    counts: Counter = Counter()
    utf_len = [0] * (_UTF_MAX + 1)
    for ch in _read_text(stream):
        if "\udc80" <= ch <= "\udcff":
            ch, width = _REPLACEMENT, 1
        else:
            width = len(ch.encode("utf-8", "surrogatepass"))
        category = _classify(ch)
        if category is not None:
            counts[category] += 1
        utf_len[width] += 1
    return dict(counts), utf_len


def word_freq(stream: IO) -> dict[str, int]:
    """Count how often each white-space separated word occurs."""
    words = (word for word in _SPACE_RUN.split(_read_text(stream)) if word)
    return dict(Counter(words))


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(description="Count characters or words on standard input.")
    parser.add_argument("--words", action="store_true", help="count word frequencies")
    args = parser.parse_args(argv)
    if args.words:
        print("word\tfreq")
        for word, n in word_freq(sys.stdin.buffer).items():
            print(f"{word}\t\t{n}")
        return
    counts, utf_len = char_count(sys.stdin.buffer)
    print("category\tcount")
    for category, n in counts.items():
        print(f"{category}\t\t{n}")
    print("\nlen\tcount")
    for i, n in enumerate(utf_len[1:], start=1):
        print(f"{i}\t{n}")