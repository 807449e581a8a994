"""SHA digests of standard input and bit differences between digests."""

from __future__ import annotations

import hashlib
import sys

_ALGORITHMS = {"sha256": hashlib.sha256, "sha384": hashlib.sha384, "sha512": hashlib.sha512}
_FLAGS = {"-sha384": "sha384", "-sha512": "sha512"}


def bits_difference(x: bytes, y: bytes) -> int:
    """Count the bits that differ between two equal-length byte strings."""
    if len(x) != len(y):
        raise ValueError(f"length mismatch: {len(x)} != {len(y)}")
    return sum((a ^ b).bit_count() for a, b in zip(x, y))


def digest(data: bytes, algorithm: str = "sha256") -> str:
    """Return the hex digest of data using sha256, sha384 or sha512."""
    try:
        hasher = _ALGORITHMS[algorithm]
    except KeyError:
        raise ValueError(f"unknown algorithm: {algorithm}") from None
    return hasher(data).hexdigest()


def main(argv=None) -> None:
    args = sys.argv[1:] if argv is None else list(argv)
    data = sys.stdin.buffer.read()
    if not args:
        print(digest(data))
        return
    for arg in args:
        print(digest(data, _FLAGS.get(arg, "sha256")))