"""A writer that only counts the bytes written to it."""

from __future__ import annotations


class ByteCounter:
    """Counts bytes written; usable as a text or binary file target."""

    def __init__(self, count: int = 0):
        self.count = count

    def write(self, data) -> int:
        size = len(data.encode()) if isinstance(data, str) else len(data)
        self.count += size
        return len(data)

    def flush(self) -> None:
        return None

    def __int__(self) -> int:
        return self.count

    def __str__(self) -> str:
        return str(self.count)


def main(argv=None) -> None:
    c = ByteCounter()
    c.write(b"hello")
    print(c)
    c = ByteCounter()
    name = "Dolly"
    print(f"hello, {name}", end="", file=c)
    print(c)