"""Print the text of selected elements of an XML document."""

from __future__ import annotations

import sys
from typing import IO, Iterator, Sequence
from xml.parsers import expat

_CHUNK = 65536


def contains_all(x: Sequence[str], y: Sequence[str]) -> bool:
    """Report whether x contains the elements of y, in order."""
    remaining = iter(x)
    return all(any(a == b for a in remaining) for b in y)


def select(source, names: Sequence[str]) -> Iterator[str]:
    """Yield "stack: text" for each text run whose element stack contains names.

    source may be bytes, str or a readable stream; malformed input raises
    xml.parsers.expat.ExpatError.
    """
    names = list(names)
    stack: list[str] = []
    text: list[str] = []
    pending: list[str] = []

    def flush() -> None:
        if text:
            data = "".join(text)
            text.clear()
            if contains_all(stack, names):
                pending.append(f"{' '.join(stack)}: {data}")

    def start(name, attrs) -> None:
        flush()
        stack.append(name.rpartition(" ")[2])

    def end(name) -> None:
        flush()
        stack.pop()

    parser = expat.ParserCreate(namespace_separator=" ")
    parser.StartElementHandler = start
    parser.EndElementHandler = end
    parser.CharacterDataHandler = text.append
    parser.CommentHandler = lambda data: flush()
    parser.ProcessingInstructionHandler = lambda target, data: flush()

    if isinstance(source, (bytes, str)):
        parser.Parse(source, False)
        yield from pending
        pending.clear()
    else:
        while chunk := source.read(_CHUNK):
            parser.Parse(chunk, False)
            yield from pending
            pending.clear()
    parser.Parse(b"", True)
    flush()
    yield from pending


def main(argv=None) -> None:
    names = sys.argv[1:] if argv is None else list(argv)
    stream: IO[bytes] = sys.stdin.buffer
    try:
        for line in select(stream, names):
            print(line)
    except expat.ExpatError as err:
        print(f"xmlselect: {err}", file=sys.stderr)
        raise SystemExit(1)