"""Concurrency-safe memoization of a function, and helpers that exercise it."""

from __future__ import annotations

import sys
import threading
import time
import urllib.request
from typing import Any, Callable, Iterable, TextIO

from .sleep import format_duration


class _Entry:
    """A cache slot that becomes ready once its value has been computed."""

    def __init__(self) -> None:
        self.ready = threading.Event()
        self.value: Any = None
        self.error: BaseException | None = None


class Memo:
    """Caches the results, values or exceptions, of calling f.

    Requests for different keys run in parallel; concurrent requests for
    the same key wait for the first one to finish instead of repeating it.
    """

    def __init__(self, f: Callable[[str], Any]):
        self._f = f
        self._lock = threading.Lock()
        self._cache: dict[str, _Entry] = {}
        self._closed = False

    def get(self, key: str) -> Any:
        """Return f(key), computing it at most once; re-raise a cached error."""
        with self._lock:
            if self._closed:
                raise RuntimeError("memo is closed")
            entry = self._cache.get(key)
            owner = entry is None
            if owner:
                entry = _Entry()
                self._cache[key] = entry
        if owner:
            try:
                entry.value = self._f(key)
            except BaseException as err:  # cached and re-raised to every caller
                entry.error = err
            finally:
                entry.ready.set()
        else:
            entry.ready.wait()
        if entry.error is not None:
            raise entry.error
        return entry.value

    def close(self) -> None:
        """Refuse further requests."""
        with self._lock:
            self._closed = True

    def __enter__(self) -> "Memo":
        return self

    def __exit__(self, *exc) -> None:
        self.close()


def http_get_body(url: str) -> bytes:
    """Fetch url and return the response body."""
    with urllib.request.urlopen(url) as response:
        return response.read()


def _fetch(memo: Memo, url: str, out: TextIO, lock: threading.Lock) -> int | None:
    start = time.monotonic()
    try:
        value = memo.get(url)
    except Exception as err:
        print(f"memo: {err}", file=sys.stderr)
        return None
    elapsed = time.monotonic() - start
    with lock:
        print(f"{url}, {format_duration(elapsed)}, {len(value)} bytes", file=out)
    return len(value)


def sequential(memo: Memo, urls: Iterable[str], out: TextIO | None = None) -> list[tuple[str, int]]:
    """Fetch each url in turn through memo; return (url, size) for each success."""
    out = out if out is not None else sys.stdout
    lock = threading.Lock()
    results = []
    for url in urls:
        size = _fetch(memo, url, out, lock)
        if size is not None:
            results.append((url, size))
    return results


def concurrent(memo: Memo, urls: Iterable[str], out: TextIO | None = None) -> list[tuple[str, int]]:
    """Fetch every url in its own thread; return (url, size) in completion order."""
    out = out if out is not None else sys.stdout
    lock = threading.Lock()
    results: list[tuple[str, int]] = []

    def work(url: str) -> None:
        size = _fetch(memo, url, out, lock)
        if size is not None:
            with lock:
                results.append((url, size))

    workers = [threading.Thread(target=work, args=(url,)) for url in urls]
    for worker in workers:
        worker.start()
    for worker in workers:
        worker.join()
    return results