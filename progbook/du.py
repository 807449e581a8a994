"""Compute the disk usage of the files below one or more directories."""

from __future__ import annotations

import argparse
import os
import sys
import threading
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, Iterator

# Limits how many directories are read at the same time.
_SEMA = threading.BoundedSemaphore(20)


def _cancelled(cancel: threading.Event | None) -> bool:
    return cancel is not None and cancel.is_set()


def _dirents(directory: str, cancel: threading.Event | None) -> list[os.DirEntry]:
    """Return the entries of directory, or none if it cannot be read."""
    if _cancelled(cancel):
        return []
    with _SEMA:
        try:
            with os.scandir(directory) as entries:
                return list(entries)
        except OSError as err:
            print(f"du: {err}", file=sys.stderr)
            return []


def walk_dir(directory: str, cancel: threading.Event | None = None) -> Iterator[int]:
    """Yield the size of every file in the tree rooted at directory.

    Symbolic links are not followed. Traversal stops once cancel is set.
    """
    if _cancelled(cancel):
        return
    for entry in _dirents(directory, cancel):
        if _cancelled(cancel):
            return
        try:
            if entry.is_dir(follow_symlinks=False):
                yield from walk_dir(entry.path, cancel)
            else:
                yield entry.stat(follow_symlinks=False).st_size
        except OSError as err:
            print(f"du: {err}", file=sys.stderr)


def _tally(sizes: Iterable[int]) -> tuple[int, int]:
    nfiles = nbytes = 0
    for size in sizes:
        nfiles += 1
        nbytes += size
    return nfiles, nbytes


def disk_usage(roots: Iterable[str], cancel: threading.Event | None = None) -> tuple[int, int]:
    """Return (number of files, total bytes) below roots, walking them in parallel."""
    roots = list(roots)
    if not roots:
        return 0, 0
    with ThreadPoolExecutor(max_workers=len(roots)) as pool:
        results = list(pool.map(lambda root: _tally(walk_dir(root, cancel)), roots))
    return sum(n for n, _ in results), sum(b for _, b in results)


def format_usage(nfiles: int, nbytes: int) -> str:
    """Format totals as e.g. "12 files  0.3 GB"."""
    return f"{nfiles} files  {nbytes / 1e9:.1f} GB"


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(description="Report disk usage.")
    parser.add_argument("-v", action="store_true", dest="verbose",
                        help="show verbose progress messages")
    parser.add_argument("--interactive", action="store_true",
                        help="cancel the traversal when input arrives")
    parser.add_argument("roots", nargs="*")
    args = parser.parse_args(argv)
    roots = args.roots or ["."]

    cancel: threading.Event | None = None
    if args.interactive:
        cancel = threading.Event()

        def watch() -> None:
            sys.stdin.read(1)
            cancel.set()

        threading.Thread(target=watch, daemon=True).start()

    lock = threading.Lock()
    totals = [0, 0]
    finished = threading.Event()

    def walk_root(root: str) -> None:
        for size in walk_dir(root, cancel):
            with lock:
                totals[0] += 1
                totals[1] += size

    def run() -> None:
        with ThreadPoolExecutor(max_workers=len(roots)) as pool:
            list(pool.map(walk_root, roots))
        finished.set()

    threading.Thread(target=run, daemon=True).start()
    interval = 0.5 if args.verbose else None
    while not finished.wait(interval):
        if _cancelled(cancel):
            break
        with lock:
            print(format_usage(*totals))
    if _cancelled(cancel):
        return
    with lock:
        print(format_usage(*totals))