"""A rocket-launch countdown that can be aborted."""

from __future__ import annotations

import argparse
import sys
import threading
import time
from typing import TextIO


def launch(out: TextIO | None = None) -> None:
    print("Lift off!", file=out if out is not None else sys.stdout)


def run_countdown(count: int = 10, abort: threading.Event | None = None,
                  interval: float = 1.0, out: TextIO | None = None) -> bool:
    """Count down and launch; return False if abort was set first."""
    out = out if out is not None else sys.stdout
    if abort is None:
        print("Commencing countdown.", file=out)
    else:
        print("Commencing countdown.  Press return to abort.", file=out)
    for n in range(count, 0, -1):
        print(n, file=out, flush=True)
        if abort is None:
            time.sleep(interval)
        elif abort.wait(interval):
            print("Launch aborted!", file=out)
            return False
    launch(out)
    return True


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(description="Count down to a launch.")
    parser.add_argument("--count", type=int, default=10)
    parser.add_argument("--interval", type=float, default=1.0)
    parser.add_argument("--no-abort", action="store_true",
                        help="do not watch standard input for an abort")
    args = parser.parse_args(argv)
    abort = None
    if not args.no_abort:
        abort = threading.Event()

        def watch() -> None:
            sys.stdin.read(1)
            abort.set()

        threading.Thread(target=watch, daemon=True).start()
    run_countdown(args.count, abort, args.interval)