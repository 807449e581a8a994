"""Sleep for a period given as a duration string."""

from __future__ import annotations

import argparse
import re
import time

_UNITS = {
    "ns": 1,
    "us": 1_000,
    "µs": 1_000,
    "μs": 1_000,
    "ms": 1_000_000,
    "s": 1_000_000_000,
    "m": 60_000_000_000,
    "h": 3_600_000_000_000,
}
_PART_RE = re.compile(r"(\d*)(?:\.(\d*))?(ns|us|µs|μs|ms|s|m|h)")


def parse_duration(text: str) -> float:
    """Parse a duration such as "1.5s" or "2h45m" into seconds."""
    error = ValueError(f'time: invalid duration "{text}"')
    s = text
    negative = s.startswith("-")
    if s[:1] in "+-" and s:
        s = s[1:]
    if s == "0":
        return 0.0
    if not s:
        raise error
    total = 0
    pos = 0
    while pos < len(s):
        match = _PART_RE.match(s, pos)
        if not match:
            raise error
        whole, frac, unit = match.groups()
        if not whole and not frac:
            raise error
        scale = _UNITS[unit]
        total += int(whole or "0") * scale
        if frac:
            total += int(frac) * scale // 10 ** len(frac)
        pos = match.end()
    return (-total if negative else total) / 1e9


def _with_fraction(value: int, unit: int) -> str:
    whole, frac = divmod(value, unit)
    if not frac:
        return str(whole)
    digits = str(frac).rjust(len(str(unit)) - 1, "0").rstrip("0")
    return f"{whole}.{digits}"


def format_duration(seconds: float) -> str:
    """Format seconds like "1h2m3.5s", "500ms" or "0s"."""
    ns = round(seconds * 1e9)
    if ns == 0:
        return "0s"
    sign = "-" if ns < 0 else ""
    ns = abs(ns)
    if ns < 1_000:
        return f"{sign}{ns}ns"
    if ns < 1_000_000:
        return f"{sign}{_with_fraction(ns, 1_000)}µs"
    if ns < 1_000_000_000:
        return f"{sign}{_with_fraction(ns, 1_000_000)}ms"
    hours, rest = divmod(ns, _UNITS["h"])
    minutes, rest = divmod(rest, _UNITS["m"])
    secs = _with_fraction(rest, _UNITS["s"]) + "s"
    if hours:
        return f"{sign}{hours}h{minutes}m{secs}"
    if minutes:
        return f"{sign}{minutes}m{secs}"
    return sign + secs


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(description="Sleep for a period.")
    parser.add_argument("-period", "--period", type=parse_duration,
                        default=1.0, help="sleep period")
    args = parser.parse_args(argv)
    print(f"Sleeping for {format_duration(args.period)}...", end="", flush=True)
    time.sleep(max(args.period, 0.0))
    print()