"""Celsius and Fahrenheit temperatures and a temperature option."""

from __future__ import annotations

import argparse
import re

from .eval import _format_g

_FLOAT_RE = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


class Celsius(float):
    """A temperature in degrees Celsius."""

    def __str__(self) -> str:
        return f"{_format_g(float(self))}°C"


class Fahrenheit(float):
    """A temperature in degrees Fahrenheit."""


def c_to_f(c: float) -> Fahrenheit:
    return Fahrenheit(c * 9.0 / 5.0 + 32.0)


def f_to_c(f: float) -> Celsius:
    return Celsius((f - 32.0) * 5.0 / 9.0)


def parse_celsius(text: str) -> Celsius:
    """Parse a quantity with a unit, e.g. "100C" or "212°F"."""
    value, unit = 0.0, ""
    match = _FLOAT_RE.match(text)
    if match:
        value = float(match.group(1))
        rest = text[match.end():].split()
        unit = rest[0] if rest else ""
    if unit in ("C", "°C"):
        return Celsius(value)
    if unit in ("F", "°F"):
        return f_to_c(Fahrenheit(value))
    raise ValueError(f'invalid temperature "{text}"')


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(description="Print a temperature.")
    parser.add_argument("-temp", "--temp", type=parse_celsius,
                        default=Celsius(20.0), help="the temperature")
    args = parser.parse_args(argv)
    print(args.temp)