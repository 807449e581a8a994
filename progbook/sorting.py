"""Sort a music playlist into several orders and print it as a table."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

from .sleep import format_duration, parse_duration


@dataclass
class Track:
    title: str
    artist: str
    album: str
    year: int
    length: float  # seconds


def default_tracks() -> list[Track]:
    """Return the sample playlist."""
    return [
        Track("Go", "Delilah", "From the Roots Up", 2012, parse_duration("3m38s")),
        Track("Go", "Moby", "Moby", 1992, parse_duration("3m37s")),
        Track("Go Ahead", "Alicia Keys", "As I Am", 2007, parse_duration("4m36s")),
        Track("Ready 2 Go", "Martin Solveig", "Smash", 2011, parse_duration("4m24s")),
    ]


def _tabulate(rows: Sequence[Sequence[str]], padding: int = 2) -> str:
    """Align tab-terminated cells into columns padded by `padding` spaces."""
    widths = [max(len(cell) for cell in column) + padding for column in zip(*rows)]
    return "".join(
        "".join(cell.ljust(width) for cell, width in zip(row, widths)) + "\n"
        for row in rows
    )


def format_tracks(tracks: Iterable[Track]) -> str:
    """Return the playlist as an aligned text table."""
    rows = [
        ("Title", "Artist", "Album", "Year", "Length"),
        ("-----", "------", "-----", "----", "------"),
    ]
    rows.extend(
        (t.title, t.artist, t.album, str(t.year), format_duration(t.length))
        for t in tracks
    )
    return _tabulate(rows)


def by_artist(tracks: Iterable[Track]) -> list[Track]:
    return sorted(tracks, key=lambda t: t.artist)


def by_year(tracks: Iterable[Track]) -> list[Track]:
    return sorted(tracks, key=lambda t: t.year)


def custom_order(tracks: Iterable[Track]) -> list[Track]:
    """Order by title, then year, then length."""
    return sorted(tracks, key=lambda t: (t.title, t.year, t.length))


def _format_ints(values: Iterable[int]) -> str:
    return "[" + " ".join(str(v) for v in values) + "]"


def _is_sorted(values: Sequence[int]) -> bool:
    return all(a <= b for a, b in zip(values, values[1:]))


def main(argv=None) -> None:
    values = [3, 1, 4, 1]
    print(str(_is_sorted(values)).lower())
    values.sort()
    print(_format_ints(values))
    print(str(_is_sorted(values)).lower())
    values.sort(reverse=True)
    print(_format_ints(values))
    print(str(_is_sorted(values)).lower())

    tracks = default_tracks()
    print("byArtist:")
    tracks = by_artist(tracks)
    print(format_tracks(tracks), end="")

    print("\nReverse(byArtist):")
    tracks = sorted(tracks, key=lambda t: t.artist, reverse=True)
    print(format_tracks(tracks), end="")

    print("\nbyYear:")
    tracks = by_year(tracks)
    print(format_tracks(tracks), end="")

    print("\nCustom:")
    tracks = custom_order(tracks)
    print(format_tracks(tracks), end="")