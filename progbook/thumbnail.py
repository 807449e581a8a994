"""Produce thumbnail-size images from larger images."""

from __future__ import annotations

import os
import sys
from typing import BinaryIO

from PIL import Image

_SIZE = 128


def thumbnail_image(src: Image.Image) -> Image.Image:
    """Return a thumbnail-size version of src, preserving its aspect ratio."""
    xs, ys = src.size
    width, height = _SIZE, _SIZE
    aspect = xs / ys
    if aspect < 1.0:
        width = int(_SIZE * aspect)  # portrait
    else:
        height = int(_SIZE / aspect)  # landscape
    xscale = xs / width
    yscale = ys / height

    pixels = src.convert("RGB").load()
    dst = Image.new("RGB", (width, height))
    # a very crude scaling algorithm
    dst.putdata([
        pixels[int(x * xscale), int(y * yscale)]
        for y in range(height)
        for x in range(width)
    ])
    return dst


def image_stream(out: BinaryIO, inp: BinaryIO) -> None:
    """Read an image from inp and write a JPEG thumbnail of it to out."""
    with Image.open(inp) as src:
        dst = thumbnail_image(src)
    dst.save(out, "JPEG")


def image_file2(outfile: str, infile: str) -> None:
    """Read an image from infile and write a thumbnail of it to outfile."""
    with open(infile, "rb") as inp, open(outfile, "wb") as out:
        try:
            image_stream(out, inp)
        except (OSError, ValueError) as err:
            raise OSError(f"scaling {infile} to {outfile}: {err}") from err


def _ext(path: str) -> str:
    base = os.path.basename(path)
    dot = base.rfind(".")
    return base[dot:] if dot >= 0 else ""


def image_file(infile: str) -> str:
    """Write a thumbnail next to infile and return its name, e.g. "foo.thumb.jpeg"."""
    ext = _ext(infile)
    stem = infile[: len(infile) - len(ext)] if ext else infile
    outfile = stem + ".thumb" + ext
    image_file2(outfile, infile)
    return outfile


def main(argv=None) -> None:
    """Make a thumbnail of each file named on a line of standard input."""
    for line in sys.stdin:
        name = line.rstrip("\n").rstrip("\r")
        try:
            print(image_file(name))
        except OSError as err:
            print(err, file=sys.stderr)