"""Serve SVG plots of a 3-D surface given by a user expression."""

from __future__ import annotations

import argparse
import math
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import Callable
from urllib.parse import parse_qs, urlsplit

from .eval import Expr, ExprError, _format_g, parse

WIDTH, HEIGHT = 600, 320
CELLS = 100
XYRANGE = 30.0
XYSCALE = WIDTH / 2 / XYRANGE
ZSCALE = HEIGHT * 0.4
SIN30, COS30 = 0.5, math.sqrt(3.0 / 4.0)


def corner(f: Callable[[float, float], float], i: int, j: int) -> tuple[float, float]:
    """Project the corner of cell (i, j) onto the 2-D canvas."""
    x = XYRANGE * (i / CELLS - 0.5)
    y = XYRANGE * (j / CELLS - 0.5)
    z = f(x, y)
    sx = WIDTH / 2 + (x - y) * COS30 * XYSCALE
    sy = HEIGHT / 2 + (x + y) * SIN30 * XYSCALE - z * ZSCALE
    return sx, sy


def surface(f: Callable[[float, float], float]) -> str:
    """Return the SVG document plotting f."""
    parts = [
        "<svg xmlns='http://www.w3.org/2000/svg' "
        "style='stroke: grey; fill: white; stroke-width: 0.7' "
        f"width='{WIDTH}' height='{HEIGHT}'>"
    ]
    for i in range(CELLS):
        for j in range(CELLS):
            points = (corner(f, i + 1, j), corner(f, i, j),
                      corner(f, i, j + 1), corner(f, i + 1, j + 1))
            coords = " ".join(f"{_format_g(x)},{_format_g(y)}" for x, y in points)
            parts.append(f"<polygon points='{coords}'/>\n")
    parts.append("</svg>\n")
    return "".join(parts)


def parse_and_check(text: str) -> Expr:
    """Parse text and allow only the variables x, y and r."""
    if text == "":
        raise ExprError("empty expression")
    expr = parse(text)
    names: set = set()
    expr.check(names)
    for name in names:
        if name not in ("x", "y", "r"):
            raise ExprError(f"undefined variable: {name}")
    return expr


def render_plot(query: str) -> tuple[int, str, str]:
    """Return (status, content type, body) for a /plot query string."""
    values = parse_qs(query, keep_blank_values=True).get("expr", [""])
    try:
        expr = parse_and_check(values[0])
    except ExprError as err:
        return 400, "text/plain; charset=utf-8", f"bad expr: {err}\n"

    def height(x: float, y: float) -> float:
        return expr.eval({"x": x, "y": y, "r": math.hypot(x, y)})

    return 200, "image/svg+xml", surface(height)


class _Handler(BaseHTTPRequestHandler):
    def do_GET(self) -> None:
        url = urlsplit(self.path)
        if url.path == "/plot":
            status, ctype, body = render_plot(url.query)
        else:
            status, ctype, body = 404, "text/plain; charset=utf-8", "404 page not found\n"
        data = body.encode()
        self.send_response(status)
        self.send_header("Content-Type", ctype)
        self.send_header("Content-Length", str(len(data)))
        self.end_headers()
        self.wfile.write(data)


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(description="Plot surfaces over HTTP.")
    parser.add_argument("--host", default="localhost")
    parser.add_argument("--port", type=int, default=8000)
    args = parser.parse_args(argv)
    with ThreadingHTTPServer((args.host, args.port), _Handler) as server:
        server.serve_forever()