"""A small e-commerce HTTP server with /list and /price endpoints."""

from __future__ import annotations

import argparse
import json
import struct
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from urllib.parse import parse_qs, urlsplit


def format_dollars(amount: float) -> str:
    """Format a single-precision dollar amount, e.g. "$50.00"."""
    single = struct.unpack("f", struct.pack("f", float(amount)))[0]
    return f"${single:.2f}"


def _quote(text: str) -> str:
    return json.dumps(text, ensure_ascii=False)


class ShopDatabase(dict):
    """Item names mapped to prices."""

    def listing(self) -> str:
        return "".join(f"{item}: {format_dollars(price)}\n" for item, price in self.items())

    def price(self, item: str) -> str:
        """Return the formatted price of item; KeyError if there is none."""
        return format_dollars(self[item])

    def handle(self, path: str, query: str = "") -> tuple[int, str]:
        """Return (status, body) for a request to path with a query string."""
        if path == "/list":
            return 200, self.listing()
        if path == "/price":
            item = parse_qs(query, keep_blank_values=True).get("item", [""])[0]
            try:
                return 200, self.price(item) + "\n"
            except KeyError:
                return 404, f"no such item: {_quote(item)}\n"
        url = path + (f"?{query}" if query else "")
        return 404, f"no such page: {url}\n"


def make_server(db: ShopDatabase, host: str = "localhost", port: int = 8000) -> ThreadingHTTPServer:
    """Create (but do not start) an HTTP server for db."""

    class Handler(BaseHTTPRequestHandler):
        def do_GET(self) -> None:
            url = urlsplit(self.path)
            status, body = db.handle(url.path, url.query)
            data = body.encode()
            self.send_response(status)
            self.send_header("Content-Type", "text/plain; charset=utf-8")
            self.send_header("Content-Length", str(len(data)))
            self.end_headers()
            self.wfile.write(data)

        def log_message(self, format, *args) -> None:
            return None

    return ThreadingHTTPServer((host, port), Handler)


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(description="Serve a tiny shop.")
    parser.add_argument("--host", default="localhost")
    parser.add_argument("--port", type=int, default=8000)
    args = parser.parse_args(argv)
    db = ShopDatabase(shoes=50, socks=5)
    with make_server(db, args.host, args.port) as server:
        server.serve_forever()