import io
import threading
import time
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

import pytest

from progbook.memo import Memo, concurrent, http_get_body, sequential

URLS = [
    "http://one.example.com",
    "http://two.example.com",
    "http://three.example.com",
    "http://four.example.com",
    "http://one.example.com",
    "http://two.example.com",
    "http://three.example.com",
    "http://four.example.com",
]


class Counting:
    def __init__(self, delay=0.0):
        self.calls = {}
        self.lock = threading.Lock()
        self.delay = delay

    def __call__(self, key):
        with self.lock:
            self.calls[key] = self.calls.get(key, 0) + 1
        time.sleep(self.delay)
        return key.encode() * 2


def test_get_computes_once_per_key():
    f = Counting()
    memo = Memo(f)
    assert memo.get("a") == b"aa"
    assert memo.get("a") == b"aa"
    assert memo.get("b") == b"bb"
    assert f.calls == {"a": 1, "b": 1}


def test_errors_are_cached():
    calls = []

    def failing(key):
        calls.append(key)
        raise ValueError(f"bad {key}")

    memo = Memo(failing)
    for _ in range(2):
        with pytest.raises(ValueError, match="bad k"):
            memo.get("k")
    assert calls == ["k"]


def test_concurrent_same_key_computes_once():
    f = Counting(delay=0.05)
    memo = Memo(f)
    results = []
    lock = threading.Lock()

    def worker():
        value = memo.get("same")
        with lock:
            results.append(value)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert results == [b"samesame"] * 8
    assert f.calls == {"same": 1}


def test_close_refuses_requests():
    memo = Memo(Counting())
    memo.close()
    with pytest.raises(RuntimeError):
        memo.get("x")


def test_context_manager_closes():
    with Memo(Counting()) as memo:
        assert memo.get("q") == b"qq"
    with pytest.raises(RuntimeError):
        memo.get("q")


def test_sequential():
    f = Counting()
    out = io.StringIO()
    results = sequential(Memo(f), URLS, out)
    assert results == [(u, 2 * len(u)) for u in URLS]
    lines = out.getvalue().splitlines()
    assert len(lines) == 8
    assert lines[0].startswith("http://one.example.com, ")
    assert lines[0].endswith(f", {2 * len('http://one.example.com')} bytes")
    assert all(n == 1 for n in f.calls.values())


def test_sequential_skips_errors():
    def f(key):
        if "bad" in key:
            raise OSError("unreachable")
        return b"x"

    out = io.StringIO()
    results = sequential(Memo(f), ["http://bad.example.com", "http://ok.example.com"], out)
    assert results == [("http://ok.example.com", 1)]
    assert len(out.getvalue().splitlines()) == 1


def test_concurrent():
    f = Counting(delay=0.01)
    out = io.StringIO()
    results = concurrent(Memo(f), URLS, out)
    assert sorted(results) == sorted((u, 2 * len(u)) for u in URLS)
    assert len(out.getvalue().splitlines()) == 8
    assert all(n == 1 for n in f.calls.values())


def test_http_get_body():
    class Handler(BaseHTTPRequestHandler):
        def do_GET(self):
            body = b"hello body"
            self.send_response(200)
            self.send_header("Content-Length", str(len(body)))
            self.end_headers()
            self.wfile.write(body)

        def log_message(self, format, *args):
            pass

    server = ThreadingHTTPServer(("127.0.0.1", 0), Handler)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    try:
        url = f"http://127.0.0.1:{server.server_address[1]}/"
        assert http_get_body(url) == b"hello body"
        memo = Memo(http_get_body)
        assert sequential(memo, [url, url], io.StringIO()) == [(url, 10), (url, 10)]
    finally:
        server.shutdown()
        server.server_close()