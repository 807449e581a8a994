import threading
import urllib.error
import urllib.request

import pytest

from progbook.shop import ShopDatabase, format_dollars, make_server


@pytest.fixture
def db():
    return ShopDatabase(shoes=50, socks=5)


def test_listing(db):
    assert db.listing() == "shoes: $50.00\nsocks: $5.00\n"


def test_price_found(db):
    assert db.handle("/price", "item=shoes") == (200, "$50.00\n")


def test_price_missing(db):
    assert db.handle("/price", "item=hats") == (404, 'no such item: "hats"\n')


def test_price_method_raises_for_missing(db):
    with pytest.raises(KeyError):
        db.price("hats")


def test_list_endpoint_matches_listing(db):
    assert db.handle("/list", "") == (200, db.listing())


def test_price_matches_format(db):
    status, body = db.handle("/price", "item=socks")
    assert status == 200
    assert body == format_dollars(5) + "\n"


def test_unknown_page(db):
    status, body = db.handle("/help", "x=1")
    assert status == 404
    assert body.startswith("no such page: /help?x=1")


def test_format_dollars_roundtrip():
    for amount in (0.25, 12.5, 99.75):
        assert float(format_dollars(amount)[1:]) == amount


def test_server_roundtrip(db):
    server = make_server(db, "127.0.0.1", 0)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    try:
        host, port = server.server_address[:2]
        with urllib.request.urlopen(f"http://{host}:{port}/list") as resp:
            assert resp.read().decode() == db.listing()
        with pytest.raises(urllib.error.HTTPError) as info:
            urllib.request.urlopen(f"http://{host}:{port}/price?item=hats")
        assert info.value.code == 404
    finally:
        server.shutdown()
        server.server_close()