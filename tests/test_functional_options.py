import threading
import time
from datetime import timedelta
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

import pytest

from designpatterns.functional_options import (
    DBClient,
    db_with_timeout,
    default_http_client,
    new_db_client,
    new_http_client,
    with_address,
    with_retries,
    with_ssl,
    with_timeout,
)


class _Handler(BaseHTTPRequestHandler):
    def do_GET(self):
        if self.path == "/slow":
            time.sleep(1.0)
        if self.path == "/ok":
            body = b"hello"
            self.send_response(200)
        else:
            body = b"missing"
            self.send_response(404)
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def log_message(self, format, *args):
        pass


@pytest.fixture
def server_url():
    server = ThreadingHTTPServer(("127.0.0.1", 0), _Handler)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    host, port = server.server_address
    yield f"http://{host}:{port}"
    server.shutdown()
    server.server_close()


def test_db_client_options():
    client = new_db_client(
        with_address("localhost:5432"),
        db_with_timeout(timedelta(seconds=5)),
        with_retries(timedelta(seconds=2)),
        with_ssl(True),
    )
    assert client.address == "localhost:5432"
    assert client.timeout == timedelta(seconds=5)
    assert client.retries == timedelta(seconds=2)
    assert client.use_ssl is True


def test_db_client_defaults():
    client = new_db_client()
    assert client == DBClient(
        address="localhost:3306",
        timeout=timedelta(seconds=10),
        retries=timedelta(seconds=3),
        use_ssl=False,
    )


def test_later_option_wins():
    client = new_db_client(with_address("a:1"), with_address("b:2"))
    assert client.address == "b:2"


def test_http_client_defaults_and_option():
    assert default_http_client().timeout == timedelta(seconds=10)
    assert new_http_client().timeout == timedelta(seconds=10)
    client = new_http_client(with_timeout(timedelta(seconds=5)))
    assert client.timeout == timedelta(seconds=5)


def test_http_client_not_found(server_url):
    client = new_http_client(with_timeout(timedelta(seconds=5)))
    resp = client.get(server_url + "/posts/1")
    assert resp.status_code == 404
    assert resp.body == b"missing"


def test_http_client_ok(server_url):
    resp = new_http_client().get(server_url + "/ok")
    assert resp.status_code == 200
    assert resp.body == b"hello"


def test_http_client_timeout(server_url):
    client = new_http_client(with_timeout(timedelta(milliseconds=100)))
    with pytest.raises(OSError):
        client.get(server_url + "/slow")