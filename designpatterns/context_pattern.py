"""A request handler that gives up on slow work after a deadline."""

from __future__ import annotations

import argparse
import queue
import threading
import time
from http import HTTPStatus
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer


def fetch_data_from_db(cancel: threading.Event, delay: float = 3.0) -> str | None:
    """Return the data after ``delay`` seconds, or None if cancelled first."""
    if cancel.wait(delay):
        print("Request cancelled: context deadline exceeded")
        return None
    return "Data from DB"


def handle_request(timeout: float = 5.0, delay: float = 3.0) -> tuple[HTTPStatus, str]:
    """Fetch the data within ``timeout`` seconds; return the status and body."""
    cancel = threading.Event()
    results: queue.Queue[str | None] = queue.Queue(maxsize=1)

    def work() -> None:
        results.put(fetch_data_from_db(cancel, delay))

    threading.Thread(target=work, daemon=True).start()
    try:
        result = results.get(timeout=timeout)
    except queue.Empty:
        cancel.set()
        return HTTPStatus.GATEWAY_TIMEOUT, "Request timed out\n"
    return HTTPStatus.OK, f"Result: {result}"


class ContextRequestHandler(BaseHTTPRequestHandler):
    """Answers every GET with the fetched data or a gateway timeout."""

    request_timeout = 5.0
    fetch_delay = 3.0

    def do_GET(self) -> None:
        status, body = handle_request(self.request_timeout, self.fetch_delay)
        payload = body.encode("utf-8")
        self.send_response(status)
        self.send_header("Content-Type", "text/plain; charset=utf-8")
        if status != HTTPStatus.OK:
            self.send_header("X-Content-Type-Options", "nosniff")
        self.send_header("Content-Length", str(len(payload)))
        self.end_headers()
        self.wfile.write(payload)


def serve(address: tuple[str, int] = ("", 8080), lifetime: float = 5.0) -> None:
    """Serve on ``address`` for ``lifetime`` seconds, then shut down."""
    server: ThreadingHTTPServer | None
    try:
        server = ThreadingHTTPServer(address, ContextRequestHandler)
    except OSError as err:
        print("Server error:", err)
        server = None
    else:
        threading.Thread(target=server.serve_forever, daemon=True).start()

    time.sleep(lifetime)
    if server is not None:
        server.shutdown()
        server.server_close()
    print("Server shutdown")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Serve requests with a deadline.")
    parser.add_argument("--host", default="")
    parser.add_argument("--port", type=int, default=8080)
    parser.add_argument("--lifetime", type=float, default=5.0)
    args = parser.parse_args(argv)
    serve((args.host, args.port), args.lifetime)
    return 0