"""Clients configured through option functions applied over defaults."""

from __future__ import annotations

import urllib.error
import urllib.request
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import timedelta


@dataclass
class DBClient:
    """Settings of a database client."""

    address: str = "localhost:3306"
    timeout: timedelta = timedelta(seconds=10)
    retries: timedelta = timedelta(seconds=3)
    use_ssl: bool = False


DBOption = Callable[[DBClient], None]


def with_address(addr: str) -> DBOption:
    def apply(client: DBClient) -> None:
        client.address = addr

    return apply


def db_with_timeout(timeout: timedelta) -> DBOption:
    def apply(client: DBClient) -> None:
        client.timeout = timeout

    return apply


def with_retries(retries: timedelta) -> DBOption:
    def apply(client: DBClient) -> None:
        client.retries = retries

    return apply


def with_ssl(enable: bool) -> DBOption:
    def apply(client: DBClient) -> None:
        client.use_ssl = enable

    return apply


def new_db_client(*options: DBOption) -> DBClient:
    """Create a database client from the defaults and the given options, in order."""
    client = DBClient()
    for option in options:
        option(client)
    return client


@dataclass
class HTTPResponse:
    """The status, headers and body of an HTTP response."""

    status_code: int
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes = b""


@dataclass
class HTTPClient:
    """A small HTTP client; a zero timeout means no timeout."""

    timeout: timedelta = timedelta(seconds=10)

    def get(self, url: str) -> HTTPResponse:
        """Send a GET request and return the response, whatever its status.

        Connection failures and timeouts raise ``OSError``.
        """
        seconds = self.timeout.total_seconds()
        request = urllib.request.Request(url, method="GET")
        try:
            with urllib.request.urlopen(request, timeout=seconds or None) as resp:
                return HTTPResponse(resp.status, dict(resp.headers.items()), resp.read())
        except urllib.error.HTTPError as err:
            with err:
                return HTTPResponse(err.code, dict(err.headers.items()), err.read())


Option = Callable[[HTTPClient], None]


def default_http_client() -> HTTPClient:
    """Return the default HTTP client settings: a 10 second timeout."""
    return HTTPClient(timeout=timedelta(seconds=10))


def with_timeout(timeout: timedelta) -> Option:
    def apply(client: HTTPClient) -> None:
        client.timeout = timeout

    return apply


def new_http_client(*options: Option) -> HTTPClient:
    """Create an HTTP client from the defaults and the given options, in order."""
    client = default_http_client()
    for option in options:
        option(client)
    return client