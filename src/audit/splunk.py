"""Audit sink that writes executed queries to a Splunk HTTP Event Collector.

Each `write()` is one blocking POST:

- The query record is mapped onto a HEC envelope (`audit.envelope`).
- The envelope is POSTed to `config.endpoint` with a fixed header set.
- The collector's acknowledgment body is decoded; a non-zero code is an error.

There is no buffering, batching or retry. Every failure is raised to the caller
as a `SplunkAuditError` subclass and the sink remains usable afterwards.

Thread-safety: concurrent `write()` calls share the client's connection pool.
The default client refuses all cookies, so its cookie jar is never written;
a custom session's cookie jar is not guarded. Do not swap the client
(`set_http_client`) or edit `config` while writes are in flight. Configure the
sink before first use.

Timeouts: the default client gets `DEFAULT_TIMEOUT` per request. An installed
client keeps its own policy unless `with_timeout` is given.
"""

from __future__ import annotations

import asyncio
import logging
import re
from http.cookiejar import DefaultCookiePolicy
from typing import Callable
from urllib.parse import urlsplit

import requests  # type: ignore
from pydantic import ValidationError
from requests.adapters import HTTPAdapter  # type: ignore

from config import SplunkConfig

from .envelope import build_event, encode_event
from .errors import (
    CollectorRejectionError,
    RequestConstructionError,
    ResponseDecodeError,
    SendError,
    SplunkAuditError,
)
from .models import CollectorAck, QueryRecord
from .version import user_agent

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 5.0

_INVALID_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")
_CONTROL_OR_SPACE = re.compile(r"[\x00-\x20\x7f]")

Option = Callable[["SplunkAudit"], None]


def default_http_client() -> requests.Session:
    """Return a session with an explicit HTTP adapter mounted for both schemes.

    The adapter performs no retries of its own; timeouts are applied per request
    by the sink. Cookies are refused so concurrent writes never touch the jar.
    """
    session = requests.Session()
    session.cookies.set_policy(DefaultCookiePolicy(allowed_domains=[]))
    adapter = HTTPAdapter(max_retries=0)
    session.mount("https://", adapter)
    session.mount("http://", adapter)
    return session


def with_http_client(client: requests.Session) -> Option:
    """Use `client` instead of the default session."""

    def _apply(sink: SplunkAudit) -> None:
        sink.set_http_client(client)

    return _apply


def with_index(index: str) -> Option:
    """Override the Splunk index carried by the sink's configuration."""

    def _apply(sink: SplunkAudit) -> None:
        sink.config = sink.config.model_copy(update={"index": index})

    return _apply


def with_timeout(seconds: float) -> Option:
    """Apply `seconds` to every request, whichever client is installed."""

    def _apply(sink: SplunkAudit) -> None:
        sink.timeout = seconds
        sink._timeout_pinned = True

    return _apply


class SplunkAudit:
    """Synchronous audit sink for a Splunk HTTP Event Collector.

    Members:
    - Collector configuration: `config`
    - HTTP client: `client` (a `requests.Session`)
    - Per-request timeout: `timeout` (`None` leaves it to the client)
    """

    def __init__(self, config: SplunkConfig, *options: Option):
        """Create a sink from `config`, then apply each option once, in order."""
        self.config = config
        self.client: requests.Session = default_http_client()
        self.timeout: float | None = DEFAULT_TIMEOUT
        self._timeout_pinned = False
        for option in options:
            option(self)

    def set_http_client(self, client: requests.Session) -> None:
        """Replace the HTTP client. Call before the first `write()`.

        The installed client's own timeout policy applies from then on, unless a
        timeout was set with `with_timeout`.
        """
        self.client = client
        if not self._timeout_pinned:
            self.timeout = None

    def write(self, record: QueryRecord) -> None:
        """Deliver one query record to the collector.

        Raises:
        - `RequestConstructionError` when the endpoint is not a usable URL
        - `SendError` for transport failures (no endpoint, unreachable, timeout)
        - `ResponseDecodeError` when the acknowledgment is not valid JSON
        - `CollectorRejectionError` when the collector returns a non-zero code
        """
        body = encode_event(build_event(record, self.config))
        logger.debug("Sending audit event for user %r to %s", record.user, self.config.endpoint)

        try:
            try:
                request = self._new_request(body)
            except ValueError as exc:
                raise RequestConstructionError(exc) from exc

            try:
                ack_body = self._send(request)
            except requests.RequestException as exc:
                raise SendError(exc) from exc

            parse_ack(ack_body)
        except SplunkAuditError as exc:
            logger.debug("Audit write failed (%s): %s", exc.kind, exc)
            raise

        logger.debug("Audit event accepted by Splunk")

    async def awrite(self, record: QueryRecord) -> None:
        """Run `write()` in a worker thread so asyncio callers are not blocked."""
        await asyncio.to_thread(self.write, record)

    def _headers(self) -> dict[str, str]:
        """Fixed header set sent with every event."""
        return {
            "Accept": "application/json",
            "Accept-Encoding": "gzip",
            "Authorization": f"Splunk {self.config.token}",
            "Content-Type": "application/json; charset=utf-8",
            "User-Agent": user_agent(),
        }

    def _new_request(self, body: bytes) -> requests.Request:
        """Build the POST request, rejecting endpoints that are not valid URLs.

        An empty endpoint is accepted here and fails when sent.
        """
        _check_endpoint(self.config.endpoint)
        return requests.Request("POST", self.config.endpoint, headers=self._headers(), data=body)

    def _send(self, request: requests.Request) -> bytes:
        """Send the request and return the full response body, whatever the status.

        Raises `requests.RequestException` for transport errors.
        """
        prepared = self.client.prepare_request(request)
        settings = self.client.merge_environment_settings(prepared.url, {}, None, None, None)
        if self.timeout is not None:
            settings["timeout"] = self.timeout
        with self.client.send(prepared, **settings) as resp:
            logger.debug("Splunk responded with HTTP %s", resp.status_code)
            return resp.content


def parse_ack(body: bytes) -> None:
    """Interpret the collector's acknowledgment.

    Raises `ResponseDecodeError` for malformed bodies and
    `CollectorRejectionError` for a non-zero code.
    """
    try:
        ack = CollectorAck.model_validate_json(body)
    except ValidationError as exc:
        raise ResponseDecodeError(exc) from exc

    if not ack.accepted:
        raise CollectorRejectionError(code=ack.code, text=ack.text)


def _check_endpoint(endpoint: str) -> None:
    """Raise `ValueError` if `endpoint` cannot be parsed as a URL."""
    if _CONTROL_OR_SPACE.search(endpoint):
        raise ValueError(f"invalid control character or space in URL {endpoint!r}")

    bad_escape = _INVALID_ESCAPE.search(endpoint)
    if bad_escape is not None:
        start = bad_escape.start()
        raise ValueError(f"invalid URL escape {endpoint[start:start + 3]!r}")

    # Raises ValueError for malformed IPv6 hosts and non-numeric ports.
    _ = urlsplit(endpoint).port
