# Copyright 2025 Loopper-AI
# HTTP client for fetching the upstream API

from __future__ import annotations

import logging
import socket
import ssl
import time
import urllib.error
import urllib.request
from email.message import Message
from typing import Any
from urllib.parse import quote, urlsplit, urlunsplit

from ..models import UpstreamResponse

logger = logging.getLogger(__name__)

CHUNK_SIZE = 16 * 1024

# RFC 3986 reserved and unreserved characters, plus "%" so existing escapes survive
URL_SAFE_CHARS = "!#$&'()*+,/:;=?@[]~%"


class UpstreamError(Exception):
    """Network-level failure talking to the upstream API."""


class UpstreamTimeoutError(UpstreamError):
    """Upstream did not answer within the timeout."""


class UpstreamConnectionError(UpstreamError):
    """DNS lookup failed or the connection was refused."""


class HttpClient:
    """HTTP client for GET requests against arbitrary upstream APIs."""

    def __init__(self, timeout: float = 30.0):
        self.timeout = timeout
        self._ssl_ctx = ssl.create_default_context()

    def get(self, url: str, headers: dict[str, str]) -> UpstreamResponse:
        """GET url. Returns UpstreamResponse for any HTTP status.

        Note: urllib.request.urlopen raises HTTPError for non-2xx status codes;
        those still carry a full response and are returned, not raised.

        Raises:
            UpstreamTimeoutError: connect, read or the whole transfer exceeded the timeout
            UpstreamConnectionError: DNS failure or connection refused
            urllib.error.URLError: any other transport failure
        """
        req = urllib.request.Request(encode_url(url), headers=headers, method="GET")
        deadline = time.monotonic() + self.timeout

        try:
            return self._send(req, deadline)

        except TimeoutError as exc:
            logger.error("Timeout reading from %s after %ss", url, self.timeout)
            raise UpstreamTimeoutError(str(exc)) from exc

        except urllib.error.URLError as exc:
            if isinstance(exc.reason, TimeoutError):
                logger.error("Timeout connecting to %s after %ss", url, self.timeout)
                raise UpstreamTimeoutError(str(exc.reason)) from exc
            if _is_connection_failure(exc.reason):
                logger.error("Connection failure for %s: %s", url, exc.reason)
                raise UpstreamConnectionError(str(exc.reason)) from exc
            logger.error("URLError for %s: reason=%s", url, exc.reason)
            raise

    def _send(self, req: urllib.request.Request, deadline: float) -> UpstreamResponse:
        try:
            resp = urllib.request.urlopen(req, timeout=self.timeout, context=self._ssl_ctx)
        except urllib.error.HTTPError as exc:
            logger.info("Upstream returned HTTP %s %s", exc.code, exc.reason)
            resp = exc

        with resp:
            return _to_upstream_response(resp, deadline)


def _to_upstream_response(resp: Any, deadline: float) -> UpstreamResponse:
    headers = resp.headers or Message()
    return UpstreamResponse(
        status_code=resp.getcode(),
        status_text=resp.reason or "",
        content_type=headers.get("Content-Type") or "",
        charset=headers.get_content_charset(),
        body=_read_body(resp, deadline),
    )


def _is_connection_failure(reason: Any) -> bool:
    # gaierror: name resolution failed (ENOTFOUND)
    return isinstance(reason, (socket.gaierror, ConnectionRefusedError))


def _read_body(resp: Any, deadline: float) -> bytes:
    """Read the body in chunks, raising TimeoutError once the deadline passes.

    The socket timeout bounds each recv only, not the whole transfer.
    """
    chunks: list[bytes] = []
    while True:
        if time.monotonic() > deadline:
            raise TimeoutError("upstream body not received before the deadline")
        chunk = resp.read1(CHUNK_SIZE)
        if not chunk:
            return b"".join(chunks)
        chunks.append(chunk)


def encode_url(url: str) -> str:
    """Percent-encode characters http.client refuses (spaces, non-ASCII) in path and query."""
    parts = urlsplit(url.strip())
    return urlunsplit(
        (
            parts.scheme,
            parts.netloc,
            quote(parts.path, safe=URL_SAFE_CHARS),
            quote(parts.query, safe=URL_SAFE_CHARS),
            "",
        )
    )
