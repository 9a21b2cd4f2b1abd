# Copyright 2025 Loopper-AI
# Data models for fetch-api

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class ProxyRequest:
    """Validated POST body: the URL to fetch and an optional bearer token."""

    url: str
    token: str | None = None

    @property
    def bearer_token(self) -> str | None:
        if isinstance(self.token, str) and self.token.strip():
            return self.token.strip()
        return None


@dataclass
class UpstreamResponse:
    """Raw response from the upstream API, whatever its status code."""

    status_code: int
    status_text: str
    content_type: str = ""
    charset: str | None = None
    body: bytes = b""


@dataclass
class FetchResult:
    """Normalized upstream response returned to the caller."""

    status_code: int
    status_text: str
    content_type: str
    data: Any

    def to_dict(self, url: str, timestamp: str) -> dict[str, Any]:
        return {
            "success": True,
            "status": self.status_code,
            "statusText": self.status_text,
            "url": url,
            "data": self.data,
            "contentType": self.content_type,
            "timestamp": timestamp,
        }
