# Copyright 2025 Loopper-AI
# Inbound gateway event parser

from __future__ import annotations

import base64
import json
from typing import Any
from urllib.parse import urlsplit

ALLOWED_SCHEMES = ("http", "https")


class RequestParser:
    """Parser for Netlify / API Gateway proxy events."""

    @staticmethod
    def get_method(event: dict[str, Any]) -> str:
        """HTTP method from httpMethod (REST, Netlify) or requestContext.http (HTTP API v2)."""
        method = event.get("httpMethod")
        if not method:
            http = (event.get("requestContext") or {}).get("http") or {}
            method = http.get("method") if isinstance(http, dict) else None
        return (method or "").upper()

    @staticmethod
    def parse_body(event: dict[str, Any]) -> dict[str, Any]:
        """Decode the JSON body. Raises json.JSONDecodeError on malformed input."""
        raw_body = event.get("body") or ""
        if raw_body and event.get("isBase64Encoded"):
            raw_body = base64.b64decode(raw_body).decode("utf-8", errors="replace")

        payload = json.loads(raw_body or "{}")
        # Arrays and scalars carry no url/token fields
        return payload if isinstance(payload, dict) else {}

    @staticmethod
    def is_valid_url(url: Any) -> bool:
        """Absolute http(s) URL with a host."""
        if not isinstance(url, str):
            return False
        try:
            parts = urlsplit(url.strip())
            # Accessing port validates it; raises ValueError when out of range
            parts.port
        except ValueError:
            return False
        return parts.scheme.lower() in ALLOWED_SCHEMES and bool(parts.hostname)
