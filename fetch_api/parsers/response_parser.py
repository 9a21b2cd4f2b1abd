# Copyright 2025 Loopper-AI
# Upstream response body parser

from __future__ import annotations

import codecs
import json
import logging
import math
from typing import Any

from ..models import FetchResult, UpstreamResponse

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json"


class ResponseParser:
    """Turns an upstream response into a FetchResult. Never raises on bad bodies."""

    @staticmethod
    def to_result(response: UpstreamResponse) -> FetchResult:
        return FetchResult(
            status_code=response.status_code,
            status_text=response.status_text,
            content_type=response.content_type,
            data=ResponseParser.parse_data(response),
        )

    @staticmethod
    def parse_data(response: UpstreamResponse) -> Any:
        """
        Parse the body as JSON when declared or JSON-shaped, else return text.

        Args:
            response: Raw upstream response

        Returns:
            Parsed JSON value, raw text, or an "Error parsing response" string
        """
        try:
            text = _decode(response.body, response.charset)
            if JSON_CONTENT_TYPE in response.content_type.lower():
                return _strict_loads(text)

            stripped = text.strip()
            if stripped.startswith("{") or stripped.startswith("["):
                try:
                    return _strict_loads(text)
                except ValueError:
                    return text
            return text

        except ValueError as e:
            logger.warning("Failed to parse upstream body content_type=%s: %s", response.content_type, e)
            return f"Error parsing response: {e}"


def _decode(body: bytes, charset: str | None) -> str:
    """Decode with the declared charset, UTF-8 when missing or unknown."""
    encoding = "utf-8"
    if charset:
        try:
            encoding = codecs.lookup(charset).name
        except LookupError:
            logger.warning("Unknown charset %s, falling back to utf-8", charset)
    return body.decode(encoding, errors="replace")


def _strict_loads(text: str) -> Any:
    """json.loads without the NaN / Infinity / -Infinity extensions."""
    return json.loads(text, parse_constant=_reject_constant, parse_float=_finite_float)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Unexpected token {name} in JSON")


def _finite_float(literal: str) -> float | None:
    # Overflowing literals such as 1e999 serialize as null, like JSON.stringify(Infinity)
    value = float(literal)
    return value if math.isfinite(value) else None
