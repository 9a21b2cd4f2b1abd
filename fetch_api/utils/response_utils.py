# Copyright 2025 Loopper-AI
# HTTP response utilities for the function gateway

from __future__ import annotations

import json
from datetime import datetime, timezone
from typing import Any

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "Content-Type",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
    "Content-Type": "application/json",
}


def create_response(status_code: int, body: dict[str, Any] | None) -> dict[str, Any]:
    """
    Create a gateway response carrying the CORS headers.

    Args:
        status_code: HTTP status code
        body: Response body as dictionary, or None for an empty body

    Returns:
        Gateway response dictionary
    """
    return {
        "statusCode": status_code,
        "headers": dict(CORS_HEADERS),
        "body": "" if body is None else json.dumps(body, default=str, allow_nan=False),
    }


def error_response(status_code: int, message: str) -> dict[str, Any]:
    """Failure envelope with timestamp."""
    return create_response(status_code, {"success": False, "error": message, "timestamp": utc_timestamp()})


def utc_timestamp() -> str:
    """ISO-8601 UTC, millisecond precision, Z suffix."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
