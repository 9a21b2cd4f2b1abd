# Copyright 2025 Loopper-AI
# Configuration management for fetch-api

from __future__ import annotations

import math
import os
from dataclasses import dataclass

DEFAULT_USER_AGENT = "Netlify-API-Fetcher/1.0"
DEFAULT_TIMEOUT = 30.0
TIMEOUT_ERROR = "REQUEST_TIMEOUT must be a positive number of seconds"


@dataclass(frozen=True)
class Config:
    """Immutable configuration from environment variables."""

    request_timeout: float = DEFAULT_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT
    log_level: str = "INFO"
    timeout_error: str | None = None

    @classmethod
    def from_environment(cls) -> Config:
        """Load config. A bad REQUEST_TIMEOUT is recorded in timeout_error and reported by validate()."""
        request_timeout, timeout_error = _parse_timeout(os.environ.get("REQUEST_TIMEOUT"))
        user_agent = (os.environ.get("USER_AGENT") or "").strip() or DEFAULT_USER_AGENT

        return cls(
            request_timeout=request_timeout,
            user_agent=user_agent,
            log_level=os.environ.get("LOG_LEVEL", "INFO").upper(),
            timeout_error=timeout_error,
        )

    def validate(self) -> tuple[bool, str | None]:
        if self.timeout_error:
            return False, self.timeout_error
        if not math.isfinite(self.request_timeout) or self.request_timeout <= 0:
            return False, TIMEOUT_ERROR
        return True, None


def _parse_timeout(raw: str | None) -> tuple[float, str | None]:
    """Returns (timeout, error). On error the default timeout is kept."""
    if raw is None or not raw.strip():
        return DEFAULT_TIMEOUT, None
    try:
        value = float(raw)
    except ValueError:
        return DEFAULT_TIMEOUT, TIMEOUT_ERROR
    if not math.isfinite(value) or value <= 0:
        return DEFAULT_TIMEOUT, TIMEOUT_ERROR
    return value, None
