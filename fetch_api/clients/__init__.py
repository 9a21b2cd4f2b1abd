# Copyright 2025 Loopper-AI
# Client modules for external services

from .http_client import HttpClient, UpstreamConnectionError, UpstreamError, UpstreamTimeoutError

__all__ = ["HttpClient", "UpstreamError", "UpstreamConnectionError", "UpstreamTimeoutError"]
