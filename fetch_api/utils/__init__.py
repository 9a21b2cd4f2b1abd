# Copyright 2025 Loopper-AI
# Utility modules

from .response_utils import CORS_HEADERS, create_response, error_response, utc_timestamp

__all__ = ["CORS_HEADERS", "create_response", "error_response", "utc_timestamp"]
