# Copyright 2025 Loopper-AI
# fetch-api Lambda: POST {url, token} → GET url → JSON envelope

from .handler import lambda_handler

__all__ = ["lambda_handler"]
