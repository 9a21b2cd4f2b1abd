# Copyright 2025 Loopper-AI
# Parser modules for inbound events and upstream responses

from .request_parser import RequestParser
from .response_parser import ResponseParser

__all__ = ["RequestParser", "ResponseParser"]
