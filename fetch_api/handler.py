# Copyright 2025 Loopper-AI
# Lambda handler: POST {url, token} → GET url → JSON envelope
#
# OPTIONS short-circuits for CORS preflight.
# Upstream 4xx/5xx are reported as success with the upstream status;
# only network failures map to 502/504.

from __future__ import annotations

import logging
from typing import Any

from .clients import HttpClient, UpstreamConnectionError, UpstreamTimeoutError
from .config import Config
from .models import ProxyRequest
from .parsers import RequestParser, ResponseParser
from .utils import create_response, error_response, utc_timestamp

logger = logging.getLogger()

TIMEOUT_MESSAGE = "Request timeout - API took too long to respond"
CONNECTION_MESSAGE = "Unable to connect to the API endpoint"


def lambda_handler(event: dict[str, Any], context: Any) -> dict[str, Any]:
    """Gateway POST → fetch upstream URL → enveloped result."""
    config = Config.from_environment()
    logger.setLevel(getattr(logging, config.log_level, logging.INFO))

    request_id = getattr(context, "aws_request_id", "") if context else ""
    method = RequestParser.get_method(event)
    logger.info("lambda_handler started method=%s request_id=%s", method, request_id)

    if method == "OPTIONS":
        return create_response(200, None)

    if method != "POST":
        return create_response(405, {"success": False, "error": "Method not allowed. Use POST."})

    try:
        return _proxy(event, config)

    except UpstreamTimeoutError:
        return error_response(504, TIMEOUT_MESSAGE)

    except UpstreamConnectionError:
        return error_response(502, CONNECTION_MESSAGE)

    except Exception as e:
        logger.exception("API fetch error request_id=%s: %s", request_id, e)
        return error_response(500, str(e))


def _proxy(event: dict[str, Any], config: Config) -> dict[str, Any]:
    """Validate, fetch and envelope. Network and body-decoding errors propagate."""
    is_valid, err = config.validate()
    if not is_valid:
        logger.error("Configuration error: %s", err)
        return error_response(500, err)

    payload = RequestParser.parse_body(event)

    url = payload.get("url")
    if not url:
        return error_response(400, "URL parameter is required")
    if not RequestParser.is_valid_url(url):
        return error_response(400, "Invalid URL format")

    request = ProxyRequest(url=url, token=payload.get("token"))
    logger.info("Fetching: %s", request.url)

    upstream = HttpClient(timeout=config.request_timeout).get(request.url, _build_headers(request, config))
    logger.info("Upstream responded: status=%s content_type=%s", upstream.status_code, upstream.content_type)

    result = ResponseParser.to_result(upstream)
    return create_response(200, result.to_dict(request.url, utc_timestamp()))


def _build_headers(request: ProxyRequest, config: Config) -> dict[str, str]:
    headers = {
        "Accept": "application/json",
        "User-Agent": config.user_agent,
    }
    token = request.bearer_token
    if token:
        headers["Authorization"] = f"Bearer {token}"
    return headers
