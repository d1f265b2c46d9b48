"""Utility for logging API requests when TRIAS_LOG_REQUESTS is enabled."""

import json
import logging
import os
from typing import Any

logger = logging.getLogger(__name__)

LOG_REQUESTS_ENV = "TRIAS_LOG_REQUESTS"


def should_log_requests() -> bool:
    """Check if request logging is enabled via TRIAS_LOG_REQUESTS environment variable."""
    return os.getenv(LOG_REQUESTS_ENV, "").lower() == "true"


def _redact_sensitive_headers(headers: dict[str, str]) -> dict[str, str]:
    """Redact sensitive headers from logging."""
    sensitive_keys = {"authorization", "cookie", "x-api-key"}
    return {k: "***REDACTED***" if k.lower() in sensitive_keys else v for k, v in headers.items()}


def _format_payload(payload: Any) -> str:
    """Format payload for logging."""
    if isinstance(payload, bytes):
        return payload.decode("utf-8", errors="replace")
    try:
        return json.dumps(payload, indent=2) if isinstance(payload, dict) else str(payload)
    except (TypeError, ValueError):
        return str(payload)


def log_api_request(
    method: str,
    url: str,
    headers: dict[str, str] | None = None,
    payload: Any = None,
) -> None:
    """Log API request details if TRIAS_LOG_REQUESTS is enabled.

    Args:
        method: HTTP method (GET, POST, etc.).
        url: Request URL.
        headers: Request headers (optional, sensitive headers are redacted).
        payload: Request payload/body (optional).
    """
    if not should_log_requests():
        return

    log_parts = [f"{method} {url}"]

    if headers:
        safe_headers = _redact_sensitive_headers(headers)
        log_parts.append(f"Headers: {json.dumps(safe_headers, indent=2)}")

    if payload is not None:
        log_parts.append(f"Payload: {_format_payload(payload)}")

    logger.info("API Request:\n" + "\n".join(log_parts))
