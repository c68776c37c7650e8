"""
mrchurn logging utilities.

Provides configurable logging for run progress and HTTP requests/responses.
Ensures access tokens never reach a log record.
"""

import logging
import re
from typing import Any

_churn_logger = logging.getLogger("mrchurn")
_http_logger = logging.getLogger("mrchurn.http")

# StreamHandler installed when configure_logging is called without one
_default_handler: logging.Handler | None = None

# Patterns for sensitive data that should be masked
_SENSITIVE_PATTERNS = [
    # GitLab personal/project/group access tokens
    (re.compile(r"gl(pat|oas|dt|rt|ptt|ft)-[A-Za-z0-9_\-]{8,}"), "[TOKEN_REDACTED]"),
    # PRIVATE-TOKEN header rendered as text
    (re.compile(r"(private-token['\"]?\s*[:=]\s*['\"]?)[^'\"\s,}]+", re.IGNORECASE), r"\1[REDACTED]"),
    # Bearer credentials
    (re.compile(r"(bearer\s+)[A-Za-z0-9._\-]+", re.IGNORECASE), r"\1[REDACTED]"),
    # Secret/token patterns
    (re.compile(r"(secret|token|password)['\"]?\s*[:=]\s*['\"][^'\"]+['\"]", re.IGNORECASE), r"\1: [REDACTED]"),
]

_SENSITIVE_KEYS = {"token", "private-token", "password", "secret", "authorization"}


def configure_logging(
    level: int = logging.INFO,
    http_level: int | None = None,
    handler: logging.Handler | None = None,
    format_string: str | None = None,
) -> None:
    """
    Configure mrchurn logging.

    Args:
        level: Default log level for all mrchurn loggers (default: INFO)
        http_level: Log level for HTTP request/response logging (default: same as level)
        handler: Custom handler to use (default: StreamHandler to stderr). A
            handler that is already attached is not added again.
        format_string: Custom format string (default: includes timestamp, level, logger name)

    Example:
        ```python
        import logging
        from mrchurn.logging import configure_logging

        # Show every request made to GitLab
        configure_logging(level=logging.INFO, http_level=logging.DEBUG)
        ```
    """
    if format_string is None:
        format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    formatter = logging.Formatter(format_string)

    global _default_handler
    if handler is None:
        if _default_handler is None:
            _default_handler = logging.StreamHandler()
        handler = _default_handler

    handler.setFormatter(formatter)

    _churn_logger.setLevel(level)
    if handler not in _churn_logger.handlers:
        _churn_logger.addHandler(handler)

    _http_logger.setLevel(http_level if http_level is not None else level)


def get_logger(name: str | None = None) -> logging.Logger:
    """
    Get an mrchurn logger.

    Args:
        name: Logger name suffix (e.g., "http"). If None, returns the main logger.

    Returns:
        Logger instance
    """
    if name is None:
        return _churn_logger
    return logging.getLogger(f"mrchurn.{name}")


def mask_sensitive_data(text: str) -> str:
    """
    Mask access tokens and other credentials in a string.

    Args:
        text: Text that may contain sensitive data

    Returns:
        Text with sensitive data masked
    """
    result = text
    for pattern, replacement in _SENSITIVE_PATTERNS:
        result = pattern.sub(replacement, result)
    return result


def safe_log_dict(data: dict[str, Any], sensitive_keys: set[str] | None = None) -> dict[str, Any]:
    """
    Create a copy of a dictionary with sensitive values masked.

    Args:
        data: Dictionary that may contain sensitive values
        sensitive_keys: Keys to mask (default: token, private-token, password,
            secret, authorization)

    Returns:
        Dictionary with sensitive values replaced with "[REDACTED]"
    """
    if sensitive_keys is None:
        sensitive_keys = _SENSITIVE_KEYS

    result: dict[str, Any] = {}
    for key, value in data.items():
        key_lower = str(key).lower()
        if key_lower in sensitive_keys or any(sk in key_lower for sk in sensitive_keys):
            result[key] = "[REDACTED]"
        elif isinstance(value, dict):
            result[key] = safe_log_dict(value, sensitive_keys)
        elif isinstance(value, list):
            result[key] = [
                safe_log_dict(item, sensitive_keys) if isinstance(item, dict) else item
                for item in value
            ]
        else:
            result[key] = value

    return result


def log_http_request(
    method: str,
    url: str,
    headers: dict[str, str] | None = None,
    params: dict[str, Any] | None = None,
) -> None:
    """
    Log an HTTP request at DEBUG level with sensitive data masked.

    Args:
        method: HTTP method (GET, POST, etc.)
        url: Request URL
        headers: Request headers (optional)
        params: Query parameters (optional)
    """
    if not _http_logger.isEnabledFor(logging.DEBUG):
        return

    log_parts = [f"{method} {mask_sensitive_data(url)}"]

    if params:
        log_parts.append(f"params={safe_log_dict(params)}")

    if headers:
        log_parts.append(f"headers={safe_log_dict(headers)}")

    _http_logger.debug(" | ".join(log_parts))


def log_http_response(
    status_code: int,
    url: str,
    elapsed_ms: float | None = None,
    next_page: str | None = None,
) -> None:
    """
    Log an HTTP response at DEBUG level.

    Response bodies are not logged; diffs can be large and may contain
    anything that was committed.

    Args:
        status_code: HTTP status code
        url: Request URL
        elapsed_ms: Request duration in milliseconds (optional)
        next_page: Value of the X-Next-Page header (optional)
    """
    if not _http_logger.isEnabledFor(logging.DEBUG):
        return

    log_parts = [f"Response {status_code} from {mask_sensitive_data(url)}"]

    if elapsed_ms is not None:
        log_parts.append(f"elapsed={elapsed_ms:.2f}ms")

    if next_page:
        log_parts.append(f"next_page={next_page}")

    _http_logger.debug(" | ".join(log_parts))


__all__ = [
    "configure_logging",
    "get_logger",
    "mask_sensitive_data",
    "safe_log_dict",
    "log_http_request",
    "log_http_response",
]
