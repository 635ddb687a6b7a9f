"""Helpers that keep secrets out of log records."""

import re
from typing import Any, Dict

SENSITIVE_KEYS = frozenset({
    "api_key", "key", "secret", "password", "token",
    "authorization", "auth", "credential"
})

# Patterns that may show up inside provider error messages
_SENSITIVE_PATTERNS = [
    (re.compile(r"sk-(?:ant-)?[\w\-]{8,}"), "sk-****"),
    (re.compile(r"Bearer\s+[\w\-\.]+"), "Bearer ****"),
    (re.compile(r"(api_key|key|password|token|secret)=[\w\-\.]+"), r"\1=****"),
]


def _mask(value: str) -> str:
    if len(value) > 8:
        return f"{value[:4]}...{value[-4:]}"
    return "****"


def redact_sensitive_data(data: Dict[str, Any]) -> Dict[str, Any]:
    """Redact values stored under sensitive keys, recursing into nested dicts.

    Args:
        data: Dictionary about to be passed as ``extra`` to a logger

    Returns:
        A copy with sensitive values masked
    """
    if not isinstance(data, dict):
        return data

    redacted = {}
    for key, value in data.items():
        if isinstance(value, dict):
            redacted[key] = redact_sensitive_data(value)
        elif value is not None and any(s in key.lower() for s in SENSITIVE_KEYS):
            redacted[key] = _mask(value) if isinstance(value, str) else "[REDACTED]"
        else:
            redacted[key] = value
    return redacted


def sanitize_log_message(message: str) -> str:
    """Mask API keys and tokens embedded in a message."""
    for pattern, replacement in _SENSITIVE_PATTERNS:
        message = pattern.sub(replacement, message)
    return message
