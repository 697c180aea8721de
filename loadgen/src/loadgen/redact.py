"""Redaction helpers so credential context can be logged safely."""

from __future__ import annotations

from typing import Any, Mapping

SENSITIVE_KEYS = {
    "password",
    "resume",
    "token",
    "authtoken",
    "auth_token",
    "totp",
    "code",
    "digest",
}

OPAQUE = "<opaque>"


def redact_mapping(obj: Mapping[str, Any]) -> dict[str, Any]:
    """Deep redact mapping values for known sensitive keys.

    Meteor-style logins nest the secret (``{"password": {"digest": ...}}``),
    so a sensitive key hides its whole subtree.
    """

    redacted: dict[str, Any] = {}
    for key, value in obj.items():
        if str(key).lower() in SENSITIVE_KEYS:
            redacted[key] = "[REDACTED]"
        elif isinstance(value, Mapping):
            redacted[key] = redact_mapping(value)
        elif isinstance(value, list):
            redacted[key] = [redact_mapping(item) if isinstance(item, Mapping) else item for item in value]
        else:
            redacted[key] = value
    return redacted


def redact_credentials(credentials: Any) -> Any:
    """Loggable form of transport-defined credentials; anything but a mapping stays opaque."""

    if isinstance(credentials, Mapping):
        return redact_mapping(credentials)
    return OPAQUE
