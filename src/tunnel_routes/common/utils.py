"""Log-sanitizing helpers."""

from typing import Any

SENSITIVE_FIELDS = frozenset(
    {
        "api_token",
        "api_key",
        "token",
        "authorization",
        "x-auth-key",
        "secret",
        "password",
    }
)


def mask_sensitive_data(
    value: str | None, mask_char: str = "*", show_chars: int = 4
) -> str:
    """Mask a credential for logging, keeping its last few characters.

    Args:
        value: Sensitive string to mask (API token, API key)
        mask_char: Character to use for masking
        show_chars: Number of characters to show at the end

    Returns:
        Masked string safe for logging
    """
    if not value:
        return "<None>"

    if len(value) <= show_chars:
        return mask_char * len(value)

    return mask_char * (len(value) - show_chars) + value[-show_chars:]


def sanitize_log_data(data: dict[str, Any]) -> dict[str, Any]:
    """Return a copy of ``data`` with credential-like keys masked."""
    sanitized = {}
    for key, value in data.items():
        if any(field in key.lower() for field in SENSITIVE_FIELDS):
            sanitized[key] = mask_sensitive_data(str(value) if value else None)
        else:
            sanitized[key] = value
    return sanitized
