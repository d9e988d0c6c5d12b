"""Configuration read from environment variables."""

import os
from typing import Any, Dict

DEFAULTS: Dict[str, Any] = {
    "account": "iCloud",
    "interpreter": "osascript",
    "timeout": 10.0,
    "rate_limit": 30,
    "rate_window": 60.0,
    "log_level": "WARNING",
}

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _env_number(name: str, default: float, cast=float, minimum: float = 0) -> Any:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return cast(default)
    try:
        value = cast(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None
    if value <= minimum:
        raise ValueError(f"{name} must be > {minimum}, got {value}")
    return value


def get_config() -> Dict[str, Any]:
    """Read server configuration from environment variables.

    Unset variables fall back to ``DEFAULTS``. Invalid numbers raise
    ``ValueError`` naming the offending variable.
    """
    log_level = os.environ.get("APPLE_NOTES_LOG_LEVEL", DEFAULTS["log_level"]).strip().upper()
    if log_level not in LOG_LEVELS:
        raise ValueError(f"APPLE_NOTES_LOG_LEVEL must be one of {list(LOG_LEVELS)}, got {log_level!r}")

    return {
        "account": os.environ.get("APPLE_NOTES_ACCOUNT") or DEFAULTS["account"],
        "interpreter": os.environ.get("APPLE_NOTES_OSASCRIPT") or DEFAULTS["interpreter"],
        "timeout": _env_number("APPLE_NOTES_TIMEOUT", DEFAULTS["timeout"]),
        "rate_limit": _env_number("APPLE_NOTES_RATE_LIMIT", DEFAULTS["rate_limit"], cast=int),
        "rate_window": _env_number("APPLE_NOTES_RATE_WINDOW", DEFAULTS["rate_window"]),
        "log_level": log_level,
    }
