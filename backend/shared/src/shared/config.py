"""Environment configuration for document generation.

All settings are optional; hosting platforms supply them as environment
variables. Services read them at construction time so tests can override
values through constructor arguments.
"""

import os
from datetime import UTC, tzinfo
from zoneinfo import ZoneInfo

DEFAULT_TIMEZONE = "America/Sao_Paulo"
DEFAULT_CORS_ALLOW_ORIGIN = "*"

_TRUTHY = {"1", "true", "yes", "on"}


def env_flag(name: str, default: bool = False) -> bool:
    """Read a boolean flag from the environment.

    Args:
        name: Environment variable name
        default: Value used when the variable is unset or empty

    Returns:
        True for 1/true/yes/on (case-insensitive), False otherwise.
    """
    raw = os.environ.get(name, "").strip().lower()
    if not raw:
        return default
    return raw in _TRUTHY


def get_timezone(name: str | None = None) -> tzinfo:
    """Resolve the display timezone.

    Args:
        name: IANA timezone name. Falls back to DOCUMENT_TIMEZONE, then
            America/Sao_Paulo.

    Returns:
        tzinfo for the requested zone.
    """
    tz_name = name or os.environ.get("DOCUMENT_TIMEZONE") or DEFAULT_TIMEZONE
    if tz_name.upper() == "UTC":
        return UTC
    return ZoneInfo(tz_name)


def get_cors_allow_origin() -> str:
    """Value for the Access-Control-Allow-Origin response header."""
    return os.environ.get("CORS_ALLOW_ORIGIN") or DEFAULT_CORS_ALLOW_ORIGIN
