"""Configuration loaded once at startup."""

__version__ = "0.1.0"

import os
from dataclasses import dataclass
from typing import Callable, Optional, TypeVar

from dotenv import load_dotenv

from linear_discord.domain.errors import ConfigError

load_dotenv()

DEFAULT_PORT = 3000
DEFAULT_HOST = "0.0.0.0"
DEFAULT_DELIVERY_TIMEOUT = 5.0
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
MAX_PORT = 65535

Number = TypeVar("Number", int, float)


def _optional(name: str) -> Optional[str]:
    value = os.getenv(name, "").strip()
    return value or None


def _number(name: str, default: Number, cast: Callable[[str], Number]) -> Number:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        value = cast(raw)
    except ValueError as e:
        raise ConfigError(f"{name} must be a number, got {raw!r}") from e
    if value <= 0:
        raise ConfigError(f"{name} must be positive, got {raw!r}")
    return value


@dataclass(frozen=True)
class AppConfig:
    """Immutable process-wide settings; passed explicitly to the adapters."""

    discord_webhook_url: str
    port: int = DEFAULT_PORT
    host: str = DEFAULT_HOST
    log_level: str = "INFO"
    delivery_timeout_seconds: float = DEFAULT_DELIVERY_TIMEOUT
    discord_username: Optional[str] = None
    discord_avatar_url: Optional[str] = None

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Create AppConfig from environment variables (and ``.env``).

        Raises:
            ConfigError: DISCORD_WEBHOOK_URL is unset or another setting is invalid.
        """
        webhook_url = _optional("DISCORD_WEBHOOK_URL")
        if not webhook_url:
            raise ConfigError(
                "DISCORD_WEBHOOK_URL is required. "
                "Add it to your .env file or export it in your shell."
            )
        log_level = (_optional("LOG_LEVEL") or "INFO").upper()
        if log_level not in LOG_LEVELS:
            raise ConfigError(f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {log_level!r}")
        port = _number("PORT", DEFAULT_PORT, int)
        if port > MAX_PORT:
            raise ConfigError(f"PORT must be at most {MAX_PORT}, got {port}")
        return cls(
            discord_webhook_url=webhook_url,
            port=port,
            host=_optional("HOST") or DEFAULT_HOST,
            log_level=log_level,
            delivery_timeout_seconds=_number(
                "DELIVERY_TIMEOUT_SECONDS", DEFAULT_DELIVERY_TIMEOUT, float
            ),
            discord_username=_optional("DISCORD_USERNAME"),
            discord_avatar_url=_optional("DISCORD_AVATAR_URL"),
        )
