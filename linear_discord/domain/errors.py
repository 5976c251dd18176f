"""Relay error taxonomy."""

from typing import Optional


class RelayError(Exception):
    """Base class for errors raised while relaying a notification."""


class FormatError(RelayError):
    """An inbound field is malformed or cannot be parsed (e.g. a bad date)."""


class MissingFieldError(RelayError):
    """A field required by the notification's formatter is absent."""

    def __init__(self, field: str):
        super().__init__(f"Missing required field: {field}")
        self.field = field


class DeliveryError(RelayError):
    """The outbound webhook call failed or timed out."""

    def __init__(
        self,
        reason: str,
        status: Optional[int] = None,
        body: Optional[str] = None,
    ):
        super().__init__(f"Discord webhook failed: {reason}")
        self.reason = reason
        self.status = status
        self.body = body


class ConfigError(RelayError):
    """Startup configuration is missing or invalid."""
