"""Outbound ports — interfaces for external system adapters."""

from typing import Protocol, runtime_checkable

from linear_discord.domain.models import OutboundMessage


@runtime_checkable
class MessageSinkPort(Protocol):
    """Interface for delivering a formatted message to the chat platform.

    Implementations raise ``DeliveryError`` when the message was not accepted.
    """

    async def send(self, message: OutboundMessage) -> None: ...
