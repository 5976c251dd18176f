"""Port interfaces (Hexagonal Architecture)."""

from linear_discord.ports.outbound import MessageSinkPort

__all__ = ["MessageSinkPort"]
