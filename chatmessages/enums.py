"""Enumerations describing message kinds and message senders."""

from enum import Enum


class MessageType(Enum):
    """The kind of content a message package carries."""

    TEXT = "Text"
    IMAGE = "Image"
    FILE = "File"
    CRYPTO_TRANSFER = "CryptoTransfer"

    def __str__(self) -> str:
        return self.value


class MessageFromType(Enum):
    """Who a message comes from."""

    AGENT = "Agent"
    USER = "User"

    def is_agent(self) -> bool:
        """Return True when the sender is an agent."""
        return self is MessageFromType.AGENT

    def __str__(self) -> str:
        return self.value