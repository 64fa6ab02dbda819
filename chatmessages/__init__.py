"""Message packages, senders and settings for chats between users and agents."""

__version__ = "0.1.0"
__all__ = ["enums", "utils", "user", "envvars", "messages", "messaging"]