"""Message packages: text, image, file and crypto transfer."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from .enums import MessageFromType, MessageType
from .user import User
from .utils import gen_message_id

MAX_TEXT_LENGTH = 512
_MIN_ADDRESS_LENGTH = 32
_MAX_ADDRESS_LENGTH = 44

_WEEKDAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")
_MONTHS = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


class MessageError(ValueError):
    """Raised when a message package cannot be built from the given values."""


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _as_utc(timestamp: datetime) -> datetime:
    if timestamp.tzinfo is None:
        return timestamp.replace(tzinfo=timezone.utc)
    return timestamp.astimezone(timezone.utc)


def format_pretty_timestamp(timestamp: datetime) -> str:
    """Format a timestamp as e.g. 'Friday, January,  5, 2024 at 02:07PM' (UTC)."""
    ts = _as_utc(timestamp)
    hour12 = ts.hour % 12 or 12
    meridiem = "AM" if ts.hour < 12 else "PM"
    return (
        f"{_WEEKDAYS[ts.weekday()]}, {_MONTHS[ts.month - 1]}, {ts.day:>2}, "
        f"{ts.year:04d} at {hour12:02d}:{ts.minute:02d}{meridiem}"
    )


def _rfc3339(timestamp: datetime) -> str:
    return _as_utc(timestamp).isoformat().replace("+00:00", "Z")


def _normalise_common(package: Any) -> None:
    object.__setattr__(package, "timestamp", _as_utc(package.timestamp))


def _coerce_sender_type(package: Any) -> None:
    if not isinstance(package.sender_type, MessageFromType):
        try:
            value = MessageFromType(package.sender_type)
        except ValueError as exc:
            raise MessageError(f"unknown sender type {package.sender_type!r}") from exc
        object.__setattr__(package, "sender_type", value)


@dataclass(frozen=True)
class TextMessagePackage:
    """A text message of at most 512 bytes of UTF-8."""

    sender: User
    message: str
    message_id: int = field(default_factory=gen_message_id)
    timestamp: datetime = field(default_factory=_now)

    def __post_init__(self) -> None:
        if not isinstance(self.message, str):
            raise MessageError("Message must be a string.")
        if len(self.message.encode("utf-8")) > MAX_TEXT_LENGTH:
            raise MessageError("Message is too long. Max characters is 512.")
        _normalise_common(self)

    @property
    def message_type(self) -> MessageType:
        return MessageType.TEXT

    def pretty_timestamp(self) -> str:
        """Return the creation time in a human-readable form."""
        return format_pretty_timestamp(self.timestamp)

    def to_dict(self) -> dict[str, Any]:
        """Return the serialised form of this message."""
        return {
            "message_id": self.message_id,
            "type": self.message_type.value,
            "message": self.message,
            "sender": self.sender.to_dict(),
            "timestamp": _rfc3339(self.timestamp),
        }


@dataclass(frozen=True)
class ImageMessagePackage:
    """A message carrying raw image bytes."""

    sender_id: int
    sender_type: MessageFromType
    image_data: bytes
    message_id: int = field(default_factory=gen_message_id)
    timestamp: datetime = field(default_factory=_now)

    def __post_init__(self) -> None:
        _coerce_sender_type(self)
        object.__setattr__(self, "image_data", bytes(self.image_data))
        _normalise_common(self)

    @property
    def message_type(self) -> MessageType:
        return MessageType.IMAGE

    def pretty_timestamp(self) -> str:
        """Return the creation time in a human-readable form."""
        return format_pretty_timestamp(self.timestamp)


@dataclass(frozen=True)
class FileMessagePackage:
    """A message carrying raw file bytes."""

    sender_type: MessageFromType
    file_data: bytes
    message_id: int = field(default_factory=gen_message_id)
    timestamp: datetime = field(default_factory=_now)

    def __post_init__(self) -> None:
        _coerce_sender_type(self)
        object.__setattr__(self, "file_data", bytes(self.file_data))
        _normalise_common(self)

    @property
    def message_type(self) -> MessageType:
        return MessageType.FILE

    def pretty_timestamp(self) -> str:
        """Return the creation time in a human-readable form."""
        return format_pretty_timestamp(self.timestamp)


@dataclass
class CryptoTransferMessagePackage:
    """A request to transfer an amount of a token to a Solana address."""

    sender_type: MessageFromType
    recipient_address: str
    amount: float
    token_symbol: str
    message_id: int = field(default_factory=gen_message_id)
    timestamp: datetime = field(default_factory=_now)
    transaction_signature: str | None = None

    def __post_init__(self) -> None:
        _coerce_sender_type(self)
        address = self.recipient_address
        size = len(address.encode("utf-8"))
        if (
            not all(ch.isalnum() for ch in address)
            or size < _MIN_ADDRESS_LENGTH
            or size > _MAX_ADDRESS_LENGTH
        ):
            raise MessageError("Invalid Solana address format")
        if self.amount <= 0.0:
            raise MessageError("Amount must be greater than 0")
        _normalise_common(self)

    @property
    def message_type(self) -> MessageType:
        return MessageType.CRYPTO_TRANSFER

    def pretty_timestamp(self) -> str:
        """Return the creation time in a human-readable form."""
        return format_pretty_timestamp(self.timestamp)