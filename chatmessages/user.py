"""The sender of a message."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from .enums import MessageFromType
from .utils import gen_sender_id

_U32_LIMIT = 2**32


@dataclass(frozen=True)
class User:
    """A message sender with a random identifier and a sender type."""

    sender_type: MessageFromType
    sender_id: int = field(default_factory=gen_sender_id)

    def __post_init__(self) -> None:
        if not isinstance(self.sender_type, MessageFromType):
            object.__setattr__(self, "sender_type", MessageFromType(self.sender_type))
        if not isinstance(self.sender_id, int) or not 0 <= self.sender_id < _U32_LIMIT:
            raise ValueError(f"sender_id must be an unsigned 32-bit integer, got {self.sender_id!r}")

    def to_dict(self) -> dict[str, Any]:
        """Return the serialised form of this user."""
        return {"sender_id": self.sender_id, "sender_type": self.sender_type.value}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> User:
        """Build a user from its serialised form."""
        try:
            return cls(
                sender_type=MessageFromType(data["sender_type"]),
                sender_id=data["sender_id"],
            )
        except KeyError as exc:
            raise ValueError(f"missing field {exc.args[0]!r}") from exc