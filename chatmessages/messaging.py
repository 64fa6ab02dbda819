"""Reporting of stored message documents."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


def debug_saved_message(message_package: Mapping[str, Any], pretty_print: bool) -> None:
    """Print the known fields of a stored message document."""
    labels = (
        ("_id", "Document ID"),
        ("message_id", "Message ID"),
        ("type", "Message Type"),
        ("message", "Message Content"),
    )
    for key, label in labels:
        if key in message_package:
            print(f"{label}: {message_package[key]!r}")

    sender = message_package.get("sender")
    if isinstance(sender, Mapping):
        if "sender_id" in sender:
            print(f"Sender ID: {sender['sender_id']!r}")
        if "sender_type" in sender:
            print(f"Sender Type: {sender['sender_type']!r}")

    if "timestamp" in message_package and pretty_print:
        print(f"Timestamp: {message_package['timestamp']!r}")