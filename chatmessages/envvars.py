"""Feature switches read from the environment."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv


@dataclass(frozen=True)
class EnvVars:
    """Raw values of the message-sending switches; empty means unset."""

    send_text_messages: str
    send_file_messages: str
    send_image_messages: str
    send_crypto_transfer_messages: str


_SETTINGS = (
    ("SEND_TEXT_MESSAGES", "Couldn't read SEND_TEXT_MESSAGES", "text"),
    ("SEND_FILE_MESSAGES", "Couldn't read env var SEND_FILE_MESSAGES", "file"),
    ("SEND_IMAGE_MESSAGES", "Couldn't read env var SEND_IMAGE_MESSAGES", "image"),
    (
        "SEND_CRYPTO_TRANSFER_MESSAGES",
        "Couldn't read env var SEND_CRYPTO_TRANSFER_MESSAGES",
        "crypto transfer",
    ),
)


def _read_setting(name: str, read_failure: str, kind: str) -> str:
    value = os.environ.get(name)
    if value is None:
        print(f"{read_failure} (environment variable not found)")
        value = ""
    if not value:
        print(
            f"The {name.lower()} environment variable is not set. By default it's set to "
            f"false. Please verify you want to allow sending {kind} messages.",
            file=sys.stderr,
        )
    return value


def validate_and_get_env_vars() -> EnvVars:
    """Load a .env file if present, then read and report the sending switches."""
    load_dotenv(find_dotenv(usecwd=True))
    values = [_read_setting(name, failure, kind) for name, failure, kind in _SETTINGS]
    return EnvVars(*values)