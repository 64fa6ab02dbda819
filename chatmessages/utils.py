"""Random identifier generation."""

import os


def _random_u32() -> int:
    """Return an unsigned 32-bit integer read big-endian from secure random bytes."""
    return int.from_bytes(os.urandom(4), "big")


def gen_message_id() -> int:
    """Return a fresh random 32-bit message identifier."""
    return _random_u32()


def gen_sender_id() -> int:
    """Return a fresh random 32-bit sender identifier."""
    return _random_u32()