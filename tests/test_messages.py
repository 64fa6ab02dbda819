from datetime import datetime, timedelta, timezone

import pytest

from chatmessages.enums import MessageFromType, MessageType
from chatmessages.messages import (
    CryptoTransferMessagePackage,
    FileMessagePackage,
    ImageMessagePackage,
    MessageError,
    TextMessagePackage,
    format_pretty_timestamp,
)
from chatmessages.user import User

ADDRESS = "A" * 32


def test_text_message_at_limit_is_accepted():
    msg = TextMessagePackage(User(MessageFromType.USER), "x" * 512)
    assert len(msg.message) == 512
    assert msg.message_type is MessageType.TEXT


def test_text_message_over_limit_is_rejected():
    with pytest.raises(MessageError, match="Max characters is 512"):
        TextMessagePackage(User(MessageFromType.USER), "x" * 513)


def test_text_limit_counts_utf8_bytes():
    TextMessagePackage(User(MessageFromType.AGENT), "é" * 256)
    with pytest.raises(MessageError):
        TextMessagePackage(User(MessageFromType.AGENT), "é" * 257)


def test_text_ids_are_u32_and_keep_sender():
    user = User(MessageFromType.AGENT)
    msg = TextMessagePackage(user, "AGENT text message")
    assert 0 <= msg.message_id < 2**32
    assert msg.sender == user
    assert msg.message == "AGENT text message"


def test_text_to_dict_fields():
    user = User(MessageFromType.USER, sender_id=7)
    ts = datetime(2024, 1, 5, 14, 7, tzinfo=timezone.utc)
    msg = TextMessagePackage(user, "USER text message", message_id=42, timestamp=ts)
    data = msg.to_dict()
    assert data["message_id"] == 42
    assert data["type"] == "Text"
    assert data["message"] == "USER text message"
    assert data["sender"] == user.to_dict()
    assert data["timestamp"].endswith("Z")
    parsed = datetime.fromisoformat(data["timestamp"].replace("Z", "+00:00"))
    assert parsed == ts


def test_pretty_timestamp_format():
    ts = datetime(2024, 1, 5, 14, 7, tzinfo=timezone.utc)
    assert format_pretty_timestamp(ts) == "Friday, January,  5, 2024 at 02:07PM"


def test_pretty_timestamp_converts_to_utc():
    local = datetime(2024, 1, 5, 16, 7, tzinfo=timezone(timedelta(hours=2)))
    utc = datetime(2024, 1, 5, 14, 7, tzinfo=timezone.utc)
    assert format_pretty_timestamp(local) == format_pretty_timestamp(utc)


def test_pretty_timestamp_midnight_is_twelve_am():
    ts = datetime(2024, 3, 15, 0, 30, tzinfo=timezone.utc)
    text = format_pretty_timestamp(ts)
    assert text.endswith("at 12:30AM")


def test_methods_match_function():
    ts = datetime(2023, 12, 25, 9, 0, tzinfo=timezone.utc)
    expected = format_pretty_timestamp(ts)
    text = TextMessagePackage(User(MessageFromType.USER), "hi", timestamp=ts)
    image = ImageMessagePackage(1, MessageFromType.USER, b"\x89PNG", timestamp=ts)
    file_msg = FileMessagePackage(MessageFromType.AGENT, b"data", timestamp=ts)
    crypto = CryptoTransferMessagePackage(
        MessageFromType.USER, ADDRESS, 1.5, "SOL", timestamp=ts
    )
    assert text.pretty_timestamp() == expected
    assert image.pretty_timestamp() == expected
    assert file_msg.pretty_timestamp() == expected
    assert crypto.pretty_timestamp() == expected


def test_image_message_keeps_data():
    msg = ImageMessagePackage(99, MessageFromType.AGENT, bytearray(b"\x01\x02\x03"))
    assert msg.image_data == b"\x01\x02\x03"
    assert msg.sender_id == 99
    assert msg.sender_type is MessageFromType.AGENT
    assert msg.message_type is MessageType.IMAGE


def test_file_message_keeps_data():
    msg = FileMessagePackage("User", b"contents")
    assert msg.file_data == b"contents"
    assert msg.sender_type is MessageFromType.USER
    assert msg.message_type is MessageType.FILE


def test_unknown_sender_type_rejected():
    with pytest.raises(MessageError):
        FileMessagePackage("Robot", b"")


def test_crypto_valid_transfer():
    msg = CryptoTransferMessagePackage(MessageFromType.USER, ADDRESS, 2.0, "SOL")
    assert msg.amount == 2.0
    assert msg.token_symbol == "SOL"
    assert msg.recipient_address == ADDRESS
    assert msg.transaction_signature is None
    assert msg.message_type is MessageType.CRYPTO_TRANSFER


def test_crypto_signature_can_be_set():
    msg = CryptoTransferMessagePackage(MessageFromType.AGENT, "b" * 44, 0.1, "USDC")
    msg.transaction_signature = "sig123"
    assert msg.transaction_signature == "sig123"


@pytest.mark.parametrize("address", ["A" * 31, "A" * 45, "A" * 31 + "!", "", "A" * 20 + " " + "A" * 20])
def test_crypto_invalid_address(address):
    with pytest.raises(MessageError, match="Invalid Solana address format"):
        CryptoTransferMessagePackage(MessageFromType.USER, address, 1.0, "SOL")


@pytest.mark.parametrize("amount", [0.0, -1.0])
def test_crypto_invalid_amount(amount):
    with pytest.raises(MessageError, match="Amount must be greater than 0"):
        CryptoTransferMessagePackage(MessageFromType.USER, ADDRESS, amount, "SOL")


def test_naive_timestamp_is_treated_as_utc():
    msg = FileMessagePackage(MessageFromType.USER, b"", timestamp=datetime(2024, 1, 5, 14, 7))
    assert msg.timestamp.tzinfo is timezone.utc
    assert msg.timestamp.hour == 14