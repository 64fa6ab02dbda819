# chatmessages

Message packages for conversations between users and agents. There are four kinds of
message: text, image, file and crypto transfer. Each message gets a random message id and a
UTC timestamp when you create it.

## Installation

```
pip install chatmessages
```

## Senders

```python
from chatmessages.enums import MessageFromType
from chatmessages.user import User

user = User(MessageFromType.USER)
agent = User(MessageFromType.AGENT)

agent.sender_type.is_agent()   # True
data = user.to_dict()          # {"sender_id": ..., "sender_type": "User"}
User.from_dict(data) == user   # True
```

A `User` is immutable. Its `sender_id` must be an unsigned 32-bit integer. If it is not,
`ValueError` is raised. `User.from_dict` also raises `ValueError` when a field is missing.

Sender ids and message ids are random unsigned 32-bit integers. They come from
`chatmessages.utils.gen_sender_id()` and `chatmessages.utils.gen_message_id()`.

`chatmessages.enums` also provides `MessageType`, which has the members `TEXT`, `IMAGE`,
`FILE` and `CRYPTO_TRANSFER`. Every message package reports its kind through its
`message_type` property.

## Messages

```python
from chatmessages.messages import (
    TextMessagePackage,
    ImageMessagePackage,
    FileMessagePackage,
    CryptoTransferMessagePackage,
    MessageError,
)

message = TextMessagePackage(user, "Hello there")
message.to_dict()             # message_id, type, message, sender, timestamp (RFC 3339, "Z")
message.pretty_timestamp()    # e.g. "Monday, June,  2, 2025 at 03:04PM"

image = ImageMessagePackage(agent.sender_id, MessageFromType.AGENT, b"\x89PNG...")
document = FileMessagePackage(MessageFromType.USER, b"file contents")

transfer = CryptoTransferMessagePackage(
    MessageFromType.AGENT, "A" * 32, 1.5, "SOL"
)
transfer.transaction_signature = "signature"
```

Each message is checked when you create it. If it is not valid, `MessageError` (a
`ValueError`) is raised:

- A text message may be at most 512 bytes of UTF-8.
- A crypto transfer needs an alphanumeric recipient address of 32 to 44 bytes and an
  amount greater than zero.
- A sender type given as a string must be a valid `MessageFromType` value.

The text, image and file packages are immutable, and image and file data are stored as
`bytes`. A crypto transfer package can be changed, so its `transaction_signature` (which
starts as `None`) can be set later. Timestamps are stored in UTC. A naive `datetime` is
taken to be UTC.

`format_pretty_timestamp(timestamp)` applies the same human-readable format to any
`datetime`.

## Inspecting stored messages

`chatmessages.messaging.debug_saved_message(document, pretty_print)` takes a stored message
document as a plain mapping. It prints the document's `_id`, `message_id`, `type`,
`message` and the sender's `sender_id` and `sender_type`, for each field that is present.
It prints the `timestamp` only when `pretty_print` is true.

## Configuration

`chatmessages.envvars.validate_and_get_env_vars()` first loads a `.env` file, if one can be
found from the current directory. It then reads these variables:

- `SEND_TEXT_MESSAGES`
- `SEND_FILE_MESSAGES`
- `SEND_IMAGE_MESSAGES`
- `SEND_CRYPTO_TRANSFER_MESSAGES`

It returns them as an `EnvVars` value, which holds the raw strings. A variable that is
missing becomes an empty string, and a note about it is printed to stdout. For any
variable that is missing or empty, a warning is also written to stderr.

## What this package does not do

The package builds, validates and serialises messages. It does not store or fetch them:
there is no database connection and no message history. It has no command-line program.
Image and file messages have no serialised form, and no message is ever sent anywhere.

## Running the tests

```
pip install -e ".[test]"
pytest
```