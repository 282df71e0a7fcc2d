"""Deterministic message generation for chat_pager.

Stands in for a message backend: the same (start_id, count) always
yields the same messages.
"""

from chat_pager.errors import InvalidRange
from chat_pager.models.message import Message

__all__ = [
    "LONG_MESSAGE_EVERY",
    "generate_messages",
    "message_text",
]

# One message in every 19 gets a multi-line body (tall cell)
LONG_MESSAGE_EVERY = 19

_LONG_TEXT = "\n".join(["Message with a longer body"] * 4)


def message_text(message_id: int) -> str:
    """Return the deterministic text for a message id."""
    if message_id % LONG_MESSAGE_EVERY == 0:
        return _LONG_TEXT
    return f"Sample message {message_id}"


def generate_messages(start_id: int, count: int) -> list[Message]:
    """Generate a contiguous run of messages.

    Args:
        start_id: First message id
        count: Number of messages to generate

    Returns:
        Messages with ids start_id..start_id + count - 1, ascending

    Raises:
        InvalidRange: If count <= 0
    """
    if count <= 0:
        raise InvalidRange(start_id, start_id + count - 1)
    return [
        Message(id=message_id, text=message_text(message_id))
        for message_id in range(start_id, start_id + count)
    ]
