"""Message model for chat_pager.

Messages are immutable values produced by a message source.
"""

from typing import Any

from pydantic import BaseModel

__all__ = [
    "Message",
]


class Message(BaseModel, frozen=True):
    """A single chat message.

    Identity is the id alone: two messages with the same id are equal
    and hash the same regardless of text. Ids are not guaranteed to be
    contiguous and may be negative once the list is extended upward
    past the origin.

    Attributes:
        id: Message identifier, strictly increasing in list order
        text: Message body
    """

    id: int
    text: str

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Message):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
