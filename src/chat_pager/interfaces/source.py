"""Message source interface for chat_pager.

This module defines the Protocol for fetching message ranges.
"""

from typing import ClassVar, Protocol, runtime_checkable

from chat_pager.models.message import Message

__all__ = [
    "MessageSourceInterface",
]


@runtime_checkable
class MessageSourceInterface(Protocol):
    """Contract for message sources.

    A source stands in for a backend call: request {start_id, count},
    respond with an ascending run of messages. Implementations must not
    touch window or coordinator state; they only compute and return.
    """

    config_class: ClassVar[type | None] = None

    async def fetch(self, start_id: int, count: int) -> list[Message]:
        """Fetch up to `count` messages starting at `start_id`.

        Args:
            start_id: First message id of the range
            count: Number of ids requested

        Returns:
            Messages in ascending id order, all within
            [start_id, start_id + count - 1]; may be shorter than count
            when the history does not cover the whole range

        Raises:
            InvalidRange: If count <= 0
            FetchFailure: If the backend is unreachable
        """
        ...
