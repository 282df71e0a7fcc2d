"""Windowed message store for chat_pager.

This module provides the sparse in-memory window of loaded messages.
"""

import bisect
from collections.abc import Callable, Iterable

from chat_pager.logging import get_logger
from chat_pager.models.message import Message
from chat_pager.models.range import LoadRange
from chat_pager.models.window import MergeDirection, WindowBounds, WindowSnapshot

__all__ = [
    "MessageWindow",
    "WindowListener",
]

logger = get_logger(__name__)

WindowListener = Callable[[WindowSnapshot], None]


class MessageWindow:
    """Sparse mapping from message id to message.

    The window is not contiguous: gaps between the minimum and maximum
    loaded ids are legal (for example after a jump far from the current
    window). Item count and positions are therefore computed from the
    loaded ids, never from max - min + 1.

    Bounds are maintained incrementally. Merges only add or replace
    entries, so min/max over the full key set is min/max of the old
    bounds and the new batch.

    Example:
        window = MessageWindow()
        window.add_listener(presentation.on_window_changed)
        window.merge(messages, MergeDirection.APPEND)
        window.position_of(1000)
    """

    def __init__(self) -> None:
        self._messages: dict[int, Message] = {}
        self._ordered_ids: list[int] = []
        self._min_id: int | None = None
        self._max_id: int | None = None
        self._listeners: list[WindowListener] = []

    # === MUTATION ===

    def merge(self, messages: Iterable[Message], direction: MergeDirection) -> None:
        """Upsert messages by id and notify listeners.

        An existing entry with the same id is replaced. An empty batch
        leaves the window untouched and notifies nobody.

        Args:
            messages: Messages to merge, in any order
            direction: End of the list this batch extends
        """
        batch = list(messages)
        if not batch:
            return

        added = 0
        for message in batch:
            if message.id not in self._messages:
                bisect.insort(self._ordered_ids, message.id)
                added += 1
            self._messages[message.id] = message

        batch_min = min(message.id for message in batch)
        batch_max = max(message.id for message in batch)
        self._min_id = batch_min if self._min_id is None else min(self._min_id, batch_min)
        self._max_id = batch_max if self._max_id is None else max(self._max_id, batch_max)

        snapshot = self.snapshot(direction)
        logger.debug(
            "window_merged",
            direction=direction,
            batch_size=len(batch),
            added=added,
            item_count=snapshot.item_count,
            min_loaded_id=self._min_id,
            max_loaded_id=self._max_id,
        )
        for listener in list(self._listeners):
            listener(snapshot)

    def add_listener(self, listener: WindowListener) -> None:
        """Register a callback fired after every non-empty merge."""
        self._listeners.append(listener)

    def remove_listener(self, listener: WindowListener) -> None:
        self._listeners.remove(listener)

    # === QUERIES ===

    def item_count(self) -> int:
        """Number of distinct loaded ids."""
        return len(self._messages)

    def __len__(self) -> int:
        return len(self._messages)

    def __contains__(self, message_id: object) -> bool:
        return message_id in self._messages

    def lookup(self, message_id: int) -> Message | None:
        return self._messages.get(message_id)

    @property
    def min_loaded_id(self) -> int | None:
        return self._min_id

    @property
    def max_loaded_id(self) -> int | None:
        return self._max_id

    def bounds_snapshot(self) -> WindowBounds:
        """Current bounds, or WindowBounds.empty() when nothing is loaded."""
        if self._min_id is None:
            return WindowBounds.empty()
        return WindowBounds(min_loaded_id=self._min_id, max_loaded_id=self._max_id)

    def snapshot(self, direction: MergeDirection | None = None) -> WindowSnapshot:
        return WindowSnapshot(
            bounds=self.bounds_snapshot(),
            item_count=len(self._messages),
            direction=direction,
        )

    def ordered_ids(self) -> list[int]:
        """Loaded ids in ascending order."""
        return list(self._ordered_ids)

    def messages_in_order(self) -> list[Message]:
        return [self._messages[message_id] for message_id in self._ordered_ids]

    def position_of(self, message_id: int) -> int | None:
        """Item position of a loaded message in ascending id order.

        Returns:
            Zero-based position, or None if the id is not loaded
        """
        if message_id not in self._messages:
            return None
        return bisect.bisect_left(self._ordered_ids, message_id)

    def message_at(self, position: int) -> Message:
        """Message at an item position.

        Raises:
            IndexError: If position is outside [0, item_count())
        """
        if not 0 <= position < len(self._ordered_ids):
            raise IndexError(f"Position {position} outside window of {len(self._ordered_ids)}")
        return self._messages[self._ordered_ids[position]]

    # === GAP BOOKKEEPING ===

    def missing_ranges(self, start: int, end: int) -> list[LoadRange]:
        """Unloaded sub-ranges of the inclusive interval [start, end].

        Returns:
            Ascending, non-overlapping ranges; empty if fully loaded
        """
        if end < start:
            return []

        missing: list[LoadRange] = []
        cursor = start
        index = bisect.bisect_left(self._ordered_ids, start)
        while index < len(self._ordered_ids) and self._ordered_ids[index] <= end:
            loaded_id = self._ordered_ids[index]
            if loaded_id > cursor:
                missing.append(LoadRange(start=cursor, end=loaded_id - 1))
            cursor = loaded_id + 1
            index += 1
        if cursor <= end:
            missing.append(LoadRange(start=cursor, end=end))
        return missing

    def gaps(self) -> list[LoadRange]:
        """Unloaded sub-ranges between the minimum and maximum loaded ids."""
        if self._min_id is None or self._max_id is None:
            return []
        return self.missing_ranges(self._min_id, self._max_id)

    def next_missing_after(self, message_id: int) -> int:
        """Smallest unloaded id greater than message_id."""
        candidate = message_id + 1
        while candidate in self._messages:
            candidate += 1
        return candidate

    def previous_missing_before(self, message_id: int) -> int:
        """Largest unloaded id smaller than message_id."""
        candidate = message_id - 1
        while candidate in self._messages:
            candidate -= 1
        return candidate

    def next_loaded_after(self, message_id: int) -> int | None:
        """Smallest loaded id greater than message_id, if any."""
        index = bisect.bisect_right(self._ordered_ids, message_id)
        if index < len(self._ordered_ids):
            return self._ordered_ids[index]
        return None

    def previous_loaded_before(self, message_id: int) -> int | None:
        """Largest loaded id smaller than message_id, if any."""
        index = bisect.bisect_left(self._ordered_ids, message_id)
        if index > 0:
            return self._ordered_ids[index - 1]
        return None
