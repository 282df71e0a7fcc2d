"""Synthetic message source for chat_pager.

This module provides a MessageSourceInterface implementation that
generates messages after an artificial delay, modelling a network call.
"""

import asyncio
from typing import Any, Self

from chat_pager.config import SourceSettings
from chat_pager.errors import InvalidRange
from chat_pager.infra.synthetic.generator import generate_messages
from chat_pager.interfaces.source import MessageSourceInterface
from chat_pager.logging import get_logger
from chat_pager.models.message import Message

__all__ = [
    "SyntheticMessageSource",
]

logger = get_logger(__name__)


class SyntheticMessageSource(MessageSourceInterface):
    """Delayed generator of deterministic messages.

    The delay is awaited on the event loop; generation itself runs on a
    worker thread and only returns a fresh list. When min_id/max_id are
    set, ranges reaching outside them come back short (possibly empty),
    like a backend with a finite history.

    Example:
        source = SyntheticMessageSource(SourceSettings(latency=0.2))
        messages = await source.fetch(990, 21)
    """

    config_class = SourceSettings

    def __init__(self, settings: SourceSettings | None = None) -> None:
        """Initialize source.

        Args:
            settings: Source settings (default: loaded from environment)
        """
        self._settings = settings or SourceSettings()
        self._latency = self._settings.latency
        self._min_id = self._settings.min_id
        self._max_id = self._settings.max_id
        self._fetches = 0

    @classmethod
    async def from_config(cls, config: SourceSettings) -> Self:
        """Factory method for MessagePager instantiation.

        Args:
            config: Source settings

        Returns:
            SyntheticMessageSource instance
        """
        return cls(config)

    @classmethod
    async def from_dict(cls, config: dict[str, Any]) -> Self:
        """Factory method for custom config dict.

        Args:
            config: Dictionary with source settings

        Returns:
            SyntheticMessageSource instance
        """
        return cls(SourceSettings(**config))

    async def close(self) -> None:
        """Close resources (no-op for the synthetic source)."""
        pass

    @property
    def fetch_count(self) -> int:
        """Number of fetches served so far."""
        return self._fetches

    async def fetch(self, start_id: int, count: int) -> list[Message]:
        """Fetch messages after the configured latency."""
        if count <= 0:
            raise InvalidRange(start_id, start_id + count - 1)

        self._fetches += 1
        if self._latency > 0:
            await asyncio.sleep(self._latency)

        first, last = self._clip(start_id, start_id + count - 1)
        if last < first:
            logger.debug("synthetic_range_outside_history", start_id=start_id, count=count)
            return []

        return await asyncio.to_thread(generate_messages, first, last - first + 1)

    def _clip(self, first: int, last: int) -> tuple[int, int]:
        """Clip an inclusive id range to the available history."""
        if self._min_id is not None:
            first = max(first, self._min_id)
        if self._max_id is not None:
            last = min(last, self._max_id)
        return first, last
