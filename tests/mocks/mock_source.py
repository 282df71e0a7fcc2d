"""Manually released message source for testing."""

import asyncio
from typing import Any, Self

from chat_pager.infra.synthetic.generator import generate_messages
from chat_pager.models.message import Message


async def settle(cycles: int = 5) -> None:
    """Let pending tasks and future callbacks run."""
    for _ in range(cycles):
        await asyncio.sleep(0)


class ManualMessageSource:
    """Message source whose fetches block until the test releases them.

    Records every fetch and the maximum number of concurrent fetches.
    """

    config_class = None

    def __init__(self) -> None:
        self.calls: list[tuple[int, int]] = []
        self._gates: list[asyncio.Future[Any]] = []
        self.active = 0
        self.max_active = 0
        self.closed = False

    @classmethod
    async def from_dict(cls, config: dict[str, Any]) -> Self:
        return cls()

    async def close(self) -> None:
        self.closed = True

    async def fetch(self, start_id: int, count: int) -> list[Message]:
        self.calls.append((start_id, count))
        gate: asyncio.Future[Any] = asyncio.get_running_loop().create_future()
        self._gates.append(gate)
        self.active += 1
        self.max_active = max(self.max_active, self.active)
        try:
            return await gate
        finally:
            self.active -= 1

    def release(self, index: int = -1, messages: Any = None) -> None:
        """Complete a recorded fetch, by default with generated messages."""
        if messages is None:
            start_id, count = self.calls[index]
            messages = generate_messages(start_id, count)
        self._gates[index].set_result(messages)

    def fail(self, index: int, error: BaseException) -> None:
        self._gates[index].set_exception(error)
