"""Exception hierarchy for chat_pager.

All failures surface to the requesting caller through the future
returned by the load coordinator. None of them is fatal to the
coordinator itself.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from chat_pager.models.range import LoadRange

__all__ = [
    "ChatPagerError",
    "FetchFailure",
    "FetchTimeout",
    "InvalidRange",
    "LoadSuperseded",
]


class ChatPagerError(Exception):
    """Base class for chat_pager errors."""


class InvalidRange(ChatPagerError):
    """Raised when a range is empty or inverted (end < start, count <= 0).

    Always raised synchronously, before any fetch is attempted.
    """

    def __init__(self, start: int, end: int) -> None:
        super().__init__(f"Invalid range: [{start}, {end}]")
        self.start = start
        self.end = end


class FetchFailure(ChatPagerError):
    """Raised when the message source is unreachable or returns malformed data."""

    def __init__(self, load_range: "LoadRange", reason: str) -> None:
        super().__init__(f"Fetch of [{load_range.start}, {load_range.end}] failed: {reason}")
        self.load_range = load_range
        self.reason = reason


class FetchTimeout(FetchFailure):
    """Raised when a fetch does not complete within the configured timeout."""

    def __init__(self, load_range: "LoadRange", timeout: float) -> None:
        super().__init__(load_range, f"timed out after {timeout}s")
        self.timeout = timeout


class LoadSuperseded(ChatPagerError):
    """Raised for a pending request replaced by a newer one before it was issued."""

    def __init__(self, load_range: "LoadRange") -> None:
        super().__init__(f"Load of [{load_range.start}, {load_range.end}] superseded")
        self.load_range = load_range
