"""Window state models for chat_pager.

These models describe the loaded window to the presentation layer.
"""

from enum import StrEnum

from pydantic import BaseModel, Field

__all__ = [
    "MergeDirection",
    "WindowBounds",
    "WindowSnapshot",
]


class MergeDirection(StrEnum):
    """Which end of the list a merged batch extends.

    Renderers use PREPEND to keep the visible item anchored while
    content is inserted above it.
    """

    PREPEND = "prepend"
    APPEND = "append"


class WindowBounds(BaseModel, frozen=True):
    """Minimum and maximum loaded ids.

    Both are None for the empty window (see WindowBounds.empty()).
    """

    min_loaded_id: int | None = None
    max_loaded_id: int | None = None

    @classmethod
    def empty(cls) -> "WindowBounds":
        return cls()

    @property
    def is_empty(self) -> bool:
        return self.min_loaded_id is None


class WindowSnapshot(BaseModel, frozen=True):
    """State of the window after a merge.

    Attributes:
        bounds: Loaded id bounds
        item_count: Number of distinct loaded ids
        direction: Direction of the merge that produced this snapshot
    """

    bounds: WindowBounds = Field(default_factory=WindowBounds.empty)
    item_count: int = 0
    direction: MergeDirection | None = None
