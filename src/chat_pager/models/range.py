"""Range models for chat_pager.

LoadRange is the unit of work handed to the load coordinator;
PageBounds is the coarse, advisory record of the settled pages.
"""

from collections.abc import Iterator
from typing import Self

from pydantic import BaseModel, model_validator

from chat_pager.errors import InvalidRange

__all__ = [
    "LoadRange",
    "PageBounds",
]


class LoadRange(BaseModel, frozen=True):
    """Inclusive range of message ids [start, end].

    Construction with end < start raises InvalidRange (not a pydantic
    ValidationError), so an invalid range never reaches a fetch.
    """

    start: int
    end: int

    @model_validator(mode="after")
    def check_order(self) -> Self:
        if self.end < self.start:
            raise InvalidRange(self.start, self.end)
        return self

    @classmethod
    def from_count(cls, start_id: int, count: int) -> "LoadRange":
        """Build the range of `count` ids starting at `start_id`.

        Raises:
            InvalidRange: If count <= 0
        """
        if count <= 0:
            raise InvalidRange(start_id, start_id + count - 1)
        return cls(start=start_id, end=start_id + count - 1)

    @property
    def count(self) -> int:
        """Number of ids covered by the range."""
        return self.end - self.start + 1

    def contains(self, message_id: int) -> bool:
        return self.start <= message_id <= self.end

    def ids(self) -> Iterator[int]:
        return iter(range(self.start, self.end + 1))


class PageBounds(BaseModel, frozen=True):
    """Page-granularity record of the last settled range.

    Advisory only: kept for display and debugging, never used to
    decide what to fetch.
    """

    lower_page: int = 0
    upper_page: int = 0
