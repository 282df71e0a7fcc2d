"""Navigation result models for chat_pager."""

from dataclasses import dataclass
from enum import StrEnum

from chat_pager.models.range import LoadRange

__all__ = [
    "NavigationOutcome",
    "NavigationResult",
]


class NavigationOutcome(StrEnum):
    """How a jump to a message id ended."""

    DIRECT = "direct"
    """Target was already loaded: scrolled without fetching"""

    LOADED = "loaded"
    """Target was fetched, merged, then scrolled to"""

    MISS = "miss"
    """Target still absent after the bounded load: no scroll"""

    SUPERSEDED = "superseded"
    """The load was replaced by a newer request before it was issued"""


@dataclass
class NavigationResult:
    """Result of resolving a jump."""

    target_id: int
    outcome: NavigationOutcome
    load_range: LoadRange | None = None
    position: int | None = None

    @property
    def scrolled(self) -> bool:
        return self.position is not None
