"""Headless presentation for chat_pager.

Logs every presentation event instead of rendering. Useful for
scripts and for running the pager without a UI.
"""

from chat_pager.interfaces.presentation import PresentationInterface
from chat_pager.logging import get_logger
from chat_pager.models.window import WindowSnapshot

__all__ = [
    "LoggingPresentation",
]

logger = get_logger(__name__)


class LoggingPresentation(PresentationInterface):
    """Presentation that records the last scroll position and logs events."""

    def __init__(self) -> None:
        self.position: int | None = None
        self.last_snapshot: WindowSnapshot | None = None

    def on_window_changed(self, snapshot: WindowSnapshot) -> None:
        self.last_snapshot = snapshot
        logger.info(
            "window_changed",
            min_loaded_id=snapshot.bounds.min_loaded_id,
            max_loaded_id=snapshot.bounds.max_loaded_id,
            item_count=snapshot.item_count,
            direction=snapshot.direction,
        )

    def on_scroll_instruction(self, target_id: int, position: int) -> None:
        self.position = position
        logger.info("scroll_to_message", target_id=target_id, position=position)

    def on_navigation_miss(self, target_id: int) -> None:
        logger.info("scroll_skipped", target_id=target_id, position=self.position)
