"""Presentation interface for chat_pager.

This module defines the Protocol the core uses to talk to the
rendering layer. All callbacks run on the coordinating event loop.
"""

from typing import Protocol, runtime_checkable

from chat_pager.models.window import WindowSnapshot

__all__ = [
    "PresentationInterface",
]


@runtime_checkable
class PresentationInterface(Protocol):
    """Contract for the rendering layer.

    Implementations redraw on window changes and perform the actual
    (possibly animated) positioning on scroll instructions.
    """

    def on_window_changed(self, snapshot: WindowSnapshot) -> None:
        """Called after every merge that added or replaced messages.

        Args:
            snapshot: Window state after the merge
        """
        ...

    def on_scroll_instruction(self, target_id: int, position: int) -> None:
        """Scroll so that the given message is visible.

        Args:
            target_id: Message id to bring into view
            position: Item position of the message in ascending id order
        """
        ...

    def on_navigation_miss(self, target_id: int) -> None:
        """Called when a jump target is still absent after loading.

        The current scroll position must be left unchanged.

        Args:
            target_id: Message id that could not be found
        """
        ...
