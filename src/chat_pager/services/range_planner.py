"""Range planning for chat_pager.

This module turns viewport signals into the id ranges to fetch.
"""

from chat_pager.config import PaginationSettings
from chat_pager.models.range import LoadRange, PageBounds
from chat_pager.services.message_window import MessageWindow

__all__ = [
    "RangePlanner",
]


class RangePlanner:
    """Computes load ranges against the current window.

    Viewport ranges start at the nearest unloaded id next to the visible
    edge and stop before the next loaded id, so a sparse window has its
    gaps filled from the side the user is scrolling towards instead of
    being extended past data that is already loaded.

    Example:
        planner = RangePlanner(window, PaginationSettings())
        load_range = planner.after(current_max_visible_id=20)
    """

    def __init__(self, window: MessageWindow, settings: PaginationSettings) -> None:
        """Initialize planner.

        Args:
            window: Window to plan against
            settings: Range sizes and jump parameters
        """
        self._window = window
        self._settings = settings

    def initial(self) -> LoadRange:
        """First range to load into an empty window."""
        return LoadRange.from_count(
            self._settings.first_message_id,
            self._settings.initial_load_count,
        )

    def after(self, current_max_visible_id: int) -> LoadRange:
        """Range to load below the visible area (near bottom)."""
        start = self._window.next_missing_after(current_max_visible_id)
        end = start + self._settings.pagination_load_count - 1
        next_loaded = self._window.next_loaded_after(start)
        if next_loaded is not None:
            end = min(end, next_loaded - 1)
        return LoadRange(start=start, end=end)

    def before(self, current_min_visible_id: int) -> LoadRange:
        """Range to load above the visible area (near top).

        No lower clamp: ids may go negative past the origin.
        """
        end = self._window.previous_missing_before(current_min_visible_id)
        start = end - self._settings.pagination_load_count + 1
        previous_loaded = self._window.previous_loaded_before(end)
        if previous_loaded is not None:
            start = max(start, previous_loaded + 1)
        return LoadRange(start=start, end=end)

    def around(self, target_id: int) -> LoadRange | None:
        """Bounding range for a jump to target_id.

        [target - jump_radius, target + jump_radius] with the start clamped
        to min_jump_id.

        Returns:
            LoadRange, or None if the clamped range is empty
        """
        radius = self._settings.jump_radius
        start = max(target_id - radius, self._settings.min_jump_id)
        end = target_id + radius
        if end < start:
            return None
        return LoadRange(start=start, end=end)

    def page_bounds_for(self, load_range: LoadRange) -> PageBounds:
        """Page window covering a range, clamped at page 0."""
        page_size = self._settings.page_size
        return PageBounds(
            lower_page=max(load_range.start // page_size, 0),
            upper_page=max(load_range.end // page_size, 0),
        )
