"""Jump-to-message navigation for chat_pager.

This module resolves "scroll to message id T" against a partially
loaded window, loading the neighbourhood of T when needed.
"""

from chat_pager.errors import LoadSuperseded
from chat_pager.interfaces.presentation import PresentationInterface
from chat_pager.logging import get_logger
from chat_pager.models.navigation import NavigationOutcome, NavigationResult
from chat_pager.models.window import MergeDirection
from chat_pager.services.load_coordinator import LoadCoordinator
from chat_pager.services.message_window import MessageWindow
from chat_pager.services.range_planner import RangePlanner

__all__ = [
    "NavigationResolver",
]

logger = get_logger(__name__)


class NavigationResolver:
    """Resolves jumps to a single scroll instruction, or a miss.

    Two paths:
    - Direct: the target is loaded, scroll immediately (no suspension).
    - Load-then-scroll: request the bounding range around the target,
      merge the result, then scroll only if the target is now present.

    A target still absent after loading is a navigation miss: the
    presentation is told via on_navigation_miss() and keeps its current
    position. Misses are outcomes, not errors. FetchFailure propagates.

    Example:
        resolver = NavigationResolver(window, coordinator, planner, presentation)
        result = await resolver.resolve(1000)
        if result.outcome == NavigationOutcome.MISS:
            ...
    """

    def __init__(
        self,
        window: MessageWindow,
        coordinator: LoadCoordinator,
        planner: RangePlanner,
        presentation: PresentationInterface,
    ) -> None:
        """Initialize resolver with collaborators.

        Args:
            window: Window to resolve against and merge into
            coordinator: Coordinator used to load missing ranges
            planner: Planner computing the bounding range of a jump
            presentation: Receiver of scroll and miss events
        """
        self._window = window
        self._coordinator = coordinator
        self._planner = planner
        self._presentation = presentation

    async def resolve(self, target_id: int) -> NavigationResult:
        """Scroll to target_id, loading its neighbourhood first if needed.

        Args:
            target_id: Message id to navigate to

        Returns:
            NavigationResult describing the outcome

        Raises:
            FetchFailure: If loading the bounding range failed
        """
        position = self._window.position_of(target_id)
        if position is not None:
            logger.debug("navigation_direct", target_id=target_id, position=position)
            self._presentation.on_scroll_instruction(target_id, position)
            return NavigationResult(
                target_id=target_id,
                outcome=NavigationOutcome.DIRECT,
                position=position,
            )

        load_range = self._planner.around(target_id)
        if load_range is None:
            return self._miss(target_id, reason="no_plausible_range")

        try:
            messages = await self._coordinator.request_range(load_range)
        except LoadSuperseded:
            logger.debug("navigation_superseded", target_id=target_id)
            return NavigationResult(
                target_id=target_id,
                outcome=NavigationOutcome.SUPERSEDED,
                load_range=load_range,
            )

        self._window.merge(messages, MergeDirection.APPEND)
        bounds = self._planner.page_bounds_for(load_range)
        self._coordinator.set_page_bounds(bounds.lower_page, bounds.upper_page)

        position = self._window.position_of(target_id)
        if position is None:
            result = self._miss(target_id, reason="not_in_loaded_range")
            result.load_range = load_range
            return result

        logger.debug("navigation_loaded", target_id=target_id, position=position)
        self._presentation.on_scroll_instruction(target_id, position)
        return NavigationResult(
            target_id=target_id,
            outcome=NavigationOutcome.LOADED,
            load_range=load_range,
            position=position,
        )

    def _miss(self, target_id: int, reason: str) -> NavigationResult:
        logger.info("navigation_miss", target_id=target_id, reason=reason)
        self._presentation.on_navigation_miss(target_id)
        return NavigationResult(target_id=target_id, outcome=NavigationOutcome.MISS)
