"""MessagePager orchestrator for windowed message pagination.

This module provides the main entry point for the chat_pager package,
wiring the message source, window, load coordinator and navigation
resolver behind the viewport signals a presentation layer emits.
"""

from typing import Any

from chat_pager.config import ChatPagerConfig
from chat_pager.errors import LoadSuperseded
from chat_pager.infra.synthetic.source import SyntheticMessageSource
from chat_pager.interfaces.presentation import PresentationInterface
from chat_pager.interfaces.source import MessageSourceInterface
from chat_pager.logging import get_logger
from chat_pager.models.message import Message
from chat_pager.models.navigation import NavigationResult
from chat_pager.models.range import LoadRange
from chat_pager.models.window import MergeDirection
from chat_pager.services.load_coordinator import LoadCoordinator
from chat_pager.services.message_window import MessageWindow
from chat_pager.services.navigation import NavigationResolver
from chat_pager.services.range_planner import RangePlanner

__all__ = ["MessagePager"]

logger = get_logger(__name__)


class MessagePager:
    """Main orchestrator for an infinite-scroll message list.

    Accepts a source implementation class. Config is loaded from .env
    automatically unless one is passed in. For custom sources, set
    config_class = None and pass source_custom_config.

    Example:
        async with MessagePager(presentation) as pager:
            await pager.load_initial()
            await pager.near_bottom(current_max_visible_id=20)
            result = await pager.jump_requested(1000)
    """

    def __init__(
        self,
        presentation: PresentationInterface,
        source_class: type[MessageSourceInterface] = SyntheticMessageSource,
        *,
        source_custom_config: dict[str, Any] | None = None,
        config: ChatPagerConfig | None = None,
    ) -> None:
        """Initialize MessagePager.

        Args:
            presentation: Rendering layer receiving window and scroll events
            source_class: Message source implementation class
            source_custom_config: Custom config dict if source_class.config_class is None
            config: Pager configuration (default: loaded from environment)
        """
        self._config = config or ChatPagerConfig()
        self._presentation = presentation
        self._source_class = source_class
        self._source_custom_config = source_custom_config

        self._window = MessageWindow()
        self._window.add_listener(presentation.on_window_changed)
        self._planner = RangePlanner(self._window, self._config.pagination)

        # Created on connect
        self._source: MessageSourceInterface | None = None
        self._coordinator: LoadCoordinator | None = None
        self._resolver: NavigationResolver | None = None

        self._connected = False

    async def _instantiate_source(self) -> MessageSourceInterface:
        """Instantiate the source class.

        If cls.config_class is set, build it from the pager's source
        settings (or a fresh instance of config_class). If it is None,
        use source_custom_config.
        """
        cls: Any = self._source_class
        config_class = getattr(cls, "config_class", None)

        if config_class is None:
            if self._source_custom_config is None:
                raise ValueError(
                    f"{cls.__name__} has config_class=None but no custom_config provided"
                )
            return await cls.from_dict(self._source_custom_config)

        settings = self._config.source
        if not (isinstance(config_class, type) and isinstance(settings, config_class)):
            settings = config_class()
        return await cls.from_config(settings)

    async def _connect(self) -> None:
        """Create the source and wire services."""
        if self._connected:
            return

        self._source = await self._instantiate_source()
        self._coordinator = LoadCoordinator(
            self._source,
            fetch_timeout=self._config.loader.fetch_timeout,
            drop_pending_on_failure=self._config.loader.drop_pending_on_failure,
            window=self._window,
        )
        self._resolver = NavigationResolver(
            self._window,
            self._coordinator,
            self._planner,
            self._presentation,
        )

        self._connected = True
        logger.info("chat_pager_connected", source=type(self._source).__name__)

    async def _disconnect(self) -> None:
        """Cancel outstanding loads and close the source."""
        if self._coordinator is not None:
            await self._coordinator.close()
        if self._source and hasattr(self._source, "close"):
            await self._source.close()

        self._connected = False
        logger.info("chat_pager_disconnected")

    async def __aenter__(self) -> "MessagePager":
        """Async context manager entry - connects automatically."""
        await self._connect()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: Any,
    ) -> None:
        """Async context manager exit - disconnects automatically."""
        await self._disconnect()

    def _ensure_connected(self) -> None:
        if not self._connected:
            raise RuntimeError(
                "MessagePager not connected. Use 'async with MessagePager(...) as pager:'"
            )

    # === PROPERTIES ===

    @property
    def config(self) -> ChatPagerConfig:
        return self._config

    @property
    def window(self) -> MessageWindow:
        return self._window

    @property
    def source(self) -> MessageSourceInterface:
        self._ensure_connected()
        assert self._source is not None
        return self._source

    @property
    def coordinator(self) -> LoadCoordinator:
        self._ensure_connected()
        assert self._coordinator is not None
        return self._coordinator

    # === VIEWPORT SIGNALS ===

    async def load_initial(self) -> list[Message]:
        """Load the first page of messages.

        Returns:
            Messages merged into the window
        """
        self._ensure_connected()
        assert self._coordinator is not None

        messages = await self._load(self._planner.initial(), MergeDirection.APPEND)
        self._coordinator.set_page_bounds(0, 1)
        return messages

    async def near_bottom(self, current_max_visible_id: int) -> list[Message]:
        """Load the page below the visible area.

        Args:
            current_max_visible_id: Largest message id currently visible

        Returns:
            Messages merged into the window (empty if superseded)
        """
        self._ensure_connected()
        load_range = self._planner.after(current_max_visible_id)
        return await self._load(load_range, MergeDirection.APPEND)

    async def near_top(self, current_min_visible_id: int) -> list[Message]:
        """Load the page above the visible area.

        Args:
            current_min_visible_id: Smallest message id currently visible

        Returns:
            Messages merged into the window (empty if superseded)
        """
        self._ensure_connected()
        load_range = self._planner.before(current_min_visible_id)
        return await self._load(load_range, MergeDirection.PREPEND)

    async def jump_requested(self, target_id: int | None = None) -> NavigationResult:
        """Navigate to a message, loading around it if needed.

        Args:
            target_id: Message id to jump to (default: configured target_message_id)

        Returns:
            NavigationResult with the outcome
        """
        self._ensure_connected()
        assert self._resolver is not None

        if target_id is None:
            target_id = self._config.pagination.target_message_id
        return await self._resolver.resolve(target_id)

    async def _load(self, load_range: LoadRange, direction: MergeDirection) -> list[Message]:
        """Request a range, merge the result and widen the page bounds."""
        assert self._coordinator is not None

        try:
            messages = await self._coordinator.request_range(load_range)
        except LoadSuperseded:
            logger.debug(
                "viewport_load_superseded",
                start=load_range.start,
                end=load_range.end,
                direction=direction,
            )
            return []

        self._window.merge(messages, direction)

        current = self._coordinator.page_bounds
        loaded = self._planner.page_bounds_for(load_range)
        self._coordinator.set_page_bounds(
            min(current.lower_page, loaded.lower_page),
            max(current.upper_page, loaded.upper_page),
        )
        return messages
