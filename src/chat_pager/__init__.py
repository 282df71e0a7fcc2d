"""chat_pager - Windowed message pagination for infinite-scroll chat lists.

This package provides tools for:
- Fetching message ranges on demand with single-flight coordination
- Keeping a sparse in-memory window of loaded messages keyed by id
- Jump-to-message navigation that loads any missing range around a target

Example usage:
    from chat_pager import LoggingPresentation, MessagePager

    async with MessagePager(LoggingPresentation()) as pager:
        await pager.load_initial()
        await pager.near_bottom(current_max_visible_id=20)
        result = await pager.jump_requested(1000)
"""

__version__ = "0.1.0"

# Configuration
from chat_pager.config import ChatPagerConfig

# Errors
from chat_pager.errors import (
    ChatPagerError,
    FetchFailure,
    FetchTimeout,
    InvalidRange,
    LoadSuperseded,
)

# Implementations
from chat_pager.infra.presentation.logging_presentation import LoggingPresentation
from chat_pager.infra.synthetic.source import SyntheticMessageSource

# Interfaces
from chat_pager.interfaces.presentation import PresentationInterface
from chat_pager.interfaces.source import MessageSourceInterface
from chat_pager.models.message import Message
from chat_pager.models.navigation import NavigationOutcome, NavigationResult
from chat_pager.models.range import LoadRange, PageBounds
from chat_pager.models.window import MergeDirection, WindowBounds, WindowSnapshot
from chat_pager.orchestrator import MessagePager

# Services
from chat_pager.services.load_coordinator import LoadCoordinator
from chat_pager.services.message_window import MessageWindow
from chat_pager.services.navigation import NavigationResolver
from chat_pager.services.range_planner import RangePlanner

__all__ = [  # noqa: RUF022
    # Orchestrator
    "MessagePager",
    "ChatPagerConfig",
    # Services
    "LoadCoordinator",
    "MessageWindow",
    "NavigationResolver",
    "RangePlanner",
    # Implementations
    "SyntheticMessageSource",
    "LoggingPresentation",
    # Interfaces
    "MessageSourceInterface",
    "PresentationInterface",
    # Models
    "LoadRange",
    "MergeDirection",
    "Message",
    "NavigationOutcome",
    "NavigationResult",
    "PageBounds",
    "WindowBounds",
    "WindowSnapshot",
    # Errors
    "ChatPagerError",
    "FetchFailure",
    "FetchTimeout",
    "InvalidRange",
    "LoadSuperseded",
]
