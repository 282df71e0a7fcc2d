"""Service layer for chat_pager.

This module exports the core pagination services.
"""

from chat_pager.services.load_coordinator import LoadCoordinator
from chat_pager.services.message_window import MessageWindow, WindowListener
from chat_pager.services.navigation import NavigationResolver
from chat_pager.services.range_planner import RangePlanner

__all__ = [
    "LoadCoordinator",
    "MessageWindow",
    "NavigationResolver",
    "RangePlanner",
    "WindowListener",
]
