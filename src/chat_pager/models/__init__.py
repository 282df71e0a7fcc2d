"""Public models for chat_pager.

This module exports all public value objects.
"""

from chat_pager.models.message import Message
from chat_pager.models.navigation import NavigationOutcome, NavigationResult
from chat_pager.models.range import LoadRange, PageBounds
from chat_pager.models.window import MergeDirection, WindowBounds, WindowSnapshot

__all__ = [
    "LoadRange",
    "MergeDirection",
    "Message",
    "NavigationOutcome",
    "NavigationResult",
    "PageBounds",
    "WindowBounds",
    "WindowSnapshot",
]
