"""Interface contracts for chat_pager.

This module exports all Protocol-based interfaces for dependency injection.
"""

from chat_pager.interfaces.presentation import PresentationInterface
from chat_pager.interfaces.source import MessageSourceInterface

__all__ = [
    "MessageSourceInterface",
    "PresentationInterface",
]
