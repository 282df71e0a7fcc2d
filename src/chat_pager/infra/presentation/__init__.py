"""Presentation implementations for chat_pager."""

from chat_pager.infra.presentation.logging_presentation import LoggingPresentation

__all__ = ["LoggingPresentation"]
