"""Shared test fixtures for chat_pager.

This module provides pytest fixtures used across all tests.
"""

import pytest
from mocks.mock_presentation import RecordingPresentation
from mocks.mock_source import ManualMessageSource

from chat_pager.config import ChatPagerConfig, PaginationSettings, SourceSettings
from chat_pager.infra.synthetic.source import SyntheticMessageSource
from chat_pager.models.message import Message
from chat_pager.services.load_coordinator import LoadCoordinator
from chat_pager.services.message_window import MessageWindow
from chat_pager.services.navigation import NavigationResolver
from chat_pager.services.range_planner import RangePlanner


# Collaborator fixtures
@pytest.fixture
def presentation() -> RecordingPresentation:
    """Create recording presentation."""
    return RecordingPresentation()


@pytest.fixture
def manual_source() -> ManualMessageSource:
    """Create source whose fetches are released by the test."""
    return ManualMessageSource()


@pytest.fixture
def instant_source() -> SyntheticMessageSource:
    """Create synthetic source without latency."""
    return SyntheticMessageSource(SourceSettings(latency=0))


@pytest.fixture
def pagination_settings() -> PaginationSettings:
    """Create default pagination settings."""
    return PaginationSettings()


@pytest.fixture
def instant_config() -> ChatPagerConfig:
    """Create pager config with a zero-latency synthetic source."""
    return ChatPagerConfig(source=SourceSettings(latency=0))


# Core fixtures
@pytest.fixture
def window(presentation: RecordingPresentation) -> MessageWindow:
    """Create empty window wired to the recording presentation."""
    window = MessageWindow()
    window.add_listener(presentation.on_window_changed)
    return window


@pytest.fixture
def planner(window: MessageWindow, pagination_settings: PaginationSettings) -> RangePlanner:
    """Create planner over the window."""
    return RangePlanner(window, pagination_settings)


@pytest.fixture
def manual_coordinator(manual_source: ManualMessageSource) -> LoadCoordinator:
    """Create coordinator over the manual source."""
    return LoadCoordinator(manual_source)


@pytest.fixture
def instant_coordinator(instant_source: SyntheticMessageSource) -> LoadCoordinator:
    """Create coordinator over the zero-latency source."""
    return LoadCoordinator(instant_source)


@pytest.fixture
def resolver(
    window: MessageWindow,
    instant_coordinator: LoadCoordinator,
    planner: RangePlanner,
    presentation: RecordingPresentation,
) -> NavigationResolver:
    """Create resolver over the zero-latency coordinator."""
    return NavigationResolver(window, instant_coordinator, planner, presentation)


# Sample data fixtures
@pytest.fixture
def sample_messages() -> list[Message]:
    """Create messages 1..5."""
    return [Message(id=i, text=f"Sample message {i}") for i in range(1, 6)]
