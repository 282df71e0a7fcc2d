"""Configuration management for chat_pager.

This module provides typed configuration classes using pydantic-settings.
Configuration is loaded from environment variables with optional .env file support.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

__all__ = [
    "PaginationSettings",
    "LoaderSettings",
    "SourceSettings",
    "ChatPagerConfig",
]


class PaginationSettings(BaseSettings):
    """Range sizes and the default jump target."""

    model_config = SettingsConfigDict(
        env_prefix="CHAT_PAGER_PAGINATION_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    initial_load_count: int = Field(default=20, gt=0)
    pagination_load_count: int = Field(default=20, gt=0)
    target_message_id: int = 1000

    # Jump window: [target - radius, target + radius], start clamped to min_jump_id
    jump_radius: int = Field(default=10, ge=0)
    min_jump_id: int = 1

    first_message_id: int = 1
    page_size: int = Field(default=20, gt=0)


class LoaderSettings(BaseSettings):
    """Load coordinator settings.

    fetch_timeout is in seconds; None waits forever.
    """

    model_config = SettingsConfigDict(
        env_prefix="CHAT_PAGER_LOADER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    fetch_timeout: float | None = None
    drop_pending_on_failure: bool = False


class SourceSettings(BaseSettings):
    """Synthetic message source settings.

    min_id/max_id bound the available history (None means unbounded).
    """

    model_config = SettingsConfigDict(
        env_prefix="CHAT_PAGER_SOURCE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    latency: float = Field(default=1.0, ge=0)
    min_id: int | None = None
    max_id: int | None = None


class ChatPagerConfig(BaseSettings):
    """Main configuration aggregating all settings.

    Example usage:
        config = ChatPagerConfig()
        page = config.pagination.pagination_load_count
    """

    model_config = SettingsConfigDict(
        env_prefix="CHAT_PAGER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    pagination: PaginationSettings = Field(default_factory=PaginationSettings)
    loader: LoaderSettings = Field(default_factory=LoaderSettings)
    source: SourceSettings = Field(default_factory=SourceSettings)

    log_level: str = "INFO"
    log_json: bool = False
