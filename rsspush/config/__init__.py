"""Configuration management for rsspush."""

from .feeds import FeedList
from .loader import Config, load_config, load_feeds, save_config, save_feeds
from .models import (
    ConfigModel,
    FeedConfig,
    FetchConfig,
    PostgresConfig,
    SeenConfig,
    SinkOptions,
)

__all__ = [
    "Config",
    "ConfigModel",
    "FeedConfig",
    "FeedList",
    "FetchConfig",
    "PostgresConfig",
    "SeenConfig",
    "SinkOptions",
    "load_config",
    "load_feeds",
    "save_config",
    "save_feeds",
]
