"""Configuration loader."""

import os
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from pydantic import ValidationError
from rich.console import Console

from ..errors import ConfigurationError
from .models import ConfigModel, FeedConfig

console = Console(stderr=True)

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "rsspush" / "config.yaml"


class Config:
    """Configuration manager."""

    def __init__(self, config_path: Optional[Path] = None) -> None:
        """Initialize config manager."""
        if config_path is None:
            env_path = os.environ.get("RSSPUSH_CONFIG")
            config_path = Path(env_path) if env_path else DEFAULT_CONFIG_PATH
        self.config_path = Path(config_path).expanduser()
        self._config: Optional[ConfigModel] = None

    @property
    def config(self) -> ConfigModel:
        """Get loaded config, falling back to defaults if no file exists."""
        if self._config is None:
            if self.config_path.exists():
                self._config = load_config(self.config_path)
            else:
                self._config = ConfigModel()
        return self._config

    @property
    def feeds_path(self) -> Path:
        """Path of the feed list, kept next to the config file."""
        return self.config_path.parent / "feeds.yaml"

    @property
    def seen_path(self) -> Path:
        """Directory used by the file seen-state backend."""
        return Path(self.config.seen.path).expanduser()

    def get_db_config(self) -> Dict[str, Any]:
        """Get database configuration dict."""
        db_config = self.config.postgres.model_dump()

        # Handle password from environment if specified
        if db_config.get("password_env"):
            password = os.environ.get(db_config["password_env"])
            if password:
                db_config["password"] = password

        return db_config


def load_config(config_path: Path) -> ConfigModel:
    """Load configuration from YAML file."""
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    try:
        with open(config_path) as f:
            config_data = yaml.safe_load(f)

        if config_data is None:
            config_data = {}

        return ConfigModel(**config_data)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in config file: {e}") from e
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e


def load_feeds(feeds_path: Path) -> List[FeedConfig]:
    """Load the feed list from YAML file."""
    if not feeds_path.exists():
        raise FileNotFoundError(f"Feeds file not found: {feeds_path}")

    try:
        with open(feeds_path) as f:
            feeds_data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in feeds file: {e}") from e

    if feeds_data is None or "feeds" not in feeds_data:
        return []

    feeds = []
    for feed_data in feeds_data["feeds"] or []:
        if isinstance(feed_data, str):
            feed_data = {"url": feed_data}
        try:
            feeds.append(FeedConfig(**feed_data))
        except (TypeError, ValidationError) as e:
            console.print(f"[yellow]Skipping invalid feed {feed_data!r}: {e}[/yellow]")

    return feeds


def save_config(config: ConfigModel, config_path: Path) -> None:
    """Save configuration to YAML file."""
    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, "w") as f:
        yaml.dump(config.model_dump(), f, default_flow_style=False, sort_keys=False)


def save_feeds(feeds: List[FeedConfig], feeds_path: Path) -> None:
    """Save the feed list to YAML file."""
    feeds_path.parent.mkdir(parents=True, exist_ok=True)

    feeds_data = {"feeds": [f.model_dump(exclude_none=True) for f in feeds]}

    with open(feeds_path, "w") as f:
        yaml.dump(feeds_data, f, default_flow_style=False, sort_keys=False)
