"""Configuration models."""

from pathlib import Path
from typing import List, Literal, Optional

from pydantic import BaseModel, Field

from .. import __version__
from ..errors import ConfigurationError

DEFAULT_USER_AGENT = f"rsspush/{__version__} (+https://github.com/rsspush/rsspush)"


class PostgresConfig(BaseModel):
    """Postgres configuration."""

    host: str = Field("localhost", description="Database host")
    port: int = Field(5432, description="Database port")
    database: str = Field("rsspush", description="Database name")
    user: str = Field("rsspush", description="Database user")
    password: Optional[str] = Field(None, description="Database password")
    password_env: Optional[str] = Field(None, description="Environment variable for password")


class SeenConfig(BaseModel):
    """Seen-state storage configuration."""

    backend: Literal["file", "postgres", "memory"] = Field("file", description="Storage backend")
    path: str = Field("~/.rsspush/seen", description="Directory used by the file backend")


class FetchConfig(BaseModel):
    """Feed fetching parameters."""

    timeout: float = Field(30.0, description="Per-request timeout in seconds", gt=0)
    max_concurrent: int = Field(5, description="Feeds processed at once", ge=1, le=50)
    user_agent: str = Field(DEFAULT_USER_AGENT, description="User-Agent header sent to feed hosts")


class ConfigModel(BaseModel):
    """Main configuration model."""

    seen: SeenConfig = Field(default_factory=SeenConfig)
    postgres: PostgresConfig = Field(default_factory=PostgresConfig)
    fetch: FetchConfig = Field(default_factory=FetchConfig)


class FeedConfig(BaseModel):
    """Feed entry from feeds.yaml."""

    url: str = Field(..., description="RSS/Atom feed URL", min_length=1)
    name: Optional[str] = Field(None, description="Display name")
    enabled: bool = Field(True, description="Whether the feed is polled")


class SinkOptions(BaseModel):
    """Notification sink settings collected from the command line."""

    send: bool = True

    use_pushover: bool = False
    pushover_api_key: Optional[str] = None
    pushover_user_key: Optional[str] = None
    pushover_with_title: bool = True

    use_sendy: bool = False
    sendy_api_hostname: Optional[str] = None
    sendy_api_key: Optional[str] = None
    sendy_list_id: Optional[str] = None
    sendy_from_name: Optional[str] = None
    sendy_from_email: Optional[str] = None
    email_template: Optional[Path] = None

    def validate_enabled(self) -> None:
        """
        Check that every enabled sink has its required settings.

        Raises:
            ConfigurationError: If a required value is missing.
        """
        if not self.send:
            return

        if not (self.use_pushover or self.use_sendy):
            raise ConfigurationError("you must use either sendy or pushover")

        if self.use_pushover:
            missing = _missing(
                pushover_api_key=self.pushover_api_key,
                pushover_user_key=self.pushover_user_key,
            )
            if missing:
                raise ConfigurationError(f"pushover required parameters missing: {', '.join(missing)}")

        if self.use_sendy:
            missing = _missing(
                sendy_api_hostname=self.sendy_api_hostname,
                sendy_api_key=self.sendy_api_key,
                sendy_list_id=self.sendy_list_id,
                sendy_from_name=self.sendy_from_name,
                sendy_from_email=self.sendy_from_email,
            )
            if missing:
                raise ConfigurationError(f"sendy required parameters missing: {', '.join(missing)}")

            if self.email_template is not None and not self.email_template.expanduser().is_file():
                raise ConfigurationError(f"can't stat {self.email_template}")


def _missing(**values: Optional[str]) -> List[str]:
    """Return the option names (as CLI flags) whose value is empty."""
    return [f"--{name.replace('_', '-')}" for name, value in values.items() if not value]
