"""Tests for the command-line interface."""

import pytest
from typer.testing import CliRunner

from conftest import rss_feed, rss_item
from rsspush import __version__
from rsspush.cli.app import app
from rsspush.config import ConfigModel, FeedConfig, save_config, save_feeds
from rsspush.errors import ConfigurationError, FetchError
from rsspush.seen import FileSeenBackend

runner = CliRunner()

GOOD = "https://good.example/feed"
BAD = "https://bad.example/feed"


class StubFetcher:
    """Stands in for FeedFetcher inside the run command."""

    bodies = {
        GOOD: rss_feed(rss_item(guid="one"), rss_item(guid="two")),
    }

    def __init__(self, client=None, timeout=30.0, user_agent=""):
        pass

    async def fetch(self, uri):
        if uri not in self.bodies:
            raise FetchError(f"HTTP error: cannot reach {uri}")
        return self.bodies[uri]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("PUSHOVER_API_KEY", "PUSHOVER_USER_KEY", "RSSPUSH_CONFIG",
                 "SENDY_API_HOSTNAME", "SENDY_API_KEY", "SENDY_LIST_ID",
                 "SENDY_FROM_NAME", "SENDY_FROM_EMAIL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def config_path(tmp_path, monkeypatch):
    """Config using a file seen-store under tmp_path, with fetching stubbed."""
    path = tmp_path / "config.yaml"
    save_config(ConfigModel(seen={"backend": "file", "path": str(tmp_path / "seen")}), path)
    monkeypatch.setattr("rsspush.cli.run.FeedFetcher", StubFetcher)
    return path


class TestVersion:
    def test_version(self):
        """Should print the package version."""
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert __version__ in result.output


class TestRunCommands:
    """Tests for push and send."""

    def test_push_requires_keys(self, config_path):
        """Missing Pushover credentials should fail before any feed is fetched."""
        result = runner.invoke(app, ["push", "--config", str(config_path)])
        assert result.exit_code == 1
        assert "pushover required parameters missing" in result.output

    def test_send_requires_a_sink(self, config_path):
        """send without any sink enabled is a configuration error."""
        result = runner.invoke(app, ["send", "--config", str(config_path)])
        assert result.exit_code == 1
        assert "either sendy or pushover" in result.output

    def test_send_missing_template(self, config_path, tmp_path):
        result = runner.invoke(app, [
            "send", "--config", str(config_path),
            "--use-sendy", "--sendy-api-hostname", "sendy.example.com",
            "--sendy-api-key", "k", "--sendy-list-id", "l",
            "--sendy-from-name", "n", "--sendy-from-email", "e@example.com",
            "--email-template", str(tmp_path / "missing.html"),
        ])
        assert result.exit_code == 1
        assert "can't stat" in result.output

    def test_invalid_config_yaml_fails(self, config_path, tmp_path):
        """Broken YAML is reported with usage and exit 1, not a traceback."""
        config_path.write_text("seen: [unclosed")
        save_feeds([FeedConfig(url=GOOD)], tmp_path / "feeds.yaml")

        result = runner.invoke(app, [
            "push", "--api-key", "k", "--user-key", "u", "--config", str(config_path),
        ])

        assert result.exit_code == 1
        assert not isinstance(result.exception, ConfigurationError)
        assert "Invalid YAML" in result.output
        assert "Usage" in result.output

    def test_invalid_config_fails_without_feeds(self, config_path):
        """An invalid config fails the run even when there is nothing to fetch."""
        config_path.write_text("seen: {backend: sqlite}")

        result = runner.invoke(app, ["push", "--no-send", "--config", str(config_path)])

        assert result.exit_code == 1
        assert "Invalid configuration" in result.output

    def test_no_feeds_is_success(self, config_path):
        """With no feeds configured there is nothing to do."""
        result = runner.invoke(app, ["push", "--no-send", "--config", str(config_path)])
        assert result.exit_code == 0
        assert "No feeds configured" in result.output

    def test_no_send_primes_seen_state(self, config_path, tmp_path):
        """--no-send records entries without needing credentials."""
        save_feeds([FeedConfig(url=GOOD)], tmp_path / "feeds.yaml")

        result = runner.invoke(app, ["push", "--no-send", "--verbose", "--config", str(config_path)])

        assert result.exit_code == 0, result.output
        backend = FileSeenBackend(tmp_path / "seen")
        assert backend.contains("one")
        assert backend.contains("two")

    def test_failed_feed_sets_exit_status(self, config_path, tmp_path):
        """A failing feed is reported and makes the run exit 1, after other feeds ran."""
        save_feeds([FeedConfig(url=BAD), FeedConfig(url=GOOD)], tmp_path / "feeds.yaml")

        result = runner.invoke(app, ["push", "--no-send", "--config", str(config_path)])

        assert result.exit_code == 1
        assert "error processing" in result.output
        assert FileSeenBackend(tmp_path / "seen").contains("one")


class TestFeedsCommands:
    """Tests for feed list management."""

    def test_add_list_remove(self, tmp_path):
        config = str(tmp_path / "config.yaml")

        result = runner.invoke(app, ["feeds", "add", GOOD, "--name", "Good", "--config", config])
        assert result.exit_code == 0
        assert "Added feed" in result.output

        result = runner.invoke(app, ["feeds", "add", GOOD, "--config", config])
        assert result.exit_code == 1

        result = runner.invoke(app, ["feeds", "list", "--config", config])
        assert result.exit_code == 0
        assert "Good" in result.output

        result = runner.invoke(app, ["feeds", "remove", GOOD, "--config", config])
        assert result.exit_code == 0

        result = runner.invoke(app, ["feeds", "remove", GOOD, "--config", config])
        assert result.exit_code == 1


class TestInit:
    def test_init_file_store(self, tmp_path):
        """init should write config, an empty feed list and the seen directory."""
        config_dir = tmp_path / "cfg"
        seen_dir = tmp_path / "seen"

        result = runner.invoke(app, ["init", "--config-dir", str(config_dir), "--seen-dir", str(seen_dir)])

        assert result.exit_code == 0, result.output
        assert (config_dir / "config.yaml").exists()
        assert (config_dir / "feeds.yaml").exists()
        assert seen_dir.is_dir()

        result = runner.invoke(app, ["init", "--config-dir", str(config_dir)])
        assert result.exit_code == 1
