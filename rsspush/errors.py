"""Exception hierarchy for rsspush."""


class RsspushError(Exception):
    """Base class for all rsspush errors."""


class ConfigurationError(RsspushError):
    """Invalid or missing configuration, detected before any feed is processed."""


class FeedError(RsspushError):
    """A failure confined to a single feed source."""


class FetchError(FeedError):
    """The feed could not be retrieved."""


class ParseError(FeedError):
    """The feed content could not be parsed."""


class StorageError(FeedError):
    """The seen-state medium could not be read or written."""


class DispatchError(FeedError):
    """A notification sink rejected or failed to deliver a notification."""

    def __init__(self, sink: str, message: str) -> None:
        super().__init__(f"{sink}: {message}")
        self.sink = sink
