"""rsspush - push new RSS/Atom feed entries to notification services."""

__version__ = "0.1.0"
