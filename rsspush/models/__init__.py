"""Data models for rsspush."""

from .entry import FeedEntry
from .notification import NotificationRequest
from .run import FeedFailure, FeedReport, RunResult

__all__ = ["FeedEntry", "FeedFailure", "FeedReport", "NotificationRequest", "RunResult"]
