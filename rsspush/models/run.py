"""Models describing the outcome of a run."""

from typing import List

from pydantic import BaseModel, Field


class FeedReport(BaseModel):
    """Statistics for a feed that was processed without error."""

    source_uri: str = Field(..., description="Feed URI")
    entries: int = Field(0, description="Entries found in the feed")
    new: int = Field(0, description="Entries not seen before")
    skipped: int = Field(0, description="Entries already seen")
    dispatched: int = Field(0, description="Entries sent to the sinks")


class FeedFailure(BaseModel):
    """A feed that failed during the run."""

    source_uri: str = Field(..., description="Feed URI (or store location)")
    kind: str = Field(..., description="Error class name")
    error: str = Field(..., description="Error message")

    def __str__(self) -> str:
        return f"error processing {self.source_uri} - {self.error}"


class RunResult(BaseModel):
    """Aggregated result of one orchestration pass."""

    reports: List[FeedReport] = Field(default_factory=list)
    failures: List[FeedFailure] = Field(default_factory=list)

    @property
    def success(self) -> bool:
        """True when no feed failed."""
        return not self.failures

    @property
    def dispatched(self) -> int:
        return sum(r.dispatched for r in self.reports)
