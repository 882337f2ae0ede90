"""Feed-processing pipeline."""

from .orchestrator import RunOrchestrator, print_run_summary, report_failures
from .processor import FeedProcessor, FeedState

__all__ = [
    "FeedProcessor",
    "FeedState",
    "RunOrchestrator",
    "print_run_summary",
    "report_failures",
]
