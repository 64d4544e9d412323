"""Course progress queries."""

from .get_progress_summary import GetProgressSummaryQuery, GetProgressSummaryHandler

__all__ = [
    "GetProgressSummaryQuery",
    "GetProgressSummaryHandler",
]
