"""Use cases for assignment progress and week advancement."""

from .overview import ProgressOverview, WeekDetail, get_progress_overview, get_week_detail
from .record_completion import ProgressUpdate, record_assignment_completion
from .save_progress import save_assignment_progress

__all__ = [
    "ProgressOverview",
    "ProgressUpdate",
    "WeekDetail",
    "get_progress_overview",
    "get_week_detail",
    "record_assignment_completion",
    "save_assignment_progress",
]
