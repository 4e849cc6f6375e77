"""
Utility helpers shared across the generate commands.
"""

from .logging_utils import (
    log_progress,
    log_line,
    log_success,
    log_error,
)
from .progress import ProgressBar, make_progress_bar
from .timing import format_elapsed, human_time_diff

__all__ = [
    "log_progress",
    "log_line",
    "log_success",
    "log_error",
    "ProgressBar",
    "make_progress_bar",
    "format_elapsed",
    "human_time_diff",
]
