"""
UTC timestamped console logging for the generate commands.

All output goes through ``tqdm.write`` so messages printed while a progress
bar is active land above the bar instead of breaking it.
"""

from datetime import datetime, UTC

from tqdm import tqdm


def _utc_timestamp() -> str:
    """
    Generate the current UTC timestamp string.

    Returns:
        str: Timestamp formatted as YYYY-MM-DD HH:MM:SS in UTC.
    """
    return datetime.now(UTC).strftime("%Y-%m-%d %H:%M:%S")


def _emit(message: str) -> None:
    tqdm.write(f"[{_utc_timestamp()}] {message}")


def log_progress(section: str, message: str) -> None:
    """
    Log an in-progress update for a section.

    Args:
        section (str): Description of the section that is running.
        message (str): Progress message to display for the section.
    """
    _emit(f"{section}: {message}")


def log_line(message: str) -> None:
    """Log a plain informational line."""
    _emit(message)


def log_success(message: str) -> None:
    """Log the final summary of a successful command."""
    _emit(f"Success: {message}")


def log_error(section: str, error: Exception | str) -> None:
    """
    Log an error that occurred during a section.

    Args:
        section (str): Description of the section where the error occurred.
        error (Exception | str): Exception instance or error message to record.
    """
    _emit(f"Error in {section}: {error}")
