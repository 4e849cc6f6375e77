"""
Elapsed time display for command summaries.
"""

MINUTE_IN_SECONDS = 60
HOUR_IN_SECONDS = 60 * MINUTE_IN_SECONDS
DAY_IN_SECONDS = 24 * HOUR_IN_SECONDS
WEEK_IN_SECONDS = 7 * DAY_IN_SECONDS
MONTH_IN_SECONDS = 30 * DAY_IN_SECONDS
YEAR_IN_SECONDS = 365 * DAY_IN_SECONDS

# (upper bound, unit size, singular, plural), checked in order
_UNITS = [
    (HOUR_IN_SECONDS, MINUTE_IN_SECONDS, "min", "mins"),
    (DAY_IN_SECONDS, HOUR_IN_SECONDS, "hour", "hours"),
    (WEEK_IN_SECONDS, DAY_IN_SECONDS, "day", "days"),
    (MONTH_IN_SECONDS, WEEK_IN_SECONDS, "week", "weeks"),
    (YEAR_IN_SECONDS, MONTH_IN_SECONDS, "month", "months"),
]


def _plural(count: int, singular: str, plural: str) -> str:
    return f"{count} {singular if count == 1 else plural}"


def human_time_diff(start: float, end: float) -> str:
    """
    Describe the distance between two timestamps in the largest fitting unit.

    Values are rounded to the nearest unit with a minimum of 1, e.g.
    "1 min", "5 mins", "2 hours", "3 days", "1 week", "4 months", "2 years".

    Args:
        start: Start timestamp in seconds.
        end: End timestamp in seconds.

    Returns:
        str: Human readable duration.
    """
    diff = abs(end - start)

    if diff < MINUTE_IN_SECONDS:
        return _plural(max(round(diff), 1), "second", "seconds")

    for upper, size, singular, plural in _UNITS:
        if diff < upper:
            return _plural(max(round(diff / size), 1), singular, plural)

    return _plural(max(round(diff / YEAR_IN_SECONDS), 1), "year", "years")


def format_elapsed(start: float, end: float) -> str:
    """
    Format a command's execution time for its summary line.

    Durations under a minute are shown as seconds with up to two decimals
    ("45 seconds", "1.5 seconds"); longer ones as a relative duration.

    Args:
        start: Timestamp captured before generation started.
        end: Timestamp captured after generation finished.

    Returns:
        str: Display string.
    """
    execution_time = round(end - start, 2)
    if execution_time < MINUTE_IN_SECONDS:
        return f"{execution_time:g} seconds"
    return human_time_diff(start, end)
