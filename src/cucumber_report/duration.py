"""
Conversion of raw step durations into display strings.

Cucumber reports durations as integers in nanoseconds.
"""

from typing import Optional

NANOSECONDS_PER_SECOND = 1_000_000_000
SECONDS_PER_MINUTE = 60


def _whole_seconds(nanoseconds: int) -> int:
    return int(nanoseconds // NANOSECONDS_PER_SECOND)


def is_minute_or_more(nanoseconds: Optional[int]) -> bool:
    """Return True if the duration is defined and at least one minute long."""
    if nanoseconds is None:
        return False
    return nanoseconds >= SECONDS_PER_MINUTE * NANOSECONDS_PER_SECOND


def is_less_than_minute(nanoseconds: Optional[int]) -> bool:
    """Return True if the duration is defined and shorter than one minute."""
    if nanoseconds is None:
        return False
    return nanoseconds < SECONDS_PER_MINUTE * NANOSECONDS_PER_SECOND


def format_duration_in_seconds(nanoseconds: int) -> str:
    return f"{_whole_seconds(nanoseconds)}s"


def format_duration_in_minutes_and_seconds(nanoseconds: int) -> str:
    minutes, seconds = divmod(_whole_seconds(nanoseconds), SECONDS_PER_MINUTE)
    return f"{minutes}m {seconds}s"


def format_duration(nanoseconds: int) -> str:
    """
    Format a duration for display.

    Args:
        nanoseconds: Duration in nanoseconds

    Returns:
        "Xm Ys" for durations of a minute or more, "Ys" otherwise
    """
    if is_minute_or_more(nanoseconds):
        return format_duration_in_minutes_and_seconds(nanoseconds)
    return format_duration_in_seconds(nanoseconds)


def convert_duration(nanoseconds: Optional[int]) -> Optional[str]:
    """Format a duration, leaving an absent duration absent."""
    if nanoseconds is None:
        return None
    return format_duration(nanoseconds)
