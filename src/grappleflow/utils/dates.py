"""Date utility functions for GrappleFlow."""

from datetime import date, datetime, time


def parse_date(date_str: str) -> date:
    """
    Parse a date string in ISO format (YYYY-MM-DD).

    Args:
        date_str: Date string in ISO format

    Returns:
        Date object
    """
    try:
        return date.fromisoformat(date_str)
    except ValueError as err:
        raise ValueError(f"Invalid date format: {date_str}. Expected format: YYYY-MM-DD") from err


def start_of_day(day: date) -> datetime:
    """Midnight at the start of the given day."""
    return datetime.combine(day, time.min)


def day_label(day: date) -> str:
    """Short M/D label used on activity charts (e.g. '3/14')."""
    return f"{day.month}/{day.day}"
