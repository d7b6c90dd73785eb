"""Utility functions for GrappleFlow."""

from grappleflow.utils.formatting import (
    format_average,
    format_mat_time,
    format_timestamp,
    split_minutes,
)
from grappleflow.utils.dates import day_label, parse_date, start_of_day

__all__ = [
    "split_minutes",
    "format_mat_time",
    "format_average",
    "format_timestamp",
    "parse_date",
    "start_of_day",
    "day_label",
]
