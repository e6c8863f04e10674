"""
Date formatting helper.
"""

import numbers
from datetime import date, datetime
from typing import Any

import pandas as pd


def format_date(value: Any, pattern: str = "%Y-%m-%d") -> str:
    """
    Format a date-like value with a strftime pattern.

    Args:
        value: datetime, date, pandas Timestamp, ISO 8601 string, or
              epoch milliseconds (int/float)
        pattern: strftime pattern (default: "%Y-%m-%d")

    Returns:
        str: Formatted date

    Raises:
        TypeError: If value is not a supported type
        ValueError: If value is missing or cannot be parsed as a date

    Example:
        format_date("2024-01-15T10:30:00", "%d.%m.%Y %H:%M")  # "15.01.2024 10:30"
        format_date(0)  # "1970-01-01"
    """
    if value is None:
        raise ValueError("Cannot format a missing date")

    if isinstance(value, bool):
        raise TypeError("Cannot format a boolean as a date")

    try:
        if isinstance(value, numbers.Real):
            timestamp = pd.Timestamp(value, unit="ms")
        elif isinstance(value, (str, datetime, date)):
            timestamp = pd.Timestamp(value)
        else:
            raise TypeError(
                f"Expected datetime, date, string or epoch milliseconds, "
                f"got {type(value).__name__}"
            )
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Failed to parse {value!r} as a date: {str(e)}") from e

    if pd.isna(timestamp):
        raise ValueError(f"Cannot format a missing date: {value!r}")

    return timestamp.strftime(pattern)
