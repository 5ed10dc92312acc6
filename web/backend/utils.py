#!/usr/bin/env python3
"""
Utility functions for the web application.
"""

from typing import Optional
from datetime import datetime


def safe_datetime_iso(dt: Optional[datetime]) -> Optional[str]:
    """
    Safely convert datetime to ISO format string.

    Args:
        dt: Datetime object.

    Returns:
        ISO format string or None.
    """
    if dt is None:
        return None
    return dt.isoformat()


def format_score(home: Optional[int], away: Optional[int]) -> Optional[str]:
    """'2-1' style score, or None while either side is unknown."""
    if home is None or away is None:
        return None
    return f"{home}-{away}"
