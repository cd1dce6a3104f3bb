"""Date helpers for reading dates."""
from datetime import date
from typing import Optional


def date_is_in_current_year(value: Optional[date], today: Optional[date] = None) -> bool:
    """
    Check whether a date falls in the current calendar year.

    Args:
        value: Date to check (None is never in the current year)
        today: Reference date; defaults to date.today()

    Returns:
        True if value has the same year as today
    """
    if value is None:
        return False
    today = today or date.today()
    return value.year == today.year


def parse_date(text: Optional[str]) -> Optional[date]:
    """
    Parse an ISO date ("2020-05-03"). Timestamps are cut to their date part.

    Raises:
        ValueError: If the text is not an ISO date
    """
    if not text or not text.strip():
        return None
    return date.fromisoformat(text.strip()[:10])
