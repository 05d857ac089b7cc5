import re
from datetime import datetime
from typing import Optional


def sanitize(name: str) -> str:
    return re.sub(r"[^A-Za-z0-9._-]+", "_", name or "").strip("_")


def clean_input(s: Optional[str]) -> str:
    if not s:
        return ""
    # normalize NBSP and surrounding whitespace from form fields
    s = s.replace("\u00A0", " ")
    return s.strip()


def format_es_date(dt: datetime) -> str:
    """Spanish short date, day first without padding: 5/3/2024."""
    return f"{dt.day}/{dt.month}/{dt.year}"


def format_es_time(dt: datetime) -> str:
    """Spanish 24h clock: 9:05:07."""
    return f"{dt.hour}:{dt.minute:02d}:{dt.second:02d}"


def epoch_millis(dt: datetime) -> int:
    return int(dt.timestamp() * 1000)
