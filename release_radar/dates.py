from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Optional, Tuple, Union

# Placeholder for missing or unparseable release dates ("unannounced").
SENTINEL_DATE = date(1980, 1, 1)

# Tried in order, first match wins. `%d` accepts zero-padded ("05"),
# unpadded ("5") and space-padded (" 5") days.
DATE_LAYOUTS: Tuple[str, ...] = (
    "%d %b, %Y",
    "%d %B, %Y",
    "%d %b %Y",
    "%d %B %Y",
)

_QUOTES = "\"'"


def _clean(raw: str) -> str:
    text = raw.strip().strip(_QUOTES)
    return " ".join(text.split())


def normalize_date(raw: Optional[str]) -> date:
    """
    Convert a stored release date ("05 Jan, 2024", "5 Jan, 2024", ...) to a date.

    Never raises: anything that matches none of DATE_LAYOUTS becomes SENTINEL_DATE.
    """
    if not isinstance(raw, str):
        return SENTINEL_DATE
    text = _clean(raw)
    if not text:
        return SENTINEL_DATE
    for layout in DATE_LAYOUTS:
        try:
            return datetime.strptime(text, layout).date()
        except ValueError:
            continue
    return SENTINEL_DATE


def is_sentinel(value: date) -> bool:
    return value == SENTINEL_DATE


def to_calendar_date(value: Union[date, datetime]) -> date:
    """Drop the time-of-day part; aware datetimes are converted to UTC first."""
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value.date()
    return value


def today_utc() -> date:
    return datetime.now(timezone.utc).date()
