from __future__ import annotations

import logging
from datetime import date, datetime
from typing import List, Optional, Union

from .dates import is_sentinel, normalize_date, to_calendar_date, today_utc
from .dedup import deduplicate
from .models import Dataset, NormalizedRecord, QueryMode, ReleaseRecord

logger = logging.getLogger(__name__)


def normalize_record(record: ReleaseRecord) -> NormalizedRecord:
    return NormalizedRecord(
        name=record.name,
        release_date=normalize_date(record.release_date),
        link=record.link,
        raw_release_date=record.release_date,
    )


def matches_mode(release_date: date, mode: QueryMode, reference: date) -> bool:
    """PAST is strictly before `reference`, FUTURE is on or after it, ALL is anything."""
    if mode is QueryMode.PAST:
        return release_date < reference
    if mode is QueryMode.FUTURE:
        return release_date >= reference
    return True


def query_releases(
    dataset: Dataset,
    mode: QueryMode = QueryMode.PAST,
    limit: int = 5,
    reference: Optional[Union[date, datetime]] = None,
) -> List[NormalizedRecord]:
    """
    Return at most `limit` releases of `dataset` for the given mode.

    Pipeline: normalize → drop sentinel dates → sort (latest first) → temporal filter
    → deduplicate → limit. FUTURE results are returned soonest first.

    An empty list is a normal outcome (no rows, or none left after filtering).
    """
    if isinstance(limit, bool) or not isinstance(limit, int) or limit <= 0:
        raise ValueError(f"limit must be a positive integer, got {limit!r}")
    ref = to_calendar_date(reference) if reference is not None else today_utc()

    # Normalize to calendar dates
    records = [normalize_record(r) for r in dataset.records]

    # Unannounced / unparseable dates never surface
    records = [r for r in records if not is_sentinel(r.release_date)]

    # Latest first; sorted() is stable so ties keep file order
    records = sorted(records, key=lambda r: r.release_date, reverse=True)

    records = [r for r in records if matches_mode(r.release_date, mode, ref)]
    records = deduplicate(records)
    if mode is QueryMode.FUTURE:
        records = sorted(records, key=lambda r: r.release_date)

    result = records[:limit]
    logger.debug(
        "Query %s mode=%s limit=%s reference=%s: %s of %s rows",
        dataset.country_key, mode.value, limit, ref.isoformat(), len(result), len(dataset),
    )
    return result
