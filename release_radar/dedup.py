from __future__ import annotations

from typing import Iterable, List, Set, Tuple

from .models import NormalizedRecord

_QUOTES = "\"'"


def _clean(value: str) -> str:
    return value.strip().strip(_QUOTES).strip()


def deduplicate(records: Iterable[NormalizedRecord]) -> List[NormalizedRecord]:
    """
    Remove rows repeated verbatim: same name, same date and same link.
    Keeps the first occurrence and preserves original order.
    """
    seen: Set[Tuple[str, str, str]] = set()
    out: List[NormalizedRecord] = []

    for rec in records:
        key = (_clean(rec.name), rec.release_date.isoformat(), _clean(rec.link))
        if key in seen:
            continue
        seen.add(key)
        out.append(rec)
    return out
