from __future__ import annotations

import enum
from dataclasses import dataclass
from datetime import date
from typing import Tuple


class QueryMode(enum.Enum):
    """Temporal filter applied to a release query."""

    PAST = "past"
    FUTURE = "future"
    ALL = "all"


@dataclass(frozen=True)
class ReleaseRecord:
    """
    One row of a country's dataset, exactly as stored.

    `release_date` is opaque text until it goes through `release_radar.dates`.
    """
    name: str
    release_date: str
    link: str


@dataclass(frozen=True)
class NormalizedRecord:
    """
    A release whose date has been converted to a calendar date.

    WARNING: Do not change fields lightly. Renderers and bot commands rely on them.
    """
    name: str
    release_date: date
    link: str
    raw_release_date: str = ""


@dataclass(frozen=True)
class Dataset:
    country_key: str
    records: Tuple[ReleaseRecord, ...] = ()

    def __len__(self) -> int:
        return len(self.records)
