"""
release_radar

A small query engine that answers "what are a country's latest game releases?"
from per-country `;`-separated release tables and returns Discord-ready listings.

Core ideas:
- Input: a country key (e.g. "FR") and a data directory of `<KEY>.csv` files
- Process: load → normalize dates → drop unannounced → deduplicate → sort → filter → limit
- Output: List[NormalizedRecord], or a rendered text block

Example
-------
from release_radar import DatasetLoader, QueryMode, ReleaseRadar

radar = ReleaseRadar(DatasetLoader("../export"))

print(radar.answer("FR", mode=QueryMode.PAST, limit=5))

for rec in radar.query("FR", mode=QueryMode.FUTURE, limit=3):
    print(rec.release_date, rec.name, rec.link)
"""
from .models import Dataset, NormalizedRecord, QueryMode, ReleaseRecord
from .exceptions import DatasetNotFound, InvalidCountryKey, LoadError, MalformedDataset
from .loader import DatasetLoader
from .dates import SENTINEL_DATE, normalize_date
from .query import query_releases
from .render import render_listing
from .core import NO_DATA_MESSAGE, NOT_FOUND_MESSAGE, ReleaseRadar

__all__ = [
    "Dataset",
    "NormalizedRecord",
    "QueryMode",
    "ReleaseRecord",
    "LoadError",
    "DatasetNotFound",
    "InvalidCountryKey",
    "MalformedDataset",
    "DatasetLoader",
    "SENTINEL_DATE",
    "normalize_date",
    "query_releases",
    "render_listing",
    "ReleaseRadar",
    "NOT_FOUND_MESSAGE",
    "NO_DATA_MESSAGE",
]
