from __future__ import annotations

import logging
import os
import re
from pathlib import Path
from typing import List, Union

import pandas as pd

from .exceptions import DatasetNotFound, InvalidCountryKey, MalformedDataset
from .models import Dataset, ReleaseRecord

logger = logging.getLogger(__name__)

NAME_COLUMN = "Name"
DATE_COLUMN = "Release_Date"
LINK_COLUMN = "Steam_Link"
REQUIRED_COLUMNS = (NAME_COLUMN, DATE_COLUMN, LINK_COLUMN)

DELIMITER = ";"
FILE_SUFFIX = ".csv"

# Country keys come straight from chat input; only plain codes reach the filesystem.
COUNTRY_KEY_RE = re.compile(r"^[A-Za-z0-9][A-Za-z0-9_-]{0,31}$")


def validate_country_key(country_key: str) -> str:
    """
    Return the stripped key, or raise InvalidCountryKey.

    Rejects anything that could act as a path ("../x", "a/b", "", ...).
    """
    key = (country_key or "").strip()
    if not COUNTRY_KEY_RE.fullmatch(key):
        raise InvalidCountryKey(f"Invalid country key: {country_key!r}")
    return key


def read_release_table(path: Union[str, os.PathLike]) -> pd.DataFrame:
    """
    Read a `;`-separated release table with a header row.

    Raises MalformedDataset when the file cannot be parsed or lacks a required column.
    """
    try:
        df = pd.read_csv(
            path,
            sep=DELIMITER,
            dtype=str,
            keep_default_na=False,
            encoding="utf-8-sig",
        )
    except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError, OSError) as e:
        raise MalformedDataset(f"Cannot read release table: {path} ({e})") from e

    df.columns = [str(c).strip() for c in df.columns]
    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise MalformedDataset(f"Release table {path} is missing columns: {', '.join(missing)}")
    return df


def frame_to_records(df: pd.DataFrame) -> List[ReleaseRecord]:
    """Map table rows to ReleaseRecord, skipping rows without a name."""
    records: List[ReleaseRecord] = []
    for name, raw_date, link in zip(df[NAME_COLUMN], df[DATE_COLUMN], df[LINK_COLUMN]):
        name = str(name).strip()
        if not name:
            continue
        records.append(ReleaseRecord(name=name, release_date=str(raw_date), link=str(link).strip()))
    return records


class DatasetLoader:
    """Locate and read `<data_dir>/<COUNTRY>.csv` release tables."""

    def __init__(self, data_dir: Union[str, os.PathLike]) -> None:
        self.data_dir = Path(data_dir)

    def resolve(self, country_key: str) -> Path:
        """
        Return the dataset path for a country key.

        The key is tried as given, then upper- and lower-cased.
        Raises InvalidCountryKey or DatasetNotFound.
        """
        key = validate_country_key(country_key)
        for candidate in dict.fromkeys((key, key.upper(), key.lower())):
            path = self.data_dir / f"{candidate}{FILE_SUFFIX}"
            if path.parent != self.data_dir:
                raise InvalidCountryKey(f"Invalid country key: {country_key!r}")
            if path.is_file():
                return path
        raise DatasetNotFound(f"No dataset for country: {key}")

    def load(self, country_key: str) -> Dataset:
        path = self.resolve(country_key)
        df = read_release_table(path)
        records = frame_to_records(df)
        logger.debug("Loaded %s rows for %s from %s", len(records), country_key, path)
        return Dataset(country_key=country_key.strip(), records=tuple(records))

    def available_countries(self) -> List[str]:
        if not self.data_dir.is_dir():
            return []
        return sorted(
            p.stem for p in self.data_dir.glob(f"*{FILE_SUFFIX}")
            if p.is_file() and COUNTRY_KEY_RE.fullmatch(p.stem)
        )
