from __future__ import annotations

import logging
from datetime import date, datetime
from typing import List, Optional, Union

from .exceptions import LoadError
from .loader import DatasetLoader
from .models import NormalizedRecord, QueryMode
from .query import query_releases
from .render import render_listing

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Error, country not found"
NO_DATA_MESSAGE = "No release data available for this country."


class ReleaseRadar:
    """
    High-level API: answer "what are a country's nearest game releases?".

    Pipeline: load → normalize → filter (past/future/all) → sort → limit → render
    """

    def __init__(self, loader: DatasetLoader, *, default_limit: int = 5) -> None:
        if default_limit <= 0:
            raise ValueError(f"default_limit must be positive, got {default_limit}")
        self.loader = loader
        self.default_limit = default_limit

    def query(
        self,
        country_key: str,
        *,
        mode: QueryMode = QueryMode.PAST,
        limit: Optional[int] = None,
        reference: Optional[Union[date, datetime]] = None,
    ) -> List[NormalizedRecord]:
        """Raises LoadError subclasses when the dataset is missing or unreadable."""
        dataset = self.loader.load(country_key)
        return query_releases(
            dataset,
            mode=mode,
            limit=self.default_limit if limit is None else limit,
            reference=reference,
        )

    def answer(
        self,
        country_key: str,
        *,
        mode: QueryMode = QueryMode.PAST,
        limit: Optional[int] = None,
        reference: Optional[Union[date, datetime]] = None,
    ) -> str:
        """Return the rendered listing, or a fixed user-facing message."""
        limit = self.default_limit if limit is None else limit
        try:
            result = self.query(country_key, mode=mode, limit=limit, reference=reference)
        except LoadError as e:
            # Missing and malformed datasets look the same to the user
            logger.warning("Load failed for %r: %s", country_key, e)
            return NOT_FOUND_MESSAGE

        if not result:
            return NO_DATA_MESSAGE
        return render_listing(result, country_key.strip(), limit, mode=mode)
