from __future__ import annotations

from typing import Iterable

from .models import NormalizedRecord, QueryMode

# Discord rejects messages longer than this.
DISCORD_MESSAGE_LIMIT = 2000

_QUOTES = "\"'"


def _strip_quotes(value: str) -> str:
    return value.strip().strip(_QUOTES).strip()


def render_header(country_key: str, mode: QueryMode = QueryMode.PAST) -> str:
    if mode is QueryMode.FUTURE:
        return f"## 🎮 Upcoming Games from: {country_key}\n"
    return f"## 🎮 Latest Games from: {country_key}\n"


def render_record(record: NormalizedRecord, mode: QueryMode = QueryMode.PAST) -> str:
    label = "Releases" if mode is QueryMode.FUTURE else "Released"
    name = _strip_quotes(record.name)
    link = _strip_quotes(record.link)
    lines = [
        f"🎯 **{name}**",
        f"📅 {label}: {record.release_date.isoformat()}",
        # <...> keeps Discord from expanding a preview for every link
        f"🔗 <{link}>" if link else "🔗 -",
    ]
    return "\n".join(lines) + "\n"


def render_listing(
    result: Iterable[NormalizedRecord],
    country_key: str,
    limit: int,
    mode: QueryMode = QueryMode.PAST,
) -> str:
    """
    Format query results as a Discord-friendly text block.

    Pure formatting: records are emitted in the given order, at most `limit` of them.
    An empty result renders the header only.
    """
    blocks = [render_header(country_key, mode)]
    for i, record in enumerate(result):
        if i >= limit:
            break
        blocks.append(render_record(record, mode))
    return "\n".join(blocks)


def fit_message(text: str, max_chars: int = DISCORD_MESSAGE_LIMIT) -> str:
    if len(text) <= max_chars:
        return text
    return text[: max_chars - 3] + "..."
