from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Dict, Optional, Union

from .core import ReleaseRadar
from .models import QueryMode
from .render import fit_message

PREFIX = "!"
PING_RESPONSE = "# MODS WEKOS"


@dataclass(frozen=True)
class ListingCommand:
    mode: QueryMode
    limit: int
    description: str


LISTING_COMMANDS: Dict[str, ListingCommand] = {
    "latest5": ListingCommand(QueryMode.PAST, 5, "Latest 5 releases of the country"),
    "latest3": ListingCommand(QueryMode.PAST, 3, "Latest 3 releases of the country"),
    "all5": ListingCommand(QueryMode.ALL, 5, "Top 5 releases of the country, announced dates included"),
    "next5": ListingCommand(QueryMode.FUTURE, 5, "Next 5 upcoming releases of the country"),
}


def usage(name: str) -> str:
    return f"Usage: {PREFIX}{name} <country>  ({LISTING_COMMANDS[name].description})"


def handle_command(
    content: str,
    radar: ReleaseRadar,
    *,
    reference: Optional[Union[date, datetime]] = None,
) -> Optional[str]:
    """
    Turn a chat message into a reply, or None if it is not one of our commands.

    Commands: !latest5 / !latest3 / !all5 / !next5 <country>, !countries, !ping
    """
    text = (content or "").strip()
    if not text.startswith(PREFIX):
        return None
    parts = text[len(PREFIX):].split()
    if not parts:
        return None
    name, args = parts[0].lower(), parts[1:]

    if name == "ping":
        return PING_RESPONSE

    if name == "countries":
        keys = radar.loader.available_countries()
        if not keys:
            return "No country datasets available."
        return fit_message("Available countries: " + ", ".join(keys))

    command = LISTING_COMMANDS.get(name)
    if command is None:
        return None
    if len(args) != 1:
        return usage(name)

    reply = radar.answer(args[0], mode=command.mode, limit=command.limit, reference=reference)
    return fit_message(reply)
