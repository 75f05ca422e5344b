from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

DEFAULT_DATA_DIR = "../export"
DEFAULT_LIMIT = 5


@dataclass(frozen=True)
class Settings:
    """
    Runtime settings read from the environment (and a `.env` file if present).

    Store the bot token in `.env` as DISCORD_TOKEN="YOUR_BOT_TOKEN".
    """
    discord_token: Optional[str] = None
    data_dir: str = DEFAULT_DATA_DIR
    default_limit: int = DEFAULT_LIMIT
    log_level: str = "INFO"


def _positive_int(value: Optional[str], default: int, name: str) -> int:
    if value is None or not value.strip():
        return default
    try:
        parsed = int(value)
    except ValueError as e:
        raise ValueError(f"{name} must be an integer, got {value!r}") from e
    if parsed <= 0:
        raise ValueError(f"{name} must be positive, got {parsed}")
    return parsed


def _log_level(value: Optional[str]) -> str:
    level = (value or "INFO").strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"RELEASE_RADAR_LOG_LEVEL must be a logging level name, got {value!r}")
    return level


def load_settings(*, dotenv: bool = True) -> Settings:
    if dotenv:
        load_dotenv()
    return Settings(
        discord_token=os.getenv("DISCORD_TOKEN") or None,
        data_dir=os.getenv("RELEASE_RADAR_DATA_DIR") or DEFAULT_DATA_DIR,
        default_limit=_positive_int(
            os.getenv("RELEASE_RADAR_DEFAULT_LIMIT"), DEFAULT_LIMIT, "RELEASE_RADAR_DEFAULT_LIMIT"
        ),
        log_level=_log_level(os.getenv("RELEASE_RADAR_LOG_LEVEL")),
    )
