from __future__ import annotations

import pytest

from release_radar.config import DEFAULT_DATA_DIR, load_settings

ENV_NAMES = (
    "DISCORD_TOKEN",
    "RELEASE_RADAR_DATA_DIR",
    "RELEASE_RADAR_DEFAULT_LIMIT",
    "RELEASE_RADAR_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ENV_NAMES:
        monkeypatch.delenv(name, raising=False)


def test_defaults() -> None:
    settings = load_settings(dotenv=False)
    assert settings.discord_token is None
    assert settings.data_dir == DEFAULT_DATA_DIR
    assert settings.default_limit == 5
    assert settings.log_level == "INFO"


def test_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DISCORD_TOKEN", "abc")
    monkeypatch.setenv("RELEASE_RADAR_DATA_DIR", "/data/export")
    monkeypatch.setenv("RELEASE_RADAR_DEFAULT_LIMIT", "3")
    monkeypatch.setenv("RELEASE_RADAR_LOG_LEVEL", "debug")

    settings = load_settings(dotenv=False)

    assert settings.discord_token == "abc"
    assert settings.data_dir == "/data/export"
    assert settings.default_limit == 3
    assert settings.log_level == "DEBUG"


@pytest.mark.parametrize("value", ["zero", "0", "-2"])
def test_bad_limit_raises(monkeypatch: pytest.MonkeyPatch, value: str) -> None:
    monkeypatch.setenv("RELEASE_RADAR_DEFAULT_LIMIT", value)
    with pytest.raises(ValueError):
        load_settings(dotenv=False)


@pytest.mark.parametrize("value", ["basicConfig", "LOUD", "root"])
def test_unknown_log_level_raises(monkeypatch: pytest.MonkeyPatch, value: str) -> None:
    monkeypatch.setenv("RELEASE_RADAR_LOG_LEVEL", value)
    with pytest.raises(ValueError):
        load_settings(dotenv=False)


def test_log_level_names_are_accepted(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("RELEASE_RADAR_LOG_LEVEL", " warning ")
    assert load_settings(dotenv=False).log_level == "WARNING"
