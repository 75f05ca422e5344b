from __future__ import annotations

from datetime import date
from pathlib import Path

import pytest

from release_radar.core import NO_DATA_MESSAGE, NOT_FOUND_MESSAGE, ReleaseRadar
from release_radar.exceptions import DatasetNotFound
from release_radar.loader import DatasetLoader
from release_radar.models import QueryMode

REFERENCE = date(2024, 1, 1)

XX_TABLE = (
    "Name;Release_Date;Steam_Link\n"
    '"March Game";"10 Mar, 2023";"https://store.steampowered.com/app/10"\n'
    '"Sentinel Game";"01 Jan, 1980";"https://store.steampowered.com/app/11"\n'
    '"December Game";"22 Dec, 2022";"https://store.steampowered.com/app/12"\n'
)


@pytest.fixture
def radar(tmp_path: Path) -> ReleaseRadar:
    (tmp_path / "XX.csv").write_text(XX_TABLE, encoding="utf-8")
    (tmp_path / "EMPTY.csv").write_text("Name;Release_Date;Steam_Link\n", encoding="utf-8")
    (tmp_path / "BAD.csv").write_text("Title;When\nA;B\n", encoding="utf-8")
    return ReleaseRadar(DatasetLoader(tmp_path), default_limit=5)


def test_answer_end_to_end(radar: ReleaseRadar) -> None:
    text = radar.answer("XX", mode=QueryMode.PAST, limit=5, reference=REFERENCE)

    assert text.startswith("## 🎮 Latest Games from: XX\n")
    assert "Sentinel Game" not in text
    assert text.index("March Game") < text.index("December Game")
    assert "📅 Released: 2023-03-10" in text
    assert "🔗 <https://store.steampowered.com/app/10>" in text


def test_query_returns_records(radar: ReleaseRadar) -> None:
    result = radar.query("XX", mode=QueryMode.PAST, reference=REFERENCE)
    assert [r.release_date for r in result] == [date(2023, 3, 10), date(2022, 12, 22)]


def test_query_uses_default_limit(tmp_path: Path) -> None:
    rows = "".join(f"Game {d};{d} Feb, 2023;https://x/{d}\n" for d in range(1, 9))
    (tmp_path / "YY.csv").write_text("Name;Release_Date;Steam_Link\n" + rows, encoding="utf-8")
    radar = ReleaseRadar(DatasetLoader(tmp_path), default_limit=3)
    assert len(radar.query("YY", reference=REFERENCE)) == 3


def test_query_propagates_load_errors(radar: ReleaseRadar) -> None:
    with pytest.raises(DatasetNotFound):
        radar.query("ZZ", reference=REFERENCE)


@pytest.mark.parametrize("key", ["ZZ", "BAD", "../XX", ""])
def test_answer_maps_load_errors_to_not_found(radar: ReleaseRadar, key: str) -> None:
    assert radar.answer(key, reference=REFERENCE) == NOT_FOUND_MESSAGE


def test_answer_empty_result_is_no_data(radar: ReleaseRadar) -> None:
    assert radar.answer("EMPTY", reference=REFERENCE) == NO_DATA_MESSAGE
    assert radar.answer("XX", mode=QueryMode.FUTURE, reference=REFERENCE) == NO_DATA_MESSAGE


def test_default_limit_must_be_positive(tmp_path: Path) -> None:
    with pytest.raises(ValueError):
        ReleaseRadar(DatasetLoader(tmp_path), default_limit=0)


@pytest.mark.parametrize("limit", [0, -3])
def test_explicit_non_positive_limit_raises(radar: ReleaseRadar, limit: int) -> None:
    with pytest.raises(ValueError):
        radar.query("XX", limit=limit, reference=REFERENCE)
    with pytest.raises(ValueError):
        radar.answer("XX", limit=limit, reference=REFERENCE)
