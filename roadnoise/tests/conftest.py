"""Shared test fixtures."""

import json
import sqlite3
from collections.abc import Callable
from pathlib import Path

import pytest

from roadnoise.models.common import parse_timestamp
from roadnoise.models.entry import NoiseEntry, NoiseLevel
from roadnoise.models.weather import Condition, WeatherSnapshot, Wind
from roadnoise.storage.database import connect


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def load_fixture(fixtures_dir: Path) -> Callable[[str], object]:
    def _load(name: str) -> object:
        with open(fixtures_dir / name) as f:
            return json.load(f)

    return _load


@pytest.fixture
def make_entry() -> Callable[..., NoiseEntry]:
    """Build an entry from a wire timestamp with plain clear-sky weather."""

    def _make(
        entry_id: str,
        date: str,
        level: int = 1,
        category: str = "Clear",
    ) -> NoiseEntry:
        return NoiseEntry(
            id=entry_id,
            timestamp=parse_timestamp(date),
            noise_level=NoiseLevel(level),
            weather=WeatherSnapshot(
                temp=50.0,
                feels_like=48.0,
                temp_min=45.0,
                temp_max=55.0,
                pressure=1013.0,
                humidity=60.0,
                clouds=10.0,
                wind=Wind(speed=5.0, deg=180.0),
                condition=Condition(category=category, description=category.lower()),
            ),
        )

    return _make


@pytest.fixture
def scenario_entries(make_entry) -> list[NoiseEntry]:
    """Three entries across two UTC days, newest first."""
    return [
        make_entry("a", "2024-01-02T10:00:00.000Z", 1),
        make_entry("b", "2024-01-02T09:00:00.000Z", 2),
        make_entry("c", "2024-01-01T08:00:00.000Z", 0),
    ]


@pytest.fixture
def db(tmp_path: Path) -> sqlite3.Connection:
    conn = connect(tmp_path / "settings.db")
    yield conn
    conn.close()
