from datetime import UTC, date, datetime, timedelta
from pathlib import Path

import pytest

from maintrack.adapters.sqlite.migrator import SQLiteMigrator
from maintrack.rules.loader import load_rules
from maintrack.rules.models import Rules


class FixedClock:
    """Deterministic clock: a fixed 'today' with a ticking now_utc."""

    def __init__(self, today: date = date(2024, 6, 15)) -> None:
        self._today = today
        self._now = datetime(today.year, today.month, today.day, 12, 0, 0, tzinfo=UTC)

    def now_utc(self) -> datetime:
        self._now += timedelta(seconds=1)
        return self._now

    def today(self) -> date:
        return self._today


@pytest.fixture
def rules() -> Rules:
    # Tests run from the project root
    rules_path = Path("rules.yaml").resolve()
    if not rules_path.exists():
        raise FileNotFoundError(f"Rules not found at {rules_path}")
    return load_rules(rules_path)


@pytest.fixture
def db_path(tmp_path: Path) -> str:
    """A migrated, empty database."""
    path = str(tmp_path / "data" / "maintrack.db")
    SQLiteMigrator(path).run_migrations()
    return path


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock()
