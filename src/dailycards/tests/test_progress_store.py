"""Tests for progress storage backends."""
import json
from pathlib import Path

import pytest

from dailycards.errors import StorageError
from dailycards.models.models import Profile, ProgressDatabase
from dailycards.services.progress_store import (
    InMemoryProgressStore,
    JsonProgressStore,
    SqlProgressStore,
)


@pytest.fixture
def sample_db() -> ProgressDatabase:
    """Two profiles, including empty day lists and an empty profile."""
    return ProgressDatabase(
        profiles={
            "profile-b": Profile(
                learned_by_date={"2024-01-02": ["c9", "c1"], "2024-01-01": []},
                difficult_by_date={"2024-01-02": ["c3"], "2024-01-01": []},
            ),
            "profile-a": Profile(),
        }
    )


def test_json_missing_file_loads_empty(tmp_path: Path) -> None:
    """Test that a missing progress file is an empty database."""
    store = JsonProgressStore(tmp_path / "progress.json")
    assert store.load() == ProgressDatabase()


def test_json_save_writes_camel_case_layout(tmp_path: Path, sample_db: ProgressDatabase) -> None:
    """Test the on-disk JSON shape."""
    path = tmp_path / "nested" / "progress.json"
    JsonProgressStore(path).save(sample_db)

    data = json.loads(path.read_text(encoding="utf-8"))
    assert data == {
        "profiles": {
            "profile-b": {
                "learnedByDate": {"2024-01-02": ["c9", "c1"], "2024-01-01": []},
                "difficultByDate": {"2024-01-02": ["c3"], "2024-01-01": []},
            },
            "profile-a": {"learnedByDate": {}, "difficultByDate": {}},
        }
    }
    assert list(path.parent.iterdir()) == [path]


def test_json_load_after_save(tmp_path: Path, sample_db: ProgressDatabase) -> None:
    """Test that saved progress loads back unchanged."""
    store = JsonProgressStore(tmp_path / "progress.json")
    store.save(sample_db)
    assert store.load() == sample_db


def test_json_load_drops_duplicate_ids(tmp_path: Path) -> None:
    """Test that duplicated ids in a hand-edited file collapse."""
    path = tmp_path / "progress.json"
    path.write_text(
        json.dumps({"profiles": {"p1": {"learnedByDate": {"2024-01-01": ["a", "a", "b"]}}}}),
        encoding="utf-8",
    )
    profile = JsonProgressStore(path).load().profiles["p1"]
    assert profile.learned_by_date == {"2024-01-01": ["a", "b"]}
    assert profile.difficult_by_date == {}


@pytest.mark.parametrize(
    "content",
    [
        "{not json",
        "[]",
        json.dumps({"profiles": []}),
        json.dumps({"profiles": {"p1": {"learnedByDate": {"2024-01-01": "c1"}}}}),
        json.dumps({"profiles": {"p1": "oops"}}),
    ],
)
def test_json_malformed_raises(tmp_path: Path, content: str) -> None:
    """Test that malformed progress files raise StorageError."""
    path = tmp_path / "progress.json"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(StorageError):
        JsonProgressStore(path).load()


def test_in_memory_store_copies(sample_db: ProgressDatabase) -> None:
    """Test that callers cannot change saved state without save()."""
    store = InMemoryProgressStore()
    store.save(sample_db)
    loaded = store.load()
    loaded.profiles["profile-a"].learned_by_date["2024-01-01"] = ["x"]
    assert store.load().profiles["profile-a"] == Profile()


def test_sql_store_empty() -> None:
    """Test loading from fresh tables."""
    store = SqlProgressStore("sqlite:///:memory:")
    assert store.load() == ProgressDatabase()


def test_sql_store_round_trip_keeps_order(sample_db: ProgressDatabase) -> None:
    """Test that profiles, dates and ids keep their order and empty lists survive."""
    store = SqlProgressStore("sqlite:///:memory:")
    store.save(sample_db)
    loaded = store.load()

    assert loaded == sample_db
    assert list(loaded.profiles) == ["profile-b", "profile-a"]
    assert list(loaded.profiles["profile-b"].learned_by_date) == ["2024-01-02", "2024-01-01"]


def test_sql_store_save_replaces(sample_db: ProgressDatabase) -> None:
    """Test that saving replaces the whole database."""
    store = SqlProgressStore("sqlite:///:memory:")
    store.save(sample_db)
    replacement = ProgressDatabase(
        profiles={"profile-c": Profile(learned_by_date={"2024-02-01": ["z"]})}
    )
    store.save(replacement)
    assert store.load() == replacement


def test_sql_store_file_database(tmp_path: Path, sample_db: ProgressDatabase) -> None:
    """Test that a file database is readable by a second store."""
    url = f"sqlite:///{tmp_path / 'progress.db'}"
    SqlProgressStore(url).save(sample_db)
    assert SqlProgressStore(url).load() == sample_db
