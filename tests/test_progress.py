"""Tests for key/value storage and ProgressStore."""

import json

import pytest

from reactprep.config import PROGRESS_STORAGE_KEY
from reactprep.errors import ProgressParseError
from reactprep.questionbank import (
    MemoryStorage,
    ProgressStore,
    SqliteStorage,
    load_progress,
    open_progress_store,
    parse_progress,
    scoped_storage_key,
)
from reactprep.schemas import HydrationStatus, ProgressState


class TestStorage:
    """MemoryStorage and SqliteStorage behave like localStorage."""

    @pytest.fixture(params=["memory", "sqlite"])
    def any_storage(self, request, tmp_path):
        if request.param == "memory":
            return MemoryStorage()
        return SqliteStorage(tmp_path / "progress.db")

    def test_missing_key(self, any_storage):
        assert any_storage.get_item("nope") is None

    def test_set_and_get(self, any_storage):
        any_storage.set_item("k", "v1")
        any_storage.set_item("k", "v2")
        assert any_storage.get_item("k") == "v2"

    def test_remove(self, any_storage):
        any_storage.set_item("k", "v")
        any_storage.remove_item("k")
        any_storage.remove_item("k")
        assert any_storage.get_item("k") is None

    def test_sqlite_persists_across_instances(self, tmp_path):
        SqliteStorage(tmp_path / "progress.db").set_item("k", "v")
        assert SqliteStorage(tmp_path / "progress.db").get_item("k") == "v"

    def test_sqlite_creates_parent_dirs(self, tmp_path):
        storage = SqliteStorage(tmp_path / "nested" / "dir" / "progress.db")
        assert storage.db_path.exists()

    def test_memory_write_count(self):
        storage = MemoryStorage({"k": "v"})
        assert storage.get_item("k") == "v"
        assert storage.write_count == 0
        storage.set_item("k", "w")
        assert storage.write_count == 1


class TestParseProgress:
    """Persisted blob parsing."""

    def test_valid_blob(self):
        state = parse_progress('{"completed": ["h1"], "saved": ["p2"]}')
        assert state.completed == ["h1"]
        assert state.saved == ["p2"]

    def test_missing_fields_default_empty(self):
        assert parse_progress('{"completed": ["h1"]}').saved == []

    @pytest.mark.parametrize("raw", ["not json", "[1, 2]", '{"completed": "h1"}', '"text"'])
    def test_bad_blobs(self, raw):
        with pytest.raises(ProgressParseError):
            parse_progress(raw)

    def test_load_progress_missing_key(self, storage):
        assert load_progress(storage) == ProgressState()

    def test_load_progress_corrupt_blob(self, storage):
        storage.set_item(PROGRESS_STORAGE_KEY, "{broken")
        assert load_progress(storage) == ProgressState()


class TestHydration:
    """A store reports empty progress until it is loaded."""

    def test_starts_uninitialized(self, storage):
        store = ProgressStore(storage)
        assert store.status == HydrationStatus.UNINITIALIZED
        assert not store.is_ready

    def test_queries_false_before_load(self, storage):
        storage.set_item(PROGRESS_STORAGE_KEY, '{"completed": ["h1"], "saved": ["h1"]}')
        store = ProgressStore(storage)
        assert store.is_completed("h1") is False
        assert store.is_saved("h1") is False
        assert store.completed_ids == []
        assert store.state == ProgressState()

    def test_load_reads_persisted_state(self, storage):
        storage.set_item(PROGRESS_STORAGE_KEY, '{"completed": ["h1"], "saved": ["p3"]}')
        store = ProgressStore(storage)
        state = store.load()
        assert store.status == HydrationStatus.READY
        assert state.completed == ["h1"]
        assert store.is_completed("h1")
        assert store.is_saved("p3")

    def test_toggle_before_load_is_ignored(self, storage):
        store = ProgressStore(storage)
        assert store.toggle_completed("h1") is False
        assert store.toggle_saved("h1") is False
        assert storage.write_count == 0
        store.load()
        assert not store.is_completed("h1")

    def test_corrupt_blob_loads_as_empty(self, storage):
        storage.set_item(PROGRESS_STORAGE_KEY, "not json at all")
        store = ProgressStore(storage)
        assert store.load() == ProgressState()
        assert store.is_ready

    def test_state_is_a_copy(self, progress):
        progress.toggle_completed("h1")
        progress.state.completed.append("h2")
        assert progress.completed_ids == ["h1"]


class TestToggles:
    """Completed/saved toggles on a loaded store."""

    def test_defaults_false(self, progress):
        assert progress.is_completed("h1") is False
        assert progress.is_saved("h1") is False

    def test_toggle_completed(self, progress):
        assert progress.toggle_completed("h1") is True
        assert progress.is_completed("h1")
        assert not progress.is_saved("h1")

    def test_double_toggle_restores(self, progress):
        progress.toggle_saved("h1")
        assert progress.toggle_saved("h1") is False
        assert not progress.is_saved("h1")

    def test_flags_are_independent(self, progress):
        progress.toggle_completed("h1")
        progress.toggle_saved("h2")
        assert progress.completed_ids == ["h1"]
        assert progress.saved_ids == ["h2"]

    def test_one_write_per_toggle(self, storage, progress):
        progress.toggle_completed("h1")
        progress.toggle_saved("h1")
        progress.toggle_completed("h1")
        assert storage.write_count == 3

    def test_persisted_json_shape(self, storage, progress):
        progress.toggle_completed("h1")
        assert json.loads(storage.get_item(PROGRESS_STORAGE_KEY)) == {"completed": ["h1"], "saved": []}

    def test_insertion_order_kept(self, progress):
        for question_id in ("h3", "h1", "h2"):
            progress.toggle_completed(question_id)
        assert progress.completed_ids == ["h3", "h1", "h2"]

    def test_reset(self, storage, progress):
        progress.toggle_completed("h1")
        progress.toggle_saved("h2")
        progress.reset()
        assert progress.completed_ids == []
        assert progress.saved_ids == []
        assert json.loads(storage.get_item(PROGRESS_STORAGE_KEY)) == {"completed": [], "saved": []}

    def test_custom_key(self, storage):
        store = ProgressStore(storage, key="other-key")
        store.load()
        store.toggle_saved("p1")
        assert storage.get_item("other-key") is not None
        assert storage.get_item(PROGRESS_STORAGE_KEY) is None


class TestPersistence:
    """Progress survives a fresh store over the same storage."""

    def test_round_trip_memory(self, storage, progress):
        progress.toggle_completed("h1")
        progress.toggle_saved("p4")
        reloaded = ProgressStore(storage)
        reloaded.load()
        assert reloaded.is_completed("h1")
        assert reloaded.is_saved("p4")

    def test_round_trip_sqlite(self, tmp_path):
        db_path = tmp_path / "progress.db"
        store = open_progress_store(SqliteStorage(db_path))
        store.load()
        store.toggle_completed("h1")

        reopened = open_progress_store(SqliteStorage(db_path))
        assert not reopened.is_completed("h1")
        reopened.load()
        assert reopened.is_completed("h1")

    def test_last_writer_wins(self, storage):
        first = ProgressStore(storage)
        second = ProgressStore(storage)
        first.load()
        second.load()
        first.toggle_completed("h1")
        second.toggle_saved("h2")
        reloaded = ProgressStore(storage)
        reloaded.load()
        assert reloaded.completed_ids == []
        assert reloaded.saved_ids == ["h2"]


class TestUserScoping:
    """Each signed-in user has a separate progress record."""

    def test_key_without_user(self):
        assert scoped_storage_key(None) == PROGRESS_STORAGE_KEY
        assert scoped_storage_key("") == PROGRESS_STORAGE_KEY

    def test_key_with_user(self):
        assert scoped_storage_key("ana@example.com") == f"{PROGRESS_STORAGE_KEY}:ana@example.com"

    def test_users_do_not_share_progress(self, storage):
        ana = open_progress_store(storage, user_id="ana@example.com")
        ben = open_progress_store(storage, user_id="ben@example.com")
        ana.load()
        ben.load()
        ana.toggle_completed("h1")
        ben.toggle_saved("p1")

        reloaded = open_progress_store(storage, user_id="ana@example.com")
        reloaded.load()
        assert reloaded.completed_ids == ["h1"]
        assert reloaded.saved_ids == []
        assert storage.get_item(PROGRESS_STORAGE_KEY) is None
