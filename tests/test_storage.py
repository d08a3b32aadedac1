"""Tests for key-value storage backends and the progress repository."""
import json

import pytest

from fitcoach.progress import Progress
from fitcoach.storage import (
    PROGRESS_KEY,
    SESSION_KEY,
    InMemoryKeyValueStore,
    JsonFileKeyValueStore,
    ProgressRepository,
    create_key_value_store,
)


class TestInMemoryKeyValueStore:
    """Tests for the dict-backed store."""

    def test_get_missing_key(self):
        assert InMemoryKeyValueStore().get("absent") is None

    def test_set_then_get(self):
        store = InMemoryKeyValueStore()
        store.set("k", "v")
        store.set("k", "w")
        assert store.get("k") == "w"

    def test_initial_data_is_copied(self):
        initial = {"k": "v"}
        store = InMemoryKeyValueStore(initial)
        store.set("k", "changed")

        assert initial["k"] == "v"
        assert store.backend_type == "memory"


class TestJsonFileKeyValueStore:
    """Tests for the JSON file store."""

    def test_missing_file_reads_empty(self, tmp_path):
        store = JsonFileKeyValueStore(tmp_path / "store.json")
        assert store.get(PROGRESS_KEY) is None

    def test_set_creates_parent_dirs_and_persists(self, tmp_path):
        path = tmp_path / "nested" / "dir" / "store.json"
        JsonFileKeyValueStore(path).set("k", "v")

        assert json.loads(path.read_text(encoding="utf-8")) == {"k": "v"}
        assert JsonFileKeyValueStore(path).get("k") == "v"

    def test_set_keeps_other_keys(self, tmp_path):
        store = JsonFileKeyValueStore(tmp_path / "store.json")
        store.set("a", "1")
        store.set("b", "2")

        assert store.get("a") == "1"
        assert store.get("b") == "2"

    def test_picks_up_external_writes(self, tmp_path):
        path = tmp_path / "store.json"
        store = JsonFileKeyValueStore(path)
        store.set("k", "old")

        path.write_text(json.dumps({"k": "new"}), encoding="utf-8")

        assert store.get("k") == "new"

    @pytest.mark.parametrize("content", ["{not json", "[1, 2, 3]", '"text"'])
    def test_malformed_file_reads_empty(self, tmp_path, content):
        path = tmp_path / "store.json"
        path.write_text(content, encoding="utf-8")

        store = JsonFileKeyValueStore(path)

        assert store.get("k") is None
        store.set("k", "v")
        assert json.loads(path.read_text(encoding="utf-8")) == {"k": "v"}

    def test_non_string_values_ignored(self, tmp_path):
        path = tmp_path / "store.json"
        path.write_text(json.dumps({"a": 1, "b": "two"}), encoding="utf-8")

        store = JsonFileKeyValueStore(path)

        assert store.get("a") is None
        assert store.get("b") == "two"

    def test_no_temporary_files_left(self, tmp_path):
        store = JsonFileKeyValueStore(tmp_path / "store.json")
        store.set("k", "v")
        assert [p.name for p in tmp_path.iterdir()] == ["store.json"]


class TestCreateKeyValueStore:
    """Tests for the storage factory."""

    def test_memory_backend(self):
        store = create_key_value_store("memory", initial={"k": "v"})
        assert isinstance(store, InMemoryKeyValueStore)
        assert store.get("k") == "v"

    def test_json_backend(self, tmp_path):
        store = create_key_value_store("json", path=tmp_path / "s.json")
        assert isinstance(store, JsonFileKeyValueStore)
        assert store.backend_type == "json"
        assert store.path == tmp_path / "s.json"

    def test_unsupported_backend(self):
        with pytest.raises(ValueError, match="Unsupported storage backend"):
            create_key_value_store("redis")


class TestProgressRepository:
    """Tests for typed progress and session access."""

    def test_load_defaults_when_empty(self, repository):
        assert repository.load_progress() == Progress()

    def test_save_writes_progress_key(self, repository, store):
        repository.save_progress(Progress(total_messages=4))

        stored = json.loads(store.get(PROGRESS_KEY))
        assert stored["totalMessages"] == 4

    def test_load_reads_fresh_each_time(self, repository, store):
        repository.save_progress(Progress(total_messages=1))
        store.set(PROGRESS_KEY, Progress(total_messages=8).to_json())

        assert repository.load_progress().total_messages == 8

    def test_load_tolerates_corrupt_record(self, store):
        store.set(PROGRESS_KEY, "{{{")
        assert ProgressRepository(store).load_progress() == Progress()

    def test_session_id_generated_once(self, repository, store):
        first = repository.load_session_id()
        second = repository.load_session_id()

        assert first
        assert first == second
        assert store.get(SESSION_KEY) == first

    def test_existing_session_id_reused(self):
        store = InMemoryKeyValueStore({SESSION_KEY: "abc-123"})
        assert ProgressRepository(store).load_session_id() == "abc-123"

    def test_session_id_survives_restart(self, tmp_path):
        path = tmp_path / "store.json"
        first = ProgressRepository(JsonFileKeyValueStore(path)).load_session_id()
        second = ProgressRepository(JsonFileKeyValueStore(path)).load_session_id()
        assert first == second
