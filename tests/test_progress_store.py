"""Tests for progress persistence and schema migration."""

import json

import pytest

from pinyin_racer.errors import PersistenceCorrupt
from pinyin_racer.game.answers import record_answer
from pinyin_racer.models.progress import SCHEMA_VERSION, ProgressDocument
from pinyin_racer.storage.progress import (
    JsonFileBackend,
    MemoryBackend,
    ProgressStore,
    migrate_document,
)


@pytest.fixture
def file_store(tmp_path):
    return ProgressStore(JsonFileBackend(tmp_path / "user_data.json"))


class TestJsonFileStore:
    def test_load_missing_file_gives_defaults(self, file_store):
        progress = file_store.load()
        assert progress == ProgressDocument()
        assert not file_store.backend.path.exists()

    def test_save_and_load(self, file_store):
        progress = file_store.load()
        progress.current_level = 3
        record_answer(progress, 2, False, "zh", answer_time=4.0)
        record_answer(progress, 3, True, "ba", answer_time=6.5)
        file_store.save(progress)

        loaded = file_store.load()
        assert loaded.current_level == 3
        assert loaded.mistakes[0].key == "zh"
        assert loaded.best_times[3][0].answer_time == 6.5
        assert loaded.time_spent == {1: 0.0, 2: 0.0, 3: 0.0}

    def test_file_is_plain_json(self, file_store):
        file_store.save(ProgressDocument(mastered=["ü"]))
        data = json.loads(file_store.backend.path.read_text(encoding="utf-8"))
        assert data["mastered"] == ["ü"]
        assert data["schema_version"] == SCHEMA_VERSION

    def test_no_temp_files_left(self, file_store, tmp_path):
        file_store.save(ProgressDocument())
        file_store.save(ProgressDocument(total_correct=1))
        assert [p.name for p in tmp_path.iterdir()] == ["user_data.json"]

    def test_corrupt_json_raises(self, file_store):
        file_store.backend.path.write_text("{not json", encoding="utf-8")
        with pytest.raises(PersistenceCorrupt):
            file_store.load()

    def test_non_object_raises(self, file_store):
        file_store.backend.path.write_text("[1, 2]", encoding="utf-8")
        with pytest.raises(PersistenceCorrupt):
            file_store.load()

    def test_invalid_field_raises(self, file_store):
        file_store.backend.path.write_text(
            json.dumps({"schema_version": 1, "total_correct": "lots"}), encoding="utf-8"
        )
        with pytest.raises(PersistenceCorrupt):
            file_store.load()

    def test_load_or_default_recovers(self, file_store):
        file_store.backend.path.write_text("garbage", encoding="utf-8")
        assert file_store.load_or_default() == ProgressDocument()

    def test_reset_overwrites(self, file_store):
        progress = file_store.load()
        record_answer(progress, 2, False, "b")
        progress.time_spent[1] = 100.0
        file_store.save(progress)

        fresh = file_store.reset()
        loaded = file_store.load()
        assert fresh == loaded
        assert loaded.total_correct == 0 and loaded.total_wrong == 0
        assert loaded.mastered == [] and loaded.mistakes == [] and loaded.session_log == []
        assert loaded.time_spent == {1: 0.0, 2: 0.0, 3: 0.0}


class TestMigration:
    def test_backfills_missing_time_and_best_times(self):
        store = ProgressStore(
            MemoryBackend({"schema_version": 1, "current_level": 2, "total_correct": 4})
        )
        progress = store.load()
        assert progress.current_level == 2
        assert progress.total_correct == 4
        assert progress.time_spent == {1: 0.0, 2: 0.0, 3: 0.0}
        assert progress.best_times == {2: [], 3: []}

    def test_partial_time_spent_is_completed(self):
        data = migrate_document({"schema_version": 1, "time_spent": {"2": 12.5}})
        assert data["time_spent"] == {"1": 0.0, "2": 12.5, "3": 0.0}

    def test_legacy_document_upgraded(self):
        legacy = {
            "level": 2,
            "mastered": ["b", "b", "p"],
            "mistakes": [
                {"level": 2, "letter": "m", "timestamp": "2025-01-01T10:00:00"},
                {"level": 3, "syllable": "ba", "timestamp": "2025-01-01T10:01:00"},
            ],
            "currentSession": [
                {"level": 2, "correct": True, "answerTime": 3.2, "timestamp": "2025-01-01T10:00:00"}
            ],
            "totalCorrect": 5,
            "totalWrong": 2,
            "time_spent": {"level1": 30, "level2": 0, "level3": 5},
            "bestTimes": {
                "level2": [{"letter": "b", "time": 2.0, "timestamp": "2025-01-01T10:00:00"}]
            },
        }
        progress = ProgressStore(MemoryBackend(legacy)).load()
        assert progress.schema_version == SCHEMA_VERSION
        assert progress.current_level == 2
        assert progress.mastered == ["b", "p"]
        assert [(m.level, m.key) for m in progress.mistakes] == [(2, "m"), (3, "ba")]
        assert progress.session_log[0].answer_time == 3.2
        assert progress.total_correct == 5 and progress.total_wrong == 2
        assert progress.time_spent == {1: 30.0, 2: 0.0, 3: 5.0}
        assert progress.best_times[2][0].key == "b"
        assert progress.best_times[2][0].answer_time == 2.0
        assert progress.best_times[3] == []

    def test_migration_does_not_mutate_input(self):
        raw = {"level": 3}
        migrate_document(raw)
        assert raw == {"level": 3}


def test_memory_backend_isolates_copies():
    backend = MemoryBackend()
    store = ProgressStore(backend)
    progress = store.load()
    store.save(progress)
    progress.mastered.append("x")
    assert store.load().mastered == []
    assert backend.writes == 1


class TestMalformedDocuments:
    @pytest.mark.parametrize("version", ["1", None, 1.5, True])
    def test_odd_schema_version_still_loads(self, version):
        progress = ProgressStore(MemoryBackend({"schema_version": version, "total_wrong": 3})).load()
        assert progress.schema_version == SCHEMA_VERSION
        assert progress.total_wrong == 3

    @pytest.mark.parametrize(
        "raw",
        [
            {"mistakes": 5},
            {"currentSession": "oops"},
            {"schema_version": 1, "mistakes": [1, 2]},
            {"bestTimes": {"level2": 7}},
        ],
    )
    def test_bad_shapes_raise_persistence_corrupt(self, raw):
        with pytest.raises(PersistenceCorrupt):
            ProgressStore(MemoryBackend(raw)).load()

    def test_non_dict_document_raises(self):
        store = ProgressStore(MemoryBackend())
        store.backend.data = ["not", "a", "dict"]
        with pytest.raises(PersistenceCorrupt):
            store.load()

    @pytest.mark.parametrize("raw", [{"schema_version": "1"}, {"schema_version": None}, {"mistakes": 5}])
    def test_load_or_default_never_raises(self, raw):
        assert ProgressStore(MemoryBackend(raw)).load_or_default() == ProgressDocument()
