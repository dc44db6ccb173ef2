"""Progress persistence (JSON + fcntl.flock + atomic write) and schema migration."""

import copy
import fcntl
import json
import os
import tempfile
from pathlib import Path
from typing import Any, Protocol

import structlog
from pydantic import ValidationError

from pinyin_racer.errors import PersistenceCorrupt
from pinyin_racer.models.progress import LEVELS, SCHEMA_VERSION, TRACKED_LEVELS, ProgressDocument

logger = structlog.get_logger()


class ProgressBackend(Protocol):
    """Where the raw progress document lives."""

    def read(self) -> dict[str, Any] | None: ...

    def write(self, data: dict[str, Any]) -> None: ...


class JsonFileBackend:
    """Keeps the document in one JSON file, replaced atomically on write."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def read(self) -> dict[str, Any] | None:
        if not self.path.exists():
            return None
        try:
            with open(self.path, encoding="utf-8") as f:
                fcntl.flock(f, fcntl.LOCK_SH)
                data = json.load(f)
                fcntl.flock(f, fcntl.LOCK_UN)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise PersistenceCorrupt(f"cannot decode {self.path}: {e}") from e
        if not isinstance(data, dict):
            raise PersistenceCorrupt(f"{self.path} does not hold a JSON object")
        return data

    def write(self, data: dict[str, Any]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            "w", dir=self.path.parent, delete=False, suffix=".json", encoding="utf-8"
        ) as tmp:
            json.dump(data, tmp, ensure_ascii=False, indent=2)
        os.replace(tmp.name, self.path)


class MemoryBackend:
    """In-process backend for tests and throwaway sessions."""

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        self.data = copy.deepcopy(data)
        self.writes = 0

    def read(self) -> dict[str, Any] | None:
        return copy.deepcopy(self.data)

    def write(self, data: dict[str, Any]) -> None:
        self.data = copy.deepcopy(data)
        self.writes += 1


def _per_level(value: Any, levels: tuple[int, ...], default: Any) -> dict[str, Any]:
    """Normalise a level-keyed mapping; accepts 1, "1" and "level1" style keys."""
    value = value if isinstance(value, dict) else {}
    result = {}
    for level in levels:
        for candidate in (str(level), level, f"level{level}"):
            if candidate in value:
                result[str(level)] = value[candidate]
                break
        else:
            result[str(level)] = copy.deepcopy(default)
    return result


def _legacy_key(record: dict[str, Any]) -> dict[str, Any]:
    record = dict(record)
    if "key" not in record:
        for legacy in ("letter", "syllable"):
            if legacy in record:
                record["key"] = record.pop(legacy)
                break
    if "answerTime" in record and "answer_time" not in record:
        record["answer_time"] = record.pop("answerTime")
    if "time" in record and "answer_time" not in record:
        record["answer_time"] = record.pop("time")
    return record


def _upgrade_legacy(data: dict[str, Any]) -> None:
    """Rename fields written by the first (camelCase) deployment."""
    renames = {
        "level": "current_level",
        "currentSession": "session_log",
        "totalCorrect": "total_correct",
        "totalWrong": "total_wrong",
        "bestTimes": "best_times",
    }
    for old, new in renames.items():
        if old in data and new not in data:
            data[new] = data.pop(old)
    for field in ("mistakes", "session_log"):
        # non-list values are left for validation to reject
        if isinstance(data.get(field), list):
            data[field] = [_legacy_key(r) if isinstance(r, dict) else r for r in data[field]]
    best = data.get("best_times")
    if isinstance(best, dict):
        data["best_times"] = {
            k: [_legacy_key(r) for r in v if isinstance(r, dict)] if isinstance(v, list) else v
            for k, v in best.items()
        }


def migrate_document(raw: dict[str, Any]) -> dict[str, Any]:
    """Bring a persisted document up to the current schema.

    Applied once per load. Missing ``time_spent`` and ``best_times`` are
    back-filled with empty values; unknown fields are left for the model to drop.
    """
    data = copy.deepcopy(raw)
    version = data.get("schema_version")
    if isinstance(version, bool) or not isinstance(version, int) or version < 1:
        _upgrade_legacy(data)
    mastered = data.get("mastered")
    if isinstance(mastered, list) and all(isinstance(k, str) for k in mastered):
        data["mastered"] = list(dict.fromkeys(data["mastered"]))
    data["time_spent"] = _per_level(data.get("time_spent"), LEVELS, 0.0)
    data["best_times"] = _per_level(data.get("best_times"), TRACKED_LEVELS, [])
    data["schema_version"] = SCHEMA_VERSION
    return data


class ProgressStore:
    """Loads and saves the single progress document through a backend.

    Args:
        backend: Persistence port, e.g. ``JsonFileBackend`` or ``MemoryBackend``.
    """

    def __init__(self, backend: ProgressBackend) -> None:
        self.backend = backend

    def load(self) -> ProgressDocument:
        """Return the stored document, or defaults when none is stored.

        Raises:
            PersistenceCorrupt: The stored form cannot be decoded or validated.
        """
        raw = self.backend.read()
        if raw is None:
            return ProgressDocument()
        try:
            return ProgressDocument.model_validate(migrate_document(raw))
        except ValidationError as e:
            raise PersistenceCorrupt(f"invalid progress document: {e}") from e
        except (TypeError, ValueError, AttributeError) as e:
            raise PersistenceCorrupt(f"cannot migrate progress document: {e}") from e

    def load_or_default(self) -> ProgressDocument:
        try:
            return self.load()
        except PersistenceCorrupt as e:
            logger.warning("progress_corrupt", error=str(e))
            return ProgressDocument()

    def save(self, progress: ProgressDocument) -> None:
        self.backend.write(progress.model_dump(mode="json"))

    def reset(self) -> ProgressDocument:
        progress = ProgressDocument()
        self.save(progress)
        logger.info("progress_reset")
        return progress
