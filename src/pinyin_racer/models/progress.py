"""Persisted learner progress models."""

from datetime import datetime

from pydantic import BaseModel, Field

SCHEMA_VERSION = 1
LEVELS = (1, 2, 3)
TRACKED_LEVELS = (2, 3)  # levels with mistake and best-time bookkeeping


def _empty_time_spent() -> dict[int, float]:
    return {level: 0.0 for level in LEVELS}


def _empty_best_times() -> dict[int, list["BestTimeRecord"]]:
    return {level: [] for level in TRACKED_LEVELS}


class Mistake(BaseModel):
    """An open record that a letter or syllable was answered wrongly."""

    level: int
    key: str
    timestamp: datetime = Field(default_factory=datetime.now)


class BestTimeRecord(BaseModel):
    key: str
    answer_time: float
    timestamp: datetime = Field(default_factory=datetime.now)


class SessionLogEntry(BaseModel):
    level: int
    correct: bool
    answer_time: float = 0.0
    timestamp: datetime = Field(default_factory=datetime.now)


class ProgressDocument(BaseModel):
    """The single progress document of a deployment."""

    schema_version: int = SCHEMA_VERSION
    current_level: int = Field(default=1, ge=1, le=3)
    mastered: list[str] = Field(default_factory=list)
    mistakes: list[Mistake] = Field(default_factory=list)
    session_log: list[SessionLogEntry] = Field(default_factory=list)
    total_correct: int = Field(default=0, ge=0)
    total_wrong: int = Field(default=0, ge=0)
    time_spent: dict[int, float] = Field(default_factory=_empty_time_spent)
    best_times: dict[int, list[BestTimeRecord]] = Field(default_factory=_empty_best_times)

    def open_mistake_keys(self, level: int) -> list[str]:
        """Keys of open mistakes at ``level``, in insertion order."""
        return [m.key for m in self.mistakes if m.level == level]

    def has_mistake(self, level: int, key: str) -> bool:
        return any(m.level == level and m.key == key for m in self.mistakes)
