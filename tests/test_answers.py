"""Tests for answer bookkeeping."""

from datetime import datetime

import pytest

from pinyin_racer.errors import InvalidArgument
from pinyin_racer.game.answers import record_answer
from pinyin_racer.models.progress import ProgressDocument


@pytest.fixture
def progress():
    return ProgressDocument()


class TestWrongAnswers:
    def test_level2_mistake_recorded(self, progress):
        result = record_answer(progress, 2, False, "b")
        assert result.total_wrong == 1
        assert result.mistakes_count == 1
        assert progress.mistakes[0].level == 2
        assert progress.mistakes[0].key == "b"

    def test_duplicate_mistake_kept_once(self, progress):
        record_answer(progress, 2, False, "b")
        record_answer(progress, 2, False, "b")
        assert [(m.level, m.key) for m in progress.mistakes] == [(2, "b")]
        assert progress.total_wrong == 2

    def test_same_key_different_levels_are_separate(self, progress):
        record_answer(progress, 2, False, "a")
        record_answer(progress, 3, False, "a")
        assert len(progress.mistakes) == 2


class TestCorrectAnswers:
    def test_correct_clears_mistake_and_masters_once(self, progress):
        record_answer(progress, 2, False, "p")
        record_answer(progress, 2, True, "p")
        record_answer(progress, 2, True, "p")
        assert progress.mistakes == []
        assert progress.mastered == ["p"]
        assert progress.total_correct == 2

    def test_level3_does_not_master(self, progress):
        record_answer(progress, 3, False, "ba")
        record_answer(progress, 3, True, "ba")
        assert progress.mistakes == []
        assert progress.mastered == []

    def test_best_time_only_for_positive_times(self, progress):
        record_answer(progress, 2, True, "b", answer_time=0)
        record_answer(progress, 2, True, "b", answer_time=2.5)
        assert [r.answer_time for r in progress.best_times[2]] == [2.5]

    def test_best_times_capped_at_fifty(self, progress):
        for i in range(51):
            record_answer(progress, 3, True, f"k{i}", answer_time=float(i + 1))
        records = progress.best_times[3]
        assert len(records) == 50
        assert records[0].key == "k1"
        assert records[-1].key == "k50"


class TestSessionLogAndLevel1:
    def test_every_answer_logged(self, progress):
        now = datetime(2026, 1, 1, 9, 0, 0)
        record_answer(progress, 2, True, "b", answer_time=1.0, now=now)
        record_answer(progress, 3, False, "ba", now=now)
        assert len(progress.session_log) == 2
        assert progress.session_log[0].timestamp == now
        assert progress.session_log[1].correct is False

    def test_level1_only_counts(self, progress):
        record_answer(progress, 1, False, "b")
        record_answer(progress, 1, True, None, answer_time=3.0)
        assert progress.total_wrong == 1
        assert progress.total_correct == 1
        assert progress.mistakes == []
        assert progress.mastered == []
        assert progress.best_times[2] == [] and progress.best_times[3] == []
        assert len(progress.session_log) == 2


def test_invalid_level(progress):
    with pytest.raises(InvalidArgument):
        record_answer(progress, 7, True, "b")


def test_missing_key_for_tracked_level(progress):
    with pytest.raises(InvalidArgument):
        record_answer(progress, 2, False, None)
    assert progress.total_wrong == 0
