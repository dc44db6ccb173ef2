"""Answer bookkeeping: counters, mistakes, mastery and best times."""

from datetime import datetime

import structlog

from pinyin_racer.errors import InvalidArgument
from pinyin_racer.models.progress import (
    LEVELS,
    TRACKED_LEVELS,
    BestTimeRecord,
    Mistake,
    ProgressDocument,
    SessionLogEntry,
)
from pinyin_racer.models.task import AnswerResult

logger = structlog.get_logger()

DEFAULT_BEST_TIMES_CAP = 50


def record_answer(
    progress: ProgressDocument,
    level: int,
    correct: bool,
    key: str | None,
    answer_time: float = 0.0,
    now: datetime | None = None,
    best_times_cap: int = DEFAULT_BEST_TIMES_CAP,
) -> AnswerResult:
    """Apply one submitted answer to ``progress`` in place.

    Level 1 answers only move the counters and the session log. Levels 2 and 3
    also maintain the open-mistake list, and level 2 grows the mastered set.

    Args:
        progress: Document to mutate.
        level: Game level the answer belongs to.
        correct: Whether the learner picked the right option.
        key: Letter (level 2) or syllable (level 3) the question was about.
        answer_time: Seconds taken; only positive times are kept as best times.
        now: Timestamp for new records, defaults to the current time.
        best_times_cap: Number of best-time records retained per level.

    Returns:
        Updated totals and the number of open mistakes.

    Raises:
        InvalidArgument: Unknown level, or a missing key at level 2 or 3.
    """
    if level not in LEVELS:
        raise InvalidArgument(f"level must be 1, 2 or 3, got {level!r}")
    tracked = level in TRACKED_LEVELS
    if tracked and not key:
        raise InvalidArgument(f"a key is required for level {level} answers")

    now = now or datetime.now()

    if correct:
        progress.total_correct += 1
        if tracked:
            progress.mistakes = [
                m for m in progress.mistakes if not (m.level == level and m.key == key)
            ]
            if level == 2 and key not in progress.mastered:
                progress.mastered.append(key)
            if answer_time > 0:
                records = progress.best_times.setdefault(level, [])
                records.append(BestTimeRecord(key=key, answer_time=answer_time, timestamp=now))
                if len(records) > best_times_cap:
                    del records[: len(records) - best_times_cap]
    else:
        progress.total_wrong += 1
        if tracked and not progress.has_mistake(level, key):
            progress.mistakes.append(Mistake(level=level, key=key, timestamp=now))

    progress.session_log.append(
        SessionLogEntry(level=level, correct=correct, answer_time=answer_time, timestamp=now)
    )
    logger.info("answer_recorded", level=level, key=key, correct=correct, answer_time=answer_time)

    return AnswerResult(
        total_correct=progress.total_correct,
        total_wrong=progress.total_wrong,
        mistakes_count=len(progress.mistakes),
    )
