"""Request-level operations over the progress document."""

import math

import structlog

from pinyin_racer.content.tables import LETTERS
from pinyin_racer.errors import InvalidArgument
from pinyin_racer.game.answers import DEFAULT_BEST_TIMES_CAP, record_answer
from pinyin_racer.game.stats import compute_stats
from pinyin_racer.game.tasks import TaskGenerator
from pinyin_racer.models.content import LetterEntry
from pinyin_racer.models.progress import LEVELS, ProgressDocument
from pinyin_racer.models.task import AnswerResult, Stats, TaskSpec
from pinyin_racer.storage.progress import ProgressStore

logger = structlog.get_logger()


def _check_level(level: int) -> int:
    if isinstance(level, bool) or level not in LEVELS:
        raise InvalidArgument(f"level must be 1, 2 or 3, got {level!r}")
    return level


class GameService:
    """Each mutating call loads the document, changes it and saves it whole.

    Concurrent callers are not coordinated: the last save wins.
    """

    def __init__(
        self,
        store: ProgressStore,
        generator: TaskGenerator | None = None,
        best_times_cap: int = DEFAULT_BEST_TIMES_CAP,
    ) -> None:
        self.store = store
        self.generator = generator or TaskGenerator()
        self.best_times_cap = best_times_cap

    def letters(self) -> list[LetterEntry]:
        return list(LETTERS)

    def progress(self) -> ProgressDocument:
        return self.store.load_or_default()

    def reset(self) -> ProgressDocument:
        return self.store.reset()

    def set_level(self, level: int) -> ProgressDocument:
        _check_level(level)
        progress = self.store.load_or_default()
        progress.current_level = level
        self.store.save(progress)
        logger.info("level_set", level=level)
        return progress

    def update_time(self, level: int, seconds: float) -> dict[int, float]:
        """Add ``seconds`` of play time to ``level``.

        Raises:
            InvalidArgument: Unknown level, or seconds not a positive number.
        """
        _check_level(level)
        if (
            isinstance(seconds, bool)
            or not isinstance(seconds, (int, float))
            or not math.isfinite(seconds)
            or seconds <= 0
        ):
            raise InvalidArgument(f"seconds must be a positive number, got {seconds!r}")
        progress = self.store.load_or_default()
        progress.time_spent[level] = progress.time_spent.get(level, 0.0) + seconds
        self.store.save(progress)
        logger.info("time_updated", level=level, seconds=seconds, total=progress.time_spent[level])
        return progress.time_spent

    def get_task(self, level: int) -> TaskSpec:
        _check_level(level)
        return self.generator.get_task(level, self.store.load_or_default())

    def submit_answer(
        self,
        level: int,
        correct: bool,
        key: str | None,
        answer_time: float = 0.0,
    ) -> AnswerResult:
        _check_level(level)
        progress = self.store.load_or_default()
        result = record_answer(
            progress,
            level,
            correct,
            key,
            answer_time=answer_time,
            best_times_cap=self.best_times_cap,
        )
        self.store.save(progress)
        return result

    def stats(self) -> Stats:
        return compute_stats(self.store.load_or_default())
