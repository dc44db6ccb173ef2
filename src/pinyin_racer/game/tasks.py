"""Quiz generation for the three game levels."""

import random

import structlog

from pinyin_racer.content.tables import (
    ALL_FINALS,
    LETTERS,
    SYLLABLES,
    find_letter,
    find_syllable,
    letters_in_category,
)
from pinyin_racer.errors import InvalidArgument
from pinyin_racer.game.selection import pick_random, prefer_review, sample_distinct, shuffle
from pinyin_racer.models.progress import ProgressDocument
from pinyin_racer.models.task import (
    BalloonOption,
    BalloonTask,
    FlashcardTask,
    RacingOption,
    RacingTask,
    TaskSpec,
)

logger = structlog.get_logger()

BALLOON_TIME_LIMIT = 10
RACING_TIME_LIMIT = 15
RACING_WRONG_OPTIONS = 2


class TaskGenerator:
    """Builds one quiz item per call, revisiting open mistakes half the time.

    Args:
        rng: Random source; pass a seeded ``random.Random`` for repeatable tasks.
        review_probability: Chance of drawing the target from open mistakes
            when at least one exists for the requested level.
    """

    def __init__(self, rng: random.Random | None = None, review_probability: float = 0.5) -> None:
        self._rng = rng or random.Random()
        self.review_probability = review_probability

    def get_task(self, level: int, progress: ProgressDocument) -> TaskSpec:
        if level == 1:
            return self.flashcards(progress)
        if level == 2:
            return self.balloon(progress)
        if level == 3:
            return self.racing(progress)
        raise InvalidArgument(f"level must be 1, 2 or 3, got {level!r}")

    def flashcards(self, progress: ProgressDocument) -> FlashcardTask:
        return FlashcardTask(letters=list(LETTERS), mastered=list(progress.mastered))

    def balloon(self, progress: ProgressDocument) -> BalloonTask:
        # Stale keys no longer in the table are dropped, which falls back to
        # uniform selection when nothing resolves.
        review = [e for e in map(find_letter, progress.open_mistake_keys(2)) if e is not None]
        target = prefer_review(LETTERS, review, self._rng, self.review_probability)

        siblings = [e for e in letters_in_category(target.category) if e.letter != target.letter]
        wrong = pick_random(siblings, self._rng)

        options = shuffle(
            [
                BalloonOption(letter=target.letter, sound=target.sound, image=target.image, correct=True),
                BalloonOption(letter=wrong.letter, sound=wrong.sound, image=wrong.image, correct=False),
            ],
            self._rng,
        )
        is_review = progress.has_mistake(2, target.letter)
        logger.debug("task_generated", level=2, target=target.letter, is_review=is_review)
        return BalloonTask(
            target_letter=target.letter,
            target_sound=target.sound,
            category=target.category.value,
            options=options,
            is_review=is_review,
            time_limit=BALLOON_TIME_LIMIT,
        )

    def racing(self, progress: ProgressDocument) -> RacingTask:
        review = [e for e in map(find_syllable, progress.open_mistake_keys(3)) if e is not None]
        target = prefer_review(SYLLABLES, review, self._rng, self.review_probability)

        candidates = [f for f in ALL_FINALS if f != target.final]
        wrong = sample_distinct(candidates, RACING_WRONG_OPTIONS, self._rng)

        options = [RacingOption(final=target.final, correct=True)]
        options.extend(RacingOption(final=f, correct=False) for f in wrong)
        shuffle(options, self._rng)

        is_review = progress.has_mistake(3, target.syllable)
        logger.debug("task_generated", level=3, target=target.syllable, is_review=is_review)
        return RacingTask(
            initial=target.initial,
            target_final=target.final,
            syllable=target.syllable,
            sound=target.sound,
            word=target.word,
            options=options,
            is_review=is_review,
            time_limit=RACING_TIME_LIMIT,
        )
