"""Derived statistics over a progress document."""

from pinyin_racer.models.progress import LEVELS, ProgressDocument
from pinyin_racer.models.task import Stats


def accuracy_percent(correct: int, wrong: int) -> int:
    """Percentage of correct answers rounded half up, 0 when nothing was answered."""
    answered = correct + wrong
    if answered == 0:
        return 0
    # half up: 12.5 -> 13
    return int(correct * 100 / answered + 0.5)


def compute_stats(progress: ProgressDocument) -> Stats:
    time_spent = {level: progress.time_spent.get(level, 0.0) for level in LEVELS}
    return Stats(
        time_spent=time_spent,
        total_time=sum(time_spent.values()),
        total_correct=progress.total_correct,
        total_wrong=progress.total_wrong,
        accuracy=accuracy_percent(progress.total_correct, progress.total_wrong),
        mastered_count=len(progress.mastered),
        mistakes_count=len(progress.mistakes),
    )
