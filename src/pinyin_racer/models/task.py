"""Quiz payloads returned to callers."""

from typing import Literal

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from pinyin_racer.models.content import LetterEntry


class Payload(BaseModel):
    """Response model serialised with camelCase keys (``is_review`` -> ``isReview``)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class FlashcardTask(Payload):
    level: Literal[1] = 1
    type: Literal["flashcard"] = "flashcard"
    letters: list[LetterEntry]
    mastered: list[str]


class BalloonOption(Payload):
    letter: str
    sound: str
    image: str
    correct: bool


class BalloonTask(Payload):
    level: Literal[2] = 2
    type: Literal["balloon"] = "balloon"
    target_letter: str
    target_sound: str
    category: str
    options: list[BalloonOption]
    is_review: bool
    time_limit: int = 10


class RacingOption(Payload):
    final: str
    correct: bool


class RacingTask(Payload):
    level: Literal[3] = 3
    type: Literal["racing"] = "racing"
    initial: str
    target_final: str
    syllable: str
    sound: str
    word: str
    options: list[RacingOption]
    is_review: bool
    time_limit: int = 15


TaskSpec = FlashcardTask | BalloonTask | RacingTask


class AnswerResult(Payload):
    total_correct: int
    total_wrong: int
    mistakes_count: int


class Stats(Payload):
    time_spent: dict[int, float]
    total_time: float
    total_correct: int
    total_wrong: int
    accuracy: int
    mastered_count: int
    mistakes_count: int
