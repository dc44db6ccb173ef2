"""Static content models: letters and syllables."""

from enum import StrEnum

from pydantic import BaseModel, ConfigDict


class LetterCategory(StrEnum):
    """Pinyin component a letter belongs to."""

    INITIAL = "initial"
    FINAL = "final"


class LetterEntry(BaseModel):
    """A single flashcard letter with its spoken sound and picture hint."""

    model_config = ConfigDict(frozen=True)

    category: LetterCategory
    letter: str
    sound: str  # glyph read aloud by speech synthesis
    image: str
    word: str
    description: str


class SyllableEntry(BaseModel):
    """An initial+final combination used by the racing quiz."""

    model_config = ConfigDict(frozen=True)

    initial: str
    final: str
    syllable: str
    sound: str
    word: str = ""
