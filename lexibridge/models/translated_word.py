"""
TranslatedWord read model.
"""
from sqlmodel import SQLModel
from typing import Iterable, List, Optional

from lexibridge.models.word import Word


class TranslatedWord(SQLModel):
    """A word reached over a translation edge, tagged with the origin word id.

    Not backed by a table; produced by joining translations with words.
    """
    origin_word_id: int
    id: int
    language: str
    sex: Optional[str] = None
    text: str

    def to_word(self) -> Word:
        """Return a detached Word with the same id, language, sex and text.

        The origin word id is dropped.
        """
        return Word(id=self.id, language=self.language, sex=self.sex, text=self.text)


def to_words(translated_words: Iterable[TranslatedWord]) -> List[Word]:
    """Map each translated word to a plain Word, preserving order."""
    return [translated_word.to_word() for translated_word in translated_words]
