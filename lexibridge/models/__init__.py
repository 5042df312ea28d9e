"""
Models package - imports all models so they register with SQLModel.
"""
from lexibridge.models.language import Language
from lexibridge.models.sex import Sex
from lexibridge.models.word import Word
from lexibridge.models.translation import Translation
from lexibridge.models.translated_word import TranslatedWord, to_words

__all__ = [
    'Language',
    'Sex',
    'Word',
    'Translation',
    'TranslatedWord',
    'to_words',
]
