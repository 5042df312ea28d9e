"""
Word model.
"""
from sqlmodel import SQLModel, Field
from typing import Optional
from sqlalchemy import UniqueConstraint


class Word(SQLModel, table=True):
    """Words table - one row per (text, language) pair."""
    __tablename__ = "words"
    __table_args__ = (
        UniqueConstraint("text", "language", name="uq_words_text_language"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    language: str  # Language code, e.g. 'EN', 'DE', 'RU'
    sex: Optional[str] = None  # Grammatical gender marker, e.g. 'M', 'F'
    text: str
