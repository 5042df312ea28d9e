"""
Translation model.
"""
from sqlmodel import SQLModel, Field
from typing import Optional
from sqlalchemy import UniqueConstraint


class Translation(SQLModel, table=True):
    """Translations table - one directed edge between two words.

    A translation relationship between two words is always stored as two
    rows, one per direction.
    """
    __tablename__ = "translations"
    __table_args__ = (
        UniqueConstraint("word_from", "word_to", name="uq_translations_word_from_word_to"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    word_from: int = Field(foreign_key="words.id", index=True)
    word_to: int = Field(foreign_key="words.id")
