"""
Language model.
"""
from sqlmodel import SQLModel, Field
from typing import Optional


class Language(SQLModel, table=True):
    """Language table - stores known language codes."""
    __tablename__ = "languages"

    code: str = Field(primary_key=True)  # e.g., 'EN', 'DE', 'RU'
    name: Optional[str] = None  # English, German, Russian, etc.
