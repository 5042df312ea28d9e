from pydantic import BaseModel, field_validator
from typing import Optional


def normalize_word_text(text: str) -> str:
    """
    Normalize word text for storage and lookup.

    Leading and trailing whitespace is removed; inner whitespace and case are
    preserved. Stored words and lookup arguments go through the same rule, so
    ' exam ' and 'exam' name the same word.
    """
    return text.strip()


class NewWord(BaseModel):
    """Attributes of a word to insert or upsert."""
    text: str
    language: str
    sex: Optional[str] = None

    @field_validator('text', 'language')
    @classmethod
    def validate_required(cls, v, info):
        """Strip required fields and reject empty values."""
        v = normalize_word_text(v)
        if not v:
            raise ValueError(f"{info.field_name} cannot be missing or empty")
        return v

    @field_validator('sex', mode='before')
    @classmethod
    def normalize_sex(cls, v):
        """Treat blank gender markers as absent."""
        if v is not None and not str(v).strip():
            return None
        return v.strip() if isinstance(v, str) else v
