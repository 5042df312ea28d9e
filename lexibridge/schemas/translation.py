from pydantic import BaseModel


class NewTranslation(BaseModel):
    """One directed translation edge to persist."""
    word_from: int
    word_to: int
