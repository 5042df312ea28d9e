"""
Sex model.
"""
from sqlmodel import SQLModel, Field


class Sex(SQLModel, table=True):
    """Sex table - stores grammatical gender markers."""
    __tablename__ = "sex"

    code: str = Field(primary_key=True)  # 'M', 'F', 'N'
