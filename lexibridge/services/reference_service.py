"""
Reference service for the language and grammatical gender code lists.
"""
import logging
from typing import List
from sqlmodel import Session, select

from lexibridge.models import Language, Sex

logger = logging.getLogger(__name__)


def find_all_languages(session: Session) -> List[Language]:
    """Return all known languages ordered by code."""
    languages = list(session.exec(select(Language).order_by(Language.code)).all())
    logger.debug("find_all_languages -> %d languages", len(languages))
    return languages


def find_all_sexes(session: Session) -> List[Sex]:
    """Return all grammatical gender markers ordered by code."""
    return list(session.exec(select(Sex).order_by(Sex.code)).all())
