"""
Word service for storing and looking up words.

Every function takes the caller's session and never commits it.
"""
import logging
from typing import Any, Iterable, List, Mapping, Optional, Union
from sqlmodel import Session, select
from sqlalchemy.exc import IntegrityError

from lexibridge.core.database import upsert_insert
from lexibridge.core.exceptions import ConstraintViolationError
from lexibridge.models import Word
from lexibridge.schemas.word import NewWord, normalize_word_text

logger = logging.getLogger(__name__)

WordInput = Union[NewWord, Mapping[str, Any]]


def _as_new_word(new_word: WordInput) -> NewWord:
    if isinstance(new_word, NewWord):
        return new_word
    return NewWord.model_validate(new_word)


def save(session: Session, new_word: WordInput) -> Word:
    """
    Insert a word, or update the existing (text, language) row.

    Runs as a single INSERT ... ON CONFLICT DO UPDATE statement, so concurrent
    callers saving the same pair converge on one row. The last writer wins on
    sex, including an explicit None.

    Args:
        session: Database session
        new_word: Word attributes (text, language, optional sex)

    Returns:
        The stored Word with its stable id
    """
    new_word = _as_new_word(new_word)

    stmt = upsert_insert(session, Word).values(
        text=new_word.text,
        language=new_word.language,
        sex=new_word.sex,
    )
    stmt = stmt.on_conflict_do_update(
        index_elements=[Word.text, Word.language],
        set_={"sex": stmt.excluded.sex},
    ).returning(Word)

    word = session.scalars(stmt, execution_options={"populate_existing": True}).one()
    logger.info("Saved word %d (%s, %s)", word.id, word.text, word.language)
    return word


def save_all(session: Session, new_words: Iterable[WordInput]) -> List[Word]:
    """
    Insert a batch of words without conflict resolution.

    A duplicate (text, language) within the batch or against stored rows is
    an error, not an upsert. Callers that need batch upsert should call save()
    per word.

    Args:
        session: Database session
        new_words: Word attributes to insert

    Returns:
        The inserted Words, in input order

    Raises:
        ConstraintViolationError: If any insert violates a constraint; no word
            from the batch is persisted
    """
    words = [
        Word(text=w.text, language=w.language, sex=w.sex)
        for w in map(_as_new_word, new_words)
    ]
    if not words:
        return []

    try:
        with session.begin_nested():
            session.add_all(words)
            session.flush()
    except IntegrityError as e:
        logger.warning("Batch insert of %d words violated a constraint: %s", len(words), str(e.orig))
        raise ConstraintViolationError(
            "A word with the same text and language already exists",
            original=e,
        ) from e

    logger.info("Inserted %d words", len(words))
    return words


def find_by_text(session: Session, text: str) -> Optional[Word]:
    """Return the first word (lowest id) with the given text, or None."""
    text = normalize_word_text(text)
    word = session.exec(
        select(Word).where(Word.text == text).order_by(Word.id)
    ).first()
    logger.debug("find_by_text(%r) -> %s", text, word.id if word else None)
    return word


def find_all_by_text(session: Session, text: str) -> List[Word]:
    """
    Return every word spelled `text`, in any language.

    Args:
        session: Database session
        text: Text to match, normalized the same way as stored words

    Returns:
        Matching words ordered by id (empty if none)
    """
    text = normalize_word_text(text)
    words = list(session.exec(
        select(Word).where(Word.text == text).order_by(Word.id)
    ).all())
    logger.debug("find_all_by_text(%r) -> %d words", text, len(words))
    return words
