"""
Translation service for linking words and reading their translations.

A translation between two words is stored as two directed edges, one per
direction. Reads follow edges one hop from the origin word only.
"""
import logging
from typing import List, Sequence
from sqlmodel import Session, select
from sqlalchemy.exc import IntegrityError

from lexibridge.core.database import upsert_insert
from lexibridge.core.exceptions import ConstraintViolationError, ValidationError
from lexibridge.models import Translation, TranslatedWord, Word
from lexibridge.schemas.translation import NewTranslation

logger = logging.getLogger(__name__)


def _require_saved(*words: Word) -> None:
    for word in words:
        if word.id is None:
            raise ValidationError(
                f"Word '{word.text}' ({word.language}) has no id; save it first"
            )


def _require_distinct(word_from: Word, word_to: Word) -> None:
    if word_from.id == word_to.id:
        raise ValidationError(
            f"Word '{word_from.text}' ({word_from.language}) cannot be a translation of itself"
        )


def new_translation(word_from: Word, word_to: Word) -> List[NewTranslation]:
    """Return the two edges (from -> to, to -> from) linking a pair of words."""
    return [
        NewTranslation(word_from=word_from.id, word_to=word_to.id),
        NewTranslation(word_from=word_to.id, word_to=word_from.id),
    ]


def new_translations(word_from: Word, words_to: Sequence[Word]) -> List[NewTranslation]:
    """Return the edges linking `word_from` with each word in `words_to`."""
    translations: List[NewTranslation] = []
    for word_to in words_to:
        translations.extend(new_translation(word_from, word_to))
    return translations


def _save_translation(session: Session, translation: NewTranslation) -> Translation:
    stmt = upsert_insert(session, Translation).values(
        word_from=translation.word_from,
        word_to=translation.word_to,
    )
    # Edges carry no other data; the no-op update makes RETURNING yield the existing row
    stmt = stmt.on_conflict_do_update(
        index_elements=[Translation.word_from, Translation.word_to],
        set_={"word_from": stmt.excluded.word_from},
    ).returning(Translation)
    return session.scalars(stmt, execution_options={"populate_existing": True}).one()


def _save_translations(session: Session, translations: List[NewTranslation]) -> List[Translation]:
    """Upsert all edges inside one savepoint so a failure leaves none behind."""
    try:
        with session.begin_nested():
            saved = [_save_translation(session, translation) for translation in translations]
    except IntegrityError as e:
        logger.warning("Saving %d translations violated a constraint: %s", len(translations), str(e.orig))
        raise ConstraintViolationError(
            "Translation references a word that does not exist",
            original=e,
        ) from e
    return saved


def translate(session: Session, word_from: Word, word_to: Word) -> List[Translation]:
    """
    Link two saved words as translations of each other.

    Both directed edges are upserted, so calling this again for the same pair
    leaves exactly two rows.

    Args:
        session: Database session
        word_from: A saved word
        word_to: A saved word

    Returns:
        The two stored edges, from -> to first

    Raises:
        ValidationError: If either word has no id or both are the same word
        ConstraintViolationError: If an edge violates a constraint
    """
    _require_saved(word_from, word_to)
    _require_distinct(word_from, word_to)
    translations = _save_translations(session, new_translation(word_from, word_to))
    logger.info("Linked word %d with word %d", word_from.id, word_to.id)
    return translations


def translate_all(session: Session, word_from: Word, words_to: Sequence[Word]) -> List[Translation]:
    """
    Link `word_from` with every word in `words_to`.

    Produces two edges per target word, all within one savepoint.

    Raises:
        ValidationError: If any word has no id or a target is `word_from` itself
        ConstraintViolationError: If an edge violates a constraint
    """
    _require_saved(word_from, *words_to)
    for word_to in words_to:
        _require_distinct(word_from, word_to)
    if not words_to:
        return []
    translations = _save_translations(session, new_translations(word_from, words_to))
    logger.info("Linked word %d with %d words", word_from.id, len(words_to))
    return translations


def find_by_word(session: Session, word: Word) -> List[TranslatedWord]:
    """
    Return the words that `word` has a direct edge to.

    Args:
        session: Database session
        word: A saved word

    Returns:
        Neighbour words with their own attributes, ordered by id

    Raises:
        ValidationError: If the word has no id
    """
    _require_saved(word)
    rows = session.exec(
        select(
            Translation.word_from,
            Word.id,
            Word.language,
            Word.sex,
            Word.text,
        )
        .join(Word, Translation.word_to == Word.id)
        .where(Translation.word_from == word.id)
        .order_by(Word.id)
    ).all()

    translated_words = [
        TranslatedWord(
            origin_word_id=origin_word_id,
            id=word_id,
            language=language,
            sex=sex,
            text=text,
        )
        for origin_word_id, word_id, language, sex, text in rows
    ]
    logger.debug("find_by_word(%d) -> %d translations", word.id, len(translated_words))
    return translated_words
