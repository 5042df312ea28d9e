"""Shared test fixtures for lexibridge.

Runs against in-memory SQLite unless TEST_DATABASE_URL points elsewhere.
"""

import os

import pytest
from sqlmodel import Session, SQLModel

from lexibridge.core.database import create_db_engine, init_db
from lexibridge.schemas.word import NewWord
from lexibridge.services import word_service

TEST_DATABASE_URL = os.getenv("TEST_DATABASE_URL", "sqlite://")


@pytest.fixture(scope="session")
def engine():
    """Create the schema once per test run."""
    engine = create_db_engine(TEST_DATABASE_URL)
    init_db(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def session(engine):
    """A session whose work is rolled back after each test."""
    connection = engine.connect()
    transaction = connection.begin()
    with Session(bind=connection, join_transaction_mode="create_savepoint") as session:
        yield session
    transaction.rollback()
    connection.close()


@pytest.fixture
def russian_word():
    return NewWord(text="экзамен", language="RU", sex="M")


@pytest.fixture
def german_word():
    return NewWord(text="Prüfung", language="DE", sex="F")


@pytest.fixture
def english_word():
    return NewWord(text="exam", language="EN")


@pytest.fixture
def saved_word_from(session, russian_word):
    """The Russian word, saved."""
    return word_service.save(session, russian_word)


@pytest.fixture
def saved_words_to(session, german_word, english_word):
    """The German and English words, saved in one batch."""
    return word_service.save_all(session, [german_word, english_word])
