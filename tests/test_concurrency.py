"""Concurrent upserts of one word from many threads."""

from concurrent.futures import ThreadPoolExecutor

import pytest
from sqlmodel import Session, SQLModel, select

from lexibridge.core.database import create_db_engine, init_db
from lexibridge.models import Word
from lexibridge.schemas.word import NewWord
from lexibridge.services import word_service


@pytest.fixture
def sqlite_file_engine(tmp_path):
    """A file-backed SQLite engine, so each thread gets its own connection."""
    engine = create_db_engine(f"sqlite:///{tmp_path}/words.db")
    init_db(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def postgres_engine(engine):
    if engine.dialect.name != "postgresql":
        pytest.skip("needs TEST_DATABASE_URL pointing at PostgreSQL")
    yield engine
    with Session(engine) as session:
        for word in session.exec(select(Word).where(Word.text == "concurrent")).all():
            session.delete(word)
        session.commit()


def assert_concurrent_saves_converge(engine):
    def save(sex):
        with Session(engine) as session:
            word = word_service.save(session, NewWord(text="concurrent", language="EN", sex=sex))
            session.commit()
            return word.id

    with ThreadPoolExecutor(max_workers=8) as pool:
        ids = list(pool.map(save, ["M", "F"] * 8))

    assert len(set(ids)) == 1
    with Session(engine) as session:
        words = session.exec(select(Word).where(Word.text == "concurrent")).all()
        assert len(words) == 1
        assert words[0].id == ids[0]
        assert words[0].sex in ("M", "F")


def test_concurrent_saves_converge_sqlite(sqlite_file_engine):
    assert_concurrent_saves_converge(sqlite_file_engine)


def test_concurrent_saves_converge_postgres(postgres_engine):
    assert_concurrent_saves_converge(postgres_engine)
