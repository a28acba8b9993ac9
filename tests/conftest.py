"""Общие фикстуры pytest: база SQLite в файле, сессии и запись YAML файлов."""

import textwrap
from pathlib import Path

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from src.core.settings import settings
from src.models import Base


@pytest.fixture
def engine(tmp_path):
    """Engine на временной базе SQLite со всеми таблицами."""
    engine = create_engine(f"sqlite:///{tmp_path / 'fixtures.db'}")
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, **settings.session_params)


@pytest.fixture
def session(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def write_fixture(tmp_path):
    """Записывает YAML файл фикстур и возвращает путь к нему."""

    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.write_text(textwrap.dedent(content), encoding="utf-8")
        return path

    return _write
