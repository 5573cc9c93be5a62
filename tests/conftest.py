"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

from typing import Generator

import pytest
from sqlalchemy import StaticPool, create_engine
from sqlalchemy.orm import Session, sessionmaker

from src.chess.fen import EMPTY_FEN, STARTING_FEN
from src.chess.position import Position
from src.db.schema import Base

# Setup an in-memory SQLite database for testing
DATABASE_URL = "sqlite:///:memory:"
engine = create_engine(
    DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestingSessionLocal = sessionmaker(autoflush=False, bind=engine)


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    """Connection to a test database. Tables are removed at teardown to make unit tests independent of each other."""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


class MockSettingsStore:
    """Mock the SettingsStore using a dictionary."""

    def __init__(self, options: dict[str, str] | None = None) -> None:
        self._options: dict[str, str] = dict(options or {})

    def get_option(self, name: str) -> str | None:
        return self._options.get(name)

    def set_option(self, name: str, value: str) -> None:
        self._options[name] = value


@pytest.fixture
def starting_position() -> Position:
    return Position.from_fen(STARTING_FEN)


@pytest.fixture
def empty_position() -> Position:
    return Position.from_fen(EMPTY_FEN)


@pytest.fixture
def mock_settings_store() -> MockSettingsStore:
    return MockSettingsStore()
