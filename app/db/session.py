from typing import Generator

from app.db.base import InMemoryStore, store


def get_db() -> Generator[InMemoryStore, None, None]:
    """
    Dependency that provides the in-memory store

    Used by the FastAPI dependency injection system, overridable in tests.
    """
    yield store
