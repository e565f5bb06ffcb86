import pytest
from fastapi.testclient import TestClient

from app.db.base import reset_store
from app.main import app


@pytest.fixture(autouse=True)
def fresh_store():
    """Every test starts from the seed data."""
    reset_store()
    yield
    reset_store()


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


@pytest.fixture
def new_course():
    return {
        "courseId": 261336,
        "courseTitle": "Software Engineering",
        "instructors": ["Chinawat Isradisaikul"],
    }
