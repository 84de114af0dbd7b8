import asyncio

import pytest
from fastapi.testclient import TestClient

from exercise_tracker.app.core.config import Settings
from exercise_tracker.app.core.db import Database
from exercise_tracker.app.main import create_app
from exercise_tracker.app.services.user_service import UserService


@pytest.fixture
def db_path(tmp_path):
    return str(tmp_path / "exercise_tracker_test.db")


@pytest.fixture
def client(db_path):
    app = create_app(Settings(database_url=db_path))
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def service(db_path):
    database = Database(db_path)
    database.open()
    yield UserService(database)
    database.close()


@pytest.fixture
def run():
    """Run a service coroutine to completion."""
    return asyncio.run


@pytest.fixture
def make_user(client):
    def _make_user(username="fcc_test"):
        response = client.post("/api/users", json={"username": username})
        assert response.status_code == 200, response.text
        return response.json()

    return _make_user
