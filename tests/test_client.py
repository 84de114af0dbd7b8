from datetime import date

import requests

from exercise_tracker.client import ExerciseTrackerAPI


class StubResponse:
    def __init__(self, status_code=200, payload=None):
        self.status_code = status_code
        self._payload = payload
        self.content = b"" if payload is None else b"{}"
        self.text = "" if payload is None else str(payload)

    def json(self):
        return self._payload

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error", response=self)


class StubSession:
    def __init__(self, response=None, exc=None):
        self.response = response
        self.exc = exc
        self.calls = []

    def request(self, **kwargs):
        self.calls.append(kwargs)
        if self.exc is not None:
            raise self.exc
        return self.response


def test_create_user_posts_json():
    session = StubSession(StubResponse(payload={"username": "alice", "id": "a" * 24}))
    api = ExerciseTrackerAPI(base_url="http://localhost:3000/", session=session)

    data, error = api.create_user("alice")

    assert error is None
    assert data == {"username": "alice", "id": "a" * 24}
    call = session.calls[0]
    assert call["method"] == "POST"
    assert call["url"] == "http://localhost:3000/api/users"
    assert call["json"] == {"username": "alice"}


def test_get_log_sends_only_given_filters():
    session = StubSession(StubResponse(payload={"count": 0, "log": []}))
    api = ExerciseTrackerAPI(base_url="http://localhost:3000", session=session)

    api.get_log("b" * 24, from_date=date(2024, 1, 1), limit=3)

    call = session.calls[0]
    assert call["url"].endswith(f"/api/users/{'b' * 24}/logs")
    assert call["params"] == {"from": "2024-01-01", "limit": 3}


def test_add_exercise_formats_dates():
    session = StubSession(StubResponse(payload={}))
    api = ExerciseTrackerAPI(base_url="http://localhost:3000", session=session)

    api.add_exercise("c" * 24, "run", 30, on=date(2024, 2, 1))

    assert session.calls[0]["json"] == {"description": "run", "duration": 30, "date": "2024-02-01"}


def test_http_errors_are_returned_not_raised():
    payload = {"error": "Internal Server Error", "message": "User not found"}
    session = StubSession(StubResponse(status_code=500, payload=payload))
    api = ExerciseTrackerAPI(base_url="http://localhost:3000", session=session)

    data, error = api.get_log("d" * 24)

    assert data is None
    assert error == {"status_code": 500, "message": "User not found"}


def test_connection_errors_are_returned_not_raised():
    session = StubSession(exc=requests.ConnectionError("refused"))
    api = ExerciseTrackerAPI(base_url="http://localhost:3000", session=session)

    users, error = api.list_users()

    assert users == []
    assert error["status_code"] is None
    assert "refused" in error["message"]
