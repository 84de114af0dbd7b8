from exercise_tracker.app.core.dates import display_today

MISSING_ID = "0123456789abcdef01234567"


def add_exercise(client, user_id, **body):
    response = client.post(f"/api/users/{user_id}/exercises", json=body)
    assert response.status_code == 200, response.text
    return response.json()


def test_index_page(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert "/api/users" in response.text


def test_hello(client):
    response = client.get("/api/hello")
    assert response.status_code == 200
    assert response.json() == {"greeting": "hello API"}


def test_create_user_returns_username_and_id(client):
    response = client.post("/api/users", json={"username": "fcc_test"})
    assert response.status_code == 200
    body = response.json()
    assert set(body) == {"username", "id"}
    assert body["username"] == "fcc_test"
    assert len(body["id"]) == 24


def test_create_user_accepts_form_data(client):
    response = client.post("/api/users", data={"username": "form_user"})
    assert response.status_code == 200
    assert response.json()["username"] == "form_user"


def test_duplicate_username_is_a_server_error(client, make_user):
    make_user("fcc_test")
    response = client.post("/api/users", json={"username": "fcc_test"})
    assert response.status_code == 500
    body = response.json()
    assert body["error"] == "Internal Server Error"
    assert "fcc_test" in body["message"]


def test_missing_username_is_a_bad_request(client):
    response = client.post("/api/users", json={})
    assert response.status_code == 400
    assert set(response.json()) == {"error", "message"}


def test_list_users(client, make_user):
    alice = make_user("alice")
    bob = make_user("bob")
    response = client.get("/api/users")
    assert response.status_code == 200
    assert response.json() == [alice, bob]


def test_add_exercise_response(client, make_user):
    user = make_user()
    body = add_exercise(client, user["id"], description="test", duration="60", date="1990-01-01")
    assert body == {
        "username": "fcc_test",
        "description": "test",
        "duration": 60,
        "date": "Mon Jan 01 1990",
        "id": user["id"],
    }


def test_add_exercise_with_form_data_and_default_date(client, make_user):
    user = make_user()
    response = client.post(
        f"/api/users/{user['id']}/exercises",
        data={"description": "walk", "duration": "15", "date": ""},
    )
    assert response.status_code == 200
    assert response.json()["date"] == display_today()
    assert response.json()["duration"] == 15


def test_add_exercise_unparsable_date_uses_today(client, make_user):
    user = make_user()
    body = add_exercise(client, user["id"], description="walk", duration=15, date="garbage")
    assert body["date"] == display_today()


def test_add_exercise_errors(client, make_user):
    user = make_user()
    response = client.post(f"/api/users/{user['id']}/exercises", json={"description": "x", "duration": "soon"})
    assert response.status_code == 400

    response = client.post(f"/api/users/{MISSING_ID}/exercises", json={"description": "x", "duration": 5})
    assert response.status_code == 500
    assert response.json()["message"] == "User not found"

    response = client.post("/api/users/nope/exercises", json={"description": "x", "duration": 5})
    assert response.status_code == 400


def test_logs_return_reverse_append_order(client, make_user):
    user = make_user()
    for index in range(5):
        add_exercise(client, user["id"], description=f"e{index}", duration=index, date=f"2024-01-0{index + 1}")

    response = client.get(f"/api/users/{user['id']}/logs")
    assert response.status_code == 200
    body = response.json()
    assert body["username"] == "fcc_test"
    assert body["id"] == user["id"]
    assert body["count"] == 5
    assert [item["description"] for item in body["log"]] == ["e4", "e3", "e2", "e1", "e0"]
    for item in body["log"]:
        assert set(item) == {"description", "duration", "date"}
        assert isinstance(item["description"], str)
        assert isinstance(item["duration"], int)
        assert isinstance(item["date"], str)


def test_logs_date_range_and_limit(client, make_user):
    user = make_user()
    for index, day in enumerate(["2023-12-31", "2024-01-01", "2024-01-01", "2024-01-02", "2024-01-03"]):
        add_exercise(client, user["id"], description=f"e{index}", duration=10, date=day)
    logs_url = f"/api/users/{user['id']}/logs"

    body = client.get(logs_url, params={"from": "2024-01-01", "to": "2024-01-01"}).json()
    assert body["count"] == 2
    assert {item["date"] for item in body["log"]} == {"Mon Jan 01 2024"}

    body = client.get(logs_url, params={"limit": 2}).json()
    assert [item["description"] for item in body["log"]] == ["e4", "e3"]
    assert body["count"] == 2

    for bad_limit in ("-1", "abc", "0"):
        assert client.get(logs_url, params={"limit": bad_limit}).json()["count"] == 5

    body = client.get(logs_url, params={"from": "garbage", "to": "nonsense"}).json()
    assert body["count"] == 5

    # Filtering must not change what is stored.
    body = client.get(logs_url).json()
    assert [item["description"] for item in body["log"]] == ["e4", "e3", "e2", "e1", "e0"]


def test_logs_errors(client):
    response = client.get("/api/users/not-a-valid-id/logs")
    assert response.status_code == 400
    assert response.json()["error"] == "Invalid user ID"

    response = client.get(f"/api/users/{MISSING_ID}/logs")
    assert response.status_code == 500
    assert response.json() == {"error": "Internal Server Error", "message": "User not found"}


def test_oversized_duration_is_a_json_bad_request(client, make_user):
    user = make_user()
    response = client.post(
        f"/api/users/{user['id']}/exercises",
        json={"description": "d", "duration": "99999999999999999999"},
    )
    assert response.status_code == 400
    assert response.headers["content-type"].startswith("application/json")
    assert set(response.json()) == {"error", "message"}

    log = client.get(f"/api/users/{user['id']}/logs").json()
    assert log["count"] == 0


def test_early_years_do_not_break_filtered_logs(client, make_user):
    user = make_user()
    early = add_exercise(client, user["id"], description="ancient", duration=5, date="0500-06-01")
    assert early["date"].endswith("Jun 01 0500")
    add_exercise(client, user["id"], description="recent", duration=5, date="2024-02-01")
    logs_url = f"/api/users/{user['id']}/logs"

    response = client.get(logs_url, params={"from": "2024-01-01"})
    assert response.status_code == 200
    assert [item["description"] for item in response.json()["log"]] == ["recent"]

    response = client.get(logs_url, params={"to": "0500-12-31"})
    assert response.status_code == 200
    assert [item["description"] for item in response.json()["log"]] == ["ancient"]


def test_year_only_bounds_cover_the_whole_year(client, make_user):
    user = make_user()
    for day in ("2023-12-31", "2024-01-01", "2024-06-15"):
        add_exercise(client, user["id"], description=day, duration=1, date=day)

    body = client.get(f"/api/users/{user['id']}/logs", params={"from": "2024"}).json()
    assert [item["description"] for item in body["log"]] == ["2024-06-15", "2024-01-01"]
