# tests/api/test_presentation_api.py


def _create(client) -> dict:
    resp = client.post("/api/v1/sessions")
    assert resp.status_code == 201
    return resp.json()


def test_list_slides(client):
    resp = client.get("/api/v1/slides")
    assert resp.status_code == 200
    slides = resp.json()["slides"]
    assert [s["id"] for s in slides] == [
        "intro",
        "problem",
        "solution",
        "domains",
        "conclusion",
    ]
    assert [s["index"] for s in slides] == [0, 1, 2, 3, 4]


def test_create_session_starts_on_intro(client):
    view = _create(client)

    assert view["current_index"] == 0
    assert view["slide_count"] == 5
    assert view["progress"] == 0.2
    assert view["policy"] == "clamped"
    assert view["direction"] is None
    assert view["can_previous"] is False
    assert view["can_next"] is True
    assert view["slide"]["id"] == "intro"
    assert view["slide"]["particles"] is True
    assert view["accordions"] == []


def test_get_session(client):
    session_id = _create(client)["session_id"]
    resp = client.get(f"/api/v1/sessions/{session_id}")
    assert resp.status_code == 200
    assert resp.json()["session_id"] == session_id


def test_clamped_walk(client):
    session_id = _create(client)["session_id"]

    view = client.post(f"/api/v1/sessions/{session_id}/previous").json()
    assert view["current_index"] == 0

    for _ in range(4):
        view = client.post(f"/api/v1/sessions/{session_id}/next").json()
    assert view["current_index"] == 4
    assert view["progress"] == 1.0
    assert view["can_next"] is False
    assert view["direction"] == "forward"

    view = client.post(f"/api/v1/sessions/{session_id}/next").json()
    assert view["current_index"] == 4


def test_accordion_toggle_and_independence(client):
    session_id = _create(client)["session_id"]
    for _ in range(3):
        view = client.post(f"/api/v1/sessions/{session_id}/next").json()
    assert view["slide"]["id"] == "domains"
    assert [a["is_open"] for a in view["accordions"]] == [False] * 4

    base = f"/api/v1/sessions/{session_id}/accordions"
    first = client.post(f"{base}/aetiological/toggle").json()
    second = client.post(f"{base}/pulmonary/toggle").json()

    assert first == {"id": "aetiological", "title": "病因 (Aetiological)", "is_open": True}
    assert second["is_open"] is True

    view = client.get(f"/api/v1/sessions/{session_id}").json()
    opened = {a["id"] for a in view["accordions"] if a["is_open"]}
    assert opened == {"aetiological", "pulmonary"}


def test_accordion_resets_when_slide_remounts(client):
    session_id = _create(client)["session_id"]
    for _ in range(3):
        client.post(f"/api/v1/sessions/{session_id}/next")
    client.post(f"/api/v1/sessions/{session_id}/accordions/behavioural/toggle")

    client.post(f"/api/v1/sessions/{session_id}/next")
    view = client.post(f"/api/v1/sessions/{session_id}/previous").json()

    assert view["direction"] == "backward"
    assert all(a["is_open"] is False for a in view["accordions"])


def test_unknown_accordion_is_404(client):
    session_id = _create(client)["session_id"]
    resp = client.post(f"/api/v1/sessions/{session_id}/accordions/pulmonary/toggle")
    assert resp.status_code == 404
    assert resp.json()["error"] == "not_found"


def test_unknown_session_is_404(client):
    resp = client.post("/api/v1/sessions/missing/next")
    assert resp.status_code == 404
    body = resp.json()
    assert body["error"] == "not_found"
    assert "missing" in body["message"]


def test_delete_session(client):
    session_id = _create(client)["session_id"]

    assert client.delete(f"/api/v1/sessions/{session_id}").status_code == 204
    assert client.get(f"/api/v1/sessions/{session_id}").status_code == 404
    assert client.delete(f"/api/v1/sessions/{session_id}").status_code == 404
