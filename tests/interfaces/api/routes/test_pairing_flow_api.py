"""Integration tests walking a leader and a learner through the API."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from main import create_app


@pytest.fixture()
def client():
    app = create_app()
    with TestClient(app) as test_client:
        yield test_client


def _onboard(client: TestClient, headers: dict, *, name: str, role: str) -> dict:
    response = client.post(
        "/profiles/me/onboarding", json={"full_name": name, "role": role}, headers=headers
    )
    assert response.status_code == 200, response.text
    return response.json()


@pytest.fixture()
def paired(client, headers_for):
    leader_headers = headers_for("leader-sub", email="leader@example.com")
    learner_headers = headers_for("learner-sub", email="learner@example.com")

    leader_body = _onboard(client, leader_headers, name="Grace", role="leader")
    _onboard(client, learner_headers, name="Sam", role="learner")
    code = leader_body["pairing"]["invite_code"]

    joined = client.post(
        "/pairings/join", json={"invite_code": code.lower()}, headers=learner_headers
    )
    assert joined.status_code == 200, joined.text
    return {
        "pairing_id": joined.json()["id"],
        "code": code,
        "leader": leader_headers,
        "learner": learner_headers,
    }


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_requests_without_token_are_rejected(client):
    assert client.get("/profiles/me").status_code == 401
    assert client.get("/profiles/me", headers={"Authorization": "Bearer junk"}).status_code == 401


def test_profile_is_created_on_first_request(client, headers_for):
    response = client.get("/profiles/me", headers=headers_for("new-sub", email="n@example.com"))
    assert response.status_code == 200
    body = response.json()
    assert body["id"] == "new-sub"
    assert body["email"] == "n@example.com"
    assert body["role"] is None


def test_pairing_routes_require_onboarding(client, headers_for):
    response = client.get("/pairings/current", headers=headers_for("not-onboarded"))
    assert response.status_code == 403


def test_join_errors_map_to_http_statuses(client, paired, headers_for):
    stranger = headers_for("stranger-sub")
    _onboard(client, stranger, name="Alex", role="learner")

    used = client.post("/pairings/join", json={"invite_code": paired["code"]}, headers=stranger)
    assert used.status_code == 404

    malformed = client.post("/pairings/join", json={"invite_code": "AB"}, headers=stranger)
    assert malformed.status_code == 400

    own_leader = headers_for("own-leader")
    own = _onboard(client, own_leader, name="Lee", role="leader")
    self_join = client.post(
        "/pairings/join", json={"invite_code": own["pairing"]["invite_code"]}, headers=own_leader
    )
    assert self_join.status_code == 400

    outsider = client.post(f"/pairings/{paired['pairing_id']}/covenant", headers=stranger)
    assert outsider.status_code == 403


def test_current_pairing_includes_partner(client, paired):
    response = client.get("/pairings/current", headers=paired["leader"])
    assert response.status_code == 200
    body = response.json()
    assert body["pairing"]["status"] == "active"
    assert body["partner"]["full_name"] == "Sam"
    assert body["partner"]["is_online"] is False


def test_covenant_and_week_advancement_flow(client, paired):
    pairing_id = paired["pairing_id"]
    first = client.post(f"/pairings/{pairing_id}/covenant", headers=paired["leader"])
    assert first.json()["covenant_complete"] is False
    second = client.post(f"/pairings/{pairing_id}/covenant", headers=paired["learner"])
    assert second.json()["covenant_complete"] is True

    assignments = client.get(
        "/curriculum/assignments", params={"week": 1}, headers=paired["learner"]
    ).json()
    assert len(assignments) == 3

    results = [
        client.put(
            f"/pairings/{pairing_id}/assignments/{assignment['id']}/progress",
            json={"status": "completed"},
            headers=paired["learner"],
        ).json()
        for assignment in assignments
    ]
    assert [result["advanced"] for result in results] == [False, False, True]
    assert results[-1]["current_week"] == 2

    overview = client.get(f"/pairings/{pairing_id}/progress", headers=paired["leader"]).json()
    assert overview["current_week"] == 2
    assert overview["weeks"][0]["is_completed"] is True
    assert overview["weeks"][1]["is_current"] is True
    assert overview["journey_complete"] is False

    locked = client.get(f"/pairings/{pairing_id}/weeks/3", headers=paired["learner"])
    assert locked.status_code == 403
    week_two = client.get(f"/pairings/{pairing_id}/weeks/2", headers=paired["learner"])
    assert week_two.status_code == 200
    assert week_two.json()["week"]["title"] == "Prayer & Communion"

    titles = [n["title"] for n in client.get("/notifications", headers=paired["learner"]).json()]
    assert "Week 2 Unlocked!" in titles
    assert "Covenant Complete!" in titles


def test_messages_and_notifications(client, paired):
    pairing_id = paired["pairing_id"]
    sent = client.post(
        f"/pairings/{pairing_id}/messages",
        json={"content": "Looking forward to this"},
        headers=paired["learner"],
    )
    assert sent.status_code == 201

    blank = client.post(
        f"/pairings/{pairing_id}/messages", json={"content": "   "}, headers=paired["learner"]
    )
    assert blank.status_code == 400

    listing = client.get(f"/pairings/{pairing_id}/messages", headers=paired["leader"]).json()
    assert [m["content"] for m in listing] == ["Looking forward to this"]

    read = client.post(f"/pairings/{pairing_id}/messages/read", headers=paired["leader"])
    assert read.json() == {"updated": 1}

    notifications = client.get("/notifications", headers=paired["leader"]).json()
    message_note = next(n for n in notifications if n["type"] == "message")
    assert message_note["url"] == f"/dashboard/messages/{pairing_id}"

    unread = client.get("/notifications/unread-count", headers=paired["leader"]).json()
    assert unread["unread"] == len(notifications)

    marked = client.post(
        "/notifications/read", json={"ids": [message_note["id"]]}, headers=paired["leader"]
    )
    assert marked.json() == {"updated": 1}
    assert client.post("/notifications/read-all", headers=paired["leader"]).json()["updated"] == (
        len(notifications) - 1
    )

    foreign_delete = client.delete(
        f"/notifications/{message_note['id']}", headers=paired["learner"]
    )
    assert foreign_delete.status_code == 404
    deleted = client.delete(f"/notifications/{message_note['id']}", headers=paired["leader"])
    assert deleted.status_code == 204


def test_encouragement_and_reflections(client, paired):
    pairing_id = paired["pairing_id"]
    nudged = client.post(
        f"/pairings/{pairing_id}/encouragement",
        json={"message": "Proud of you"},
        headers=paired["leader"],
    )
    assert nudged.status_code == 204
    refused = client.post(
        f"/pairings/{pairing_id}/encouragement",
        json={"message": "Hi"},
        headers=paired["learner"],
    )
    assert refused.status_code == 403

    created = client.post(
        f"/pairings/{pairing_id}/weeks/1/reflections",
        json={"reflection_text": "Grace changes everything", "is_shared": True},
        headers=paired["learner"],
    )
    assert created.status_code == 201
    visible = client.get(
        f"/pairings/{pairing_id}/weeks/1/reflections", headers=paired["leader"]
    ).json()
    assert [r["reflection_text"] for r in visible] == ["Grace changes everything"]


def test_invite_code_regeneration_is_leader_only(client, headers_for):
    leader_headers = headers_for("solo-leader")
    body = _onboard(client, leader_headers, name="Grace", role="leader")
    pairing_id = body["pairing"]["id"]

    refreshed = client.post(f"/pairings/{pairing_id}/invite-code", headers=leader_headers)
    assert refreshed.status_code == 200
    assert refreshed.json()["invite_code"] != body["pairing"]["invite_code"]

    other = headers_for("other-sub")
    _onboard(client, other, name="Sam", role="learner")
    denied = client.post(f"/pairings/{pairing_id}/invite-code", headers=other)
    assert denied.status_code == 403


def test_websocket_sends_unread_notifications_and_answers_ping(client, paired, token_for):
    with client.websocket_connect(f"/notifications/ws?token={token_for('leader-sub')}") as ws:
        init = ws.receive_json()
        assert init["type"] == "init"
        assert [n["type"] for n in init["data"]] == ["pairing"]

        ws.send_json({"type": "ack", "ids": [init["data"][0]["id"]]})
        ws.send_json({"type": "ping"})
        assert ws.receive_json() == {"type": "pong"}

    unread = client.get("/notifications/unread-count", headers=paired["leader"]).json()
    assert unread["unread"] == 0


def test_websocket_ignores_unreadable_frames(client, paired, token_for):
    with client.websocket_connect(f"/notifications/ws?token={token_for('leader-sub')}") as ws:
        assert ws.receive_json()["type"] == "init"

        ws.send_bytes(b"\x00\x01")
        ws.send_text("not json")
        ws.send_json({"type": "ping"})
        assert ws.receive_json() == {"type": "pong"}
