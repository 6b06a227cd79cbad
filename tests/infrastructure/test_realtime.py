"""Tests for the websocket connection manager and realtime dispatch."""

from __future__ import annotations

import anyio

from discipleship.infrastructure.notifications import NotificationConnectionManager
from discipleship.infrastructure.notifications.realtime import RealtimeEventPublisher


class _FakeSocket:
    def __init__(self, *, fail: bool = False) -> None:
        self.accepted = False
        self.sent: list[dict] = []
        self.fail = fail

    async def accept(self) -> None:
        self.accepted = True

    async def send_json(self, message: dict) -> None:
        if self.fail:
            raise RuntimeError("socket closed")
        self.sent.append(message)


def test_manager_tracks_presence_and_drops_dead_sockets():
    manager = NotificationConnectionManager()
    healthy = _FakeSocket()
    dead = _FakeSocket(fail=True)

    async def scenario() -> None:
        await manager.connect("user-1", healthy)
        await manager.connect("user-1", dead)
        assert manager.is_online("user-1")
        await manager.send_to_user("user-1", {"type": "ping"})

    anyio.run(scenario)

    assert healthy.accepted
    assert healthy.sent == [{"type": "ping"}]
    manager.disconnect("user-1", healthy)
    assert not manager.is_online("user-1")


def test_dispatch_skips_offline_users():
    manager = NotificationConnectionManager()
    publisher = RealtimeEventPublisher(manager)
    # Would raise outside an event loop if it tried to send.
    publisher.dispatch_many(["nobody", None, "nobody"], event_type="typing", payload={})


def test_dispatch_from_event_loop_reaches_every_connection():
    manager = NotificationConnectionManager()
    publisher = RealtimeEventPublisher(manager)
    socket = _FakeSocket()

    async def scenario() -> None:
        await manager.connect("user-1", socket)
        publisher.dispatch_many(
            ["user-1", "user-1"], event_type="pairing.updated", payload={"pairing_id": 3}
        )
        await anyio.sleep(0.01)

    anyio.run(scenario)
    assert socket.sent == [{"type": "pairing.updated", "data": {"pairing_id": 3}}]
