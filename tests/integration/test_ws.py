"""End-to-end WebSocket delivery through the real registry and dispatcher."""
from __future__ import annotations

import time

import jwt
import pytest
from fastapi.testclient import TestClient
from starlette.websockets import WebSocketDisconnect

from school_service.api.deps import get_uow
from school_service.app import create_app
from school_service.application.dto.principal import Principal
from school_service.config import settings
from school_service.domain.value_objects.enums import UserRole
from tests.conftest import STUDENT_ID, TEACHER_ID, FakeUoW, make_user


def _token(sub: str, role: str) -> str:
    return jwt.encode({"sub": sub, "role": role}, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


TEACHER = {"Authorization": f"Bearer {_token(TEACHER_ID, 'teacher')}"}
STUDENT = Principal(user_id=STUDENT_ID, role=UserRole.STUDENT)


def _wait_for(predicate, timeout: float = 2.0) -> None:
    deadline = time.monotonic() + timeout
    while not predicate():
        if time.monotonic() > deadline:
            raise AssertionError("condition not reached")
        time.sleep(0.01)


@pytest.fixture
def app_and_uow():
    app = create_app()
    uow = FakeUoW()
    uow.add_user(make_user(user_id=STUDENT_ID, role=UserRole.STUDENT))

    async def _override():
        yield uow

    app.dependency_overrides[get_uow] = _override
    return app, uow


@pytest.fixture
def client(app_and_uow):
    app, _ = app_and_uow
    # one shared event loop for HTTP requests and WS sessions
    with TestClient(app) as c:
        yield c


def _identities(app) -> list[Principal | None]:
    return [entry.identity for entry in app.state.registry.live_channels()]


def test_token_bound_channel_receives_private_message(client, app_and_uow):
    app, _ = app_and_uow

    with client.websocket_connect(f"/ws?token={_token(STUDENT_ID, 'student')}") as ws:
        ws.send_json({"type": "auth", "userId": STUDENT_ID, "role": "student"})
        _wait_for(lambda: _identities(app) == [STUDENT])

        resp = client.post(
            "/api/messages",
            headers=TEACHER,
            json={"receiver_id": STUDENT_ID, "body": "Well done"},
        )
        assert resp.status_code == 201

        frame = ws.receive_json()
        assert frame["type"] == "new_message"
        assert frame["data"]["body"] == "Well done"
        assert frame["data"]["receiver_id"] == STUDENT_ID

    _wait_for(lambda: len(app.state.registry) == 0)


def test_anonymous_channel_only_sees_broadcasts(client, app_and_uow):
    app, _ = app_and_uow

    with client.websocket_connect("/ws") as ws:
        # not trusted without a token, so this is discarded
        ws.send_json({"type": "auth", "userId": STUDENT_ID, "role": "student"})
        ws.send_text("garbage")
        _wait_for(lambda: len(app.state.registry) == 1)

        client.post("/api/messages", headers=TEACHER, json={"receiver_id": STUDENT_ID, "body": "secret"})
        client.post(
            "/api/events",
            headers=TEACHER,
            json={"title": "Open day", "starts_at": "2030-05-01T09:00:00Z"},
        )

        frame = ws.receive_json()
        assert frame["type"] == "new_event"
        assert _identities(app) == [None]


def test_binary_frame_keeps_channel_open(client, app_and_uow, monkeypatch):
    app, _ = app_and_uow
    monkeypatch.setattr(settings, "WS_TRUST_CLIENT_IDENTITY", True)

    with client.websocket_connect("/ws") as ws:
        _wait_for(lambda: len(app.state.registry) == 1)
        ws.send_bytes(b"\xff\xfe not text")
        # frames are read in order, so this binds only if the loop survived
        ws.send_json({"type": "auth", "userId": STUDENT_ID, "role": "student"})
        _wait_for(lambda: _identities(app) == [STUDENT])

        client.post(
            "/api/events",
            headers=TEACHER,
            json={"title": "Sports day", "starts_at": "2030-06-01T09:00:00Z"},
        )

        assert ws.receive_json()["type"] == "new_event"
        assert len(app.state.registry) == 1


def test_trusted_client_identity(client, app_and_uow, monkeypatch):
    app, _ = app_and_uow
    monkeypatch.setattr(settings, "WS_TRUST_CLIENT_IDENTITY", True)

    with client.websocket_connect("/ws") as ws:
        ws.send_json({"type": "auth", "userId": STUDENT_ID, "role": "student"})
        _wait_for(lambda: _identities(app) == [STUDENT])

        client.post("/api/messages", headers=TEACHER, json={"receiver_id": STUDENT_ID, "body": "hi"})
        assert ws.receive_json()["type"] == "new_message"


def test_invalid_token_is_rejected(client):
    with pytest.raises(WebSocketDisconnect) as exc_info:
        with client.websocket_connect("/ws?token=not-a-jwt") as ws:
            ws.receive_text()
    assert exc_info.value.code == 4001
