from __future__ import annotations

import pytest

from school_service.infrastructure.ws.registry import ConnectionRegistry
from tests.conftest import FakeChannel, identity_of


@pytest.mark.asyncio
async def test_connect_accepts_and_registers_unauthenticated():
    registry = ConnectionRegistry()
    ws = FakeChannel()

    await registry.connect(ws)

    assert ws.accepted is True
    assert ws in registry
    assert len(registry) == 1
    assert identity_of(registry, ws) is None


def test_authenticate_attaches_identity(student_principal):
    registry = ConnectionRegistry()
    ws = FakeChannel()
    registry.register(ws)

    assert registry.authenticate(ws, student_principal) is True
    assert identity_of(registry, ws) == student_principal


def test_reauthenticate_replaces_identity(student_principal, teacher_principal):
    registry = ConnectionRegistry()
    ws = FakeChannel()
    registry.register(ws)

    registry.authenticate(ws, student_principal)
    registry.authenticate(ws, teacher_principal)

    assert identity_of(registry, ws) == teacher_principal
    assert len(registry) == 1


def test_authenticate_after_deregister_is_ignored(student_principal):
    registry = ConnectionRegistry()
    ws = FakeChannel()
    registry.register(ws)
    registry.deregister(ws)

    assert registry.authenticate(ws, student_principal) is False
    assert ws not in registry
    assert registry.live_channels() == []


def test_deregister_is_idempotent():
    registry = ConnectionRegistry()
    ws = FakeChannel()
    registry.register(ws)

    registry.deregister(ws)
    registry.deregister(ws)

    assert len(registry) == 0


def test_deregister_unknown_channel_is_noop():
    registry = ConnectionRegistry()
    registry.register(FakeChannel())

    registry.deregister(FakeChannel())

    assert len(registry) == 1


def test_same_user_may_hold_several_channels(student_principal):
    registry = ConnectionRegistry()
    tab1, tab2 = FakeChannel(), FakeChannel()
    for ws in (tab1, tab2):
        registry.register(ws)
        registry.authenticate(ws, student_principal)

    identities = [entry.identity for entry in registry.live_channels()]
    assert identities == [student_principal, student_principal]


def test_live_channels_is_a_snapshot():
    registry = ConnectionRegistry()
    ws = FakeChannel()
    registry.register(ws)

    snapshot = registry.live_channels()
    registry.deregister(ws)

    assert len(snapshot) == 1
    assert snapshot[0].channel is ws
    assert registry.live_channels() == []
