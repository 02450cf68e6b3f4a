"""In-process registry of live WebSocket channels."""
from __future__ import annotations

import logging
from typing import NamedTuple

from starlette.websockets import WebSocket

from school_service.application.dto.principal import Principal

logger = logging.getLogger(__name__)


class LiveChannel(NamedTuple):
    channel: WebSocket
    identity: Principal | None


class ConnectionRegistry:
    """Tracks open channels and the identity each one has asserted, if any.

    Constructed once per process. The live map is only mutated through
    ``register`` / ``authenticate`` / ``deregister`` and only read through
    ``live_channels``. All calls run on the event loop, so no locking.
    """

    def __init__(self) -> None:
        # keyed by id(): the entry holds a strong ref, so ids are not reused while live
        self._channels: dict[int, LiveChannel] = {}

    async def connect(self, ws: WebSocket) -> None:
        await ws.accept()
        self.register(ws)

    def register(self, ws: WebSocket) -> None:
        self._channels[id(ws)] = LiveChannel(ws, None)
        logger.debug("WS registered (total=%d)", len(self._channels))

    def authenticate(self, ws: WebSocket, identity: Principal) -> bool:
        """Attach ``identity`` to a live channel, replacing any previous one.

        Returns False when the channel is no longer registered; a closed
        channel never becomes authenticated again.
        """
        key = id(ws)
        if key not in self._channels:
            logger.debug("WS authenticate ignored for closed channel")
            return False
        self._channels[key] = LiveChannel(ws, identity)
        logger.debug("WS authenticated: %s:%s", identity.role, identity.user_id)
        return True

    def deregister(self, ws: WebSocket) -> None:
        entry = self._channels.pop(id(ws), None)
        if entry is None:
            return
        who = f"{entry.identity.role}:{entry.identity.user_id}" if entry.identity else "anonymous"
        logger.debug("WS deregistered: %s (total=%d)", who, len(self._channels))

    def live_channels(self) -> list[LiveChannel]:
        """Point-in-time snapshot; safe to iterate across awaits."""
        return list(self._channels.values())

    def __contains__(self, ws: object) -> bool:
        return id(ws) in self._channels

    def __len__(self) -> int:
        return len(self._channels)
