"""Targeted fan-out of notification events to live channels."""
from __future__ import annotations

import logging

from starlette.websockets import WebSocket, WebSocketState

from school_service.application.dto.audience import Audience
from school_service.domain.events.notifications import NotificationEvent
from school_service.infrastructure.ws.protocol import WsOutbound
from school_service.infrastructure.ws.registry import ConnectionRegistry

logger = logging.getLogger(__name__)


def _is_writable(ws: WebSocket) -> bool:
    return (
        ws.client_state == WebSocketState.CONNECTED
        and ws.application_state == WebSocketState.CONNECTED
    )


class NotificationDispatcher:
    """Implements application.ports.realtime.Notifier.

    Fire-and-forget: a failed or non-writable channel is skipped and the
    fan-out continues; nothing is queued, retried or reported to the caller.
    """

    def __init__(self, registry: ConnectionRegistry) -> None:
        self._registry = registry

    async def dispatch(self, event: NotificationEvent, audience: Audience) -> int:
        """Send ``event`` to every live channel matching ``audience``.

        Returns the number of channels the frame was written to.
        """
        raw = WsOutbound(type=str(event.kind), data=event.payload()).model_dump_json()
        delivered = 0
        dead: list[WebSocket] = []
        for channel, identity in self._registry.live_channels():
            if not audience.matches(identity):
                continue
            if not _is_writable(channel):
                logger.debug("WS skip non-writable channel for %s", event.kind)
                continue
            try:
                await channel.send_text(raw)
            except Exception:
                logger.debug("WS send failed for %s", event.kind, exc_info=True)
                dead.append(channel)
                continue
            delivered += 1

        for channel in dead:
            self._registry.deregister(channel)

        logger.debug(
            "Dispatched %s to %s: delivered=%d failed=%d",
            event.kind,
            audience,
            delivered,
            len(dead),
        )
        return delivered
