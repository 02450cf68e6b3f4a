from __future__ import annotations

import logging

from fastapi import APIRouter, Query, WebSocket, WebSocketDisconnect
from pydantic import ValidationError

from school_service.api.deps import get_registry, get_verifier
from school_service.application.dto.principal import Principal
from school_service.config import settings
from school_service.infrastructure.ws.protocol import AuthFrame, WsInbound
from school_service.infrastructure.ws.registry import ConnectionRegistry

logger = logging.getLogger(__name__)
router = APIRouter(tags=["websocket"])


async def _authenticate(token: str) -> Principal | None:
    try:
        verifier = get_verifier()
        return await verifier.verify(token)
    except Exception:
        logger.debug("WS token rejected", exc_info=True)
        return None


@router.websocket(settings.WS_PATH)
async def ws_notifications(
    websocket: WebSocket,
    token: str | None = Query(None),
) -> None:
    verified: Principal | None = None
    if token is not None:
        verified = await _authenticate(token)
        if verified is None:
            await websocket.close(code=4001, reason="Authentication failed")
            return

    registry = get_registry(websocket)
    await registry.connect(websocket)
    try:
        while True:
            message = await websocket.receive()
            if message["type"] == "websocket.disconnect":
                raise WebSocketDisconnect(message.get("code", 1000))
            raw = message.get("text")
            if raw is None:
                logger.debug("WS discarded non-text frame")
                continue
            apply_auth_frame(
                registry,
                websocket,
                raw,
                verified=verified,
                trust_client=settings.WS_TRUST_CLIENT_IDENTITY,
            )
    except WebSocketDisconnect:
        pass
    except Exception:
        logger.exception("WS error")
    finally:
        registry.deregister(websocket)


def apply_auth_frame(
    registry: ConnectionRegistry,
    ws: WebSocket,
    raw: str,
    *,
    verified: Principal | None,
    trust_client: bool,
) -> bool:
    """Interpret one inbound frame. Returns True if the channel got an identity.

    Anything other than a well-formed auth frame is dropped without a reply.
    An asserted identity must equal the token's principal when the channel
    was opened with one; token-less channels accept it only if ``trust_client``.
    A frame without a role takes the token's role, or binds a bare user id.
    """
    try:
        msg = WsInbound.model_validate_json(raw)
    except ValidationError:
        logger.debug("WS discarded malformed frame")
        return False
    if msg.type != "auth":
        logger.debug("WS discarded frame of type %r", msg.type)
        return False

    try:
        frame = AuthFrame.model_validate(msg.model_dump())
    except ValidationError:
        logger.debug("WS discarded invalid auth frame")
        return False

    identity = Principal(user_id=frame.user_id, role=frame.role)
    if verified is not None:
        if frame.role is None and frame.user_id == verified.user_id:
            identity = verified
        if identity != verified:
            logger.warning(
                "WS auth frame %s:%s does not match token principal %s:%s",
                identity.role,
                identity.user_id,
                verified.role,
                verified.user_id,
            )
            return False
    elif not trust_client:
        logger.debug("WS auth frame ignored on token-less channel")
        return False

    return registry.authenticate(ws, identity)
