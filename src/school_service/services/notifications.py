"""Best-effort notification helper shared by the services.

The write that triggers a notification has already been committed when this
runs, so a failure here is logged and never propagates to the request.
"""
from __future__ import annotations

import logging

from school_service.application.dto.audience import Audience
from school_service.application.ports.realtime import Notifier
from school_service.domain.events.notifications import NotificationEvent

logger = logging.getLogger(__name__)


async def notify(notifier: Notifier, event: NotificationEvent, audience: Audience) -> None:
    try:
        await notifier.dispatch(event, audience)
    except Exception:
        logger.exception("Notification %s to %s failed", event.kind, audience)
