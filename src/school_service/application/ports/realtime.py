from __future__ import annotations

from typing import Protocol

from school_service.application.dto.audience import Audience
from school_service.domain.events.notifications import NotificationEvent


class Notifier(Protocol):
    """Fan-out entry point used by services after a successful write."""

    async def dispatch(self, event: NotificationEvent, audience: Audience) -> int: ...
