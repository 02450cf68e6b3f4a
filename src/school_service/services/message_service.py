from __future__ import annotations

from datetime import datetime, timezone

from school_service.application.dto.audience import Audience
from school_service.application.dto.principal import Principal
from school_service.application.exceptions import NotFoundError, ValidationError
from school_service.application.ports.realtime import Notifier
from school_service.application.uow import UnitOfWork
from school_service.domain.entities.message import DirectMessage
from school_service.domain.events.notifications import MessageSent
from school_service.domain.value_objects.ids import new_id
from school_service.services.notifications import notify


async def send_message(
    principal: Principal,
    receiver_id: str,
    body: str,
    uow: UnitOfWork,
    notifier: Notifier,
) -> DirectMessage:
    """Store a direct message and push it to the receiver's channels only."""
    if receiver_id == principal.user_id:
        raise ValidationError("Cannot send a message to yourself")
    if await uow.users.get_by_id(receiver_id) is None:
        raise NotFoundError("Receiver not found")

    message = await uow.messages_w.create(
        DirectMessage(
            id=new_id(),
            sender_id=principal.user_id,
            receiver_id=receiver_id,
            body=body,
            created_at=datetime.now(timezone.utc),
        )
    )
    await uow.commit()

    await notify(notifier, MessageSent(message), Audience.users([receiver_id]))
    return message


async def list_inbox(
    principal: Principal,
    cursor: str | None,
    limit: int,
    uow: UnitOfWork,
) -> list[DirectMessage]:
    return await uow.messages.list_inbox(principal.user_id, cursor=cursor, limit=limit)
