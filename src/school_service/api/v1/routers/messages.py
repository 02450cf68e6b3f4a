from __future__ import annotations

from fastapi import APIRouter, Query

from school_service.api.deps import CurrentPrincipal, NotifierDep, UoWDep
from school_service.api.v1.schemas.common import PaginatedResponse
from school_service.api.v1.schemas.message import MessageResponse, SendMessageRequest
from school_service.infrastructure.db.repositories._cursor import encode_cursor
from school_service.services import message_service

router = APIRouter(prefix="/api/messages", tags=["messages"])


@router.get("", response_model=PaginatedResponse[MessageResponse])
async def list_inbox(
    principal: CurrentPrincipal,
    uow: UoWDep,
    cursor: str | None = Query(None),
    limit: int = Query(50, ge=1, le=200),
) -> PaginatedResponse[MessageResponse]:
    messages = await message_service.list_inbox(principal, cursor, limit, uow)
    next_cursor = None
    if len(messages) == limit:
        last = messages[-1]
        next_cursor = encode_cursor(last.created_at, last.id)
    return PaginatedResponse[MessageResponse](
        items=[MessageResponse.model_validate(m, from_attributes=True) for m in messages],
        next_cursor=next_cursor,
    )


@router.post("", response_model=MessageResponse, status_code=201)
async def send_message(
    body: SendMessageRequest,
    principal: CurrentPrincipal,
    uow: UoWDep,
    notifier: NotifierDep,
) -> MessageResponse:
    message = await message_service.send_message(
        principal, body.receiver_id, body.body, uow, notifier,
    )
    return MessageResponse.model_validate(message, from_attributes=True)
