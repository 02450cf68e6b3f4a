from __future__ import annotations

from fastapi import APIRouter

from school_service.api.deps import CurrentPrincipal, UoWDep
from school_service.api.v1.schemas.emotion import EmotionEntryResponse, RecordEmotionRequest
from school_service.services import emotion_service

router = APIRouter(prefix="/api/emotions", tags=["emotions"])


@router.get("", response_model=list[EmotionEntryResponse])
async def list_emotions(
    principal: CurrentPrincipal,
    uow: UoWDep,
) -> list[EmotionEntryResponse]:
    entries = await emotion_service.list_own(principal, uow)
    return [EmotionEntryResponse.model_validate(e, from_attributes=True) for e in entries]


@router.post("", response_model=EmotionEntryResponse, status_code=201)
async def record_emotion(
    body: RecordEmotionRequest,
    principal: CurrentPrincipal,
    uow: UoWDep,
) -> EmotionEntryResponse:
    entry = await emotion_service.record(
        principal, body.emotion, body.intensity, body.context, uow,
    )
    return EmotionEntryResponse.model_validate(entry, from_attributes=True)
