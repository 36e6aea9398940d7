"""Daily quest routes."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException

from manifest_garden.api.schemas import DailyQuestResponse, QuestProgressRequest, QuestSummaryResponse
from manifest_garden.core.dependencies import get_quest_service
from manifest_garden.domain.services import IQuestService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/quests", tags=["quests"])


@router.get("/", response_model=list[DailyQuestResponse])
async def list_quests(
    quest_service: Annotated[IQuestService, Depends(get_quest_service)],
) -> list[DailyQuestResponse]:
    """Today's quests, generated on first read of the day."""
    return [DailyQuestResponse.model_validate(q) for q in await quest_service.list_quests()]


@router.get("/active", response_model=list[DailyQuestResponse])
async def active_quests(
    quest_service: Annotated[IQuestService, Depends(get_quest_service)],
) -> list[DailyQuestResponse]:
    return [DailyQuestResponse.model_validate(q) for q in await quest_service.active_quests()]


@router.get("/summary", response_model=QuestSummaryResponse)
async def summary(
    quest_service: Annotated[IQuestService, Depends(get_quest_service)],
) -> QuestSummaryResponse:
    return QuestSummaryResponse(
        completed=await quest_service.completed_count(),
        total=await quest_service.total_count(),
    )


@router.post("/refresh", response_model=list[DailyQuestResponse])
async def refresh(
    quest_service: Annotated[IQuestService, Depends(get_quest_service)],
) -> list[DailyQuestResponse]:
    return [DailyQuestResponse.model_validate(q) for q in await quest_service.refresh()]


@router.post("/progress", response_model=list[DailyQuestResponse])
async def progress(
    body: QuestProgressRequest,
    quest_service: Annotated[IQuestService, Depends(get_quest_service)],
) -> list[DailyQuestResponse]:
    """Report an action of the given type; matching open quests advance."""
    try:
        quests = await quest_service.progress(body.type, body.amount)
    except ValueError as e:
        logger.warning(f"Rejected quest progress for {body.type.value}: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    return [DailyQuestResponse.model_validate(q) for q in quests]
