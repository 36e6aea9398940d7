"""Weekly manifestation routes."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException

from manifest_garden.api.schemas import (
    ExtraSlotsRequest,
    WeeklyManifestationResponse,
    WeeklyManifestationStateResponse,
)
from manifest_garden.core.dependencies import get_weekly_manifestation_service
from manifest_garden.domain.services import IWeeklyManifestationService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/weekly-manifestations", tags=["weekly-manifestations"])


@router.get("/", response_model=WeeklyManifestationStateResponse)
async def get_state(
    weekly_service: Annotated[IWeeklyManifestationService, Depends(get_weekly_manifestation_service)],
) -> WeeklyManifestationStateResponse:
    """This week's affirmations; a new week gets a fresh set on first read."""
    return WeeklyManifestationStateResponse.model_validate(await weekly_service.get_state())


@router.post("/regenerate", response_model=WeeklyManifestationStateResponse)
async def regenerate(
    weekly_service: Annotated[IWeeklyManifestationService, Depends(get_weekly_manifestation_service)],
) -> WeeklyManifestationStateResponse:
    return WeeklyManifestationStateResponse.model_validate(await weekly_service.regenerate())


@router.post("/extra-slots", response_model=WeeklyManifestationStateResponse)
async def purchase_extra_slots(
    body: ExtraSlotsRequest,
    weekly_service: Annotated[IWeeklyManifestationService, Depends(get_weekly_manifestation_service)],
) -> WeeklyManifestationStateResponse:
    try:
        state = await weekly_service.purchase_extra_slots(body.count)
    except ValueError as e:
        logger.warning(f"Rejected extra slot purchase: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    return WeeklyManifestationStateResponse.model_validate(state)


@router.post("/{manifestation_id}/use", response_model=WeeklyManifestationResponse)
async def mark_used(
    manifestation_id: str,
    weekly_service: Annotated[IWeeklyManifestationService, Depends(get_weekly_manifestation_service)],
) -> WeeklyManifestationResponse:
    manifestation = await weekly_service.mark_used(manifestation_id)
    if not manifestation:
        raise HTTPException(status_code=404, detail="Weekly manifestation not found")
    return WeeklyManifestationResponse.model_validate(manifestation)
