"""Gardener profile routes."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException

from manifest_garden.api.schemas import ProfileResponse, ProfileUpdateRequest
from manifest_garden.core.dependencies import get_profile_service
from manifest_garden.domain.services import IProfileService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/profile", tags=["profile"])


@router.get("/", response_model=ProfileResponse)
async def get_profile(
    profile_service: Annotated[IProfileService, Depends(get_profile_service)],
) -> ProfileResponse:
    return ProfileResponse.model_validate(await profile_service.get_profile())


@router.patch("/", response_model=ProfileResponse)
async def update_profile(
    body: ProfileUpdateRequest,
    profile_service: Annotated[IProfileService, Depends(get_profile_service)],
) -> ProfileResponse:
    try:
        profile = await profile_service.update_profile(
            username=body.username, is_premium=body.is_premium
        )
    except ValueError as e:
        logger.warning(f"Rejected profile update: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    return ProfileResponse.model_validate(profile)
