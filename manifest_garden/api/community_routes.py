"""Community feed routes."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from manifest_garden.api.schemas import ReceiveRequest, SharedManifestationResponse, ShareRequest
from manifest_garden.core.dependencies import get_community_service
from manifest_garden.domain.services import ICommunityService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/community", tags=["community"])


@router.get("/", response_model=list[SharedManifestationResponse])
async def feed(
    community_service: Annotated[ICommunityService, Depends(get_community_service)],
) -> list[SharedManifestationResponse]:
    """All shared manifestations, newest first."""
    return [SharedManifestationResponse.model_validate(s) for s in await community_service.feed()]


@router.get("/mine", response_model=list[SharedManifestationResponse])
async def my_shared(
    community_service: Annotated[ICommunityService, Depends(get_community_service)],
) -> list[SharedManifestationResponse]:
    return [SharedManifestationResponse.model_validate(s) for s in await community_service.my_shared()]


@router.post("/", response_model=SharedManifestationResponse, status_code=status.HTTP_201_CREATED)
async def share(
    body: ShareRequest,
    community_service: Annotated[ICommunityService, Depends(get_community_service)],
) -> SharedManifestationResponse:
    try:
        shared = await community_service.share(
            intention=body.intention,
            category=body.category,
            color=body.color,
            rarity=body.rarity,
        )
    except ValueError as e:
        logger.warning(f"Rejected share: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    return SharedManifestationResponse.model_validate(shared)


@router.post("/received", response_model=SharedManifestationResponse, status_code=status.HTTP_201_CREATED)
async def receive(
    body: ReceiveRequest,
    community_service: Annotated[ICommunityService, Depends(get_community_service)],
) -> SharedManifestationResponse:
    """Import a post written by another gardener into the feed."""
    try:
        shared = await community_service.receive(
            username=body.username,
            intention=body.intention,
            category=body.category,
            color=body.color,
            rarity=body.rarity,
            likes=body.likes,
            shared_at=body.shared_at,
        )
    except ValueError as e:
        logger.warning(f"Rejected received manifestation from {body.username}: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    return SharedManifestationResponse.model_validate(shared)


@router.post("/{shared_id}/like", response_model=SharedManifestationResponse)
async def toggle_like(
    shared_id: str,
    community_service: Annotated[ICommunityService, Depends(get_community_service)],
) -> SharedManifestationResponse:
    """Like the post, or take the like back if it was already liked."""
    shared = await community_service.toggle_like(shared_id)
    if not shared:
        raise HTTPException(status_code=404, detail="Shared manifestation not found")
    return SharedManifestationResponse.model_validate(shared)
