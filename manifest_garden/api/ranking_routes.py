"""Leaderboard routes."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException

from manifest_garden.api.schemas import (
    ProfileResponse,
    SeedEntrySubmit,
    SeedRankingResponse,
    StreakEntrySubmit,
    StreakRankingResponse,
    UserRankResponse,
)
from manifest_garden.core.dependencies import get_ranking_service
from manifest_garden.domain.services import IRankingService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/rankings", tags=["rankings"])


@router.get("/seeds", response_model=list[SeedRankingResponse])
async def seed_rankings(
    ranking_service: Annotated[IRankingService, Depends(get_ranking_service)],
) -> list[SeedRankingResponse]:
    return [SeedRankingResponse.model_validate(r) for r in await ranking_service.seed_rankings()]


@router.get("/streaks", response_model=list[StreakRankingResponse])
async def streak_rankings(
    ranking_service: Annotated[IRankingService, Depends(get_ranking_service)],
) -> list[StreakRankingResponse]:
    return [StreakRankingResponse.model_validate(r) for r in await ranking_service.streak_rankings()]


@router.post("/seeds", response_model=list[SeedRankingResponse])
async def submit_seed_entry(
    body: SeedEntrySubmit,
    ranking_service: Annotated[IRankingService, Depends(get_ranking_service)],
) -> list[SeedRankingResponse]:
    """Add or replace another player's seed entry and re-rank."""
    try:
        rankings = await ranking_service.submit_seed_entry(
            entry_id=body.id,
            username=body.username,
            total_seeds=body.total_seeds,
            blooming_seeds=body.blooming_seeds,
        )
    except ValueError as e:
        logger.warning(f"Rejected seed entry {body.id}: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    return [SeedRankingResponse.model_validate(r) for r in rankings]


@router.post("/streaks", response_model=list[StreakRankingResponse])
async def submit_streak_entry(
    body: StreakEntrySubmit,
    ranking_service: Annotated[IRankingService, Depends(get_ranking_service)],
) -> list[StreakRankingResponse]:
    try:
        rankings = await ranking_service.submit_streak_entry(
            entry_id=body.id,
            username=body.username,
            current_streak=body.current_streak,
            longest_streak=body.longest_streak,
        )
    except ValueError as e:
        logger.warning(f"Rejected streak entry {body.id}: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    return [StreakRankingResponse.model_validate(r) for r in rankings]


@router.post("/check-in", response_model=ProfileResponse)
async def check_in(
    ranking_service: Annotated[IRankingService, Depends(get_ranking_service)],
) -> ProfileResponse:
    """Record today's visit and update the streak board."""
    return ProfileResponse.model_validate(await ranking_service.check_in())


@router.post("/seeds/refresh", response_model=list[SeedRankingResponse])
async def refresh_seed_ranking(
    ranking_service: Annotated[IRankingService, Depends(get_ranking_service)],
) -> list[SeedRankingResponse]:
    return [SeedRankingResponse.model_validate(r) for r in await ranking_service.refresh_seed_ranking()]


@router.get("/{board}/me", response_model=UserRankResponse)
async def user_rank(
    board: str,
    ranking_service: Annotated[IRankingService, Depends(get_ranking_service)],
) -> UserRankResponse:
    try:
        rank = await ranking_service.user_rank(board)
    except ValueError as e:
        logger.warning(f"Unknown ranking board {board}: {e}")
        raise HTTPException(status_code=404, detail=str(e))
    return UserRankResponse(board=board, rank=rank)
