"""Seed and streak leaderboards."""

import logging
from datetime import date, timedelta
from typing import Optional, TypeVar

from manifest_garden.core.dates import local_today
from manifest_garden.domain.entities import (
    GardenerProfile,
    GrowthStage,
    RankingEntry,
    SeedRanking,
    StreakRanking,
)
from manifest_garden.domain.repositories import (
    IInventoryRepository,
    IProfileRepository,
    IRankingRepository,
)
from manifest_garden.domain.services import IRankingService

logger = logging.getLogger(__name__)

USER_ENTRY_ID = "user"

RankingT = TypeVar("RankingT", bound=RankingEntry)


def assign_ranks(entries: list[RankingT]) -> list[RankingT]:
    """Order by score, highest first, and number the ranks from 1.

    Ties keep their incoming order.
    """
    ordered = sorted(entries, key=lambda e: e.score, reverse=True)
    for position, entry in enumerate(ordered, start=1):
        entry.rank = position
    return ordered


def _upsert(entries: list[RankingT], entry: RankingT) -> list[RankingT]:
    return [e for e in entries if e.id != entry.id] + [entry]


class RankingService(IRankingService):

    def __init__(
        self,
        ranking_repository: IRankingRepository,
        profile_repository: IProfileRepository,
        inventory_repository: IInventoryRepository,
        default_username: str,
    ):
        self.ranking_repository = ranking_repository
        self.profile_repository = profile_repository
        self.inventory_repository = inventory_repository
        self.default_username = default_username

    async def seed_rankings(self) -> list[SeedRanking]:
        return await self.ranking_repository.list_seed_rankings()

    async def streak_rankings(self) -> list[StreakRanking]:
        return await self.ranking_repository.list_streak_rankings()

    async def submit_seed_entry(
        self, entry_id: str, username: str, total_seeds: int, blooming_seeds: int
    ) -> list[SeedRanking]:
        self._check_entry_id(entry_id)
        if blooming_seeds > total_seeds:
            raise ValueError("Blooming seeds cannot exceed total seeds")
        return await self._save_seed_entry(entry_id, username, total_seeds, blooming_seeds)

    async def submit_streak_entry(
        self, entry_id: str, username: str, current_streak: int, longest_streak: int
    ) -> list[StreakRanking]:
        self._check_entry_id(entry_id)
        if current_streak > longest_streak:
            raise ValueError("Current streak cannot exceed longest streak")
        return await self._save_streak_entry(entry_id, username, current_streak, longest_streak)

    async def check_in(self, today: Optional[date] = None) -> GardenerProfile:
        today = today or local_today()
        profile = await self.profile_repository.get_or_create(self.default_username)
        if profile.last_check_in == today:
            return profile

        if profile.last_check_in == today - timedelta(days=1):
            profile.current_streak += 1
        else:
            profile.current_streak = 1
        profile.longest_streak = max(profile.longest_streak, profile.current_streak)
        profile.last_check_in = today
        profile = await self.profile_repository.update(profile)
        logger.info("Check-in on %s, streak now %d", today, profile.current_streak)

        await self._save_streak_entry(
            USER_ENTRY_ID, profile.username, profile.current_streak, profile.longest_streak
        )
        return profile

    async def refresh_seed_ranking(self) -> list[SeedRanking]:
        profile = await self.profile_repository.get_or_create(self.default_username)
        total = await self.inventory_repository.count()
        blooming = await self.inventory_repository.count(stage=GrowthStage.BLOOMING)
        return await self._save_seed_entry(USER_ENTRY_ID, profile.username, total, blooming)

    async def user_rank(self, board: str) -> int:
        if board == "seeds":
            entries = await self.seed_rankings()
        elif board == "streaks":
            entries = await self.streak_rankings()
        else:
            raise ValueError(f"Unknown leaderboard: {board}")
        return next((e.rank for e in entries if e.id == USER_ENTRY_ID), 0)

    async def _save_seed_entry(
        self, entry_id: str, username: str, total_seeds: int, blooming_seeds: int
    ) -> list[SeedRanking]:
        entry = SeedRanking(
            id=entry_id,
            username=username,
            score=blooming_seeds,
            rank=1,
            total_seeds=total_seeds,
            blooming_seeds=blooming_seeds,
        )
        entries = assign_ranks(_upsert(await self.seed_rankings(), entry))
        return await self.ranking_repository.save_seed_rankings(entries)

    async def _save_streak_entry(
        self, entry_id: str, username: str, current_streak: int, longest_streak: int
    ) -> list[StreakRanking]:
        entry = StreakRanking(
            id=entry_id,
            username=username,
            score=current_streak,
            rank=1,
            current_streak=current_streak,
            longest_streak=longest_streak,
        )
        entries = assign_ranks(_upsert(await self.streak_rankings(), entry))
        return await self.ranking_repository.save_streak_rankings(entries)

    @staticmethod
    def _check_entry_id(entry_id: str) -> None:
        if entry_id == USER_ENTRY_ID:
            raise ValueError(f"Entry id '{USER_ENTRY_ID}' is reserved for this gardener")
