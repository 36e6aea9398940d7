"""Weekly rotation of suggested affirmations."""

import logging
import random
from datetime import date
from typing import Optional
from uuid import uuid4

from manifest_garden.core.dates import local_today, week_start
from manifest_garden.domain.catalog import DEFAULT_WEEKLY_CATEGORIES, MANIFESTATION_TEMPLATES
from manifest_garden.domain.entities import WeeklyManifestation, WeeklyManifestationState
from manifest_garden.domain.repositories import (
    IInventoryRepository,
    IProfileRepository,
    IWeeklyManifestationRepository,
)
from manifest_garden.domain.services import IWeeklyManifestationService

logger = logging.getLogger(__name__)

FREE_WEEKLY_COUNT = 1
PREMIUM_WEEKLY_COUNT = 5


class WeeklyManifestationService(IWeeklyManifestationService):
    """Keeps one set of affirmations per calendar week.

    The set holds ``base + extra_slots`` affirmations, where ``base`` depends
    on the premium flag.  Each affirmation fills a template with one of the
    categories the gardener has collected, so the suggestions follow what
    they have been growing.
    """

    def __init__(
        self,
        weekly_repository: IWeeklyManifestationRepository,
        inventory_repository: IInventoryRepository,
        profile_repository: IProfileRepository,
        default_username: str,
        rng: Optional[random.Random] = None,
    ):
        self.weekly_repository = weekly_repository
        self.inventory_repository = inventory_repository
        self.profile_repository = profile_repository
        self.default_username = default_username
        self.rng = rng or random.Random()

    async def get_state(self, today: Optional[date] = None) -> WeeklyManifestationState:
        state = await self.weekly_repository.get_state()
        if state.last_generated_week != week_start(today or local_today()):
            return await self.regenerate(today)
        return state

    async def regenerate(self, today: Optional[date] = None) -> WeeklyManifestationState:
        week = week_start(today or local_today())
        state = await self.weekly_repository.get_state()
        total = await self.base_count() + state.extra_slots
        manifestations = await self._generate(week, total)
        logger.info("Generated %d weekly manifestations for week of %s", total, week)
        return await self.weekly_repository.replace_week(week, manifestations)

    async def mark_used(self, manifestation_id: str) -> Optional[WeeklyManifestation]:
        return await self.weekly_repository.mark_used(manifestation_id)

    async def purchase_extra_slots(self, count: int, today: Optional[date] = None) -> WeeklyManifestationState:
        if count < 1:
            raise ValueError("Slot count must be at least 1")
        state = await self.get_state(today)
        manifestations = await self._generate(state.last_generated_week, count)
        logger.info("Added %d extra weekly slots", count)
        return await self.weekly_repository.add(manifestations, state.extra_slots + count)

    async def base_count(self) -> int:
        profile = await self.profile_repository.get_or_create(self.default_username)
        return PREMIUM_WEEKLY_COUNT if profile.is_premium else FREE_WEEKLY_COUNT

    async def _generate(self, week: date, count: int) -> list[WeeklyManifestation]:
        categories = await self.inventory_repository.categories() or DEFAULT_WEEKLY_CATEGORIES
        manifestations = []
        for _ in range(count):
            category = self.rng.choice(categories)
            template = self.rng.choice(MANIFESTATION_TEMPLATES)
            manifestations.append(
                WeeklyManifestation(
                    id=uuid4().hex,
                    text=template.replace("{category}", category.lower()),
                    category=category,
                    week_start=week,
                    used=False,
                )
            )
        return manifestations
