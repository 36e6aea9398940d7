"""Inventory of collected manifestations and the seed stash."""

import logging
import random
from typing import Optional
from uuid import uuid4

from manifest_garden.core.dates import utcnow
from manifest_garden.domain.catalog import CATEGORY_COLORS, SEED_RARITY_WEIGHTS
from manifest_garden.domain.entities import (
    GrowthStage,
    InventoryItem,
    ManifestationCategory,
    Seed,
    SeedRarity,
)
from manifest_garden.domain.repositories import IInventoryRepository, ISeedRepository
from manifest_garden.domain.services import IInventoryService

logger = logging.getLogger(__name__)


class InventoryService(IInventoryService):

    def __init__(
        self,
        inventory_repository: IInventoryRepository,
        seed_repository: ISeedRepository,
        rng: Optional[random.Random] = None,
    ):
        self.inventory_repository = inventory_repository
        self.seed_repository = seed_repository
        self.rng = rng or random.Random()

    async def add_item(
        self,
        intention: str,
        category: ManifestationCategory,
        stage: GrowthStage,
        color: Optional[str] = None,
    ) -> InventoryItem:
        category = ManifestationCategory(category)
        item = InventoryItem(
            id=uuid4().hex,
            intention=intention,
            category=category,
            stage=stage,
            color=color or CATEGORY_COLORS[category],
            collected_at=utcnow(),
        )
        created = await self.inventory_repository.create(item)
        logger.info("Inventory item collected: %s (%s, %s)", created.id, created.category.value, created.stage.value)
        return created

    async def remove_item(self, item_id: str) -> bool:
        return await self.inventory_repository.delete(item_id)

    async def list_items(
        self,
        category: Optional[ManifestationCategory] = None,
        stage: Optional[GrowthStage] = None,
    ) -> list[InventoryItem]:
        return await self.inventory_repository.list_items(category=category, stage=stage)

    async def total_seeds(self) -> int:
        return await self.inventory_repository.count()

    async def blooming_seeds(self) -> int:
        return await self.inventory_repository.count(stage=GrowthStage.BLOOMING)

    async def acquire_seed(self, rarity: Optional[SeedRarity] = None) -> Seed:
        if rarity is None:
            rarity = self.roll_rarity()
        seed = Seed(id=uuid4().hex, rarity=rarity, acquired_at=utcnow())
        created = await self.seed_repository.create(seed)
        logger.info("Seed acquired: %s (%s)", created.id, created.rarity.value)
        return created

    async def list_seeds(self, rarity: Optional[SeedRarity] = None) -> list[Seed]:
        return await self.seed_repository.list_seeds(rarity=rarity)

    async def count_seeds_by_rarity(self) -> dict[SeedRarity, int]:
        return await self.seed_repository.count_by_rarity()

    async def remove_seed(self, seed_id: str) -> bool:
        return await self.seed_repository.delete(seed_id)

    def roll_rarity(self) -> SeedRarity:
        rarities = list(SEED_RARITY_WEIGHTS)
        return self.rng.choices(rarities, weights=[SEED_RARITY_WEIGHTS[r] for r in rarities])[0]
