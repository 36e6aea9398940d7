import random
from collections import Counter

import pytest

from manifest_garden.domain.catalog import CATEGORY_COLORS
from manifest_garden.domain.entities import GrowthStage, ManifestationCategory, SeedRarity
from manifest_garden.services.inventory_service import InventoryService


@pytest.fixture
def inventory_service(inventory_repo, seed_repo, rng):
    return InventoryService(inventory_repo, seed_repo, rng=rng)


async def test_add_item_uses_category_color(inventory_service):
    item = await inventory_service.add_item("Joy", ManifestationCategory.LOVE, GrowthStage.SPROUT)
    assert item.color == CATEGORY_COLORS[ManifestationCategory.LOVE]
    custom = await inventory_service.add_item("Joy", ManifestationCategory.LOVE, GrowthStage.SPROUT, color="#123456")
    assert custom.color == "#123456"


async def test_counts(inventory_service):
    await inventory_service.add_item("a", ManifestationCategory.LOVE, GrowthStage.SPROUT)
    await inventory_service.add_item("b", ManifestationCategory.HEALTH, GrowthStage.BLOOMING)
    assert await inventory_service.total_seeds() == 2
    assert await inventory_service.blooming_seeds() == 1
    items = await inventory_service.list_items(stage=GrowthStage.BLOOMING)
    assert [i.intention for i in items] == ["b"]


async def test_remove_item(inventory_service):
    item = await inventory_service.add_item("a", ManifestationCategory.PEACE, GrowthStage.GROWING)
    assert await inventory_service.remove_item(item.id) is True
    assert await inventory_service.remove_item(item.id) is False


async def test_acquire_seed_with_rarity(inventory_service):
    seed = await inventory_service.acquire_seed(SeedRarity.LEGENDARY)
    assert seed.rarity is SeedRarity.LEGENDARY
    counts = await inventory_service.count_seeds_by_rarity()
    assert counts[SeedRarity.LEGENDARY] == 1
    assert await inventory_service.remove_seed(seed.id) is True
    assert await inventory_service.list_seeds() == []


async def test_acquire_seed_rolls_rarity(inventory_service):
    seed = await inventory_service.acquire_seed()
    assert seed.rarity in SeedRarity
    assert [s.id for s in await inventory_service.list_seeds(rarity=seed.rarity)] == [seed.id]


def test_rarity_roll_follows_weights():
    service = InventoryService(None, None, rng=random.Random(42))
    rolls = Counter(service.roll_rarity() for _ in range(10000))
    assert rolls[SeedRarity.COMMON] > rolls[SeedRarity.RARE] > rolls[SeedRarity.EPIC] > rolls[SeedRarity.LEGENDARY]
    assert 0.45 < rolls[SeedRarity.COMMON] / 10000 < 0.55
    assert 0.03 < rolls[SeedRarity.LEGENDARY] / 10000 < 0.07
