from datetime import date, timedelta

import pytest

from manifest_garden.domain.catalog import DEFAULT_WEEKLY_CATEGORIES, MANIFESTATION_TEMPLATES
from manifest_garden.domain.entities import GrowthStage, ManifestationCategory
from manifest_garden.services.inventory_service import InventoryService
from manifest_garden.services.weekly_manifestation_service import WeeklyManifestationService

THURSDAY = date(2024, 3, 7)
MONDAY = date(2024, 3, 4)


@pytest.fixture
def weekly_service(weekly_repo, inventory_repo, profile_repo, rng):
    return WeeklyManifestationService(weekly_repo, inventory_repo, profile_repo, "Dreamer", rng=rng)


async def make_premium(profile_repo):
    profile = await profile_repo.get_or_create("Dreamer")
    profile.is_premium = True
    await profile_repo.update(profile)


async def test_first_read_generates_one_for_free_gardener(weekly_service):
    state = await weekly_service.get_state(THURSDAY)
    assert state.last_generated_week == MONDAY
    assert len(state.manifestations) == 1
    manifestation = state.manifestations[0]
    assert manifestation.week_start == MONDAY
    assert manifestation.used is False
    assert manifestation.category in DEFAULT_WEEKLY_CATEGORIES


async def test_premium_gets_five(weekly_service, profile_repo):
    await make_premium(profile_repo)
    state = await weekly_service.get_state(THURSDAY)
    assert len(state.manifestations) == 5


async def test_text_fills_template(weekly_service):
    state = await weekly_service.get_state(THURSDAY)
    manifestation = state.manifestations[0]
    assert any(
        template.replace("{category}", manifestation.category.lower()) == manifestation.text
        for template in MANIFESTATION_TEMPLATES
    )


async def test_categories_follow_inventory(weekly_service, inventory_repo, profile_repo):
    await make_premium(profile_repo)
    await InventoryService(inventory_repo, None).add_item(
        "Radiant health", ManifestationCategory.HEALTH, GrowthStage.BLOOMING
    )
    state = await weekly_service.get_state(THURSDAY)
    assert {m.category for m in state.manifestations} == {"health"}


async def test_same_week_keeps_set(weekly_service):
    first = await weekly_service.get_state(MONDAY)
    again = await weekly_service.get_state(THURSDAY)
    assert [m.id for m in again.manifestations] == [m.id for m in first.manifestations]


async def test_new_week_regenerates(weekly_service):
    first = await weekly_service.get_state(THURSDAY)
    used = await weekly_service.mark_used(first.manifestations[0].id)
    assert used.used is True

    next_week = await weekly_service.get_state(THURSDAY + timedelta(days=7))
    assert next_week.last_generated_week == MONDAY + timedelta(days=7)
    assert next_week.manifestations[0].id != first.manifestations[0].id
    assert next_week.manifestations[0].used is False


async def test_extra_slots(weekly_service):
    state = await weekly_service.purchase_extra_slots(2, today=THURSDAY)
    assert state.extra_slots == 2
    assert len(state.manifestations) == 3

    regenerated = await weekly_service.regenerate(THURSDAY + timedelta(days=7))
    assert len(regenerated.manifestations) == 3


async def test_extra_slots_requires_positive_count(weekly_service):
    with pytest.raises(ValueError):
        await weekly_service.purchase_extra_slots(0, today=THURSDAY)


async def test_mark_used_unknown(weekly_service):
    assert await weekly_service.mark_used("missing") is None
