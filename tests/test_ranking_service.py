from datetime import date, timedelta

import pytest

from manifest_garden.domain.entities import GrowthStage, ManifestationCategory, SeedRanking
from manifest_garden.services.inventory_service import InventoryService
from manifest_garden.services.ranking_service import USER_ENTRY_ID, RankingService, assign_ranks

DAY = date(2024, 3, 4)


@pytest.fixture
def ranking_service(ranking_repo, profile_repo, inventory_repo):
    return RankingService(ranking_repo, profile_repo, inventory_repo, "Dreamer")


def test_assign_ranks_is_stable():
    entries = [
        SeedRanking(id="a", username="A", score=1, rank=0),
        SeedRanking(id="b", username="B", score=3, rank=0),
        SeedRanking(id="c", username="C", score=1, rank=0),
    ]
    ranked = assign_ranks(entries)
    assert [(e.id, e.rank) for e in ranked] == [("b", 1), ("a", 2), ("c", 3)]


async def test_submit_seed_entries_rank_by_blooming(ranking_service):
    await ranking_service.submit_seed_entry("ann", "Ann", total_seeds=10, blooming_seeds=4)
    rankings = await ranking_service.submit_seed_entry("bo", "Bo", total_seeds=6, blooming_seeds=6)
    assert [(r.id, r.rank, r.score) for r in rankings] == [("bo", 1, 6), ("ann", 2, 4)]

    # Resubmitting replaces the entry
    rankings = await ranking_service.submit_seed_entry("ann", "Ann", total_seeds=12, blooming_seeds=9)
    assert [(r.id, r.rank) for r in rankings] == [("ann", 1), ("bo", 2)]
    assert len(await ranking_service.seed_rankings()) == 2


async def test_submit_rejects_invalid_entries(ranking_service):
    with pytest.raises(ValueError):
        await ranking_service.submit_seed_entry("ann", "Ann", total_seeds=1, blooming_seeds=2)
    with pytest.raises(ValueError):
        await ranking_service.submit_streak_entry("ann", "Ann", current_streak=5, longest_streak=2)
    with pytest.raises(ValueError):
        await ranking_service.submit_seed_entry(USER_ENTRY_ID, "Me", total_seeds=1, blooming_seeds=1)


async def test_check_in_streaks(ranking_service):
    profile = await ranking_service.check_in(DAY)
    assert (profile.current_streak, profile.longest_streak) == (1, 1)

    # Same day is a no-op
    profile = await ranking_service.check_in(DAY)
    assert profile.current_streak == 1

    profile = await ranking_service.check_in(DAY + timedelta(days=1))
    profile = await ranking_service.check_in(DAY + timedelta(days=2))
    assert (profile.current_streak, profile.longest_streak) == (3, 3)

    # A missed day resets the current streak but keeps the best
    profile = await ranking_service.check_in(DAY + timedelta(days=4))
    assert (profile.current_streak, profile.longest_streak) == (1, 3)
    assert profile.last_check_in == DAY + timedelta(days=4)


async def test_check_in_updates_streak_board(ranking_service):
    await ranking_service.submit_streak_entry("sol", "Sol", current_streak=2, longest_streak=10)
    assert await ranking_service.user_rank("streaks") == 0

    await ranking_service.check_in(DAY)
    assert await ranking_service.user_rank("streaks") == 2
    await ranking_service.check_in(DAY + timedelta(days=1))
    await ranking_service.check_in(DAY + timedelta(days=2))
    assert await ranking_service.user_rank("streaks") == 1

    entry = next(r for r in await ranking_service.streak_rankings() if r.id == USER_ENTRY_ID)
    assert entry.username == "Dreamer"
    assert (entry.current_streak, entry.longest_streak, entry.score) == (3, 3, 3)


async def test_refresh_seed_ranking_uses_inventory(ranking_service, inventory_repo):
    inventory = InventoryService(inventory_repo, None)
    await inventory.add_item("a", ManifestationCategory.LOVE, GrowthStage.BLOOMING)
    await inventory.add_item("b", ManifestationCategory.LOVE, GrowthStage.SPROUT)
    await ranking_service.submit_seed_entry("ann", "Ann", total_seeds=3, blooming_seeds=3)

    rankings = await ranking_service.refresh_seed_ranking()
    mine = next(r for r in rankings if r.id == USER_ENTRY_ID)
    assert (mine.total_seeds, mine.blooming_seeds, mine.rank) == (2, 1, 2)
    assert await ranking_service.user_rank("seeds") == 2


async def test_user_rank_unknown_board(ranking_service):
    with pytest.raises(ValueError):
        await ranking_service.user_rank("gems")
