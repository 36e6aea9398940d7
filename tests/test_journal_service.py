from datetime import date

import pytest

from manifest_garden.domain.entities import Mood
from manifest_garden.services.journal_service import JournalService

TODAY = date(2024, 3, 4)


@pytest.fixture
def journal_service(journal_repo):
    return JournalService(journal_repo)


async def test_add_entry_cleans_gratitude(journal_service):
    entry = await journal_service.add_entry(TODAY, ["  sunshine ", "", "   ", "tea"], "Good day", Mood.GOOD)
    assert entry.gratitude == ["sunshine", "tea"]
    assert entry.id
    assert entry.created_at is not None


async def test_newest_first(journal_service):
    first = await journal_service.add_entry(date(2024, 3, 1), ["a"], "", Mood.LOW)
    second = await journal_service.add_entry(date(2024, 3, 2), ["b"], "", Mood.AMAZING)
    assert [e.id for e in await journal_service.list_entries()] == [second.id, first.id]


async def test_update_entry_partial(journal_service):
    entry = await journal_service.add_entry(TODAY, ["a"], "before", Mood.NEUTRAL)
    updated = await journal_service.update_entry(entry.id, thoughts="after", mood=Mood.AMAZING)
    assert updated.thoughts == "after"
    assert updated.mood is Mood.AMAZING
    assert updated.gratitude == ["a"]
    assert updated.date == TODAY
    assert await journal_service.update_entry("missing", thoughts="x") is None


async def test_today_entry(journal_service):
    assert await journal_service.today_entry(TODAY) is None
    entry = await journal_service.add_entry(TODAY, [], "", Mood.STRUGGLING)
    assert (await journal_service.today_entry(TODAY)).id == entry.id


async def test_delete_entry(journal_service):
    entry = await journal_service.add_entry(TODAY, [], "", Mood.GOOD)
    assert await journal_service.delete_entry(entry.id) is True
    assert await journal_service.get_entry(entry.id) is None
    assert await journal_service.delete_entry(entry.id) is False
