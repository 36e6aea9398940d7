"""Gratitude journal."""

import logging
from datetime import date
from typing import Optional
from uuid import uuid4

from manifest_garden.core.dates import local_today, utcnow
from manifest_garden.domain.entities import JournalEntry, Mood
from manifest_garden.domain.repositories import IJournalRepository
from manifest_garden.domain.services import IJournalService

logger = logging.getLogger(__name__)


class JournalService(IJournalService):

    def __init__(self, journal_repository: IJournalRepository):
        self.journal_repository = journal_repository

    async def add_entry(
        self, day: date, gratitude: list[str], thoughts: str, mood: Mood
    ) -> JournalEntry:
        entry = JournalEntry(
            id=uuid4().hex,
            date=day,
            gratitude=self._clean_gratitude(gratitude),
            thoughts=thoughts,
            mood=mood,
            created_at=utcnow(),
        )
        created = await self.journal_repository.create(entry)
        logger.info("Journal entry created: %s for %s", created.id, created.date)
        return created

    async def update_entry(
        self,
        entry_id: str,
        *,
        day: Optional[date] = None,
        gratitude: Optional[list[str]] = None,
        thoughts: Optional[str] = None,
        mood: Optional[Mood] = None,
    ) -> Optional[JournalEntry]:
        entry = await self.journal_repository.get_by_id(entry_id)
        if not entry:
            return None
        if day is not None:
            entry.date = day
        if gratitude is not None:
            entry.gratitude = self._clean_gratitude(gratitude)
        if thoughts is not None:
            entry.thoughts = thoughts
        if mood is not None:
            entry.mood = Mood(mood)
        return await self.journal_repository.update(entry)

    async def delete_entry(self, entry_id: str) -> bool:
        deleted = await self.journal_repository.delete(entry_id)
        if deleted:
            logger.info("Journal entry deleted: %s", entry_id)
        return deleted

    async def get_entry(self, entry_id: str) -> Optional[JournalEntry]:
        return await self.journal_repository.get_by_id(entry_id)

    async def list_entries(self) -> list[JournalEntry]:
        return await self.journal_repository.list_all()

    async def today_entry(self, today: Optional[date] = None) -> Optional[JournalEntry]:
        return await self.journal_repository.get_by_date(today or local_today())

    @staticmethod
    def _clean_gratitude(gratitude: list[str]) -> list[str]:
        # Blank lines come from unused input rows
        return [g.strip() for g in gratitude if g.strip()]
