"""Daily quests."""

import logging
import random
from datetime import datetime
from typing import Optional
from uuid import uuid4

from manifest_garden.core.dates import next_local_midnight, utcnow
from manifest_garden.domain.catalog import DAILY_QUEST_COUNT, QUEST_TEMPLATES
from manifest_garden.domain.entities import DailyQuest, QuestReward, QuestType
from manifest_garden.domain.repositories import IQuestRepository
from manifest_garden.domain.services import IQuestService

logger = logging.getLogger(__name__)


class QuestService(IQuestService):
    """Three quests per local day, drawn without repetition from the templates.

    Quests expire at the next local midnight; the first read after that
    replaces the whole set.
    """

    def __init__(self, quest_repository: IQuestRepository, rng: Optional[random.Random] = None):
        self.quest_repository = quest_repository
        self.rng = rng or random.Random()

    async def list_quests(self, now: Optional[datetime] = None) -> list[DailyQuest]:
        now = now or utcnow()
        quests = await self.quest_repository.list_all()
        if not quests or quests[0].expires_at <= now:
            return await self.refresh(now)
        return quests

    async def refresh(self, now: Optional[datetime] = None) -> list[DailyQuest]:
        now = now or utcnow()
        expires_at = next_local_midnight(now)
        quests = [
            DailyQuest(
                id=uuid4().hex,
                title=title,
                description=description,
                type=quest_type,
                target_value=target,
                reward=QuestReward(gems=gems, energy=energy),
                expires_at=expires_at,
            )
            for quest_type, title, description, target, gems, energy in self.rng.sample(
                QUEST_TEMPLATES, DAILY_QUEST_COUNT
            )
        ]
        logger.info("Generated %d daily quests expiring at %s", len(quests), expires_at)
        return await self.quest_repository.replace_all(quests)

    async def progress(
        self, quest_type: QuestType, amount: int = 1, now: Optional[datetime] = None
    ) -> list[DailyQuest]:
        if amount < 1:
            raise ValueError("Progress amount must be at least 1")
        now = now or utcnow()
        quest_type = QuestType(quest_type)
        quests = await self.list_quests(now)

        changed = []
        for quest in quests:
            if quest.type != quest_type or quest.completed:
                continue
            quest.current_value = min(quest.current_value + amount, quest.target_value)
            if quest.current_value >= quest.target_value:
                quest.completed = True
                quest.completed_at = now
                logger.info("Quest completed: %s (%s)", quest.title, quest.id)
            changed.append(quest)

        if changed:
            await self.quest_repository.save_progress(changed)
        return quests

    async def active_quests(self, now: Optional[datetime] = None) -> list[DailyQuest]:
        return [q for q in await self.list_quests(now) if not q.completed]

    async def completed_count(self, now: Optional[datetime] = None) -> int:
        return sum(1 for q in await self.list_quests(now) if q.completed)

    async def total_count(self, now: Optional[datetime] = None) -> int:
        return len(await self.list_quests(now))
