"""Repository implementations."""

from datetime import date
from typing import Optional

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from manifest_garden.domain.entities import (
    Book,
    BookPage,
    DailyQuest,
    GardenerProfile,
    GrowthStage,
    InventoryItem,
    JournalEntry,
    ManifestationCategory,
    QuestReward,
    Seed,
    SeedRanking,
    SeedRarity,
    SharedManifestation,
    StreakRanking,
    WeeklyManifestation,
    WeeklyManifestationState,
)
from manifest_garden.domain.repositories import (
    IBookRepository,
    IInventoryRepository,
    IJournalRepository,
    IProfileRepository,
    IQuestRepository,
    IRankingRepository,
    ISeedRepository,
    ISharedManifestationRepository,
    IWeeklyManifestationRepository,
)
from manifest_garden.infrastructure.database.models import (
    SINGLETON_ID,
    BookModel,
    BookPageModel,
    DailyQuestModel,
    GardenerProfileModel,
    InventoryItemModel,
    JournalEntryModel,
    LikedManifestationModel,
    SeedModel,
    SeedRankingModel,
    SharedManifestationModel,
    StreakRankingModel,
    WeeklyManifestationModel,
    WeeklyManifestationStateModel,
)


# ---------------------------------------------------------------------------
# Profile Repository
# ---------------------------------------------------------------------------
class ProfileRepository(IProfileRepository):

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_or_create(self, default_username: str) -> GardenerProfile:
        db_profile = await self.session.get(GardenerProfileModel, SINGLETON_ID)
        if db_profile is None:
            db_profile = GardenerProfileModel(
                id=SINGLETON_ID,
                username=default_username,
                is_premium=False,
                last_book_purchase_at=None,
                current_streak=0,
                longest_streak=0,
                last_check_in=None,
            )
            self.session.add(db_profile)
            await self.session.commit()
        return self._to_entity(db_profile)

    async def update(self, profile: GardenerProfile) -> GardenerProfile:
        db_profile = await self.session.get(GardenerProfileModel, SINGLETON_ID)
        if db_profile is None:
            db_profile = GardenerProfileModel(id=SINGLETON_ID)
            self.session.add(db_profile)
        db_profile.username = profile.username
        db_profile.is_premium = profile.is_premium
        db_profile.last_book_purchase_at = profile.last_book_purchase_at
        db_profile.current_streak = profile.current_streak
        db_profile.longest_streak = profile.longest_streak
        db_profile.last_check_in = profile.last_check_in
        await self.session.commit()
        return self._to_entity(db_profile)

    @staticmethod
    def _to_entity(model: GardenerProfileModel) -> GardenerProfile:
        return GardenerProfile(
            username=model.username,
            is_premium=model.is_premium,
            last_book_purchase_at=model.last_book_purchase_at,
            current_streak=model.current_streak,
            longest_streak=model.longest_streak,
            last_check_in=model.last_check_in,
        )


# ---------------------------------------------------------------------------
# Book Repository
# ---------------------------------------------------------------------------
class BookRepository(IBookRepository):

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, book_id: str) -> Optional[Book]:
        result = await self.session.execute(select(BookModel).where(BookModel.id == book_id))
        db_book = result.scalar_one_or_none()
        return self._to_entity(db_book) if db_book else None

    async def list_all(self, purchased: Optional[bool] = None) -> list[Book]:
        stmt = select(BookModel).order_by(BookModel.title)
        if purchased is not None:
            stmt = stmt.where(BookModel.is_purchased == purchased)
        result = await self.session.execute(stmt)
        return [self._to_entity(book) for book in result.scalars().all()]

    async def update_state(self, book_id: str, is_purchased: bool, reading_progress: float) -> Optional[Book]:
        result = await self.session.execute(select(BookModel).where(BookModel.id == book_id))
        db_book = result.scalar_one_or_none()
        if db_book is None:
            return None
        db_book.is_purchased = is_purchased
        db_book.reading_progress = reading_progress
        await self.session.commit()
        return self._to_entity(db_book)

    async def seed_catalog(self, books: list[Book]) -> int:
        result = await self.session.execute(select(BookModel.id))
        existing = set(result.scalars().all())
        added = 0
        for book in books:
            if book.id in existing:
                continue
            self.session.add(
                BookModel(
                    id=book.id,
                    title=book.title,
                    author=book.author,
                    description=book.description,
                    cover_url=book.cover_url,
                    price=book.price,
                    category=book.category.value,
                    is_purchased=book.is_purchased,
                    reading_progress=book.reading_progress,
                    pages=[
                        BookPageModel(id=page.id, page_number=page.page_number, content=page.content)
                        for page in book.pages
                    ],
                )
            )
            added += 1
        if added:
            await self.session.commit()
        return added

    @staticmethod
    def _to_entity(model: BookModel) -> Book:
        return Book(
            id=model.id,
            title=model.title,
            author=model.author,
            description=model.description,
            cover_url=model.cover_url,
            price=model.price,
            category=model.category,
            is_purchased=model.is_purchased,
            reading_progress=model.reading_progress,
            pages=[
                BookPage(id=page.id, content=page.content, page_number=page.page_number)
                for page in model.pages
            ],
        )


# ---------------------------------------------------------------------------
# Shared Manifestation Repository
# ---------------------------------------------------------------------------
class SharedManifestationRepository(ISharedManifestationRepository):

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, shared: SharedManifestation, own: bool = True) -> SharedManifestation:
        db_shared = SharedManifestationModel(
            id=shared.id,
            username=shared.username,
            intention=shared.intention,
            category=shared.category.value,
            color=shared.color,
            rarity=shared.rarity.value,
            likes=shared.likes,
            shared_at=shared.shared_at,
            is_own=own,
        )
        self.session.add(db_shared)
        await self.session.commit()
        return self._to_entity(db_shared, liked=False)

    async def get_by_id(self, shared_id: str) -> Optional[SharedManifestation]:
        db_shared = await self.session.get(SharedManifestationModel, shared_id)
        if db_shared is None:
            return None
        return self._to_entity(db_shared, liked=await self._is_liked(shared_id))

    async def list_all(self, own_only: bool = False) -> list[SharedManifestation]:
        stmt = select(SharedManifestationModel).order_by(
            SharedManifestationModel.shared_at.desc(), SharedManifestationModel.id.desc()
        )
        if own_only:
            stmt = stmt.where(SharedManifestationModel.is_own.is_(True))
        result = await self.session.execute(stmt)
        liked_ids = set((await self.session.execute(select(LikedManifestationModel.shared_id))).scalars().all())
        return [self._to_entity(m, liked=m.id in liked_ids) for m in result.scalars().all()]

    async def set_liked(self, shared_id: str, liked: bool) -> Optional[SharedManifestation]:
        db_shared = await self.session.get(SharedManifestationModel, shared_id)
        if db_shared is None:
            return None
        db_like = await self.session.get(LikedManifestationModel, shared_id)
        if liked and db_like is None:
            self.session.add(LikedManifestationModel(shared_id=shared_id))
            db_shared.likes = db_shared.likes + 1
        elif not liked and db_like is not None:
            await self.session.delete(db_like)
            db_shared.likes = max(db_shared.likes - 1, 0)
        await self.session.commit()
        return self._to_entity(db_shared, liked=liked)

    async def _is_liked(self, shared_id: str) -> bool:
        return await self.session.get(LikedManifestationModel, shared_id) is not None

    @staticmethod
    def _to_entity(model: SharedManifestationModel, liked: bool) -> SharedManifestation:
        return SharedManifestation(
            id=model.id,
            username=model.username,
            intention=model.intention,
            category=model.category,
            color=model.color,
            rarity=model.rarity,
            likes=model.likes,
            liked_by_user=liked,
            shared_at=model.shared_at,
        )


# ---------------------------------------------------------------------------
# Weekly Manifestation Repository
# ---------------------------------------------------------------------------
class WeeklyManifestationRepository(IWeeklyManifestationRepository):

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_state(self) -> WeeklyManifestationState:
        db_state = await self._get_or_create_state()
        manifestations: list[WeeklyManifestation] = []
        if db_state.last_generated_week is not None:
            result = await self.session.execute(
                select(WeeklyManifestationModel)
                .where(WeeklyManifestationModel.week_start == db_state.last_generated_week)
                .order_by(WeeklyManifestationModel.position)
            )
            manifestations = [self._to_entity(m) for m in result.scalars().all()]
        return WeeklyManifestationState(
            manifestations=manifestations,
            last_generated_week=db_state.last_generated_week,
            extra_slots=db_state.extra_slots,
        )

    async def replace_week(self, week: date, manifestations: list[WeeklyManifestation]) -> WeeklyManifestationState:
        db_state = await self._get_or_create_state()
        await self.session.execute(delete(WeeklyManifestationModel))
        for position, manifestation in enumerate(manifestations):
            self.session.add(self._to_model(manifestation, position))
        db_state.last_generated_week = week
        await self.session.commit()
        return await self.get_state()

    async def add(self, manifestations: list[WeeklyManifestation], extra_slots: int) -> WeeklyManifestationState:
        db_state = await self._get_or_create_state()
        result = await self.session.execute(select(func.count()).select_from(WeeklyManifestationModel))
        offset = result.scalar_one()
        for position, manifestation in enumerate(manifestations, start=offset):
            self.session.add(self._to_model(manifestation, position))
        db_state.extra_slots = extra_slots
        await self.session.commit()
        return await self.get_state()

    async def mark_used(self, manifestation_id: str) -> Optional[WeeklyManifestation]:
        db_manifestation = await self.session.get(WeeklyManifestationModel, manifestation_id)
        if db_manifestation is None:
            return None
        db_manifestation.used = True
        await self.session.commit()
        return self._to_entity(db_manifestation)

    async def _get_or_create_state(self) -> WeeklyManifestationStateModel:
        db_state = await self.session.get(WeeklyManifestationStateModel, SINGLETON_ID)
        if db_state is None:
            db_state = WeeklyManifestationStateModel(id=SINGLETON_ID, last_generated_week=None, extra_slots=0)
            self.session.add(db_state)
            await self.session.flush()
        return db_state

    @staticmethod
    def _to_model(manifestation: WeeklyManifestation, position: int) -> WeeklyManifestationModel:
        return WeeklyManifestationModel(
            id=manifestation.id,
            text=manifestation.text,
            category=manifestation.category,
            week_start=manifestation.week_start,
            used=manifestation.used,
            position=position,
        )

    @staticmethod
    def _to_entity(model: WeeklyManifestationModel) -> WeeklyManifestation:
        return WeeklyManifestation(
            id=model.id,
            text=model.text,
            category=model.category,
            week_start=model.week_start,
            used=model.used,
        )


# ---------------------------------------------------------------------------
# Inventory Repository
# ---------------------------------------------------------------------------
class InventoryRepository(IInventoryRepository):

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, item: InventoryItem) -> InventoryItem:
        db_item = InventoryItemModel(
            id=item.id,
            intention=item.intention,
            category=item.category.value,
            stage=item.stage.value,
            color=item.color,
            collected_at=item.collected_at,
        )
        self.session.add(db_item)
        await self.session.commit()
        return self._to_entity(db_item)

    async def delete(self, item_id: str) -> bool:
        db_item = await self.session.get(InventoryItemModel, item_id)
        if db_item:
            await self.session.delete(db_item)
            await self.session.commit()
            return True
        return False

    async def list_items(
        self,
        category: Optional[ManifestationCategory] = None,
        stage: Optional[GrowthStage] = None,
    ) -> list[InventoryItem]:
        stmt = select(InventoryItemModel).order_by(InventoryItemModel.collected_at, InventoryItemModel.id)
        if category is not None:
            stmt = stmt.where(InventoryItemModel.category == ManifestationCategory(category).value)
        if stage is not None:
            stmt = stmt.where(InventoryItemModel.stage == GrowthStage(stage).value)
        result = await self.session.execute(stmt)
        return [self._to_entity(i) for i in result.scalars().all()]

    async def count(self, stage: Optional[GrowthStage] = None) -> int:
        stmt = select(func.count()).select_from(InventoryItemModel)
        if stage is not None:
            stmt = stmt.where(InventoryItemModel.stage == GrowthStage(stage).value)
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def categories(self) -> list[str]:
        result = await self.session.execute(select(InventoryItemModel.category))
        return list(result.scalars().all())

    @staticmethod
    def _to_entity(model: InventoryItemModel) -> InventoryItem:
        return InventoryItem(
            id=model.id,
            intention=model.intention,
            category=model.category,
            stage=model.stage,
            color=model.color,
            collected_at=model.collected_at,
        )


# ---------------------------------------------------------------------------
# Seed Repository
# ---------------------------------------------------------------------------
class SeedRepository(ISeedRepository):

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, seed: Seed) -> Seed:
        db_seed = SeedModel(id=seed.id, rarity=seed.rarity.value, acquired_at=seed.acquired_at)
        self.session.add(db_seed)
        await self.session.commit()
        return self._to_entity(db_seed)

    async def delete(self, seed_id: str) -> bool:
        db_seed = await self.session.get(SeedModel, seed_id)
        if db_seed:
            await self.session.delete(db_seed)
            await self.session.commit()
            return True
        return False

    async def list_seeds(self, rarity: Optional[SeedRarity] = None) -> list[Seed]:
        stmt = select(SeedModel).order_by(SeedModel.acquired_at, SeedModel.id)
        if rarity is not None:
            stmt = stmt.where(SeedModel.rarity == SeedRarity(rarity).value)
        result = await self.session.execute(stmt)
        return [self._to_entity(s) for s in result.scalars().all()]

    async def count_by_rarity(self) -> dict[SeedRarity, int]:
        result = await self.session.execute(
            select(SeedModel.rarity, func.count()).group_by(SeedModel.rarity)
        )
        counts = {rarity: 0 for rarity in SeedRarity}
        for rarity, count in result.all():
            counts[SeedRarity(rarity)] = count
        return counts

    @staticmethod
    def _to_entity(model: SeedModel) -> Seed:
        return Seed(id=model.id, rarity=model.rarity, acquired_at=model.acquired_at)


# ---------------------------------------------------------------------------
# Journal Repository
# ---------------------------------------------------------------------------
class JournalRepository(IJournalRepository):

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, entry: JournalEntry) -> JournalEntry:
        db_entry = JournalEntryModel(
            id=entry.id,
            date=entry.date,
            gratitude=list(entry.gratitude),
            thoughts=entry.thoughts,
            mood=entry.mood.value,
            created_at=entry.created_at,
        )
        self.session.add(db_entry)
        await self.session.commit()
        return self._to_entity(db_entry)

    async def get_by_id(self, entry_id: str) -> Optional[JournalEntry]:
        db_entry = await self.session.get(JournalEntryModel, entry_id)
        return self._to_entity(db_entry) if db_entry else None

    async def get_by_date(self, day: date) -> Optional[JournalEntry]:
        result = await self.session.execute(
            select(JournalEntryModel)
            .where(JournalEntryModel.date == day)
            .order_by(JournalEntryModel.created_at.desc())
        )
        db_entry = result.scalars().first()
        return self._to_entity(db_entry) if db_entry else None

    async def list_all(self) -> list[JournalEntry]:
        result = await self.session.execute(
            select(JournalEntryModel).order_by(JournalEntryModel.created_at.desc(), JournalEntryModel.id.desc())
        )
        return [self._to_entity(e) for e in result.scalars().all()]

    async def update(self, entry: JournalEntry) -> JournalEntry:
        result = await self.session.execute(select(JournalEntryModel).where(JournalEntryModel.id == entry.id))
        db_entry = result.scalar_one()
        db_entry.date = entry.date
        db_entry.gratitude = list(entry.gratitude)
        db_entry.thoughts = entry.thoughts
        db_entry.mood = entry.mood.value
        await self.session.commit()
        return self._to_entity(db_entry)

    async def delete(self, entry_id: str) -> bool:
        db_entry = await self.session.get(JournalEntryModel, entry_id)
        if db_entry:
            await self.session.delete(db_entry)
            await self.session.commit()
            return True
        return False

    @staticmethod
    def _to_entity(model: JournalEntryModel) -> JournalEntry:
        return JournalEntry(
            id=model.id,
            date=model.date,
            gratitude=list(model.gratitude or []),
            thoughts=model.thoughts,
            mood=model.mood,
            created_at=model.created_at,
        )


# ---------------------------------------------------------------------------
# Quest Repository
# ---------------------------------------------------------------------------
class QuestRepository(IQuestRepository):

    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_all(self) -> list[DailyQuest]:
        result = await self.session.execute(select(DailyQuestModel).order_by(DailyQuestModel.position))
        return [self._to_entity(q) for q in result.scalars().all()]

    async def replace_all(self, quests: list[DailyQuest]) -> list[DailyQuest]:
        await self.session.execute(delete(DailyQuestModel))
        for position, quest in enumerate(quests):
            self.session.add(
                DailyQuestModel(
                    id=quest.id,
                    position=position,
                    title=quest.title,
                    description=quest.description,
                    type=quest.type.value,
                    target_value=quest.target_value,
                    current_value=quest.current_value,
                    completed=quest.completed,
                    completed_at=quest.completed_at,
                    reward_gems=quest.reward.gems,
                    reward_energy=quest.reward.energy,
                    expires_at=quest.expires_at,
                )
            )
        await self.session.commit()
        return await self.list_all()

    async def save_progress(self, quests: list[DailyQuest]) -> list[DailyQuest]:
        for quest in quests:
            db_quest = await self.session.get(DailyQuestModel, quest.id)
            if db_quest is None:
                continue
            db_quest.current_value = quest.current_value
            db_quest.completed = quest.completed
            db_quest.completed_at = quest.completed_at
        await self.session.commit()
        return await self.list_all()

    @staticmethod
    def _to_entity(model: DailyQuestModel) -> DailyQuest:
        return DailyQuest(
            id=model.id,
            title=model.title,
            description=model.description,
            type=model.type,
            target_value=model.target_value,
            current_value=model.current_value,
            completed=model.completed,
            completed_at=model.completed_at,
            reward=QuestReward(gems=model.reward_gems, energy=model.reward_energy),
            expires_at=model.expires_at,
        )


# ---------------------------------------------------------------------------
# Ranking Repository
# ---------------------------------------------------------------------------
class RankingRepository(IRankingRepository):

    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_seed_rankings(self) -> list[SeedRanking]:
        result = await self.session.execute(select(SeedRankingModel).order_by(SeedRankingModel.rank))
        return [
            SeedRanking(
                id=r.id,
                username=r.username,
                score=r.score,
                rank=r.rank,
                total_seeds=r.total_seeds,
                blooming_seeds=r.blooming_seeds,
            )
            for r in result.scalars().all()
        ]

    async def list_streak_rankings(self) -> list[StreakRanking]:
        result = await self.session.execute(select(StreakRankingModel).order_by(StreakRankingModel.rank))
        return [
            StreakRanking(
                id=r.id,
                username=r.username,
                score=r.score,
                rank=r.rank,
                current_streak=r.current_streak,
                longest_streak=r.longest_streak,
            )
            for r in result.scalars().all()
        ]

    async def save_seed_rankings(self, rankings: list[SeedRanking]) -> list[SeedRanking]:
        for ranking in rankings:
            db_ranking = await self.session.get(SeedRankingModel, ranking.id)
            if db_ranking is None:
                db_ranking = SeedRankingModel(id=ranking.id)
                self.session.add(db_ranking)
            db_ranking.username = ranking.username
            db_ranking.score = ranking.score
            db_ranking.rank = ranking.rank
            db_ranking.total_seeds = ranking.total_seeds
            db_ranking.blooming_seeds = ranking.blooming_seeds
        await self.session.commit()
        return await self.list_seed_rankings()

    async def save_streak_rankings(self, rankings: list[StreakRanking]) -> list[StreakRanking]:
        for ranking in rankings:
            db_ranking = await self.session.get(StreakRankingModel, ranking.id)
            if db_ranking is None:
                db_ranking = StreakRankingModel(id=ranking.id)
                self.session.add(db_ranking)
            db_ranking.username = ranking.username
            db_ranking.score = ranking.score
            db_ranking.rank = ranking.rank
            db_ranking.current_streak = ranking.current_streak
            db_ranking.longest_streak = ranking.longest_streak
        await self.session.commit()
        return await self.list_streak_rankings()
