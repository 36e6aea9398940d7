"""Domain-level application service interfaces (ports).

These abstract classes define the contracts that the API layer depends on.
Concrete implementations live in ``manifest_garden/services/`` and are wired
together by the composition root in ``manifest_garden/core/dependencies.py``.

Route handlers import from ``manifest_garden.domain`` only, so every service
can be replaced with a test double via FastAPI's ``app.dependency_overrides``.
"""

from abc import ABC, abstractmethod
from datetime import date, datetime
from typing import Optional

from manifest_garden.domain.entities import (
    Book,
    DailyQuest,
    GardenerProfile,
    GrowthStage,
    InventoryItem,
    JournalEntry,
    ManifestationCategory,
    Mood,
    QuestType,
    Seed,
    SeedRanking,
    SeedRarity,
    SharedManifestation,
    StreakRanking,
    WeeklyManifestation,
    WeeklyManifestationState,
)


class IProfileService(ABC):

    @abstractmethod
    async def get_profile(self) -> GardenerProfile:
        pass

    @abstractmethod
    async def update_profile(
        self, username: Optional[str] = None, is_premium: Optional[bool] = None
    ) -> GardenerProfile:
        pass


class IBookService(ABC):

    @abstractmethod
    async def list_books(self, purchased: Optional[bool] = None) -> list[Book]:
        pass

    @abstractmethod
    async def list_purchased(self) -> list[Book]:
        pass

    @abstractmethod
    async def list_available(self) -> list[Book]:
        pass

    @abstractmethod
    async def get_book(self, book_id: str) -> Optional[Book]:
        pass

    @abstractmethod
    async def purchase_book(self, book_id: str, now: Optional[datetime] = None) -> Optional[Book]:
        """Mark a book purchased and remember when; ``ValueError`` if already owned."""
        pass

    @abstractmethod
    async def get_price(self, book: Book, now: Optional[datetime] = None) -> float:
        """Price after the premium and recent-purchase discounts."""
        pass

    @abstractmethod
    async def has_recent_purchase(self, now: Optional[datetime] = None) -> bool:
        pass

    @abstractmethod
    async def update_reading_progress(self, book_id: str, progress: float) -> Optional[Book]:
        pass

    @abstractmethod
    async def turn_to_page(self, book_id: str, page_index: int) -> Optional[Book]:
        pass

    @abstractmethod
    def current_page_index(self, book: Book) -> int:
        """0-based page the reader is on, derived from the progress percentage."""
        pass


class ICommunityService(ABC):

    @abstractmethod
    async def share(
        self,
        intention: str,
        category: ManifestationCategory,
        color: str,
        rarity: SeedRarity,
    ) -> SharedManifestation:
        pass

    @abstractmethod
    async def feed(self) -> list[SharedManifestation]:
        pass

    @abstractmethod
    async def my_shared(self) -> list[SharedManifestation]:
        pass

    @abstractmethod
    async def toggle_like(self, shared_id: str) -> Optional[SharedManifestation]:
        pass

    @abstractmethod
    async def receive(
        self,
        username: str,
        intention: str,
        category: ManifestationCategory,
        color: str,
        rarity: SeedRarity,
        likes: int = 0,
        shared_at: Optional[datetime] = None,
    ) -> SharedManifestation:
        pass


class IWeeklyManifestationService(ABC):

    @abstractmethod
    async def get_state(self, today: Optional[date] = None) -> WeeklyManifestationState:
        """Current rotation, regenerated first if the week has turned over."""
        pass

    @abstractmethod
    async def regenerate(self, today: Optional[date] = None) -> WeeklyManifestationState:
        pass

    @abstractmethod
    async def mark_used(self, manifestation_id: str) -> Optional[WeeklyManifestation]:
        pass

    @abstractmethod
    async def purchase_extra_slots(self, count: int, today: Optional[date] = None) -> WeeklyManifestationState:
        pass


class IInventoryService(ABC):

    @abstractmethod
    async def add_item(
        self,
        intention: str,
        category: ManifestationCategory,
        stage: GrowthStage,
        color: Optional[str] = None,
    ) -> InventoryItem:
        pass

    @abstractmethod
    async def remove_item(self, item_id: str) -> bool:
        pass

    @abstractmethod
    async def list_items(
        self,
        category: Optional[ManifestationCategory] = None,
        stage: Optional[GrowthStage] = None,
    ) -> list[InventoryItem]:
        pass

    @abstractmethod
    async def total_seeds(self) -> int:
        pass

    @abstractmethod
    async def blooming_seeds(self) -> int:
        pass

    @abstractmethod
    async def acquire_seed(self, rarity: Optional[SeedRarity] = None) -> Seed:
        pass

    @abstractmethod
    async def list_seeds(self, rarity: Optional[SeedRarity] = None) -> list[Seed]:
        pass

    @abstractmethod
    async def count_seeds_by_rarity(self) -> dict[SeedRarity, int]:
        pass

    @abstractmethod
    async def remove_seed(self, seed_id: str) -> bool:
        pass


class IJournalService(ABC):

    @abstractmethod
    async def add_entry(
        self, day: date, gratitude: list[str], thoughts: str, mood: Mood
    ) -> JournalEntry:
        pass

    @abstractmethod
    async def update_entry(
        self,
        entry_id: str,
        *,
        day: Optional[date] = None,
        gratitude: Optional[list[str]] = None,
        thoughts: Optional[str] = None,
        mood: Optional[Mood] = None,
    ) -> Optional[JournalEntry]:
        pass

    @abstractmethod
    async def delete_entry(self, entry_id: str) -> bool:
        pass

    @abstractmethod
    async def get_entry(self, entry_id: str) -> Optional[JournalEntry]:
        pass

    @abstractmethod
    async def list_entries(self) -> list[JournalEntry]:
        pass

    @abstractmethod
    async def today_entry(self, today: Optional[date] = None) -> Optional[JournalEntry]:
        pass


class IQuestService(ABC):

    @abstractmethod
    async def list_quests(self, now: Optional[datetime] = None) -> list[DailyQuest]:
        """Today's quests; a fresh set replaces an expired or empty one."""
        pass

    @abstractmethod
    async def progress(
        self, quest_type: QuestType, amount: int = 1, now: Optional[datetime] = None
    ) -> list[DailyQuest]:
        pass

    @abstractmethod
    async def refresh(self, now: Optional[datetime] = None) -> list[DailyQuest]:
        pass

    @abstractmethod
    async def active_quests(self, now: Optional[datetime] = None) -> list[DailyQuest]:
        pass

    @abstractmethod
    async def completed_count(self, now: Optional[datetime] = None) -> int:
        pass

    @abstractmethod
    async def total_count(self, now: Optional[datetime] = None) -> int:
        pass


class IRankingService(ABC):

    @abstractmethod
    async def seed_rankings(self) -> list[SeedRanking]:
        pass

    @abstractmethod
    async def streak_rankings(self) -> list[StreakRanking]:
        pass

    @abstractmethod
    async def submit_seed_entry(
        self, entry_id: str, username: str, total_seeds: int, blooming_seeds: int
    ) -> list[SeedRanking]:
        pass

    @abstractmethod
    async def submit_streak_entry(
        self, entry_id: str, username: str, current_streak: int, longest_streak: int
    ) -> list[StreakRanking]:
        pass

    @abstractmethod
    async def check_in(self, today: Optional[date] = None) -> GardenerProfile:
        pass

    @abstractmethod
    async def refresh_seed_ranking(self) -> list[SeedRanking]:
        pass

    @abstractmethod
    async def user_rank(self, board: str) -> int:
        """The gardener's rank on ``"seeds"`` or ``"streaks"``; 0 when unranked."""
        pass
