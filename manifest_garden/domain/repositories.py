"""Repository interfaces (ports) for dependency inversion."""

from abc import ABC, abstractmethod
from datetime import date
from typing import Optional

from manifest_garden.domain.entities import (
    Book,
    DailyQuest,
    GardenerProfile,
    GrowthStage,
    InventoryItem,
    JournalEntry,
    ManifestationCategory,
    Seed,
    SeedRanking,
    SeedRarity,
    SharedManifestation,
    StreakRanking,
    WeeklyManifestation,
    WeeklyManifestationState,
)


class IProfileRepository(ABC):

    @abstractmethod
    async def get_or_create(self, default_username: str) -> GardenerProfile:
        pass

    @abstractmethod
    async def update(self, profile: GardenerProfile) -> GardenerProfile:
        pass


class IBookRepository(ABC):

    @abstractmethod
    async def get_by_id(self, book_id: str) -> Optional[Book]:
        pass

    @abstractmethod
    async def list_all(self, purchased: Optional[bool] = None) -> list[Book]:
        pass

    @abstractmethod
    async def update_state(self, book_id: str, is_purchased: bool, reading_progress: float) -> Optional[Book]:
        """Persist the per-gardener state of a book (purchase flag and progress)."""
        pass

    @abstractmethod
    async def seed_catalog(self, books: list[Book]) -> int:
        """Insert catalog books that are not stored yet; return how many were added."""
        pass


class ISharedManifestationRepository(ABC):

    @abstractmethod
    async def create(self, shared: SharedManifestation, own: bool = True) -> SharedManifestation:
        """Store a post; *own* marks posts authored by the local gardener."""
        pass

    @abstractmethod
    async def get_by_id(self, shared_id: str) -> Optional[SharedManifestation]:
        pass

    @abstractmethod
    async def list_all(self, own_only: bool = False) -> list[SharedManifestation]:
        """Newest first; ``liked_by_user`` filled from the liked set."""
        pass

    @abstractmethod
    async def set_liked(self, shared_id: str, liked: bool) -> Optional[SharedManifestation]:
        """Add or remove the like of the local gardener and adjust the counter."""
        pass


class IWeeklyManifestationRepository(ABC):

    @abstractmethod
    async def get_state(self) -> WeeklyManifestationState:
        pass

    @abstractmethod
    async def replace_week(self, week: date, manifestations: list[WeeklyManifestation]) -> WeeklyManifestationState:
        """Drop the previous rotation and store *manifestations* as the current week."""
        pass

    @abstractmethod
    async def add(self, manifestations: list[WeeklyManifestation], extra_slots: int) -> WeeklyManifestationState:
        pass

    @abstractmethod
    async def mark_used(self, manifestation_id: str) -> Optional[WeeklyManifestation]:
        pass


class IInventoryRepository(ABC):

    @abstractmethod
    async def create(self, item: InventoryItem) -> InventoryItem:
        pass

    @abstractmethod
    async def delete(self, item_id: str) -> bool:
        pass

    @abstractmethod
    async def list_items(
        self,
        category: Optional[ManifestationCategory] = None,
        stage: Optional[GrowthStage] = None,
    ) -> list[InventoryItem]:
        pass

    @abstractmethod
    async def count(self, stage: Optional[GrowthStage] = None) -> int:
        pass

    @abstractmethod
    async def categories(self) -> list[str]:
        """Category of every stored item, duplicates kept."""
        pass


class ISeedRepository(ABC):

    @abstractmethod
    async def create(self, seed: Seed) -> Seed:
        pass

    @abstractmethod
    async def delete(self, seed_id: str) -> bool:
        pass

    @abstractmethod
    async def list_seeds(self, rarity: Optional[SeedRarity] = None) -> list[Seed]:
        pass

    @abstractmethod
    async def count_by_rarity(self) -> dict[SeedRarity, int]:
        pass


class IJournalRepository(ABC):

    @abstractmethod
    async def create(self, entry: JournalEntry) -> JournalEntry:
        pass

    @abstractmethod
    async def get_by_id(self, entry_id: str) -> Optional[JournalEntry]:
        pass

    @abstractmethod
    async def get_by_date(self, day: date) -> Optional[JournalEntry]:
        pass

    @abstractmethod
    async def list_all(self) -> list[JournalEntry]:
        pass

    @abstractmethod
    async def update(self, entry: JournalEntry) -> JournalEntry:
        pass

    @abstractmethod
    async def delete(self, entry_id: str) -> bool:
        pass


class IQuestRepository(ABC):

    @abstractmethod
    async def list_all(self) -> list[DailyQuest]:
        pass

    @abstractmethod
    async def replace_all(self, quests: list[DailyQuest]) -> list[DailyQuest]:
        pass

    @abstractmethod
    async def save_progress(self, quests: list[DailyQuest]) -> list[DailyQuest]:
        pass


class IRankingRepository(ABC):

    @abstractmethod
    async def list_seed_rankings(self) -> list[SeedRanking]:
        pass

    @abstractmethod
    async def list_streak_rankings(self) -> list[StreakRanking]:
        pass

    @abstractmethod
    async def save_seed_rankings(self, rankings: list[SeedRanking]) -> list[SeedRanking]:
        pass

    @abstractmethod
    async def save_streak_rankings(self, rankings: list[StreakRanking]) -> list[StreakRanking]:
        pass
