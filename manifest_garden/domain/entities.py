"""Domain entities for Manifest Garden."""

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import Optional

from manifest_garden.core.dates import utcnow


class BookCategory(str, Enum):
    MANIFESTATION = "manifestation"
    SPIRITUALITY = "spirituality"
    SUCCESS = "success"
    MINDFULNESS = "mindfulness"


class ManifestationCategory(str, Enum):
    ABUNDANCE = "abundance"
    LOVE = "love"
    HEALTH = "health"
    SUCCESS = "success"
    PEACE = "peace"


class SeedRarity(str, Enum):
    """Shared by seeds and community posts."""

    COMMON = "common"
    RARE = "rare"
    EPIC = "epic"
    LEGENDARY = "legendary"


class GrowthStage(str, Enum):
    """Declared in growth order."""

    SPROUT = "sprout"
    GROWING = "growing"
    BLOOMING = "blooming"

    @property
    def order(self) -> int:
        return list(GrowthStage).index(self)


class Mood(str, Enum):
    AMAZING = "amazing"
    GOOD = "good"
    NEUTRAL = "neutral"
    LOW = "low"
    STRUGGLING = "struggling"


class QuestType(str, Enum):
    NURTURE = "nurture"
    PLANT = "plant"
    HARVEST = "harvest"
    SHARE = "share"
    STREAK = "streak"


@dataclass
class BookPage:
    id: str
    content: str
    page_number: int


@dataclass
class Book:
    id: str
    title: str
    author: str
    description: str
    cover_url: str
    price: float
    category: BookCategory
    is_purchased: bool = False
    reading_progress: float = 0.0  # percent, 0–100
    pages: list[BookPage] = field(default_factory=list)

    def __post_init__(self):
        self.category = BookCategory(self.category)


@dataclass
class SharedManifestation:
    id: str
    username: str
    intention: str
    category: ManifestationCategory
    color: str
    rarity: SeedRarity
    likes: int = 0
    liked_by_user: bool = False  # per-viewer, derived on read
    shared_at: datetime = field(default_factory=utcnow)

    def __post_init__(self):
        self.category = ManifestationCategory(self.category)
        self.rarity = SeedRarity(self.rarity)


@dataclass
class WeeklyManifestation:
    id: str
    text: str
    category: str  # free-form, taken from the gardener's inventory
    week_start: date
    used: bool = False


@dataclass
class WeeklyManifestationState:
    manifestations: list[WeeklyManifestation] = field(default_factory=list)
    last_generated_week: Optional[date] = None
    extra_slots: int = 0


@dataclass
class InventoryItem:
    id: str
    intention: str
    category: ManifestationCategory
    stage: GrowthStage
    color: str
    collected_at: datetime = field(default_factory=utcnow)

    def __post_init__(self):
        self.category = ManifestationCategory(self.category)
        self.stage = GrowthStage(self.stage)


@dataclass
class Seed:
    id: str
    rarity: SeedRarity
    acquired_at: datetime = field(default_factory=utcnow)

    def __post_init__(self):
        self.rarity = SeedRarity(self.rarity)


@dataclass
class JournalEntry:
    id: str
    date: date
    mood: Mood
    gratitude: list[str] = field(default_factory=list)
    thoughts: str = ""
    created_at: datetime = field(default_factory=utcnow)

    def __post_init__(self):
        self.mood = Mood(self.mood)


@dataclass
class QuestReward:
    gems: int
    energy: Optional[int] = None


@dataclass
class DailyQuest:
    id: str
    title: str
    description: str
    type: QuestType
    target_value: int
    reward: QuestReward
    expires_at: datetime
    current_value: int = 0
    completed: bool = False
    completed_at: Optional[datetime] = None

    def __post_init__(self):
        self.type = QuestType(self.type)


@dataclass
class RankingEntry:
    id: str
    username: str
    score: float
    rank: int


@dataclass
class SeedRanking(RankingEntry):
    total_seeds: int = 0
    blooming_seeds: int = 0


@dataclass
class StreakRanking(RankingEntry):
    current_streak: int = 0
    longest_streak: int = 0


@dataclass
class GardenerProfile:
    """The single local gardener this deployment serves."""

    username: str
    is_premium: bool = False
    last_book_purchase_at: Optional[datetime] = None
    current_streak: int = 0
    longest_streak: int = 0
    last_check_in: Optional[date] = None
