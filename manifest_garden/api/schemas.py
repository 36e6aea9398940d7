"""Pydantic schemas for API requests and responses.

Field names are snake_case in Python and camelCase on the wire.
"""

import datetime as dt
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from manifest_garden.domain.entities import (
    BookCategory,
    GrowthStage,
    ManifestationCategory,
    Mood,
    QuestType,
    SeedRarity,
)


class CamelModel(BaseModel):
    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)


# ---------------------------------------------------------------------------
# Profile
# ---------------------------------------------------------------------------
class ProfileResponse(CamelModel):
    username: str
    is_premium: bool
    current_streak: int = Field(..., ge=0)
    longest_streak: int = Field(..., ge=0)
    last_check_in: Optional[dt.date] = None
    last_book_purchase_at: Optional[dt.datetime] = None


class ProfileUpdateRequest(CamelModel):
    username: Optional[str] = Field(None, min_length=1, max_length=50)
    is_premium: Optional[bool] = None


# ---------------------------------------------------------------------------
# Books
# ---------------------------------------------------------------------------
class BookPageResponse(CamelModel):
    id: str
    content: str
    page_number: int = Field(..., ge=1)


class BookResponse(CamelModel):
    id: str
    title: str
    author: str
    description: str
    cover_url: str
    price: float = Field(..., ge=0)
    category: BookCategory
    is_purchased: bool
    reading_progress: float = Field(..., ge=0, le=100)
    pages: list[BookPageResponse]
    effective_price: Optional[float] = None
    current_page_index: Optional[int] = None


class ReadingProgressRequest(CamelModel):
    progress: float = Field(..., ge=0, le=100)


class PageTurnRequest(CamelModel):
    page_index: int = Field(..., ge=0)


class PurchaseStatusResponse(CamelModel):
    has_recent_purchase: bool


# ---------------------------------------------------------------------------
# Community
# ---------------------------------------------------------------------------
class ShareRequest(CamelModel):
    intention: str = Field(..., min_length=1, max_length=500)
    category: ManifestationCategory
    color: str = Field(..., min_length=1, max_length=32)
    rarity: SeedRarity


class ReceiveRequest(ShareRequest):
    """A post authored by another gardener."""

    username: str = Field(..., min_length=1, max_length=50)
    likes: int = Field(0, ge=0)
    shared_at: Optional[dt.datetime] = None


class SharedManifestationResponse(CamelModel):
    id: str
    username: str
    intention: str
    category: ManifestationCategory
    color: str
    rarity: SeedRarity
    likes: int = Field(..., ge=0)
    liked_by_user: bool
    shared_at: dt.datetime


# ---------------------------------------------------------------------------
# Weekly manifestations
# ---------------------------------------------------------------------------
class WeeklyManifestationResponse(CamelModel):
    id: str
    text: str
    category: str
    week_start: dt.date
    used: bool


class WeeklyManifestationStateResponse(CamelModel):
    manifestations: list[WeeklyManifestationResponse]
    last_generated_week: Optional[dt.date] = None
    extra_slots: int = Field(..., ge=0)


class ExtraSlotsRequest(CamelModel):
    count: int = Field(..., ge=1)


# ---------------------------------------------------------------------------
# Inventory and seeds
# ---------------------------------------------------------------------------
class InventoryItemCreate(CamelModel):
    intention: str = Field(..., min_length=1, max_length=500)
    category: ManifestationCategory
    stage: GrowthStage
    color: Optional[str] = Field(None, min_length=1, max_length=32)


class InventoryItemResponse(CamelModel):
    id: str
    intention: str
    category: ManifestationCategory
    stage: GrowthStage
    color: str
    collected_at: dt.datetime


class InventoryStatsResponse(CamelModel):
    total_seeds: int = Field(..., ge=0)
    blooming_seeds: int = Field(..., ge=0)

    @model_validator(mode="after")
    def check_blooming(self):
        if self.blooming_seeds > self.total_seeds:
            raise ValueError("bloomingSeeds cannot exceed totalSeeds")
        return self


class SeedCreate(CamelModel):
    rarity: Optional[SeedRarity] = None


class SeedResponse(CamelModel):
    id: str
    rarity: SeedRarity
    acquired_at: dt.datetime


class SeedCountsResponse(CamelModel):
    counts: dict[SeedRarity, int]
    total: int = Field(..., ge=0)


# ---------------------------------------------------------------------------
# Journal
# ---------------------------------------------------------------------------
class JournalEntryCreate(CamelModel):
    date: dt.date
    gratitude: list[str] = Field(default_factory=list)
    thoughts: str = ""
    mood: Mood


class JournalEntryUpdate(CamelModel):
    date: Optional[dt.date] = None
    gratitude: Optional[list[str]] = None
    thoughts: Optional[str] = None
    mood: Optional[Mood] = None


class JournalEntryResponse(CamelModel):
    id: str
    date: dt.date
    gratitude: list[str]
    thoughts: str
    mood: Mood
    created_at: dt.datetime


# ---------------------------------------------------------------------------
# Quests
# ---------------------------------------------------------------------------
class QuestRewardSchema(CamelModel):
    gems: int = Field(..., ge=0)
    energy: Optional[int] = Field(None, ge=0)


class DailyQuestResponse(CamelModel):
    id: str
    title: str
    description: str
    type: QuestType
    target_value: int = Field(..., ge=1)
    current_value: int = Field(..., ge=0)
    reward: QuestRewardSchema
    completed: bool
    completed_at: Optional[dt.datetime] = None
    expires_at: dt.datetime

    @model_validator(mode="after")
    def check_progress(self):
        if self.current_value > self.target_value:
            raise ValueError("currentValue cannot exceed targetValue")
        return self


class QuestProgressRequest(CamelModel):
    type: QuestType
    amount: int = Field(1, ge=1)


class QuestSummaryResponse(CamelModel):
    completed: int = Field(..., ge=0)
    total: int = Field(..., ge=0)


# ---------------------------------------------------------------------------
# Rankings
# ---------------------------------------------------------------------------
class SeedRankingResponse(CamelModel):
    id: str
    username: str
    score: float
    rank: int = Field(..., ge=1)
    total_seeds: int = Field(..., ge=0)
    blooming_seeds: int = Field(..., ge=0)

    @model_validator(mode="after")
    def check_blooming(self):
        if self.blooming_seeds > self.total_seeds:
            raise ValueError("bloomingSeeds cannot exceed totalSeeds")
        return self


class StreakRankingResponse(CamelModel):
    id: str
    username: str
    score: float
    rank: int = Field(..., ge=1)
    current_streak: int = Field(..., ge=0)
    longest_streak: int = Field(..., ge=0)

    @model_validator(mode="after")
    def check_streak(self):
        if self.current_streak > self.longest_streak:
            raise ValueError("currentStreak cannot exceed longestStreak")
        return self


class SeedEntrySubmit(CamelModel):
    id: str = Field(..., min_length=1, max_length=64)
    username: str = Field(..., min_length=1, max_length=50)
    total_seeds: int = Field(..., ge=0)
    blooming_seeds: int = Field(..., ge=0)

    @model_validator(mode="after")
    def check_blooming(self):
        if self.blooming_seeds > self.total_seeds:
            raise ValueError("bloomingSeeds cannot exceed totalSeeds")
        return self


class StreakEntrySubmit(CamelModel):
    id: str = Field(..., min_length=1, max_length=64)
    username: str = Field(..., min_length=1, max_length=50)
    current_streak: int = Field(..., ge=0)
    longest_streak: int = Field(..., ge=0)

    @model_validator(mode="after")
    def check_streak(self):
        if self.current_streak > self.longest_streak:
            raise ValueError("currentStreak cannot exceed longestStreak")
        return self


class UserRankResponse(CamelModel):
    board: str
    rank: int = Field(..., ge=0)
