"""SQLAlchemy database models."""

from sqlalchemy import (
    JSON,
    Boolean,
    Column,
    Date,
    DateTime,
    Float,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
)
from sqlalchemy.orm import DeclarativeBase, relationship

from manifest_garden.core.dates import utcnow

# Single-row tables use this fixed primary key
SINGLETON_ID = 1


class Base(DeclarativeBase):
    pass


class GardenerProfileModel(Base):
    __tablename__ = "gardener_profile"

    id = Column(Integer, primary_key=True, default=SINGLETON_ID)
    username = Column(String(50), nullable=False)
    is_premium = Column(Boolean, default=False, nullable=False)
    last_book_purchase_at = Column(DateTime, nullable=True)
    current_streak = Column(Integer, default=0, nullable=False)
    longest_streak = Column(Integer, default=0, nullable=False)
    last_check_in = Column(Date, nullable=True)


class BookModel(Base):
    __tablename__ = "books"

    id = Column(String(64), primary_key=True)
    title = Column(String(255), nullable=False)
    author = Column(String(255), nullable=False)
    description = Column(Text, nullable=False, default="")
    cover_url = Column(String(512), nullable=False, default="")
    price = Column(Float, nullable=False)
    category = Column(String(20), nullable=False, index=True)
    is_purchased = Column(Boolean, default=False, nullable=False)
    reading_progress = Column(Float, default=0.0, nullable=False)

    pages = relationship(
        "BookPageModel",
        back_populates="book",
        lazy="selectin",
        cascade="all, delete-orphan",
        order_by="BookPageModel.page_number",
    )


class BookPageModel(Base):
    __tablename__ = "book_pages"

    book_id = Column(String(64), ForeignKey("books.id"), primary_key=True)
    id = Column(String(64), primary_key=True)
    page_number = Column(Integer, nullable=False)
    content = Column(Text, nullable=False)

    book = relationship("BookModel", back_populates="pages")


class SharedManifestationModel(Base):
    __tablename__ = "shared_manifestations"
    __table_args__ = (Index("ix_shared_shared_at", "shared_at"),)

    id = Column(String(64), primary_key=True)
    username = Column(String(50), nullable=False, index=True)
    intention = Column(Text, nullable=False)
    category = Column(String(20), nullable=False)
    color = Column(String(20), nullable=False)
    rarity = Column(String(20), nullable=False)
    likes = Column(Integer, default=0, nullable=False)
    shared_at = Column(DateTime, default=utcnow, nullable=False)
    is_own = Column(Boolean, default=False, nullable=False)  # authored on this garden


class LikedManifestationModel(Base):
    """Ids the local gardener has liked."""

    __tablename__ = "liked_manifestations"

    shared_id = Column(String(64), ForeignKey("shared_manifestations.id"), primary_key=True)
    liked_at = Column(DateTime, default=utcnow, nullable=False)


class WeeklyManifestationModel(Base):
    __tablename__ = "weekly_manifestations"

    id = Column(String(64), primary_key=True)
    text = Column(Text, nullable=False)
    category = Column(String(50), nullable=False)
    week_start = Column(Date, nullable=False, index=True)
    used = Column(Boolean, default=False, nullable=False)
    position = Column(Integer, nullable=False, default=0)  # order within the rotation


class WeeklyManifestationStateModel(Base):
    __tablename__ = "weekly_manifestation_state"

    id = Column(Integer, primary_key=True, default=SINGLETON_ID)
    last_generated_week = Column(Date, nullable=True)
    extra_slots = Column(Integer, default=0, nullable=False)


class InventoryItemModel(Base):
    __tablename__ = "inventory_items"
    __table_args__ = (Index("ix_inventory_category_stage", "category", "stage"),)

    id = Column(String(64), primary_key=True)
    intention = Column(Text, nullable=False)
    category = Column(String(20), nullable=False)
    stage = Column(String(20), nullable=False)
    color = Column(String(20), nullable=False)
    collected_at = Column(DateTime, default=utcnow, nullable=False)


class SeedModel(Base):
    __tablename__ = "seeds"

    id = Column(String(64), primary_key=True)
    rarity = Column(String(20), nullable=False, index=True)
    acquired_at = Column(DateTime, default=utcnow, nullable=False)


class JournalEntryModel(Base):
    __tablename__ = "journal_entries"

    id = Column(String(64), primary_key=True)
    date = Column(Date, nullable=False, index=True)
    gratitude = Column(JSON, default=list, nullable=False)  # ordered list of statements
    thoughts = Column(Text, default="", nullable=False)
    mood = Column(String(20), nullable=False)
    created_at = Column(DateTime, default=utcnow, nullable=False)


class DailyQuestModel(Base):
    __tablename__ = "daily_quests"

    id = Column(String(64), primary_key=True)
    position = Column(Integer, nullable=False, default=0)  # order within the daily set
    title = Column(String(100), nullable=False)
    description = Column(String(255), nullable=False)
    type = Column(String(20), nullable=False, index=True)
    target_value = Column(Integer, nullable=False)
    current_value = Column(Integer, default=0, nullable=False)
    completed = Column(Boolean, default=False, nullable=False)
    completed_at = Column(DateTime, nullable=True)
    reward_gems = Column(Integer, nullable=False)
    reward_energy = Column(Integer, nullable=True)
    expires_at = Column(DateTime, nullable=False)


class SeedRankingModel(Base):
    __tablename__ = "seed_rankings"

    id = Column(String(64), primary_key=True)
    username = Column(String(50), nullable=False)
    score = Column(Float, nullable=False, default=0.0)
    rank = Column(Integer, nullable=False, index=True)
    total_seeds = Column(Integer, default=0, nullable=False)
    blooming_seeds = Column(Integer, default=0, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)


class StreakRankingModel(Base):
    __tablename__ = "streak_rankings"

    id = Column(String(64), primary_key=True)
    username = Column(String(50), nullable=False)
    score = Column(Float, nullable=False, default=0.0)
    rank = Column(Integer, nullable=False, index=True)
    current_streak = Column(Integer, default=0, nullable=False)
    longest_streak = Column(Integer, default=0, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)
