"""Dependency injection container."""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from manifest_garden.core.config import settings
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
from manifest_garden.domain.services import (
    IBookService,
    ICommunityService,
    IInventoryService,
    IJournalService,
    IProfileService,
    IQuestService,
    IRankingService,
    IWeeklyManifestationService,
)
from manifest_garden.infrastructure.database.connection import get_db
from manifest_garden.infrastructure.database.repository import (
    BookRepository,
    InventoryRepository,
    JournalRepository,
    ProfileRepository,
    QuestRepository,
    RankingRepository,
    SeedRepository,
    SharedManifestationRepository,
    WeeklyManifestationRepository,
)
from manifest_garden.services.book_service import BookService
from manifest_garden.services.community_service import CommunityService
from manifest_garden.services.inventory_service import InventoryService
from manifest_garden.services.journal_service import JournalService
from manifest_garden.services.profile_service import ProfileService
from manifest_garden.services.quest_service import QuestService
from manifest_garden.services.ranking_service import RankingService
from manifest_garden.services.weekly_manifestation_service import WeeklyManifestationService


# ---------------------------------------------------------------------------
# Repository providers
# ---------------------------------------------------------------------------
async def get_profile_repository(session: AsyncSession = Depends(get_db)) -> IProfileRepository:
    return ProfileRepository(session)


async def get_book_repository(session: AsyncSession = Depends(get_db)) -> IBookRepository:
    return BookRepository(session)


async def get_shared_repository(
    session: AsyncSession = Depends(get_db),
) -> ISharedManifestationRepository:
    return SharedManifestationRepository(session)


async def get_weekly_repository(
    session: AsyncSession = Depends(get_db),
) -> IWeeklyManifestationRepository:
    return WeeklyManifestationRepository(session)


async def get_inventory_repository(session: AsyncSession = Depends(get_db)) -> IInventoryRepository:
    return InventoryRepository(session)


async def get_seed_repository(session: AsyncSession = Depends(get_db)) -> ISeedRepository:
    return SeedRepository(session)


async def get_journal_repository(session: AsyncSession = Depends(get_db)) -> IJournalRepository:
    return JournalRepository(session)


async def get_quest_repository(session: AsyncSession = Depends(get_db)) -> IQuestRepository:
    return QuestRepository(session)


async def get_ranking_repository(session: AsyncSession = Depends(get_db)) -> IRankingRepository:
    return RankingRepository(session)


# ---------------------------------------------------------------------------
# Service providers
# ---------------------------------------------------------------------------
async def get_profile_service(
    profile_repo: IProfileRepository = Depends(get_profile_repository),
) -> IProfileService:
    return ProfileService(profile_repository=profile_repo, default_username=settings.default_username)


async def get_book_service(
    book_repo: IBookRepository = Depends(get_book_repository),
    profile_repo: IProfileRepository = Depends(get_profile_repository),
) -> IBookService:
    """Get book service with dependencies."""
    return BookService(
        book_repository=book_repo,
        profile_repository=profile_repo,
        default_username=settings.default_username,
    )


async def get_community_service(
    shared_repo: ISharedManifestationRepository = Depends(get_shared_repository),
    profile_repo: IProfileRepository = Depends(get_profile_repository),
) -> ICommunityService:
    return CommunityService(
        shared_repository=shared_repo,
        profile_repository=profile_repo,
        default_username=settings.default_username,
    )


async def get_weekly_manifestation_service(
    weekly_repo: IWeeklyManifestationRepository = Depends(get_weekly_repository),
    inventory_repo: IInventoryRepository = Depends(get_inventory_repository),
    profile_repo: IProfileRepository = Depends(get_profile_repository),
) -> IWeeklyManifestationService:
    return WeeklyManifestationService(
        weekly_repository=weekly_repo,
        inventory_repository=inventory_repo,
        profile_repository=profile_repo,
        default_username=settings.default_username,
    )


async def get_inventory_service(
    inventory_repo: IInventoryRepository = Depends(get_inventory_repository),
    seed_repo: ISeedRepository = Depends(get_seed_repository),
) -> IInventoryService:
    return InventoryService(inventory_repository=inventory_repo, seed_repository=seed_repo)


async def get_journal_service(
    journal_repo: IJournalRepository = Depends(get_journal_repository),
) -> IJournalService:
    return JournalService(journal_repository=journal_repo)


async def get_quest_service(
    quest_repo: IQuestRepository = Depends(get_quest_repository),
) -> IQuestService:
    return QuestService(quest_repository=quest_repo)


async def get_ranking_service(
    ranking_repo: IRankingRepository = Depends(get_ranking_repository),
    profile_repo: IProfileRepository = Depends(get_profile_repository),
    inventory_repo: IInventoryRepository = Depends(get_inventory_repository),
) -> IRankingService:
    return RankingService(
        ranking_repository=ranking_repo,
        profile_repository=profile_repo,
        inventory_repository=inventory_repo,
        default_username=settings.default_username,
    )
