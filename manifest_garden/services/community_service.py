"""Community feed of shared manifestations."""

import logging
from datetime import datetime
from typing import Optional
from uuid import uuid4

from manifest_garden.core.dates import to_naive_utc, utcnow
from manifest_garden.domain.entities import ManifestationCategory, SeedRarity, SharedManifestation
from manifest_garden.domain.repositories import IProfileRepository, ISharedManifestationRepository
from manifest_garden.domain.services import ICommunityService

logger = logging.getLogger(__name__)


class CommunityService(ICommunityService):

    def __init__(
        self,
        shared_repository: ISharedManifestationRepository,
        profile_repository: IProfileRepository,
        default_username: str,
    ):
        self.shared_repository = shared_repository
        self.profile_repository = profile_repository
        self.default_username = default_username

    async def share(
        self,
        intention: str,
        category: ManifestationCategory,
        color: str,
        rarity: SeedRarity,
    ) -> SharedManifestation:
        intention = intention.strip()
        if not intention:
            raise ValueError("Intention cannot be empty")
        profile = await self.profile_repository.get_or_create(self.default_username)
        shared = SharedManifestation(
            id=f"user_{uuid4().hex}",
            username=profile.username,
            intention=intention,
            category=category,
            color=color,
            rarity=rarity,
            likes=0,
            liked_by_user=False,
            shared_at=utcnow(),
        )
        created = await self.shared_repository.create(shared)
        logger.info("Manifestation shared by %s: %s", created.username, created.id)
        return created

    async def feed(self) -> list[SharedManifestation]:
        return await self.shared_repository.list_all()

    async def my_shared(self) -> list[SharedManifestation]:
        return await self.shared_repository.list_all(own_only=True)

    async def toggle_like(self, shared_id: str) -> Optional[SharedManifestation]:
        shared = await self.shared_repository.get_by_id(shared_id)
        if not shared:
            return None
        return await self.shared_repository.set_liked(shared_id, not shared.liked_by_user)

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
        """Add a post from another gardener to the feed."""
        if likes < 0:
            raise ValueError("Likes cannot be negative")
        shared = SharedManifestation(
            id=f"shared_{uuid4().hex}",
            username=username,
            intention=intention,
            category=category,
            color=color,
            rarity=rarity,
            likes=likes,
            liked_by_user=False,
            shared_at=to_naive_utc(shared_at) if shared_at else utcnow(),
        )
        created = await self.shared_repository.create(shared, own=False)
        logger.info("Received manifestation from %s: %s", username, created.id)
        return created
