"""Gardener profile service."""

import logging
from typing import Optional

from manifest_garden.domain.entities import GardenerProfile
from manifest_garden.domain.repositories import IProfileRepository
from manifest_garden.domain.services import IProfileService

logger = logging.getLogger(__name__)

MAX_USERNAME_LENGTH = 50


class ProfileService(IProfileService):

    def __init__(self, profile_repository: IProfileRepository, default_username: str):
        self.profile_repository = profile_repository
        self.default_username = default_username

    async def get_profile(self) -> GardenerProfile:
        return await self.profile_repository.get_or_create(self.default_username)

    async def update_profile(
        self, username: Optional[str] = None, is_premium: Optional[bool] = None
    ) -> GardenerProfile:
        profile = await self.get_profile()
        if username is not None:
            username = username.strip()
            if not username or len(username) > MAX_USERNAME_LENGTH:
                raise ValueError(f"Username must be 1 to {MAX_USERNAME_LENGTH} characters")
            profile.username = username
        if is_premium is not None:
            profile.is_premium = is_premium
        updated = await self.profile_repository.update(profile)
        logger.info("Profile updated: username=%s premium=%s", updated.username, updated.is_premium)
        return updated
