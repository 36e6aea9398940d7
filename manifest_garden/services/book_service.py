"""Book service with business logic."""

import logging
import math
from datetime import datetime, timedelta
from typing import Optional

from manifest_garden.core.dates import utcnow
from manifest_garden.domain.entities import Book
from manifest_garden.domain.repositories import IBookRepository, IProfileRepository
from manifest_garden.domain.services import IBookService

logger = logging.getLogger(__name__)

PREMIUM_DISCOUNT = 0.75
RECENT_PURCHASE_DISCOUNT = 0.75
RECENT_PURCHASE_WINDOW = timedelta(minutes=5)


class BookService(IBookService):
    """Book library: catalog, purchases and reading progress."""

    def __init__(
        self,
        book_repository: IBookRepository,
        profile_repository: IProfileRepository,
        default_username: str,
    ):
        self.book_repository = book_repository
        self.profile_repository = profile_repository
        self.default_username = default_username

    async def list_books(self, purchased: Optional[bool] = None) -> list[Book]:
        return await self.book_repository.list_all(purchased=purchased)

    async def list_purchased(self) -> list[Book]:
        return await self.list_books(purchased=True)

    async def list_available(self) -> list[Book]:
        return await self.list_books(purchased=False)

    async def get_book(self, book_id: str) -> Optional[Book]:
        return await self.book_repository.get_by_id(book_id)

    async def purchase_book(self, book_id: str, now: Optional[datetime] = None) -> Optional[Book]:
        """Add a book to the gardener's library.

        Payment happens in the app store; this only records the outcome.  The
        purchase time is kept on the profile because it unlocks the
        recent-purchase discount for the next few minutes.
        """
        book = await self.book_repository.get_by_id(book_id)
        if not book:
            return None
        if book.is_purchased:
            raise ValueError("Book already purchased")

        updated = await self.book_repository.update_state(book_id, True, book.reading_progress)
        profile = await self.profile_repository.get_or_create(self.default_username)
        profile.last_book_purchase_at = now or utcnow()
        await self.profile_repository.update(profile)
        logger.info("Book purchased: %s", book_id)
        return updated

    async def get_price(self, book: Book, now: Optional[datetime] = None) -> float:
        profile = await self.profile_repository.get_or_create(self.default_username)
        price = book.price
        if profile.is_premium:
            price *= PREMIUM_DISCOUNT
        if self._is_recent(profile.last_book_purchase_at, now):
            price *= RECENT_PURCHASE_DISCOUNT
        return round(price, 2)

    async def has_recent_purchase(self, now: Optional[datetime] = None) -> bool:
        profile = await self.profile_repository.get_or_create(self.default_username)
        return self._is_recent(profile.last_book_purchase_at, now)

    async def update_reading_progress(self, book_id: str, progress: float) -> Optional[Book]:
        if not 0 <= progress <= 100:
            raise ValueError("Reading progress must be between 0 and 100")
        book = await self.book_repository.get_by_id(book_id)
        if not book:
            return None
        if not book.is_purchased:
            raise ValueError("Book must be purchased before reading")
        return await self.book_repository.update_state(book_id, book.is_purchased, progress)

    async def turn_to_page(self, book_id: str, page_index: int) -> Optional[Book]:
        """Record that the reader is on *page_index* (0-based, clamped)."""
        book = await self.book_repository.get_by_id(book_id)
        if not book:
            return None
        if not book.pages:
            raise ValueError("Book has no pages")
        page_index = min(max(page_index, 0), len(book.pages) - 1)
        progress = round((page_index + 1) / len(book.pages) * 100)
        return await self.update_reading_progress(book_id, progress)

    @staticmethod
    def current_page_index(book: Book) -> int:
        if not book.pages:
            return 0
        index = math.floor(book.reading_progress / 100 * len(book.pages))
        return min(index, len(book.pages) - 1)

    @staticmethod
    def _is_recent(purchased_at: Optional[datetime], now: Optional[datetime]) -> bool:
        if purchased_at is None:
            return False
        return (now or utcnow()) - purchased_at < RECENT_PURCHASE_WINDOW
