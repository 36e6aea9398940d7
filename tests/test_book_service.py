from datetime import datetime, timedelta

import pytest

from manifest_garden.services.book_service import BookService

NOW = datetime(2024, 3, 4, 12, 0, 0)


@pytest.fixture
def book_service(book_repo, profile_repo):
    return BookService(book_repo, profile_repo, "Dreamer")


async def test_list_books_by_ownership(book_service):
    assert len(await book_service.list_books()) == 3
    await book_service.purchase_book("success-virus", now=NOW)
    owned = await book_service.list_purchased()
    assert [b.id for b in owned] == ["success-virus"]
    assert "success-virus" not in {b.id for b in await book_service.list_available()}
    assert len(await book_service.list_books(purchased=False)) == 2


async def test_purchase_records_time_on_profile(book_service, profile_repo):
    book = await book_service.purchase_book("success-virus", now=NOW)
    assert book.is_purchased is True
    profile = await profile_repo.get_or_create("Dreamer")
    assert profile.last_book_purchase_at == NOW


async def test_purchase_twice_is_rejected(book_service):
    await book_service.purchase_book("success-virus", now=NOW)
    with pytest.raises(ValueError):
        await book_service.purchase_book("success-virus", now=NOW)


async def test_purchase_unknown_book(book_service):
    assert await book_service.purchase_book("missing", now=NOW) is None


async def test_price_without_discounts(book_service):
    book = await book_service.get_book("manifestation-mastery")
    assert await book_service.get_price(book, now=NOW) == pytest.approx(22.2)


async def test_premium_discount(book_service, profile_repo):
    profile = await profile_repo.get_or_create("Dreamer")
    profile.is_premium = True
    await profile_repo.update(profile)
    book = await book_service.get_book("manifestation-mastery")
    assert await book_service.get_price(book, now=NOW) == pytest.approx(16.65, abs=0.01)


async def test_recent_purchase_discount_stacks_with_premium(book_service, profile_repo):
    profile = await profile_repo.get_or_create("Dreamer")
    profile.is_premium = True
    await profile_repo.update(profile)
    await book_service.purchase_book("success-virus", now=NOW)

    book = await book_service.get_book("manifestation-mastery")
    assert await book_service.has_recent_purchase(now=NOW + timedelta(minutes=4))
    assert await book_service.get_price(book, now=NOW + timedelta(minutes=4)) == pytest.approx(12.49, abs=0.01)


async def test_recent_purchase_window_closes(book_service):
    await book_service.purchase_book("success-virus", now=NOW)
    later = NOW + timedelta(minutes=5)
    assert not await book_service.has_recent_purchase(now=later)
    book = await book_service.get_book("spiritual-awakening")
    assert await book_service.get_price(book, now=later) == pytest.approx(22.2)


async def test_reading_requires_purchase(book_service):
    with pytest.raises(ValueError):
        await book_service.update_reading_progress("success-virus", 10)


async def test_reading_progress_range(book_service):
    await book_service.purchase_book("success-virus", now=NOW)
    with pytest.raises(ValueError):
        await book_service.update_reading_progress("success-virus", 101)
    with pytest.raises(ValueError):
        await book_service.update_reading_progress("success-virus", -1)
    book = await book_service.update_reading_progress("success-virus", 40)
    assert book.reading_progress == 40
    assert await book_service.update_reading_progress("missing", 40) is None


async def test_turn_to_page_sets_progress(book_service):
    await book_service.purchase_book("success-virus", now=NOW)
    book = await book_service.turn_to_page("success-virus", 1)
    assert book.reading_progress == 67
    assert book_service.current_page_index(book) == 2

    book = await book_service.turn_to_page("success-virus", 0)
    assert book.reading_progress == 33
    assert book_service.current_page_index(book) == 0


async def test_turn_to_page_clamps(book_service):
    await book_service.purchase_book("success-virus", now=NOW)
    book = await book_service.turn_to_page("success-virus", 10)
    assert book.reading_progress == 100
    assert book_service.current_page_index(book) == 2
    book = await book_service.turn_to_page("success-virus", -3)
    assert book.reading_progress == 33
