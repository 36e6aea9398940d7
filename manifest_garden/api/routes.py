"""Book API routes (catalog, purchase, reading progress)."""

import logging
from typing import Annotated, Optional

from fastapi import APIRouter, Depends, HTTPException

from manifest_garden.api.schemas import (
    BookResponse,
    PageTurnRequest,
    PurchaseStatusResponse,
    ReadingProgressRequest,
)
from manifest_garden.core.dependencies import get_book_service
from manifest_garden.domain.entities import Book
from manifest_garden.domain.services import IBookService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/books", tags=["books"])


async def _to_response(book: Book, book_service: IBookService) -> BookResponse:
    response = BookResponse.model_validate(book)
    response.effective_price = await book_service.get_price(book)
    response.current_page_index = book_service.current_page_index(book)
    return response


@router.get("/", response_model=list[BookResponse])
async def list_books(
    book_service: Annotated[IBookService, Depends(get_book_service)],
    purchased: Optional[bool] = None,
) -> list[BookResponse]:
    """List the catalog, optionally only owned (``purchased=true``) or unowned books."""
    books = await book_service.list_books(purchased=purchased)
    return [await _to_response(b, book_service) for b in books]


@router.get("/purchase-status", response_model=PurchaseStatusResponse)
async def purchase_status(
    book_service: Annotated[IBookService, Depends(get_book_service)],
) -> PurchaseStatusResponse:
    return PurchaseStatusResponse(has_recent_purchase=await book_service.has_recent_purchase())


@router.get("/{book_id}", response_model=BookResponse)
async def get_book(
    book_id: str,
    book_service: Annotated[IBookService, Depends(get_book_service)],
) -> BookResponse:
    """Get a book by ID."""
    book = await book_service.get_book(book_id)
    if not book:
        raise HTTPException(status_code=404, detail="Book not found")
    return await _to_response(book, book_service)


@router.post("/{book_id}/purchase", response_model=BookResponse)
async def purchase_book(
    book_id: str,
    book_service: Annotated[IBookService, Depends(get_book_service)],
) -> BookResponse:
    try:
        book = await book_service.purchase_book(book_id)
    except ValueError as e:
        logger.warning(f"Rejected purchase of book {book_id}: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    if not book:
        raise HTTPException(status_code=404, detail="Book not found")
    return await _to_response(book, book_service)


@router.put("/{book_id}/progress", response_model=BookResponse)
async def update_reading_progress(
    book_id: str,
    body: ReadingProgressRequest,
    book_service: Annotated[IBookService, Depends(get_book_service)],
) -> BookResponse:
    try:
        book = await book_service.update_reading_progress(book_id, body.progress)
    except ValueError as e:
        logger.warning(f"Rejected reading progress for book {book_id}: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    if not book:
        raise HTTPException(status_code=404, detail="Book not found")
    return await _to_response(book, book_service)


@router.put("/{book_id}/page", response_model=BookResponse)
async def turn_to_page(
    book_id: str,
    body: PageTurnRequest,
    book_service: Annotated[IBookService, Depends(get_book_service)],
) -> BookResponse:
    """Move the reader to a page; progress becomes the share of pages read."""
    try:
        book = await book_service.turn_to_page(book_id, body.page_index)
    except ValueError as e:
        logger.warning(f"Rejected page turn for book {book_id}: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    if not book:
        raise HTTPException(status_code=404, detail="Book not found")
    return await _to_response(book, book_service)
