"""Gratitude journal routes."""

from typing import Annotated, Optional

from fastapi import APIRouter, Depends, HTTPException, status

from manifest_garden.api.schemas import JournalEntryCreate, JournalEntryResponse, JournalEntryUpdate
from manifest_garden.core.dependencies import get_journal_service
from manifest_garden.domain.services import IJournalService

router = APIRouter(prefix="/journal", tags=["journal"])


@router.get("/", response_model=list[JournalEntryResponse])
async def list_entries(
    journal_service: Annotated[IJournalService, Depends(get_journal_service)],
) -> list[JournalEntryResponse]:
    """All entries, newest first."""
    return [JournalEntryResponse.model_validate(e) for e in await journal_service.list_entries()]


@router.get("/today", response_model=Optional[JournalEntryResponse])
async def today_entry(
    journal_service: Annotated[IJournalService, Depends(get_journal_service)],
) -> Optional[JournalEntryResponse]:
    """Today's entry, or ``null`` when nothing has been written yet."""
    entry = await journal_service.today_entry()
    return JournalEntryResponse.model_validate(entry) if entry else None


@router.get("/{entry_id}", response_model=JournalEntryResponse)
async def get_entry(
    entry_id: str,
    journal_service: Annotated[IJournalService, Depends(get_journal_service)],
) -> JournalEntryResponse:
    entry = await journal_service.get_entry(entry_id)
    if not entry:
        raise HTTPException(status_code=404, detail="Journal entry not found")
    return JournalEntryResponse.model_validate(entry)


@router.post("/", response_model=JournalEntryResponse, status_code=status.HTTP_201_CREATED)
async def add_entry(
    body: JournalEntryCreate,
    journal_service: Annotated[IJournalService, Depends(get_journal_service)],
) -> JournalEntryResponse:
    entry = await journal_service.add_entry(
        day=body.date,
        gratitude=body.gratitude,
        thoughts=body.thoughts,
        mood=body.mood,
    )
    return JournalEntryResponse.model_validate(entry)


@router.patch("/{entry_id}", response_model=JournalEntryResponse)
async def update_entry(
    entry_id: str,
    body: JournalEntryUpdate,
    journal_service: Annotated[IJournalService, Depends(get_journal_service)],
) -> JournalEntryResponse:
    entry = await journal_service.update_entry(
        entry_id,
        day=body.date,
        gratitude=body.gratitude,
        thoughts=body.thoughts,
        mood=body.mood,
    )
    if not entry:
        raise HTTPException(status_code=404, detail="Journal entry not found")
    return JournalEntryResponse.model_validate(entry)


@router.delete("/{entry_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_entry(
    entry_id: str,
    journal_service: Annotated[IJournalService, Depends(get_journal_service)],
) -> None:
    if not await journal_service.delete_entry(entry_id):
        raise HTTPException(status_code=404, detail="Journal entry not found")
