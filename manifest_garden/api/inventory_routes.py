"""Inventory and seed routes."""

from typing import Annotated, Optional

from fastapi import APIRouter, Depends, HTTPException, status

from manifest_garden.api.schemas import (
    InventoryItemCreate,
    InventoryItemResponse,
    InventoryStatsResponse,
    SeedCountsResponse,
    SeedCreate,
    SeedResponse,
)
from manifest_garden.core.dependencies import get_inventory_service
from manifest_garden.domain.entities import GrowthStage, ManifestationCategory, SeedRarity
from manifest_garden.domain.services import IInventoryService

router = APIRouter(prefix="/inventory", tags=["inventory"])
seed_router = APIRouter(prefix="/seeds", tags=["seeds"])


# ---------------------------------------------------------------------------
# Inventory
# ---------------------------------------------------------------------------
@router.get("/", response_model=list[InventoryItemResponse])
async def list_items(
    inventory_service: Annotated[IInventoryService, Depends(get_inventory_service)],
    category: Optional[ManifestationCategory] = None,
    stage: Optional[GrowthStage] = None,
) -> list[InventoryItemResponse]:
    items = await inventory_service.list_items(category=category, stage=stage)
    return [InventoryItemResponse.model_validate(i) for i in items]


@router.get("/stats", response_model=InventoryStatsResponse)
async def stats(
    inventory_service: Annotated[IInventoryService, Depends(get_inventory_service)],
) -> InventoryStatsResponse:
    return InventoryStatsResponse(
        total_seeds=await inventory_service.total_seeds(),
        blooming_seeds=await inventory_service.blooming_seeds(),
    )


@router.post("/", response_model=InventoryItemResponse, status_code=status.HTTP_201_CREATED)
async def add_item(
    body: InventoryItemCreate,
    inventory_service: Annotated[IInventoryService, Depends(get_inventory_service)],
) -> InventoryItemResponse:
    item = await inventory_service.add_item(
        intention=body.intention,
        category=body.category,
        stage=body.stage,
        color=body.color,
    )
    return InventoryItemResponse.model_validate(item)


@router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_item(
    item_id: str,
    inventory_service: Annotated[IInventoryService, Depends(get_inventory_service)],
) -> None:
    if not await inventory_service.remove_item(item_id):
        raise HTTPException(status_code=404, detail="Inventory item not found")


# ---------------------------------------------------------------------------
# Seeds
# ---------------------------------------------------------------------------
@seed_router.get("/", response_model=list[SeedResponse])
async def list_seeds(
    inventory_service: Annotated[IInventoryService, Depends(get_inventory_service)],
    rarity: Optional[SeedRarity] = None,
) -> list[SeedResponse]:
    return [SeedResponse.model_validate(s) for s in await inventory_service.list_seeds(rarity=rarity)]


@seed_router.get("/counts", response_model=SeedCountsResponse)
async def count_seeds(
    inventory_service: Annotated[IInventoryService, Depends(get_inventory_service)],
) -> SeedCountsResponse:
    counts = await inventory_service.count_seeds_by_rarity()
    return SeedCountsResponse(counts=counts, total=sum(counts.values()))


@seed_router.post("/", response_model=SeedResponse, status_code=status.HTTP_201_CREATED)
async def acquire_seed(
    body: SeedCreate,
    inventory_service: Annotated[IInventoryService, Depends(get_inventory_service)],
) -> SeedResponse:
    """Add a seed; without a rarity one is rolled from the drop table."""
    return SeedResponse.model_validate(await inventory_service.acquire_seed(rarity=body.rarity))


@seed_router.delete("/{seed_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_seed(
    seed_id: str,
    inventory_service: Annotated[IInventoryService, Depends(get_inventory_service)],
) -> None:
    if not await inventory_service.remove_seed(seed_id):
        raise HTTPException(status_code=404, detail="Seed not found")
