# backend/modules/catalog/routes/catalog_routes.py

from fastapi import APIRouter, Depends, Query, status
from typing import List, Optional

from core.store import Store, get_store
from ..services.catalog_service import CatalogService
from ..schemas.catalog_schemas import (
    ItemCreate,
    ItemOut,
    ItemTypeCreate,
    ItemTypeOut,
    ItemTypeUpdate,
    ItemUpdate,
)


router = APIRouter(tags=["Catalog"])


def get_catalog_service(store: Store = Depends(get_store)) -> CatalogService:
    """Dependency to get catalog service instance"""
    return CatalogService(store)


# Item types
@router.get("/item-types", response_model=List[ItemTypeOut])
async def list_item_types(
    catalog_service: CatalogService = Depends(get_catalog_service),
):
    """List live item types ordered by name"""
    return catalog_service.list_item_types()


@router.post(
    "/item-types", response_model=ItemTypeOut, status_code=status.HTTP_201_CREATED
)
async def create_item_type(
    item_type_data: ItemTypeCreate,
    catalog_service: CatalogService = Depends(get_catalog_service),
):
    return catalog_service.create_item_type(item_type_data)


@router.get("/item-types/{item_type_id}", response_model=ItemTypeOut)
async def get_item_type(
    item_type_id: str,
    catalog_service: CatalogService = Depends(get_catalog_service),
):
    return catalog_service.get_item_type(item_type_id)


@router.put("/item-types/{item_type_id}", response_model=ItemTypeOut)
async def update_item_type(
    item_type_id: str,
    item_type_data: ItemTypeUpdate,
    catalog_service: CatalogService = Depends(get_catalog_service),
):
    return catalog_service.update_item_type(item_type_id, item_type_data)


@router.delete("/item-types/{item_type_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_item_type(
    item_type_id: str,
    catalog_service: CatalogService = Depends(get_catalog_service),
):
    """Soft delete an item type that has no live items"""
    catalog_service.delete_item_type(item_type_id)


# Items
@router.get("/items", response_model=List[ItemOut])
async def list_items(
    item_type_id: Optional[str] = Query(None, description="Filter by item type"),
    catalog_service: CatalogService = Depends(get_catalog_service),
):
    """List live items ordered by name"""
    return catalog_service.list_items(item_type_id)


@router.post("/items", response_model=ItemOut, status_code=status.HTTP_201_CREATED)
async def create_item(
    item_data: ItemCreate,
    catalog_service: CatalogService = Depends(get_catalog_service),
):
    return catalog_service.create_item(item_data)


@router.get("/items/{item_id}", response_model=ItemOut)
async def get_item(
    item_id: str,
    catalog_service: CatalogService = Depends(get_catalog_service),
):
    return catalog_service.get_item(item_id)


@router.put("/items/{item_id}", response_model=ItemOut)
async def update_item(
    item_id: str,
    item_data: ItemUpdate,
    catalog_service: CatalogService = Depends(get_catalog_service),
):
    """Partially update an item; omitted fields are left unchanged"""
    return catalog_service.update_item(item_id, item_data)


@router.delete("/items/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_item(
    item_id: str,
    catalog_service: CatalogService = Depends(get_catalog_service),
):
    catalog_service.delete_item(item_id)
