# backend/modules/catalog/schemas/catalog_schemas.py

from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime


# Item type schemas
class ItemTypeBase(BaseModel):
    name: str = Field(..., max_length=100)
    display_name: str = Field(default="", max_length=200)


class ItemTypeCreate(ItemTypeBase):
    pass


class ItemTypeUpdate(BaseModel):
    name: Optional[str] = Field(None, max_length=100)
    display_name: Optional[str] = Field(None, max_length=200)


class ItemTypeOut(ItemTypeBase):
    id: str
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


# Item schemas
class ItemBase(BaseModel):
    name: str = Field(..., max_length=200)
    abbreviation: str = Field(default="", max_length=50)
    price: int = Field(..., ge=0, description="Price in minor currency units")
    key: str = Field(default="", max_length=50)
    item_type_id: str
    assignee: Optional[str] = Field(None, max_length=100)


class ItemCreate(ItemBase):
    pass


class ItemUpdate(BaseModel):
    """Partial update; fields left out of the request keep their value"""

    name: Optional[str] = Field(None, max_length=200)
    abbreviation: Optional[str] = Field(None, max_length=50)
    price: Optional[int] = Field(None, ge=0)
    key: Optional[str] = Field(None, max_length=50)
    item_type_id: Optional[str] = None
    assignee: Optional[str] = Field(
        None, max_length=100, description="Empty string clears the assignee"
    )


class ItemOut(ItemBase):
    id: str
    created_at: datetime
    updated_at: datetime
    item_type: Optional[ItemTypeOut] = None

    class Config:
        from_attributes = True
