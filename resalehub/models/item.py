from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ItemIn(BaseModel):
    """New inventory item. Prices are in the current display currency.

    Blank brand/category are filled in from the item name on creation.
    """

    name: str
    brand: Optional[str] = None
    category: Optional[str] = None
    purchase_price: float = Field(0.0, ge=0)
    listing_price: Optional[float] = Field(None, ge=0)
    notes: Optional[str] = Field(None, max_length=500)

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name cannot be empty")
        if len(v) > 200:
            raise ValueError("name must be at most 200 characters")
        return v

    @field_validator("brand", "category")
    @classmethod
    def _strip_labels(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        return v.strip() or None


class ItemOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    brand: str
    category: str
    purchase_price: float
    listing_price: Optional[float] = None
    notes: Optional[str] = None
    currency: str
    created_at: datetime
    updated_at: datetime


class ItemNameIn(BaseModel):
    name: str = Field(..., max_length=200)


class ParsedItemNameOut(BaseModel):
    detected_brand: str
    detected_category: str
