from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response, status

from resalehub.db.dal import Database
from resalehub.models.item import ItemIn, ItemNameIn, ItemOut, ParsedItemNameOut
from resalehub.routers.deps import get_app_settings, get_db
from resalehub.services import app_settings
from resalehub.services.classifier import auto_detect, parse_item_name
from resalehub.services.inventory import create_item
from resalehub.services.pricing import price_view
from resalehub.services.rates.exchange import normalize_currency

router = APIRouter(prefix="/items", tags=["items"])


def _parse_ts(raw):
    if isinstance(raw, str):
        return datetime.fromisoformat(raw.replace("Z", ""))
    return raw


def _row_to_item(row: dict, currency: str) -> ItemOut:
    return ItemOut(
        id=int(row["id"]),
        name=row["name"],
        brand=row.get("brand") or "",
        category=row.get("category") or "",
        purchase_price=float(row["purchase_price"]),
        listing_price=float(row["listing_price"])
        if row.get("listing_price") is not None
        else None,
        notes=row.get("notes"),
        currency=row.get("currency", currency),
        created_at=_parse_ts(row["created_at"]),
        updated_at=_parse_ts(row["updated_at"]),
    )


# Detection ---------------------------------------------------------


@router.post(
    "/parse-name",
    response_model=ParsedItemNameOut,
    summary="Detect brand and category from an item name",
)
async def parse_name(payload: ItemNameIn):
    parsed = parse_item_name(payload.name)
    return ParsedItemNameOut(**parsed.as_dict())


@router.post(
    "/auto-detect",
    response_model=ParsedItemNameOut,
    responses={204: {"description": "Nothing to suggest"}},
    summary="As-you-type suggestion; 204 when input is too short or unmatched",
)
async def auto_detect_name(payload: ItemNameIn, request: Request):
    min_length = get_app_settings(request).auto_detect_min_length
    parsed = auto_detect(payload.name, min_length=min_length)
    if parsed is None:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return ParsedItemNameOut(**parsed.as_dict())


# CRUD --------------------------------------------------------------


@router.post(
    "/",
    response_model=ItemOut,
    status_code=status.HTTP_201_CREATED,
    summary="Add an inventory item",
)
async def add_item(payload: ItemIn, db: Database = Depends(get_db)):
    item_id = create_item(db, payload)
    row = db.get_item(item_id)
    if not row:
        raise HTTPException(status_code=500, detail="item not found after insert")
    return _row_to_item(row, app_settings.get_currency(db))


@router.get("/", response_model=List[ItemOut], summary="List inventory items")
async def list_items(
    category: Optional[str] = Query(None, description="Filter by category label"),
    brand: Optional[str] = Query(None, description="Filter by brand"),
    currency: Optional[str] = Query(
        None, description="Show prices converted to this currency (storage unchanged)"
    ),
    db: Database = Depends(get_db),
):
    if currency:
        currency = normalize_currency(currency)
    stored_currency = app_settings.get_currency(db)
    rows = db.list_items(category=category, brand=brand)
    if currency:
        rows = [price_view(r, stored_currency, currency) for r in rows]
    return [_row_to_item(r, stored_currency) for r in rows]


@router.get("/{item_id}", response_model=ItemOut, summary="Get an inventory item")
async def get_item(
    item_id: int,
    currency: Optional[str] = Query(None, description="Show prices in this currency"),
    db: Database = Depends(get_db),
):
    if currency:
        currency = normalize_currency(currency)
    row = db.get_item(item_id)
    if not row:
        raise HTTPException(status_code=404, detail="item not found")
    stored_currency = app_settings.get_currency(db)
    if currency:
        row = price_view(row, stored_currency, currency)
    return _row_to_item(row, stored_currency)


@router.delete(
    "/{item_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete an item"
)
async def delete_item(item_id: int, db: Database = Depends(get_db)):
    if not db.delete_item(item_id):
        raise HTTPException(status_code=404, detail="item not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
