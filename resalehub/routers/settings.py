"""Display settings router.

Changing the currency rewrites stored item prices from the previous currency
to the new one; the response reports how many items were converted.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from resalehub.db.dal import Database
from resalehub.models.currency import (
    CurrencySwitchOut,
    CurrencyUpdate,
    DisplaySettingsOut,
    ThemeUpdate,
)
from resalehub.routers.deps import get_db
from resalehub.services import app_settings
from resalehub.services.pricing import switch_display_currency

router = APIRouter(prefix="/settings", tags=["settings"])


def _current(db: Database) -> DisplaySettingsOut:
    current = app_settings.get_display_settings(db)
    return DisplaySettingsOut(
        theme=current.theme,
        currency=current.currency,
        previous_currency=current.previous_currency,
    )


@router.get("/", response_model=DisplaySettingsOut, summary="Current display settings")
async def get_display_settings(db: Database = Depends(get_db)):
    return _current(db)


@router.put("/theme", response_model=DisplaySettingsOut, summary="Set UI theme")
async def set_theme(payload: ThemeUpdate, db: Database = Depends(get_db)):
    try:
        app_settings.set_theme(db, payload.theme)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return _current(db)


@router.put(
    "/currency",
    response_model=CurrencySwitchOut,
    summary="Switch display currency and convert stored prices",
)
async def set_currency(payload: CurrencyUpdate, db: Database = Depends(get_db)):
    switch = switch_display_currency(db, payload.currency)
    return CurrencySwitchOut(
        currency=switch.currency,
        previous_currency=switch.previous_currency,
        converted_items=switch.converted_items,
    )
