"""Keeps stored item prices in the active display currency.

Item prices are persisted in whatever currency is currently selected, so a
currency switch has to rewrite them. `switch_display_currency` is the single
entry point: it records the change in settings and converts every price from
the previous currency to the new one, all in one database transaction.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from resalehub.core.config import get_settings
from resalehub.db.dal import Database
from resalehub.models.constants import CURRENCIES
from resalehub.services import app_settings
from resalehub.services.rates.exchange import convert_currency, normalize_currency

logger = logging.getLogger("resalehub.pricing")


@dataclass(frozen=True)
class CurrencySwitch:
    currency: str
    previous_currency: Optional[str]
    converted_items: int


def convert_all_prices(db: Database, to_currency: str, from_currency: str) -> int:
    """Convert every stored item price from `from_currency` to `to_currency`."""
    src = normalize_currency(from_currency)
    dst = normalize_currency(to_currency)
    if src == dst:
        return 0
    count = db.rewrite_item_prices(lambda amount: convert_currency(amount, src, dst))
    logger.info("converted %d item prices %s -> %s", count, src, dst)
    return count


def switch_display_currency(db: Database, currency: str) -> CurrencySwitch:
    new = normalize_currency(currency)
    previous, converted = db.switch_display_currency(
        new,
        currency_key=app_settings.CURRENCY_KEY,
        previous_key=app_settings.PREVIOUS_CURRENCY_KEY,
        fallback=get_settings().default_currency,
        supported=CURRENCIES,
        convert=convert_currency,
    )
    if converted:
        logger.info("converted %d item prices %s -> %s", converted, previous, new)
    return CurrencySwitch(
        currency=new, previous_currency=previous, converted_items=converted
    )


def price_view(row: Dict[str, Any], stored_currency: str, currency: str) -> Dict[str, Any]:
    """Return a copy of an item row with prices expressed in `currency`.

    Storage is untouched; used for read-time display in another currency.
    """
    out = dict(row)
    out["purchase_price"] = convert_currency(
        float(row["purchase_price"]), stored_currency, currency
    )
    if row.get("listing_price") is not None:
        out["listing_price"] = convert_currency(
            float(row["listing_price"]), stored_currency, currency
        )
    out["currency"] = normalize_currency(currency)
    return out
