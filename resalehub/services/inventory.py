"""Inventory item creation helpers.

Fills blank brand/category from the item name before the row is stored, so a
listing typed as "Nike Air Max 90" lands as brand Nike / category Sneakers
without the caller having to ask for detection first.
"""

from __future__ import annotations

import logging
from typing import Tuple

from resalehub.db.dal import Database
from resalehub.models.item import ItemIn
from resalehub.services.classifier import parse_item_name

logger = logging.getLogger("resalehub.inventory")


def resolve_labels(item: ItemIn) -> Tuple[str, str]:
    """Return (brand, category), detecting whichever the caller left blank."""
    if item.brand and item.category:
        return item.brand, item.category
    parsed = parse_item_name(item.name)
    brand = item.brand or parsed.detected_brand
    category = item.category or parsed.detected_category
    logger.debug(
        "labels for %r: brand=%r category=%r", item.name, brand, category
    )
    return brand, category


def create_item(db: Database, item: ItemIn) -> int:
    brand, category = resolve_labels(item)
    return db.insert_item(item, brand=brand, category=category)
