"""Brand and category detection from free-text item names.

Matching is plain case-insensitive substring containment against the ordered
tables in `brands` and `categories`: no tokenizing and no word boundaries, so
"pineapple" matches "Apple" and "sweatshirt" matches the "shirt" keyword.
That trade-off is accepted; ordering in the tables is what resolves overlaps.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Dict, Optional

from .brands import POPULAR_BRANDS
from .categories import CATEGORY_KEYWORDS


@dataclass(frozen=True)
class ParsedItemName:
    detected_brand: str
    detected_category: str

    def has_match(self) -> bool:
        return bool(self.detected_brand or self.detected_category)

    def as_dict(self) -> Dict[str, str]:
        return asdict(self)


def detect_brand(item_name: str) -> str:
    """Return the first known brand contained in `item_name`, or ""."""
    normalized = item_name.lower()
    for brand in POPULAR_BRANDS:
        if brand.lower() in normalized:
            return brand
    return ""


def detect_category(item_name: str) -> str:
    """Return the category of the first keyword contained in `item_name`, or ""."""
    normalized = item_name.lower()
    for category, keywords in CATEGORY_KEYWORDS:
        for keyword in keywords:
            if keyword in normalized:
                return category
    return ""


def parse_item_name(item_name: str) -> ParsedItemName:
    return ParsedItemName(
        detected_brand=detect_brand(item_name),
        detected_category=detect_category(item_name),
    )


def auto_detect(value: str, min_length: int = 3) -> Optional[ParsedItemName]:
    """Suggestion hook for as-you-type inputs.

    Returns None while the trimmed input is shorter than `min_length` or when
    nothing was detected, so callers only get a result worth applying.
    Debouncing is left to the caller.
    """
    if len(value.strip()) < min_length:
        return None
    parsed = parse_item_name(value)
    return parsed if parsed.has_match() else None
