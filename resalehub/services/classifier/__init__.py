"""Keyword-based brand/category detection for item names."""

from .brands import POPULAR_BRANDS
from .categories import CATEGORY_KEYWORDS, CATEGORY_LABELS
from .item_parser import (
    ParsedItemName,
    auto_detect,
    detect_brand,
    detect_category,
    parse_item_name,
)

__all__ = [
    "POPULAR_BRANDS",
    "CATEGORY_KEYWORDS",
    "CATEGORY_LABELS",
    "ParsedItemName",
    "auto_detect",
    "detect_brand",
    "detect_category",
    "parse_item_name",
]
