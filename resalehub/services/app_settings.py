"""Display settings backed by the metadata table.

Keys:
  - ui_theme: str in {light, dark, system}
  - display_currency: supported currency code
  - previous_display_currency: currency in effect before the last change

Reads are resilient: a missing or invalid stored value falls back to the
configured default. Writes validate and raise.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from resalehub.core.config import get_settings
from resalehub.db.dal import Database
from resalehub.models.constants import CURRENCIES, THEMES

THEME_KEY = "ui_theme"
CURRENCY_KEY = "display_currency"
PREVIOUS_CURRENCY_KEY = "previous_display_currency"


@dataclass
class DisplaySettings:
    theme: str
    currency: str
    previous_currency: Optional[str] = None


def get_theme(db: Database) -> str:
    theme = db.get_metadata(THEME_KEY)
    return theme if theme in THEMES else get_settings().default_theme


def set_theme(db: Database, theme: str) -> None:
    if theme not in THEMES:
        raise ValueError("Invalid theme")
    db.set_metadata(THEME_KEY, theme)


def get_currency(db: Database) -> str:
    currency = db.get_metadata(CURRENCY_KEY)
    return currency if currency in CURRENCIES else get_settings().default_currency


def get_previous_currency(db: Database) -> Optional[str]:
    currency = db.get_metadata(PREVIOUS_CURRENCY_KEY)
    return currency if currency in CURRENCIES else None


def get_display_settings(db: Database) -> DisplaySettings:
    return DisplaySettings(
        theme=get_theme(db),
        currency=get_currency(db),
        previous_currency=get_previous_currency(db),
    )


__all__ = [
    "DisplaySettings",
    "get_theme",
    "set_theme",
    "get_currency",
    "get_previous_currency",
    "get_display_settings",
]
