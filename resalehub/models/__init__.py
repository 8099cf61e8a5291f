"""Pydantic domain models for Resale Hub."""

from .constants import (
    CURRENCIES,
    REFERENCE_CURRENCY,
    THEMES,
)  # re-export
from .customer import CustomerIn, CustomerOut
from .item import ItemIn, ItemOut, ItemNameIn, ParsedItemNameOut
from .currency import (
    ConversionOut,
    CurrencySwitchOut,
    CurrencyUpdate,
    DisplaySettingsOut,
    ExchangeRateOut,
    RatesTableOut,
    ThemeUpdate,
)

__all__ = [
    "CURRENCIES",
    "REFERENCE_CURRENCY",
    "THEMES",
    "CustomerIn",
    "CustomerOut",
    "ItemIn",
    "ItemOut",
    "ItemNameIn",
    "ParsedItemNameOut",
    "ConversionOut",
    "CurrencySwitchOut",
    "CurrencyUpdate",
    "DisplaySettingsOut",
    "ExchangeRateOut",
    "RatesTableOut",
    "ThemeUpdate",
]
