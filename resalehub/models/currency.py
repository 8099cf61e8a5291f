from __future__ import annotations

from typing import Dict, Optional

from pydantic import BaseModel, Field

from .constants import Theme


class RatesTableOut(BaseModel):
    reference: str
    rates: Dict[str, float]


class ExchangeRateOut(BaseModel):
    from_currency: str
    to_currency: str
    rate: float


class ConversionOut(BaseModel):
    original_amount: float
    from_currency: str
    to_currency: str
    rate: float
    converted_amount: float


class DisplaySettingsOut(BaseModel):
    theme: Theme
    currency: str
    previous_currency: Optional[str] = None


class ThemeUpdate(BaseModel):
    theme: Theme


class CurrencyUpdate(BaseModel):
    # Validated against the rate table by the service (400 invalid_currency)
    currency: str = Field(..., description="Display currency (EUR, USD, GBP, CHF)")


class CurrencySwitchOut(BaseModel):
    currency: str
    previous_currency: Optional[str] = None
    converted_items: int
