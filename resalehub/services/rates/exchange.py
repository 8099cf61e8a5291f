"""Fixed-rate currency conversion.

Rates are expressed relative to a single reference currency (EUR), so the
table stays O(n) and every conversion is a two-hop path through EUR.

    - `get_exchange_rate(from, to)` -> units of `to` per 1 unit of `from`
    - `convert_currency(amount, from, to)` -> amount rounded to 2 decimals

Rates are compiled-in constants; nothing here is fetched or reloaded.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from resalehub.services.money import round2

# Value of 1 EUR in each currency
BASE_RATES: Mapping[str, float] = MappingProxyType(
    {
        "EUR": 1.0,
        "USD": 1.08,
        "GBP": 0.85,
        "CHF": 0.96,
    }
)


class InvalidCurrencyError(ValueError):
    """Raised when a currency code is not in the rate table."""

    def __init__(self, currency: object):
        self.currency = currency
        super().__init__(
            f"unsupported currency {currency!r}; expected one of {', '.join(BASE_RATES)}"
        )


def normalize_currency(currency: object) -> str:
    if not isinstance(currency, str):
        raise InvalidCurrencyError(currency)
    code = currency.strip().upper()
    if code not in BASE_RATES:
        raise InvalidCurrencyError(currency)
    return code


def convert_currency(amount: float, from_currency: str, to_currency: str) -> float:
    """Convert `amount` between two supported currencies.

    Same-currency conversion returns `amount` untouched (no rounding). The
    amount itself is not validated; negative and zero amounts convert
    like any other.
    """
    src = normalize_currency(from_currency)
    dst = normalize_currency(to_currency)
    if src == dst:
        return amount
    reference_amount = amount / BASE_RATES[src]
    return round2(reference_amount * BASE_RATES[dst])


def get_exchange_rate(from_currency: str, to_currency: str) -> float:
    """Return how many units of `to_currency` equal one `from_currency`.

    Unrounded; this is a display ratio rather than a monetary amount.
    """
    src = normalize_currency(from_currency)
    dst = normalize_currency(to_currency)
    if src == dst:
        return 1.0
    return BASE_RATES[dst] / BASE_RATES[src]


def supported_currencies() -> list[str]:
    return list(BASE_RATES)
