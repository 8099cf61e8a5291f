"""Conversion result wrapper used by the currency endpoints.

Bundles the converted amount with the rate that produced it so callers
(price display, API responses) do not recompute the ratio themselves.
Rounding happens once, inside `convert_currency`.
"""

from __future__ import annotations

from dataclasses import dataclass

from resalehub.services.rates.exchange import (
    convert_currency,
    get_exchange_rate,
    normalize_currency,
)


@dataclass(frozen=True)
class ConversionResult:
    original_amount: float
    from_currency: str
    to_currency: str
    rate: float
    converted_amount: float


def compute_conversion(
    amount: float, from_currency: str, to_currency: str
) -> ConversionResult:
    src = normalize_currency(from_currency)
    dst = normalize_currency(to_currency)
    return ConversionResult(
        original_amount=amount,
        from_currency=src,
        to_currency=dst,
        rate=get_exchange_rate(src, dst),
        converted_amount=convert_currency(amount, src, dst),
    )
