"""Currency router: read-only access to the fixed rate table.

Endpoints:
    - GET /currency/rates                        -> reference currency + table
    - GET /currency/rate?from=USD&to=GBP         -> pairwise ratio (unrounded)
    - GET /currency/convert?amount=10&from=&to=  -> converted amount (2 dp)

Unsupported codes surface as 400 invalid_currency via the app error handler.
"""

from __future__ import annotations

from fastapi import APIRouter, Query

from resalehub.models.constants import REFERENCE_CURRENCY
from resalehub.models.currency import ConversionOut, ExchangeRateOut, RatesTableOut
from resalehub.services.rates.conversion import compute_conversion
from resalehub.services.rates.exchange import (
    BASE_RATES,
    get_exchange_rate,
    normalize_currency,
)

router = APIRouter(prefix="/currency", tags=["currency"])


@router.get("/rates", response_model=RatesTableOut, summary="Fixed rate table")
async def list_rates():
    return RatesTableOut(reference=REFERENCE_CURRENCY, rates=dict(BASE_RATES))


@router.get("/rate", response_model=ExchangeRateOut, summary="Pairwise exchange rate")
async def exchange_rate(
    from_currency: str = Query(..., alias="from", description="Source currency"),
    to_currency: str = Query(..., alias="to", description="Target currency"),
):
    src = normalize_currency(from_currency)
    dst = normalize_currency(to_currency)
    return ExchangeRateOut(
        from_currency=src, to_currency=dst, rate=get_exchange_rate(src, dst)
    )


@router.get("/convert", response_model=ConversionOut, summary="Convert an amount")
async def convert(
    amount: float = Query(
        ..., allow_inf_nan=False, description="Amount in the source currency"
    ),
    from_currency: str = Query(..., alias="from", description="Source currency"),
    to_currency: str = Query(..., alias="to", description="Target currency"),
):
    result = compute_conversion(amount, from_currency, to_currency)
    return ConversionOut(
        original_amount=result.original_amount,
        from_currency=result.from_currency,
        to_currency=result.to_currency,
        rate=result.rate,
        converted_amount=result.converted_amount,
    )
