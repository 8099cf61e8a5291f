"""Money / rounding helpers.

Centralized so the converter, pricing service, and endpoints use identical
rounding semantics.
"""

from __future__ import annotations
from decimal import Decimal, ROUND_HALF_UP


def round2(value: float) -> float:
    """Round to 2 decimals, half away from zero (-0.125 -> -0.13)."""
    return float(Decimal(str(value)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))
