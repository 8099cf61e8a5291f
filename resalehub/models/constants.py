"""Domain constants and enumerations for validation.

Kept as plain literals/tuples; the rate table itself lives with the converter
in `resalehub.services.rates.exchange`.
"""

from typing import Literal, Tuple

Theme = Literal["light", "dark", "system"]

REFERENCE_CURRENCY: str = "EUR"
CURRENCIES: Tuple[str, ...] = ("EUR", "USD", "GBP", "CHF")
THEMES: Tuple[str, ...] = ("light", "dark", "system")

# Customer image uploads (data URLs)
IMAGE_MIME_TYPES: Tuple[str, ...] = ("image/jpeg", "image/png", "image/webp")
IMAGE_MAX_BYTES: int = 5 * 1024 * 1024
