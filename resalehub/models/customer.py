from __future__ import annotations

import base64
import binascii
import re
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, field_validator

from .constants import IMAGE_MAX_BYTES, IMAGE_MIME_TYPES

_DATA_URL_RE = re.compile(r"^data:(?P<mime>[\w/+.-]+);base64,(?P<payload>.*)$", re.S)


def _blank_to_none(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


class CustomerIn(BaseModel):
    """Customer intake payload.

    Optional text fields treat blank strings as absent so a form can submit
    empty inputs as-is.
    """

    name: str
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    platform: str
    notes: Optional[str] = None
    image: Optional[str] = None

    @field_validator("name")
    @classmethod
    def _valid_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Customer name is required")
        if len(v) > 100:
            raise ValueError("Name must be less than 100 characters")
        return v

    @field_validator("platform")
    @classmethod
    def _valid_platform(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Platform is required")
        if len(v) > 50:
            raise ValueError("Platform name must be less than 50 characters")
        return v

    @field_validator("email", "phone", "notes", "image", mode="before")
    @classmethod
    def _blank_optional(cls, v):  # type: ignore[override]
        if isinstance(v, str):
            return _blank_to_none(v)
        return v

    @field_validator("notes")
    @classmethod
    def _notes_length(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and len(v) > 500:
            raise ValueError("Notes must be less than 500 characters")
        return v

    @field_validator("image")
    @classmethod
    def _valid_image(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        match = _DATA_URL_RE.match(v)
        if not match or match.group("mime") not in IMAGE_MIME_TYPES:
            raise ValueError("Please upload a valid image file (JPG, PNG or WEBP)")
        try:
            raw = base64.b64decode(match.group("payload"), validate=True)
        except (binascii.Error, ValueError):
            raise ValueError("image data is not valid base64")
        if len(raw) > IMAGE_MAX_BYTES:
            raise ValueError("Image must be less than 5MB")
        return v


class CustomerOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    platform: str
    notes: Optional[str] = None
    image: Optional[str] = None
    total_purchases: int
    last_purchase: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime
