from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

from . import models

MAX_QUANTITY = 2_147_483_647


def _strip_required(value: Any, field_name: str) -> Any:
    if value is None:
        raise ValueError(f"{field_name} cannot be null")
    if isinstance(value, str):
        return value.strip()
    return value


def _blank_to_none(value: Any) -> Any:
    # null means "not set"; blank strings are stored the same way.
    if isinstance(value, str):
        value = value.strip()
        return value or None
    return value


class ItemCreate(BaseModel):
    code: str = Field(..., min_length=1, max_length=128)
    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    quantity: int = Field(default=0, ge=0, le=MAX_QUANTITY, strict=True)
    category: Optional[str] = Field(default=None, max_length=128)

    @field_validator("code", "name", mode="before")
    @classmethod
    def _clean_required_text(cls, value, info):
        return _strip_required(value, info.field_name)

    @field_validator("description", "category", mode="before")
    @classmethod
    def _clean_optional_text(cls, value):
        return _blank_to_none(value)


class ItemUpdate(BaseModel):
    """
    Partial update – every field optional.

    Only the fields present in the request body are applied. code, name and
    quantity may be omitted but not set to null; description and category
    accept null to clear them.
    """

    code: Optional[str] = Field(default=None, min_length=1, max_length=128)
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    description: Optional[str] = None
    quantity: Optional[int] = Field(default=None, ge=0, le=MAX_QUANTITY, strict=True)
    category: Optional[str] = Field(default=None, max_length=128)

    @field_validator("code", "name", "quantity", mode="before")
    @classmethod
    def _reject_null(cls, value, info):
        return _strip_required(value, info.field_name)

    @field_validator("description", "category", mode="before")
    @classmethod
    def _clean_optional_text(cls, value):
        return _blank_to_none(value)


class ItemRead(BaseModel):
    id: int
    code: str
    name: str
    description: Optional[str] = None
    quantity: int
    category: Optional[str] = None
    created_at: datetime

    class Config:
        from_attributes = True


class ItemDraft(BaseModel):
    """Prefilled create-form payload for a code that is not in stock yet."""

    code: str
    name: str = ""
    description: Optional[str] = None
    quantity: int = 0
    category: Optional[str] = None


class ScanRequest(BaseModel):
    code: Optional[str] = Field(default=None, max_length=128)


class ScanDecisionRead(BaseModel):
    action: models.ScanAction
    code: str
    item: Optional[ItemRead] = None
    draft: Optional[ItemDraft] = None

    class Config:
        from_attributes = True


class ErrorResponse(BaseModel):
    message: str
    field: Optional[str] = None
