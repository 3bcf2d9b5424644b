# This file defines the request and response models for studio endpoints.
# Python attributes stay snake_case while the JSON contract uses camelCase aliases.
# Draft fields are deliberately loose so constraint checks can report every problem together.

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class StudioDraft(CamelModel):
    """Caller-supplied mutable fields used to create or replace a studio."""

    name: str | None = None
    description: str | None = None
    location: str | None = None
    price_per_hour: float | None = Field(default=None, allow_inf_nan=False)
    image_url: str | None = None
    contact_email: str | None = None
    contact_phone: str | None = None
    is_available: bool = True


class StudioResponse(CamelModel):
    id: int
    name: str
    description: str
    location: str
    price_per_hour: float
    image_url: str | None = None
    contact_email: str | None = None
    contact_phone: str | None = None
    is_available: bool
    created_at: datetime
    updated_at: datetime
