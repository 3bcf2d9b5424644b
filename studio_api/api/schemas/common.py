# This file defines the error payload shared by every failing endpoint.
# Routers reference it in their OpenAPI `responses` so clients see the 400 contract.

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel


class FieldViolationDetail(BaseModel):
    field: str
    message: str


class ErrorResponse(BaseModel):
    error_code: str
    message: str
    details: Any | None = None
    request_id: str
    timestamp: datetime


class ValidationErrorResponse(ErrorResponse):
    details: list[FieldViolationDetail]
