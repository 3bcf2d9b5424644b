# This file defines response schemas for the readiness and version endpoints.
# The liveness endpoint answers in plain text, so it has no model here.

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel


class ReadinessResponse(BaseModel):
    request_id: str
    db_connected: bool
    studios_table_ready: bool
    ready: bool
    database: str
    timestamp: datetime


class VersionResponse(BaseModel):
    request_id: str
    project: str
    app_version: str
    environment: str
    git_commit: str | None = None
    timestamp: datetime
