# This file defines liveness, readiness, and version endpoints for API operations.
# Liveness is a fixed plain-text answer; readiness checks the database and the studios table.
# Version details help clients and operators confirm which build is serving traffic.

from __future__ import annotations

import subprocess
from datetime import UTC, datetime
from functools import lru_cache
from typing import Annotated

from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse

from studio_api.api.api_config import ApiConfig
from studio_api.api.db_access import DatabaseClient
from studio_api.api.dependencies import get_config, get_database_client
from studio_api.api.schemas.health_schemas import ReadinessResponse, VersionResponse

HEALTH_MESSAGE = "Studio API is running!"

router = APIRouter(tags=["health"])
ConfigDep = Annotated[ApiConfig, Depends(get_config)]
DBDep = Annotated[DatabaseClient, Depends(get_database_client)]


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


@lru_cache(maxsize=1)
def _git_commit() -> str | None:
    try:
        completed = subprocess.run(
            ["git", "rev-parse", "--short", "HEAD"],
            check=True,
            capture_output=True,
            text=True,
        )
    except (OSError, subprocess.CalledProcessError):
        return None
    value = completed.stdout.strip()
    return value or None


@router.get("/health", response_class=PlainTextResponse)
def health() -> str:
    return HEALTH_MESSAGE


@router.get("/ready", response_model=ReadinessResponse)
def ready(
    request: Request,
    config: ConfigDep,
    db: DBDep,
) -> dict[str, object]:
    db_connected = db.can_connect()
    studios_table_ready = db_connected and db.table_exists(config.studio_table_name)

    return {
        "request_id": request.state.request_id,
        "db_connected": db_connected,
        "studios_table_ready": studios_table_ready,
        "ready": db_connected and studios_table_ready,
        "database": "reachable" if db_connected else "unreachable",
        "timestamp": _utc_now(),
    }


@router.get("/version", response_model=VersionResponse)
def version(
    request: Request,
    config: ConfigDep,
) -> dict[str, object]:
    return {
        "request_id": request.state.request_id,
        "project": config.api_name,
        "app_version": config.app_version,
        "environment": config.environment,
        "git_commit": _git_commit(),
        "timestamp": _utc_now(),
    }
