# This file provides shared helpers for API endpoint tests.
# Each client runs against its own SQLite file so tests never share studio rows.
# The helpers build consistent config objects and scoped TestClient contexts.

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

import pytest
from fastapi.testclient import TestClient

from studio_api.api.api_config import ApiConfig
from studio_api.api.app import app
from studio_api.api.dependencies import (
    clear_dependency_caches,
    get_config,
    get_database_client,
    get_studio_service,
)


def build_test_config(*, database_url: str = "sqlite+pysqlite:///:memory:") -> ApiConfig:
    """Create deterministic API config for tests."""

    return ApiConfig(
        api_name="Test Studio API",
        api_base_path="/api",
        host="0.0.0.0",
        port=8080,
        environment="test",
        database_url=database_url,
        allowed_origins=["*"],
        studio_table_name="studios",
        seed_sample_data=False,
        app_version="0.1.0",
    )


class FakeDBClient:
    """Simple fake DB dependency for readiness endpoint tests."""

    def __init__(self, *, connected: bool = True, existing_tables: set[str] | None = None) -> None:
        self._connected = connected
        self._tables = existing_tables if existing_tables is not None else {"studios"}

    def can_connect(self) -> bool:
        return self._connected

    def table_exists(self, table_name: str) -> bool:
        return self._connected and table_name in self._tables


class ExplodingStudioService:
    """Service stand-in that fails every call, for 500 handling tests."""

    def list_studios(self, **_: Any) -> list[dict[str, Any]]:
        raise RuntimeError("database went away")


@contextmanager
def api_test_client(
    *,
    database_url: str,
    seed_sample_data: bool = False,
    config: ApiConfig | None = None,
    db_client: Any | None = None,
    studio_service: Any | None = None,
) -> Iterator[TestClient]:
    """Yield a TestClient bound to `database_url`, with optional dependency overrides."""

    with pytest.MonkeyPatch.context() as patcher:
        patcher.setenv("DATABASE_URL", database_url)
        patcher.setenv("API_SEED_SAMPLE_DATA", "true" if seed_sample_data else "false")
        clear_dependency_caches()

        if config is not None:
            app.dependency_overrides[get_config] = lambda: config
        if db_client is not None:
            app.dependency_overrides[get_database_client] = lambda: db_client
        if studio_service is not None:
            app.dependency_overrides[get_studio_service] = lambda: studio_service

        try:
            with TestClient(app, raise_server_exceptions=False) as client:
                yield client
        finally:
            app.dependency_overrides.clear()
            clear_dependency_caches()


def studio_payload(**overrides: Any) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "name": "Test Studio",
        "description": "A quiet live room with an SSL console.",
        "location": "Mumbai",
        "pricePerHour": 2000,
        "contactEmail": "bookings@teststudio.com",
    }
    payload.update(overrides)
    return payload
