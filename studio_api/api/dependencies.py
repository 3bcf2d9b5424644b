# This file provides dependency factories for FastAPI routes and the startup hook.
# The database client, store, and service are built once per process and shared through injection.
# Tests swap any of them through `app.dependency_overrides` or by clearing the caches.

from __future__ import annotations

from functools import lru_cache

from studio_api.api.api_config import ApiConfig, get_api_config
from studio_api.api.db_access import DatabaseClient
from studio_api.api.services.studio_service import StudioService
from studio_api.api.studio_store import StudioStore


@lru_cache(maxsize=1)
def get_database_client() -> DatabaseClient:
    config = get_api_config()
    return DatabaseClient(database_url=config.database_url)


@lru_cache(maxsize=1)
def get_studio_store() -> StudioStore:
    config = get_api_config()
    return StudioStore(db=get_database_client(), table_name=config.studio_table_name)


@lru_cache(maxsize=1)
def get_studio_service() -> StudioService:
    return StudioService(store=get_studio_store())


def get_config() -> ApiConfig:
    return get_api_config()


def clear_dependency_caches() -> None:
    """Drop cached clients so the next request rebuilds them from fresh config."""

    if get_database_client.cache_info().currsize:
        get_database_client().dispose()
    get_studio_service.cache_clear()
    get_studio_store.cache_clear()
    get_database_client.cache_clear()
    get_api_config.cache_clear()
