# This file implements the studio service used by the studio routes.
# It resolves list filters to exactly one store query and shapes records into response dictionaries.
# Filters are mutually exclusive by priority: search, then location, then max price, then availability.
# Mutations are logged here so the store stays free of transport and logging concerns.

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Protocol

from studio_api.api.schemas.studio_schemas import StudioDraft
from studio_api.api.studio_store import StudioRecord

LOGGER = logging.getLogger("studios")


class StudioRepository(Protocol):
    def insert(self, draft: StudioDraft) -> StudioRecord: ...

    def get_by_id(self, studio_id: int) -> StudioRecord | None: ...

    def list_all(self) -> list[StudioRecord]: ...

    def list_available(self) -> list[StudioRecord]: ...

    def list_by_location(self, location: str) -> list[StudioRecord]: ...

    def list_by_max_price(self, max_price: float) -> list[StudioRecord]: ...

    def list_by_keyword(self, keyword: str) -> list[StudioRecord]: ...

    def update(self, studio_id: int, draft: StudioDraft) -> StudioRecord | None: ...

    def delete(self, studio_id: int) -> bool: ...

    def count(self) -> int: ...


class StudioQueryKind(str, Enum):
    KEYWORD = "keyword"
    LOCATION = "location"
    MAX_PRICE = "max_price"
    AVAILABLE = "available"
    ALL = "all"


@dataclass(frozen=True)
class StudioQuery:
    kind: StudioQueryKind
    argument: str | float | None = None


def _non_blank(value: str | None) -> str | None:
    if value is None:
        return None
    trimmed = value.strip()
    return trimmed or None


def resolve_studio_query(
    *,
    location: str | None,
    max_price: float | None,
    search: str | None,
    available_only: bool = False,
) -> StudioQuery:
    """Pick the single store query for a set of list filters."""

    keyword = _non_blank(search)
    if keyword is not None:
        return StudioQuery(StudioQueryKind.KEYWORD, keyword)

    trimmed_location = _non_blank(location)
    if trimmed_location is not None:
        return StudioQuery(StudioQueryKind.LOCATION, trimmed_location)

    if max_price is not None:
        return StudioQuery(StudioQueryKind.MAX_PRICE, max_price)

    if available_only:
        return StudioQuery(StudioQueryKind.AVAILABLE)

    return StudioQuery(StudioQueryKind.ALL)


def to_studio_response(record: StudioRecord) -> dict[str, Any]:
    """Map a stored record to its public response fields."""

    return asdict(record)


class StudioService:
    """Studio listing, lookup, and mutation for API routes."""

    def __init__(self, *, store: StudioRepository) -> None:
        self.store = store

    def run_query(self, query: StudioQuery) -> list[StudioRecord]:
        if query.kind is StudioQueryKind.KEYWORD:
            return self.store.list_by_keyword(str(query.argument))
        if query.kind is StudioQueryKind.LOCATION:
            return self.store.list_by_location(str(query.argument))
        if query.kind is StudioQueryKind.MAX_PRICE:
            if isinstance(query.argument, bool) or not isinstance(query.argument, (int, float)):
                raise TypeError(f"max price query needs a numeric argument, got {query.argument!r}")
            return self.store.list_by_max_price(float(query.argument))
        if query.kind is StudioQueryKind.AVAILABLE:
            return self.store.list_available()
        return self.store.list_all()

    def list_studios(
        self,
        *,
        location: str | None = None,
        max_price: float | None = None,
        search: str | None = None,
        available_only: bool = False,
    ) -> list[dict[str, Any]]:
        query = resolve_studio_query(
            location=location,
            max_price=max_price,
            search=search,
            available_only=available_only,
        )
        records = self.run_query(query)
        LOGGER.debug("studio list kind=%s matched=%d", query.kind.value, len(records))
        return [to_studio_response(record) for record in records]

    def get_studio(self, studio_id: int) -> dict[str, Any] | None:
        record = self.store.get_by_id(studio_id)
        return to_studio_response(record) if record is not None else None

    def create_studio(self, draft: StudioDraft) -> dict[str, Any]:
        record = self.store.insert(draft)
        LOGGER.info("studio created id=%s name=%r", record.id, record.name)
        return to_studio_response(record)

    def update_studio(self, studio_id: int, draft: StudioDraft) -> dict[str, Any] | None:
        record = self.store.update(studio_id, draft)
        if record is None:
            LOGGER.info("studio update skipped id=%s reason=not_found", studio_id)
            return None
        LOGGER.info("studio updated id=%s", record.id)
        return to_studio_response(record)

    def delete_studio(self, studio_id: int) -> bool:
        deleted = self.store.delete(studio_id)
        LOGGER.info("studio delete id=%s deleted=%s", studio_id, deleted)
        return deleted
