# This file implements persistence for studio records on top of `DatabaseClient`.
# Every query is parameterized SQL against one table, typed so SQLite and PostgreSQL return the same Python values.
# The store owns id assignment (via the database) and created/updated timestamp stamping.
# Drafts are validated here, before any write, so no caller can persist an invalid record.

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any

from sqlalchemy import Boolean, DateTime, Float, Integer, bindparam, text
from sqlalchemy.sql.elements import TextClause
from sqlalchemy.sql.selectable import TextualSelect

from studio_api.api.db_access import DatabaseClient, validate_identifier
from studio_api.api.schemas.studio_schemas import StudioDraft
from studio_api.api.validation import ensure_valid_draft

STUDIO_COLUMNS = (
    "id",
    "name",
    "description",
    "location",
    "price_per_hour",
    "image_url",
    "contact_email",
    "contact_phone",
    "is_available",
    "created_at",
    "updated_at",
)
MUTABLE_COLUMNS = (
    "name",
    "description",
    "location",
    "price_per_hour",
    "image_url",
    "contact_email",
    "contact_phone",
    "is_available",
)

_COLUMN_TYPES = {
    "id": Integer(),
    "price_per_hour": Float(),
    "is_available": Boolean(),
    "created_at": DateTime(timezone=True),
    "updated_at": DateTime(timezone=True),
}
_BIND_TYPES = {
    "price_per_hour": Float(),
    "is_available": Boolean(),
    "created_at": DateTime(timezone=True),
    "updated_at": DateTime(timezone=True),
    "max_price": Float(),
}


@dataclass(frozen=True)
class StudioRecord:
    id: int
    name: str
    description: str
    location: str
    price_per_hour: float
    image_url: str | None
    contact_email: str | None
    contact_phone: str | None
    is_available: bool
    created_at: datetime
    updated_at: datetime


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


def _as_utc(value: datetime) -> datetime:
    # SQLite drops the offset on the way in; values are always written in UTC.
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def like_pattern(value: str) -> str:
    """Build a lower-cased `%value%` pattern with LIKE wildcards escaped."""

    escaped = value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped.lower()}%"


class StudioStore:
    """CRUD and predicate queries over the studios table."""

    def __init__(
        self,
        *,
        db: DatabaseClient,
        table_name: str = "studios",
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        self.db = db
        self.table = validate_identifier(table_name)
        self._clock = clock
        self._select_sql = f"SELECT {', '.join(STUDIO_COLUMNS)} FROM {self.table}"

    def insert(self, draft: StudioDraft) -> StudioRecord:
        ensure_valid_draft(draft)
        now = self._clock()
        column_sql = ", ".join((*MUTABLE_COLUMNS, "created_at", "updated_at"))
        value_sql = ", ".join(f":{name}" for name in (*MUTABLE_COLUMNS, "created_at", "updated_at"))
        query = f"""
        INSERT INTO {self.table} ({column_sql})
        VALUES ({value_sql})
        RETURNING {', '.join(STUDIO_COLUMNS)}
        """
        params = {**self._draft_params(draft), "created_at": now, "updated_at": now}
        row = self.db.execute_returning(self._typed(query), params)
        if row is None:
            raise RuntimeError(f"Insert into {self.table} returned no row.")
        return self._to_record(row)

    def get_by_id(self, studio_id: int) -> StudioRecord | None:
        row = self.db.fetch_one(self._typed(f"{self._select_sql} WHERE id = :id"), {"id": studio_id})
        return self._to_record(row) if row is not None else None

    def list_all(self) -> list[StudioRecord]:
        return self._list(f"{self._select_sql} ORDER BY id ASC")

    def list_available(self) -> list[StudioRecord]:
        return self._list(f"{self._select_sql} WHERE is_available = TRUE ORDER BY id ASC")

    def list_by_location(self, location: str) -> list[StudioRecord]:
        query = f"""
        {self._select_sql}
        WHERE LOWER(location) LIKE :pattern ESCAPE '\\'
        ORDER BY id ASC
        """
        return self._list(query, {"pattern": like_pattern(location)})

    def list_by_max_price(self, max_price: float) -> list[StudioRecord]:
        query = f"""
        {self._select_sql}
        WHERE price_per_hour <= :max_price AND is_available = TRUE
        ORDER BY id ASC
        """
        return self._list(query, {"max_price": max_price})

    def list_by_keyword(self, keyword: str) -> list[StudioRecord]:
        query = f"""
        {self._select_sql}
        WHERE LOWER(name) LIKE :pattern ESCAPE '\\'
           OR LOWER(description) LIKE :pattern ESCAPE '\\'
        ORDER BY id ASC
        """
        return self._list(query, {"pattern": like_pattern(keyword)})

    def update(self, studio_id: int, draft: StudioDraft) -> StudioRecord | None:
        ensure_valid_draft(draft)
        assignments = ", ".join(f"{name} = :{name}" for name in (*MUTABLE_COLUMNS, "updated_at"))
        query = f"""
        UPDATE {self.table}
        SET {assignments}
        WHERE id = :id
        RETURNING {', '.join(STUDIO_COLUMNS)}
        """
        params = {**self._draft_params(draft), "updated_at": self._clock(), "id": studio_id}
        row = self.db.execute_returning(self._typed(query), params)
        return self._to_record(row) if row is not None else None

    def delete(self, studio_id: int) -> bool:
        affected = self.db.execute(f"DELETE FROM {self.table} WHERE id = :id", {"id": studio_id})
        return affected > 0

    def count(self) -> int:
        return int(self.db.fetch_scalar(f"SELECT COUNT(*) FROM {self.table}"))

    def _list(self, query: str, params: dict[str, Any] | None = None) -> list[StudioRecord]:
        return [self._to_record(row) for row in self.db.fetch_all(self._typed(query), params)]

    @staticmethod
    def _typed(query: str) -> TextualSelect:
        clause: TextClause = text(query)
        bind_names = [name for name in _BIND_TYPES if f":{name}" in query]
        if bind_names:
            clause = clause.bindparams(
                *(bindparam(name, type_=_BIND_TYPES[name]) for name in bind_names)
            )
        return clause.columns(**_COLUMN_TYPES)

    @staticmethod
    def _draft_params(draft: StudioDraft) -> dict[str, Any]:
        return {
            "name": draft.name,
            "description": draft.description,
            "location": draft.location,
            "price_per_hour": draft.price_per_hour,
            "image_url": draft.image_url,
            "contact_email": draft.contact_email,
            "contact_phone": draft.contact_phone,
            "is_available": draft.is_available,
        }

    @staticmethod
    def _to_record(row: dict[str, Any]) -> StudioRecord:
        return StudioRecord(
            id=int(row["id"]),
            name=row["name"],
            description=row["description"],
            location=row["location"],
            price_per_hour=float(row["price_per_hour"]),
            image_url=row["image_url"],
            contact_email=row["contact_email"],
            contact_phone=row["contact_phone"],
            is_available=bool(row["is_available"]),
            created_at=_as_utc(row["created_at"]),
            updated_at=_as_utc(row["updated_at"]),
        )
