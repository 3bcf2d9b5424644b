# This file wraps database access so the studio store can run parameterized SQL safely.
# It keeps connection and transaction handling out of the store and router code.
# Reads use a plain connection; writes run inside `engine.begin()` so they commit atomically.

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from sqlalchemy import create_engine, inspect, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.sql.expression import Executable

_IDENTIFIER_RE = re.compile(r"^[a-zA-Z_][a-zA-Z0-9_]*$")

Query = str | Executable


def validate_identifier(identifier: str) -> str:
    if not _IDENTIFIER_RE.match(identifier):
        raise ValueError(f"Unsafe SQL identifier: {identifier!r}")
    return identifier


def _as_clause(query: Query) -> Executable:
    return text(query) if isinstance(query, str) else query


class DatabaseClient:
    """Minimal SQLAlchemy wrapper for API read/write access."""

    def __init__(self, *, database_url: str) -> None:
        self._engine: Engine = create_engine(database_url, pool_pre_ping=True, future=True)

    @property
    def engine(self) -> Engine:
        return self._engine

    @property
    def dialect_name(self) -> str:
        return self._engine.dialect.name

    def can_connect(self) -> bool:
        try:
            with self._engine.connect() as connection:
                connection.execute(text("SELECT 1"))
            return True
        except SQLAlchemyError:
            return False

    def table_exists(self, table_name: str) -> bool:
        validate_identifier(table_name)
        return inspect(self._engine).has_table(table_name)

    def fetch_all(self, query: Query, params: Mapping[str, Any] | None = None) -> list[dict[str, Any]]:
        with self._engine.connect() as connection:
            rows = connection.execute(_as_clause(query), dict(params or {})).mappings().all()
        return [dict(row) for row in rows]

    def fetch_one(self, query: Query, params: Mapping[str, Any] | None = None) -> dict[str, Any] | None:
        with self._engine.connect() as connection:
            row = connection.execute(_as_clause(query), dict(params or {})).mappings().first()
        return dict(row) if row is not None else None

    def fetch_scalar(self, query: Query, params: Mapping[str, Any] | None = None) -> Any:
        with self._engine.connect() as connection:
            return connection.execute(_as_clause(query), dict(params or {})).scalar_one()

    def execute(self, query: Query, params: Mapping[str, Any] | None = None) -> int:
        """Run a write statement and return the number of affected rows."""

        with self._engine.begin() as connection:
            result = connection.execute(_as_clause(query), dict(params or {}))
            return result.rowcount

    def execute_returning(
        self, query: Query, params: Mapping[str, Any] | None = None
    ) -> dict[str, Any] | None:
        """Run a write statement with a RETURNING clause and return the first row."""

        with self._engine.begin() as connection:
            row = connection.execute(_as_clause(query), dict(params or {})).mappings().first()
            return dict(row) if row is not None else None

    def dispose(self) -> None:
        self._engine.dispose()
