"""
Shared test configuration.
It asserts expected behavior and guards against regressions in the corresponding component.
These tests are executed by `pytest` locally and in CI and should remain deterministic.
"""

from __future__ import annotations

import os
import sys
import tempfile
from collections.abc import Iterator
from pathlib import Path

import pytest

ROOT_DIR = Path(__file__).resolve().parent.parent
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

# `studio_api.api.app` builds the app at import time, so the database URL must exist before collection.
_COLLECTION_DB_PATH = Path(tempfile.gettempdir()) / "studio_api_collection.db"
os.environ.setdefault("DATABASE_URL", f"sqlite+pysqlite:///{_COLLECTION_DB_PATH}")
os.environ.setdefault("ENV", "test")
os.environ.setdefault("LOG_LEVEL", "INFO")

from studio_api.api.db_access import DatabaseClient  # noqa: E402
from studio_api.api.ddl import apply_studio_ddl  # noqa: E402


@pytest.fixture(autouse=True)
def base_test_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure required environment variables are present during tests."""

    defaults = {
        "PROJECT_NAME": "test-project",
        "ENV": "test",
        "LOG_LEVEL": "INFO",
        "API_HOST": "0.0.0.0",
        "API_PORT": "8080",
    }

    for key, value in defaults.items():
        if os.getenv(key) is None:
            monkeypatch.setenv(key, value)


@pytest.fixture
def sqlite_url(tmp_path: Path) -> str:
    return f"sqlite+pysqlite:///{tmp_path / 'studios.db'}"


@pytest.fixture
def sqlite_db(sqlite_url: str) -> Iterator[DatabaseClient]:
    """A throwaway SQLite database with the studios table already created."""

    db = DatabaseClient(database_url=sqlite_url)
    apply_studio_ddl(db.engine, table_name="studios")
    try:
        yield db
    finally:
        db.dispose()
