"""DDL helpers for the studios table."""

from __future__ import annotations

import logging
from pathlib import Path
from string import Template

from sqlalchemy.engine import Engine

from studio_api.api.db_access import validate_identifier

PACKAGE_ROOT = Path(__file__).resolve().parents[1]
DDL_DIR = PACKAGE_ROOT / "sql" / "ddl"

LOGGER = logging.getLogger("studios")


def studio_ddl_path(dialect_name: str, ddl_dir: Path | None = None) -> Path:
    ddl_path = (ddl_dir or DDL_DIR) / f"studios.{dialect_name}.sql"
    if not ddl_path.exists():
        raise FileNotFoundError(f"No studios DDL for dialect {dialect_name!r}: {ddl_path}")
    return ddl_path


def render_studio_ddl(dialect_name: str, *, table_name: str, ddl_dir: Path | None = None) -> list[str]:
    """Return the DDL statements for the dialect with the table name filled in."""

    validate_identifier(table_name)
    raw_sql = studio_ddl_path(dialect_name, ddl_dir).read_text(encoding="utf-8")
    rendered = Template(raw_sql).substitute(table_name=table_name)
    return [statement.strip() for statement in rendered.split(";") if statement.strip()]


def apply_studio_ddl(engine: Engine, *, table_name: str = "studios", ddl_dir: Path | None = None) -> None:
    """Create the studios table if it does not exist yet."""

    statements = render_studio_ddl(engine.dialect.name, table_name=table_name, ddl_dir=ddl_dir)
    with engine.begin() as connection:
        for statement in statements:
            connection.exec_driver_sql(statement)
    LOGGER.info("studio ddl applied dialect=%s table=%s", engine.dialect.name, table_name)
