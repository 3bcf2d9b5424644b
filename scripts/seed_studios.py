#!/usr/bin/env python3
"""
Create the studios table and load the sample listings.
Run it directly before the first deploy, or whenever a fresh database needs demo data.
Seeding is skipped when the table already holds rows.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from studio_api.api.db_access import DatabaseClient
from studio_api.api.seed import bootstrap_studio_table
from studio_api.api.studio_store import StudioStore
from studio_api.common.logging import configure_logging
from studio_api.common.settings import get_settings


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Create the studios table and seed sample data")
    parser.add_argument("--database-url", default=None, help="Overrides DATABASE_URL")
    parser.add_argument("--table-name", default="studios")
    parser.add_argument("--skip-seed", action="store_true", help="Only apply DDL")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    configure_logging()
    database_url = args.database_url or get_settings().DATABASE_URL

    db = DatabaseClient(database_url=database_url)
    try:
        seeded = bootstrap_studio_table(db, table_name=args.table_name, seed=not args.skip_seed)
        total = StudioStore(db=db, table_name=args.table_name).count()
    finally:
        db.dispose()

    print(json.dumps({"table": args.table_name, "seeded": seeded, "total": total}, indent=2))


if __name__ == "__main__":
    main()
