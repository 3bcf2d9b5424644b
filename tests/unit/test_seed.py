"""
Unit tests for startup seeding of the sample studios.
It asserts expected behavior and guards against regressions in the corresponding component.
"""

from __future__ import annotations

from studio_api.api.db_access import DatabaseClient
from studio_api.api.schemas.studio_schemas import StudioDraft
from studio_api.api.seed import SAMPLE_STUDIOS, bootstrap_studio_table, seed_sample_studios
from studio_api.api.studio_store import StudioStore
from studio_api.api.validation import validate_studio_draft


def test_sample_studios_are_valid_and_available() -> None:
    assert len(SAMPLE_STUDIOS) == 5
    for draft in SAMPLE_STUDIOS:
        assert validate_studio_draft(draft) == []
        assert draft.is_available is True


def test_seed_inserts_samples_into_empty_store(sqlite_db: DatabaseClient) -> None:
    store = StudioStore(db=sqlite_db)

    assert seed_sample_studios(store) == 5
    names = [item.name for item in store.list_all()]
    assert names == [draft.name for draft in SAMPLE_STUDIOS]


def test_seed_skips_non_empty_store(sqlite_db: DatabaseClient) -> None:
    store = StudioStore(db=sqlite_db)
    store.insert(
        StudioDraft(name="Existing", description="Already here.", location="Goa", price_per_hour=100.0)
    )

    assert seed_sample_studios(store) == 0
    assert [item.name for item in store.list_all()] == ["Existing"]


def test_bootstrap_is_idempotent(sqlite_url: str) -> None:
    db = DatabaseClient(database_url=sqlite_url)
    try:
        assert bootstrap_studio_table(db, table_name="studios") == 5
        assert bootstrap_studio_table(db, table_name="studios") == 0
        store = StudioStore(db=db)
        assert store.count() == 5
        assert len({item.name for item in store.list_all()}) == 5
    finally:
        db.dispose()


def test_bootstrap_without_seed_only_creates_table(sqlite_url: str) -> None:
    db = DatabaseClient(database_url=sqlite_url)
    try:
        assert bootstrap_studio_table(db, table_name="listing_rooms", seed=False) == 0
        assert db.table_exists("listing_rooms")
        assert StudioStore(db=db, table_name="listing_rooms").count() == 0
    finally:
        db.dispose()
