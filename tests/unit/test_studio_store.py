"""
Unit tests for the studio record store.
They run against a throwaway SQLite file so id assignment and timestamps come from real SQL.
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest

from studio_api.api.db_access import DatabaseClient
from studio_api.api.schemas.studio_schemas import StudioDraft
from studio_api.api.studio_store import StudioStore, like_pattern
from studio_api.api.validation import StudioValidationError


class StepClock:
    def __init__(self, start: datetime) -> None:
        self.current = start

    def __call__(self) -> datetime:
        value = self.current
        self.current = self.current + timedelta(minutes=5)
        return value


def _draft(**overrides: object) -> StudioDraft:
    values: dict[str, object] = {
        "name": "Blue Room",
        "description": "Vocal booth with a Neumann U87.",
        "location": "Kochi, Kerala",
        "price_per_hour": 1500.0,
    }
    values.update(overrides)
    return StudioDraft(**values)


@pytest.fixture
def clock() -> StepClock:
    return StepClock(datetime(2024, 3, 1, 9, 30, tzinfo=UTC))


@pytest.fixture
def store(sqlite_db: DatabaseClient, clock: StepClock) -> StudioStore:
    return StudioStore(db=sqlite_db, clock=clock)


def test_insert_assigns_id_and_matching_timestamps(store: StudioStore) -> None:
    record = store.insert(_draft(contact_email="hi@blueroom.in"))

    assert record.id > 0
    assert record.created_at == record.updated_at == datetime(2024, 3, 1, 9, 30, tzinfo=UTC)
    assert record.is_available is True
    assert record.contact_email == "hi@blueroom.in"
    assert record.image_url is None
    assert store.get_by_id(record.id) == record


def test_insert_ids_are_unique_and_increasing(store: StudioStore) -> None:
    first = store.insert(_draft())
    second = store.insert(_draft(name="Red Room"))
    assert second.id > first.id
    assert store.count() == 2


def test_insert_rejects_invalid_draft_without_writing(store: StudioStore) -> None:
    with pytest.raises(StudioValidationError):
        store.insert(_draft(price_per_hour=-1.0))
    assert store.count() == 0


def test_get_by_id_returns_none_for_unknown_id(store: StudioStore) -> None:
    assert store.get_by_id(42) is None


def test_update_keeps_id_and_created_at(store: StudioStore) -> None:
    original = store.insert(_draft())
    updated = store.update(original.id, _draft(name="Blue Room II", is_available=False))

    assert updated is not None
    assert updated.id == original.id
    assert updated.created_at == original.created_at
    assert updated.updated_at > original.updated_at
    assert updated.name == "Blue Room II"
    assert updated.is_available is False
    assert store.get_by_id(original.id) == updated


def test_update_unknown_id_returns_none(store: StudioStore) -> None:
    assert store.update(999, _draft()) is None


def test_update_validates_even_for_unknown_id(store: StudioStore) -> None:
    with pytest.raises(StudioValidationError):
        store.update(999, _draft(name=None))


def test_delete_reports_whether_a_row_was_removed(store: StudioStore) -> None:
    record = store.insert(_draft())
    assert store.delete(record.id) is True
    assert store.delete(record.id) is False
    assert store.get_by_id(record.id) is None


def test_location_and_keyword_matching_is_case_insensitive(store: StudioStore) -> None:
    kochi = store.insert(_draft())
    goa = store.insert(_draft(name="Beach Tracks", description="Open-air mixing deck.", location="Panaji, Goa"))

    assert [item.id for item in store.list_by_location("KERALA")] == [kochi.id]
    assert [item.id for item in store.list_by_keyword("neumann")] == [kochi.id]
    assert [item.id for item in store.list_by_keyword("beach")] == [goa.id]
    assert [item.id for item in store.list_by_keyword("MIXING")] == [goa.id]


def test_wildcards_in_filters_match_literally(store: StudioStore) -> None:
    store.insert(_draft())
    discount = store.insert(_draft(name="100% Analog", description="Tape only."))

    assert [item.id for item in store.list_by_keyword("100%")] == [discount.id]
    assert store.list_by_keyword("_") == []
    assert store.list_by_location("%") == []


def test_max_price_is_inclusive_and_skips_unavailable(store: StudioStore) -> None:
    cheap = store.insert(_draft(price_per_hour=1000.0))
    exact = store.insert(_draft(price_per_hour=1500.0))
    store.insert(_draft(price_per_hour=1200.0, is_available=False))
    store.insert(_draft(price_per_hour=1600.0))

    assert [item.id for item in store.list_by_max_price(1500.0)] == [cheap.id, exact.id]


def test_list_all_and_available_are_ordered_by_id(store: StudioStore) -> None:
    first = store.insert(_draft())
    hidden = store.insert(_draft(is_available=False))
    third = store.insert(_draft())

    assert [item.id for item in store.list_all()] == [first.id, hidden.id, third.id]
    assert [item.id for item in store.list_available()] == [first.id, third.id]


def test_like_pattern_escapes_wildcards() -> None:
    assert like_pattern("50%_Off") == "%50\\%\\_off%"
    assert like_pattern("a\\b") == "%a\\\\b%"


def test_store_rejects_unsafe_table_name(sqlite_db: DatabaseClient) -> None:
    with pytest.raises(ValueError, match="Unsafe SQL identifier"):
        StudioStore(db=sqlite_db, table_name="studios; DROP TABLE studios")
