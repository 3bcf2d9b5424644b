# This file holds the sample studio listings and the startup routine that inserts them.
# Seeding only runs against an empty table, so restarts never duplicate or merge records.

from __future__ import annotations

import logging
from typing import Final, Protocol

from studio_api.api.db_access import DatabaseClient
from studio_api.api.ddl import apply_studio_ddl
from studio_api.api.schemas.studio_schemas import StudioDraft
from studio_api.api.studio_store import StudioRecord, StudioStore

LOGGER = logging.getLogger("studios")


class SeedableStore(Protocol):
    def count(self) -> int: ...

    def insert(self, draft: StudioDraft) -> StudioRecord: ...


SAMPLE_STUDIOS: Final[tuple[StudioDraft, ...]] = (
    StudioDraft(
        name="Creative Sound Studio",
        description=(
            "Professional recording studio with state-of-the-art equipment. "
            "Perfect for music production, podcasts, and voice-overs."
        ),
        location="Mumbai, Maharashtra",
        price_per_hour=2500.0,
        image_url="https://images.unsplash.com/photo-1598488035139-bdbb2231ce04?w=500",
        contact_email="info@creativesound.com",
        contact_phone="+91-9876543210",
    ),
    StudioDraft(
        name="Harmony Music Hub",
        description=(
            "Spacious studio with excellent acoustics and professional mixing capabilities. "
            "Ideal for bands and solo artists."
        ),
        location="Bangalore, Karnataka",
        price_per_hour=3000.0,
        image_url="https://images.unsplash.com/photo-1493225457124-a3eb161ffa5f?w=500",
        contact_email="contact@harmonymusic.com",
        contact_phone="+91-9876543211",
    ),
    StudioDraft(
        name="Digital Dreams Studio",
        description=(
            "Modern digital recording facility with the latest software and hardware. "
            "Specializing in electronic music production."
        ),
        location="Delhi, NCR",
        price_per_hour=2200.0,
        image_url="https://images.unsplash.com/photo-1571330735066-03aaa9429d89?w=500",
        contact_email="hello@digitaldreams.com",
        contact_phone="+91-9876543212",
    ),
    StudioDraft(
        name="Acoustic Vibes Studio",
        description=(
            "Intimate studio perfect for acoustic recordings and singer-songwriter sessions. "
            "Warm and cozy atmosphere."
        ),
        location="Chennai, Tamil Nadu",
        price_per_hour=1800.0,
        image_url="https://images.unsplash.com/photo-1519892300165-cb5542fb47c7?w=500",
        contact_email="info@acousticvibes.com",
        contact_phone="+91-9876543213",
    ),
    StudioDraft(
        name="Pro Audio Labs",
        description=(
            "High-end professional studio with Grammy-winning engineers. "
            "Full production services available."
        ),
        location="Pune, Maharashtra",
        price_per_hour=4500.0,
        image_url="https://images.unsplash.com/photo-1598653222000-6b7b7a552625?w=500",
        contact_email="bookings@proaudiolabs.com",
        contact_phone="+91-9876543214",
    ),
)


def seed_sample_studios(store: SeedableStore) -> int:
    """Insert the sample studios when the store is empty; return how many were inserted."""

    existing = store.count()
    if existing > 0:
        LOGGER.info("studio seeding skipped existing_count=%d", existing)
        return 0

    for draft in SAMPLE_STUDIOS:
        store.insert(draft)

    LOGGER.info("sample studio data initialized created=%d", len(SAMPLE_STUDIOS))
    return len(SAMPLE_STUDIOS)


def bootstrap_studio_table(db: DatabaseClient, *, table_name: str, seed: bool = True) -> int:
    """Create the studios table if needed, then seed it; return the number of seeded rows."""

    apply_studio_ddl(db.engine, table_name=table_name)
    if not seed:
        return 0
    return seed_sample_studios(StudioStore(db=db, table_name=table_name))
