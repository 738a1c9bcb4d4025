#!/usr/bin/env python3
"""
Seed the records table with deterministic random data.

Features:
- Deterministic: fixed seed → same dataset every run
- Idempotent: safe to run multiple times (clears orders and records first)
- Unique: one row per (artist, album, format)

Usage:
    python scripts/seed_records.py
"""

from __future__ import annotations

import random
import sys
from decimal import Decimal
from pathlib import Path

# Add src to path so we can import our modules
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from record_shop.domain.record import RecordCategory, RecordFormat, normalize_name
from record_shop.infra.db.models import OrderRow, RecordRow
from record_shop.infra.db.session import get_session


# ==============================================================================
# Configuration
# ==============================================================================

RANDOM_SEED = 42  # Fixed seed for deterministic results
NUM_RECORDS = 50  # Upper bound; duplicates of (artist, album, format) are skipped


# ==============================================================================
# Catalog Data
# ==============================================================================

ALBUMS_BY_ARTIST = {
    "Pink Floyd": (RecordCategory.ROCK, ["The Wall", "Animals", "Wish You Were Here"]),
    "Led Zeppelin": (RecordCategory.ROCK, ["Led Zeppelin IV", "Physical Graffiti"]),
    "Miles Davis": (RecordCategory.JAZZ, ["Kind of Blue", "Bitches Brew"]),
    "John Coltrane": (RecordCategory.JAZZ, ["A Love Supreme", "Blue Train"]),
    "Nas": (RecordCategory.HIPHOP, ["Illmatic", "Stillmatic"]),
    "Glenn Gould": (RecordCategory.CLASSICAL, ["Goldberg Variations"]),
    "Madonna": (RecordCategory.POP, ["Like a Prayer", "Ray of Light"]),
    "Radiohead": (RecordCategory.ALTERNATIVE, ["OK Computer", "Kid A"]),
    "Pixies": (RecordCategory.ALTERNATIVE, ["Doolittle", "Surfer Rosa"]),
    "Arcade Fire": (RecordCategory.INDIE, ["Funeral", "The Suburbs"]),
}

# Base prices per format
BASE_PRICES = {
    RecordFormat.VINYL: Decimal("24.99"),
    RecordFormat.CD: Decimal("12.99"),
    RecordFormat.CASSETTE: Decimal("9.99"),
    RecordFormat.DIGITAL: Decimal("7.99"),
}


# ==============================================================================
# Seed Generation
# ==============================================================================


def calculate_price(format: RecordFormat) -> Decimal:
    """Base price for the format plus up to 10.00 of variance, 2 decimal places."""
    variance = Decimal(random.randint(0, 1000)) / 100
    return (BASE_PRICES[format] + variance).quantize(Decimal("0.01"))


def generate_record() -> RecordRow:
    """Generate a single random record."""
    artist = random.choice(list(ALBUMS_BY_ARTIST))
    category, albums = ALBUMS_BY_ARTIST[artist]
    album = random.choice(albums)

    # Weighted toward vinyl
    format = random.choices(list(RecordFormat), weights=[5, 3, 1, 2], k=1)[0]

    return RecordRow(
        artist=normalize_name(artist),
        album=normalize_name(album),
        price=calculate_price(format),
        quantity=random.randint(0, 25),
        format=format.value,
        category=category.value,
        track_list=[],
    )


def seed_records(num_records: int = NUM_RECORDS, seed: int = RANDOM_SEED) -> None:
    """
    Seed the database with random record data.

    Args:
        num_records: Number of records to generate (before de-duplication)
        seed: Random seed for deterministic results
    """
    random.seed(seed)

    print(f"🌱 Seeding database with up to {num_records} records (seed={seed})...")

    with get_session() as session:
        # Step 1: Clear existing data (idempotent); orders reference records
        print("🗑️  Clearing existing orders and records...")
        deleted_orders = session.query(OrderRow).delete()
        deleted_records = session.query(RecordRow).delete()
        print(f"   Deleted {deleted_orders} orders and {deleted_records} records")

        # Step 2: Generate unique records and insert them
        print(f"💿 Generating {num_records} records...")
        records: dict[tuple[str, str, str], RecordRow] = {}
        for _ in range(num_records):
            row = generate_record()
            records.setdefault((row.artist, row.album, row.format), row)

        session.add_all(records.values())
        session.flush()

        print(f"✅ Successfully seeded {len(records)} records!")

        print("\n📊 Sample records:")
        for i, row in enumerate(list(records.values())[:5], 1):
            print(f"   {i}. {row.artist} - {row.album} [{row.format}] ${row.price} x{row.quantity}")

        if len(records) > 5:
            print(f"   ... and {len(records) - 5} more")


# ==============================================================================
# Main
# ==============================================================================


if __name__ == "__main__":
    try:
        seed_records()
    except Exception as e:
        print(f"❌ Error seeding database: {e}", file=sys.stderr)
        sys.exit(1)
