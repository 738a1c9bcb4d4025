from __future__ import annotations

import uuid
from datetime import datetime
from decimal import Decimal

from sqlalchemy import (
    CheckConstraint,
    DateTime,
    Index,
    Integer,
    Numeric,
    String,
    Text,
    UniqueConstraint,
    func,
    literal_column,
)
from sqlalchemy.dialects.postgresql import ARRAY, UUID
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql.elements import ColumnElement

from record_shop.domain.record import RecordCategory, RecordFormat
from record_shop.infra.db.models.base import Base

# Text search configuration; must be a literal so the GIN index expression
# and the query expression are identical
TEXT_SEARCH_CONFIG = literal_column("'english'::regconfig")


def _quoted(values: list[str]) -> str:
    return ", ".join(f"'{value}'" for value in values)


class RecordRow(Base):
    __tablename__ = "records"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )
    artist: Mapped[str] = mapped_column(String(200), nullable=False, index=True)
    album: Mapped[str] = mapped_column(String(200), nullable=False, index=True)

    price: Mapped[Decimal] = mapped_column(Numeric(precision=10, scale=2), nullable=False)
    quantity: Mapped[int] = mapped_column(Integer, nullable=False)

    format: Mapped[str] = mapped_column(String(20), nullable=False)
    category: Mapped[str] = mapped_column(String(20), nullable=False, index=True)

    external_id: Mapped[str | None] = mapped_column(Text, nullable=True)
    track_list: Mapped[list[str]] = mapped_column(
        ARRAY(Text), nullable=False, default=list, server_default="{}"
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )

    __table_args__ = (
        UniqueConstraint("artist", "album", "format", name="record_compound_unique_index"),
        CheckConstraint("quantity >= 0", name="quantity_non_negative"),
        CheckConstraint("price >= 0", name="price_non_negative"),
        CheckConstraint(
            f"format IN ({_quoted([f.value for f in RecordFormat])})", name="format_allowed"
        ),
        CheckConstraint(
            f"category IN ({_quoted([c.value for c in RecordCategory])})",
            name="category_allowed",
        ),
    )


def search_document(
    artist: ColumnElement[str], album: ColumnElement[str], category: ColumnElement[str]
) -> ColumnElement:
    """tsvector over the text-searchable fields, shared by the index and the queries."""
    separator = literal_column("' '")
    return func.to_tsvector(
        TEXT_SEARCH_CONFIG, artist + separator + album + separator + category
    )


Index(
    "record_search_index",
    search_document(RecordRow.__table__.c.artist, RecordRow.__table__.c.album, RecordRow.__table__.c.category),
    postgresql_using="gin",
)
