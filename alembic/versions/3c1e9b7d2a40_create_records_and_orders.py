"""Create records and orders

Revision ID: 3c1e9b7d2a40
Revises:
Create Date: 2026-10-19 10:02:11.418207

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1e9b7d2a40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "records",
        sa.Column("id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("artist", sa.String(length=200), nullable=False),
        sa.Column("album", sa.String(length=200), nullable=False),
        sa.Column("price", sa.Numeric(precision=10, scale=2), nullable=False),
        sa.Column("quantity", sa.Integer(), nullable=False),
        sa.Column("format", sa.String(length=20), nullable=False),
        sa.Column("category", sa.String(length=20), nullable=False),
        sa.Column("external_id", sa.Text(), nullable=True),
        sa.Column(
            "track_list", postgresql.ARRAY(sa.Text()), server_default="{}", nullable=False
        ),
        sa.Column(
            "created_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False
        ),
        sa.Column(
            "updated_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False
        ),
        sa.CheckConstraint("quantity >= 0", name=op.f("ck_records_quantity_non_negative")),
        sa.CheckConstraint("price >= 0", name=op.f("ck_records_price_non_negative")),
        sa.CheckConstraint(
            "format IN ('vinyl', 'cd', 'cassette', 'digital')",
            name=op.f("ck_records_format_allowed"),
        ),
        sa.CheckConstraint(
            "category IN ('rock', 'jazz', 'hip-hop', 'classical', 'pop', 'alternative', 'indie')",
            name=op.f("ck_records_category_allowed"),
        ),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_records")),
        sa.UniqueConstraint("artist", "album", "format", name="record_compound_unique_index"),
    )
    op.create_index(op.f("ix_records_artist"), "records", ["artist"], unique=False)
    op.create_index(op.f("ix_records_album"), "records", ["album"], unique=False)
    op.create_index(op.f("ix_records_category"), "records", ["category"], unique=False)
    op.create_index(
        "record_search_index",
        "records",
        [
            sa.text(
                "to_tsvector('english'::regconfig, artist || ' ' || album || ' ' || category)"
            )
        ],
        unique=False,
        postgresql_using="gin",
    )

    op.create_table(
        "orders",
        sa.Column("id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("record_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("quantity", sa.Integer(), nullable=False),
        sa.Column(
            "created_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False
        ),
        sa.CheckConstraint("quantity > 0", name=op.f("ck_orders_quantity_positive")),
        sa.ForeignKeyConstraint(
            ["record_id"], ["records.id"], name=op.f("fk_orders_record_id_records")
        ),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_orders")),
    )
    op.create_index(op.f("ix_orders_record_id"), "orders", ["record_id"], unique=False)


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index(op.f("ix_orders_record_id"), table_name="orders")
    op.drop_table("orders")
    op.drop_index("record_search_index", table_name="records", postgresql_using="gin")
    op.drop_index(op.f("ix_records_category"), table_name="records")
    op.drop_index(op.f("ix_records_album"), table_name="records")
    op.drop_index(op.f("ix_records_artist"), table_name="records")
    op.drop_table("records")
