"""create_webman_tables

Revision ID: 4f1c2a9b7d01
Revises:
Create Date: 2026-10-17 10:00:00.000000

"""

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "4f1c2a9b7d01"
down_revision: str | Sequence[str] | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Create collections, requests and default_headers tables."""
    op.create_table(
        "collections",
        sa.Column("id", sa.String(length=36), nullable=False, comment="Collection ID (UUID)"),
        sa.Column("name", sa.String(length=255), nullable=False, comment="Collection name"),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "requests",
        sa.Column("id", sa.String(length=36), nullable=False, comment="Request ID (UUID)"),
        sa.Column(
            "collection_id",
            sa.String(length=36),
            nullable=False,
            comment="Foreign key to collections table",
        ),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("method", sa.String(length=16), nullable=False),
        sa.Column("url", sa.Text(), nullable=False),
        sa.Column(
            "headers", sa.JSON(), nullable=False, comment="Header name to value mapping"
        ),
        sa.Column("body", sa.Text(), nullable=False),
        sa.Column("body_type", sa.String(length=32), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["collection_id"], ["collections.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        op.f("ix_requests_collection_id"), "requests", ["collection_id"], unique=False
    )

    op.create_table(
        "default_headers",
        sa.Column(
            "id", sa.String(length=36), nullable=False, comment="Default header ID (UUID)"
        ),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("value", sa.Text(), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )


def downgrade() -> None:
    """Drop all Webman tables."""
    op.drop_table("default_headers")
    op.drop_index(op.f("ix_requests_collection_id"), table_name="requests")
    op.drop_table("requests")
    op.drop_table("collections")
