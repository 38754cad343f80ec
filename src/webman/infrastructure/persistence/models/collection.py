"""SQLAlchemy model for the collections table.

Collections group saved HTTP requests under a user-chosen name.
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from webman.infrastructure.persistence.database import Base


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class CollectionModel(Base):
    """SQLAlchemy model for the collections table.

    Attributes:
        id: Primary key (UUID string).
        name: Collection name.
        description: Free-form description, empty when not given.
        requests: Saved requests owned by this collection, oldest first.
        created_at: Timestamp when the collection was created.
        updated_at: Timestamp when the collection was last updated.
    """

    __tablename__ = "collections"

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        comment="Collection ID (UUID)",
    )
    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Collection name",
    )
    description: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        default="",
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )

    # Relationships
    requests: Mapped[list["RequestModel"]] = relationship(  # noqa: F821
        "RequestModel",
        back_populates="collection",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="RequestModel.created_at",
    )

    def __repr__(self) -> str:
        return f"<Collection(id={self.id}, name={self.name})>"
