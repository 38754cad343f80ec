"""SQLAlchemy model for the requests table.

A request is a saved, reusable HTTP call template owned by exactly one
collection.
"""

from datetime import datetime

from sqlalchemy import JSON, DateTime, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from webman.infrastructure.persistence.database import Base
from webman.infrastructure.persistence.models.collection import utcnow


class RequestModel(Base):
    """SQLAlchemy model for the requests table.

    Attributes:
        id: Primary key (UUID string).
        collection_id: Foreign key to the owning collection.
        name: Display name of the saved request.
        method: HTTP method.
        url: Target URL.
        headers: Header name to value mapping.
        body: Stored request body template.
        body_type: Free-form tag describing the body encoding (e.g. "json", "raw").
        created_at: Timestamp when the request was created.
        updated_at: Timestamp when the request was last updated.
    """

    __tablename__ = "requests"

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        comment="Request ID (UUID)",
    )
    collection_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("collections.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="Foreign key to collections table",
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    method: Mapped[str] = mapped_column(String(16), nullable=False)
    url: Mapped[str] = mapped_column(Text, nullable=False)
    headers: Mapped[dict[str, str]] = mapped_column(
        JSON,
        nullable=False,
        default=dict,
        comment="Header name to value mapping",
    )
    body: Mapped[str] = mapped_column(Text, nullable=False, default="")
    body_type: Mapped[str] = mapped_column(String(32), nullable=False, default="")
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
    collection: Mapped["CollectionModel"] = relationship(  # noqa: F821
        "CollectionModel",
        back_populates="requests",
    )

    def __repr__(self) -> str:
        return f"<Request(id={self.id}, method={self.method}, url={self.url})>"
