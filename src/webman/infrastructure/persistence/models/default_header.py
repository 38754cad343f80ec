"""SQLAlchemy model for the default_headers table.

Reference catalog of commonly used HTTP headers, seeded once at startup.
"""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from webman.infrastructure.persistence.database import Base


class DefaultHeaderModel(Base):
    """SQLAlchemy model for the default_headers table.

    Attributes:
        id: Primary key (UUID string).
        name: Header name.
        value: Suggested header value.
        description: Human-readable explanation.
    """

    __tablename__ = "default_headers"

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        comment="Default header ID (UUID)",
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    value: Mapped[str] = mapped_column(Text, nullable=False, default="")
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")

    def __repr__(self) -> str:
        return f"<DefaultHeader(id={self.id}, name={self.name})>"
