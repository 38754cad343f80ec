"""Repository for the persisted default header catalog."""

import uuid
from collections.abc import Iterable

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from webman.domain.entities import DefaultHeader
from webman.infrastructure.persistence.models import DefaultHeaderModel


class DefaultHeaderRepository:
    """Repository for default header database operations."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def count(self) -> int:
        """Count persisted catalog rows."""
        result = await self.session.execute(
            select(func.count()).select_from(DefaultHeaderModel)
        )
        return result.scalar_one()

    async def create_many(self, headers: Iterable[DefaultHeader]) -> list[DefaultHeaderModel]:
        """Persist catalog entries, each with a fresh UUID.

        Args:
            headers: Catalog entries to store.

        Returns:
            The created models.
        """
        models = [
            DefaultHeaderModel(
                id=str(uuid.uuid4()),
                name=header.name,
                value=header.value,
                description=header.description,
            )
            for header in headers
        ]
        self.session.add_all(models)
        await self.session.flush()
        return models

    async def list_all(self) -> list[DefaultHeaderModel]:
        """List persisted catalog rows."""
        result = await self.session.execute(select(DefaultHeaderModel))
        return list(result.scalars().all())
