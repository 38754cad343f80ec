"""Repository for collection operations.

Provides CRUD operations for the collections table. Reads always load the
owned requests and refresh objects already present in the session.
"""

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from webman.infrastructure.persistence.models import CollectionModel


class CollectionRepository:
    """Repository for collection database operations."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize the repository with a database session.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def create(self, collection: CollectionModel) -> CollectionModel:
        """Create a new collection.

        Args:
            collection: The collection model to create.

        Returns:
            The created collection model.
        """
        self.session.add(collection)
        await self.session.flush()
        return collection

    async def get_by_id(self, collection_id: str) -> CollectionModel | None:
        """Get a collection by ID with its requests loaded.

        Args:
            collection_id: The collection ID.

        Returns:
            The collection model if found, None otherwise.
        """
        result = await self.session.execute(
            select(CollectionModel)
            .options(selectinload(CollectionModel.requests))
            .where(CollectionModel.id == collection_id)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def exists(self, collection_id: str) -> bool:
        """Check if a collection with the given ID exists."""
        result = await self.session.execute(
            select(CollectionModel.id).where(CollectionModel.id == collection_id).limit(1)
        )
        return result.scalar_one_or_none() is not None

    async def list_all(self) -> list[CollectionModel]:
        """List all collections, oldest first, with their requests loaded.

        Returns:
            List of collection models.
        """
        result = await self.session.execute(
            select(CollectionModel)
            .options(selectinload(CollectionModel.requests))
            .order_by(CollectionModel.created_at)
            .execution_options(populate_existing=True)
        )
        return list(result.scalars().all())

    async def update(self, collection: CollectionModel) -> CollectionModel:
        """Flush pending changes of a collection.

        Args:
            collection: The collection model with updated values.

        Returns:
            The updated collection model.
        """
        await self.session.flush()
        return collection

    async def delete_by_id(self, collection_id: str) -> int:
        """Delete the collection row with the given ID.

        Args:
            collection_id: The collection ID.

        Returns:
            Number of rows deleted.
        """
        result = await self.session.execute(
            delete(CollectionModel).where(CollectionModel.id == collection_id)
        )
        await self.session.flush()
        return result.rowcount
