"""Repository for saved request operations."""

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from webman.infrastructure.persistence.models import RequestModel


class RequestRepository:
    """Repository for saved request database operations."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize the repository.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def create(self, request: RequestModel) -> RequestModel:
        """Create a new saved request.

        Args:
            request: The request model to create.

        Returns:
            The created request model.
        """
        self.session.add(request)
        await self.session.flush()
        return request

    async def get_in_collection(
        self, collection_id: str, request_id: str
    ) -> RequestModel | None:
        """Get a request by ID, scoped to its owning collection.

        Args:
            collection_id: The owning collection ID.
            request_id: The request ID.

        Returns:
            The request model if found under that collection, None otherwise.
        """
        result = await self.session.execute(
            select(RequestModel).where(
                RequestModel.id == request_id,
                RequestModel.collection_id == collection_id,
            )
        )
        return result.scalar_one_or_none()

    async def update(self, request: RequestModel) -> RequestModel:
        """Flush pending changes of a request."""
        await self.session.flush()
        return request

    async def delete_in_collection(self, collection_id: str, request_id: str) -> int:
        """Delete a request matching both IDs.

        Args:
            collection_id: The owning collection ID.
            request_id: The request ID.

        Returns:
            Number of rows deleted (0 when the pair does not exist).
        """
        result = await self.session.execute(
            delete(RequestModel).where(
                RequestModel.id == request_id,
                RequestModel.collection_id == collection_id,
            )
        )
        await self.session.flush()
        return result.rowcount

    async def delete_by_collection(self, collection_id: str) -> int:
        """Delete every request owned by a collection.

        Args:
            collection_id: The owning collection ID.

        Returns:
            Number of rows deleted.
        """
        result = await self.session.execute(
            delete(RequestModel).where(RequestModel.collection_id == collection_id)
        )
        await self.session.flush()
        return result.rowcount
