"""Collection service for business logic.

Handles CRUD for collections and the saved requests they own. Every
mutating operation is one unit of work: it re-reads its target to report
unknown IDs as NotFoundError, applies the change and commits.
"""

import uuid
from datetime import datetime, timezone
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from webman.core.exceptions import NotFoundError, PersistenceError
from webman.core.logging import get_logger
from webman.infrastructure.persistence.models import CollectionModel, RequestModel
from webman.infrastructure.persistence.repositories import (
    CollectionRepository,
    RequestRepository,
)

logger = get_logger(__name__)

# Caller-editable request fields; id, collection_id and timestamps are server-owned
REQUEST_FIELDS = ("name", "method", "url", "headers", "body", "body_type")


class CollectionService:
    """Service for collection and saved request business logic."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize the service.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session
        self.collections = CollectionRepository(session)
        self.requests = RequestRepository(session)

    async def _commit(self) -> None:
        try:
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise PersistenceError(str(e)) from e

    async def list_collections(self) -> list[CollectionModel]:
        """List all collections with their requests.

        Returns:
            All collections, oldest first. Empty when there are none.

        Raises:
            PersistenceError: If the store read fails.
        """
        try:
            return await self.collections.list_all()
        except SQLAlchemyError as e:
            raise PersistenceError(str(e)) from e

    async def create_collection(self, name: str, description: str = "") -> CollectionModel:
        """Create a new, empty collection.

        Args:
            name: Collection name.
            description: Optional description.

        Returns:
            The created collection model.

        Raises:
            PersistenceError: If the store write fails.
        """
        now = datetime.now(timezone.utc)
        collection = CollectionModel(
            id=str(uuid.uuid4()),
            name=name,
            description=description or "",
            requests=[],
            created_at=now,
            updated_at=now,
        )
        try:
            await self.collections.create(collection)
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise PersistenceError(str(e)) from e
        await self._commit()

        logger.info("Collection created", collection_id=collection.id, collection_name=name)
        return collection

    async def get_collection(self, collection_id: str) -> CollectionModel:
        """Get one collection with its requests.

        Args:
            collection_id: The collection ID.

        Returns:
            The collection model.

        Raises:
            NotFoundError: If no collection has this ID.
            PersistenceError: If the store read fails.
        """
        try:
            collection = await self.collections.get_by_id(collection_id)
        except SQLAlchemyError as e:
            raise PersistenceError(str(e)) from e

        if collection is None:
            raise NotFoundError("collection not found")
        return collection

    async def update_collection(
        self, collection_id: str, name: str, description: str = ""
    ) -> CollectionModel:
        """Overwrite a collection's name and description.

        Args:
            collection_id: The collection ID.
            name: New name.
            description: New description.

        Returns:
            The updated collection model.

        Raises:
            NotFoundError: If no collection has this ID.
            PersistenceError: If the store write fails.
        """
        collection = await self.get_collection(collection_id)

        collection.name = name
        collection.description = description or ""
        collection.updated_at = datetime.now(timezone.utc)
        try:
            await self.collections.update(collection)
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise PersistenceError(str(e)) from e
        await self._commit()

        logger.info("Collection updated", collection_id=collection_id)
        return collection

    async def delete_collection(self, collection_id: str) -> None:
        """Delete a collection and every request it owns.

        Child rows go first, then the collection row, in a single
        transaction. Deleting an unknown ID succeeds without changes.

        Args:
            collection_id: The collection ID.

        Raises:
            PersistenceError: If either delete fails; nothing is removed.
        """
        try:
            requests_deleted = await self.requests.delete_by_collection(collection_id)
            await self.collections.delete_by_id(collection_id)
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise PersistenceError(str(e)) from e
        await self._commit()

        logger.info(
            "Collection deleted",
            collection_id=collection_id,
            requests_deleted=requests_deleted,
        )

    async def add_request(
        self, collection_id: str, request_data: dict[str, Any]
    ) -> RequestModel:
        """Save a new request under an existing collection.

        Any ID or collection ID present in ``request_data`` is ignored.

        Args:
            collection_id: The owning collection ID.
            request_data: Request fields (name, method, url, headers, body, body_type).

        Returns:
            The created request model with its server-assigned ID.

        Raises:
            NotFoundError: If the collection does not exist.
            PersistenceError: If the store write fails.
        """
        try:
            parent_exists = await self.collections.exists(collection_id)
        except SQLAlchemyError as e:
            raise PersistenceError(str(e)) from e
        if not parent_exists:
            raise NotFoundError("collection not found")

        now = datetime.now(timezone.utc)
        request = RequestModel(
            id=str(uuid.uuid4()),
            collection_id=collection_id,
            created_at=now,
            updated_at=now,
            **_request_fields(request_data),
        )
        try:
            await self.requests.create(request)
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise PersistenceError(str(e)) from e
        await self._commit()

        logger.info(
            "Request added",
            collection_id=collection_id,
            request_id=request.id,
            method=request.method,
        )
        return request

    async def update_request(
        self, collection_id: str, request_id: str, request_data: dict[str, Any]
    ) -> RequestModel:
        """Overwrite a saved request.

        The request stays under ``collection_id`` whatever the payload says;
        ``created_at`` is kept.

        Args:
            collection_id: The owning collection ID.
            request_id: The request ID.
            request_data: Request fields (name, method, url, headers, body, body_type).

        Returns:
            The updated request model.

        Raises:
            NotFoundError: If no request with this ID exists under the collection.
            PersistenceError: If the store write fails.
        """
        try:
            request = await self.requests.get_in_collection(collection_id, request_id)
        except SQLAlchemyError as e:
            raise PersistenceError(str(e)) from e
        if request is None:
            raise NotFoundError("request not found")

        for field, value in _request_fields(request_data).items():
            setattr(request, field, value)
        request.collection_id = collection_id
        request.updated_at = datetime.now(timezone.utc)
        try:
            await self.requests.update(request)
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise PersistenceError(str(e)) from e
        await self._commit()

        logger.info("Request updated", collection_id=collection_id, request_id=request_id)
        return request

    async def delete_request(self, collection_id: str, request_id: str) -> None:
        """Delete a saved request scoped to its collection.

        Args:
            collection_id: The owning collection ID.
            request_id: The request ID.

        Raises:
            NotFoundError: If the (collection, request) pair does not exist.
            PersistenceError: If the store write fails.
        """
        try:
            deleted = await self.requests.delete_in_collection(collection_id, request_id)
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise PersistenceError(str(e)) from e
        if deleted == 0:
            raise NotFoundError("request not found")
        await self._commit()

        logger.info("Request deleted", collection_id=collection_id, request_id=request_id)


def _request_fields(request_data: dict[str, Any]) -> dict[str, Any]:
    """Pick the caller-editable fields, normalizing missing optional ones."""
    fields = {field: request_data[field] for field in REQUEST_FIELDS if field in request_data}
    fields["headers"] = dict(fields.get("headers") or {})
    fields["body"] = fields.get("body") or ""
    fields["body_type"] = fields.get("body_type") or ""
    return fields
