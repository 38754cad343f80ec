"""Collections API routes.

Provides endpoints for managing collections and the saved requests
they own.
"""

from fastapi import APIRouter, Response, status
from fastapi.responses import JSONResponse

from webman.core.exceptions import NotFoundError, PersistenceError
from webman.core.logging import get_logger
from webman.infrastructure.api.dependencies import CollectionServiceDep
from webman.infrastructure.api.schemas import (
    CollectionRequest,
    CollectionResponse,
    ErrorResponse,
    SavedRequestPayload,
)

logger = get_logger(__name__)

router = APIRouter()


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def _persistence_error(e: PersistenceError, **context: str) -> JSONResponse:
    logger.error("Collection store operation failed", error=e.message, **context)
    return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, e.message)


@router.get(
    "",
    status_code=status.HTTP_200_OK,
    response_model=list[CollectionResponse],
    responses={500: {"model": ErrorResponse, "description": "Store error"}},
)
async def list_collections(
    service: CollectionServiceDep,
) -> list[CollectionResponse] | JSONResponse:
    """List all collections with their saved requests."""
    try:
        collections = await service.list_collections()
    except PersistenceError as e:
        return _persistence_error(e)

    logger.debug("Collections listed", count=len(collections))
    return [CollectionResponse.model_validate(c) for c in collections]


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=CollectionResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Malformed request body"},
        500: {"model": ErrorResponse, "description": "Store error"},
    },
)
async def create_collection(
    request: CollectionRequest,
    service: CollectionServiceDep,
) -> CollectionResponse | JSONResponse:
    """Create a new, empty collection."""
    try:
        collection = await service.create_collection(request.name, request.description)
    except PersistenceError as e:
        return _persistence_error(e)

    return CollectionResponse.model_validate(collection)


@router.get(
    "/{collection_id}",
    status_code=status.HTTP_200_OK,
    response_model=CollectionResponse,
    responses={
        404: {"model": ErrorResponse, "description": "Collection not found"},
        500: {"model": ErrorResponse, "description": "Store error"},
    },
)
async def get_collection(
    collection_id: str,
    service: CollectionServiceDep,
) -> CollectionResponse | JSONResponse:
    """Get one collection with its saved requests."""
    try:
        collection = await service.get_collection(collection_id)
    except NotFoundError as e:
        logger.info("Collection not found", collection_id=collection_id)
        return _error(status.HTTP_404_NOT_FOUND, e.message)
    except PersistenceError as e:
        return _persistence_error(e, collection_id=collection_id)

    return CollectionResponse.model_validate(collection)


@router.put(
    "/{collection_id}",
    status_code=status.HTTP_200_OK,
    response_model=CollectionResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Malformed request body"},
        404: {"model": ErrorResponse, "description": "Collection not found"},
        500: {"model": ErrorResponse, "description": "Store error"},
    },
)
async def update_collection(
    collection_id: str,
    request: CollectionRequest,
    service: CollectionServiceDep,
) -> CollectionResponse | JSONResponse:
    """Overwrite a collection's name and description."""
    try:
        collection = await service.update_collection(
            collection_id, request.name, request.description
        )
    except NotFoundError as e:
        logger.info("Collection update failed: not found", collection_id=collection_id)
        return _error(status.HTTP_404_NOT_FOUND, e.message)
    except PersistenceError as e:
        return _persistence_error(e, collection_id=collection_id)

    return CollectionResponse.model_validate(collection)


@router.delete(
    "/{collection_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={500: {"model": ErrorResponse, "description": "Store error"}},
)
async def delete_collection(
    collection_id: str,
    service: CollectionServiceDep,
) -> Response:
    """Delete a collection and all of its saved requests."""
    try:
        await service.delete_collection(collection_id)
    except PersistenceError as e:
        return _persistence_error(e, collection_id=collection_id)

    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/{collection_id}/requests",
    status_code=status.HTTP_201_CREATED,
    response_class=Response,
    responses={
        400: {"model": ErrorResponse, "description": "Malformed request body"},
        404: {"model": ErrorResponse, "description": "Collection not found"},
        500: {"model": ErrorResponse, "description": "Store error"},
    },
)
async def add_request(
    collection_id: str,
    request: SavedRequestPayload,
    service: CollectionServiceDep,
) -> Response:
    """Save a new request under a collection."""
    try:
        await service.add_request(collection_id, request.model_dump())
    except NotFoundError as e:
        logger.info("Request add failed: collection not found", collection_id=collection_id)
        return _error(status.HTTP_404_NOT_FOUND, e.message)
    except PersistenceError as e:
        return _persistence_error(e, collection_id=collection_id)

    return Response(status_code=status.HTTP_201_CREATED)


@router.put(
    "/{collection_id}/requests/{request_id}",
    status_code=status.HTTP_200_OK,
    response_class=Response,
    responses={
        400: {"model": ErrorResponse, "description": "Malformed request body"},
        404: {"model": ErrorResponse, "description": "Request not found"},
        500: {"model": ErrorResponse, "description": "Store error"},
    },
)
async def update_request(
    collection_id: str,
    request_id: str,
    request: SavedRequestPayload,
    service: CollectionServiceDep,
) -> Response:
    """Overwrite a saved request."""
    try:
        await service.update_request(collection_id, request_id, request.model_dump())
    except NotFoundError as e:
        logger.info(
            "Request update failed: not found",
            collection_id=collection_id,
            request_id=request_id,
        )
        return _error(status.HTTP_404_NOT_FOUND, e.message)
    except PersistenceError as e:
        return _persistence_error(e, collection_id=collection_id, request_id=request_id)

    return Response(status_code=status.HTTP_200_OK)


@router.delete(
    "/{collection_id}/requests/{request_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={
        404: {"model": ErrorResponse, "description": "Request not found"},
        500: {"model": ErrorResponse, "description": "Store error"},
    },
)
async def delete_request(
    collection_id: str,
    request_id: str,
    service: CollectionServiceDep,
) -> Response:
    """Delete a saved request from a collection."""
    try:
        await service.delete_request(collection_id, request_id)
    except NotFoundError as e:
        logger.info(
            "Request delete failed: not found",
            collection_id=collection_id,
            request_id=request_id,
        )
        return _error(status.HTTP_404_NOT_FOUND, e.message)
    except PersistenceError as e:
        return _persistence_error(e, collection_id=collection_id, request_id=request_id)

    return Response(status_code=status.HTTP_204_NO_CONTENT)
