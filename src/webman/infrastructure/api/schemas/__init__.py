"""API Schemas for request/response validation."""

from webman.infrastructure.api.schemas.collection_schemas import (
    CollectionRequest,
    CollectionResponse,
    SavedRequestPayload,
    SavedRequestResponse,
)
from webman.infrastructure.api.schemas.error_schemas import ErrorResponse, ProxyErrorResponse
from webman.infrastructure.api.schemas.header_schemas import DefaultHeaderResponse
from webman.infrastructure.api.schemas.proxy_schemas import ProxyRequest, ProxyResponse

__all__ = [
    "CollectionRequest",
    "CollectionResponse",
    "DefaultHeaderResponse",
    "ErrorResponse",
    "ProxyErrorResponse",
    "ProxyRequest",
    "ProxyResponse",
    "SavedRequestPayload",
    "SavedRequestResponse",
]
