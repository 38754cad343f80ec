"""Persistence repositories for database operations."""

from webman.infrastructure.persistence.repositories.collection_repository import (
    CollectionRepository,
)
from webman.infrastructure.persistence.repositories.default_header_repository import (
    DefaultHeaderRepository,
)
from webman.infrastructure.persistence.repositories.request_repository import (
    RequestRepository,
)

__all__ = [
    "CollectionRepository",
    "DefaultHeaderRepository",
    "RequestRepository",
]
