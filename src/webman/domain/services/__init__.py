"""Domain services for Webman.

Services contain the business logic behind the API routes.
"""

from webman.domain.services.header_service import DEFAULT_HEADERS, HeaderService
from webman.domain.services.collection_service import CollectionService

__all__ = [
    "DEFAULT_HEADERS",
    "CollectionService",
    "HeaderService",
]
