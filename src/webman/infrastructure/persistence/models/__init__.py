"""SQLAlchemy models for Webman tables.

All models inherit from the Base class defined in database.py and are
created on application startup when auto-create is enabled.
"""

from webman.infrastructure.persistence.models.collection import CollectionModel
from webman.infrastructure.persistence.models.default_header import DefaultHeaderModel
from webman.infrastructure.persistence.models.request import RequestModel

__all__ = [
    "CollectionModel",
    "DefaultHeaderModel",
    "RequestModel",
]
