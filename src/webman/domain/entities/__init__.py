"""Domain entities for Webman.

Entities are pure Python dataclasses that represent core concepts.
They have no dependencies on infrastructure or external frameworks.
"""

from webman.domain.entities.default_header import DefaultHeader
from webman.domain.entities.proxy import BodyEncoding, ProxyResult

__all__ = [
    "BodyEncoding",
    "DefaultHeader",
    "ProxyResult",
]
