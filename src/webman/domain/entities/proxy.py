"""Proxy relay result entity.

A ProxyResult is the normalized envelope returned for one relayed HTTP
exchange. The body is either the upstream JSON text verbatim or the
base64 encoding of the raw upstream bytes.
"""

from dataclasses import dataclass, field
from enum import Enum


class BodyEncoding(str, Enum):
    """How the relayed response body was encoded."""

    JSON = "json"
    BASE64 = "base64"


@dataclass
class ProxyResult:
    """Normalized upstream response.

    Attributes:
        status_code: Upstream HTTP status code.
        headers: Upstream headers, first value per header name.
        body: JSON text verbatim, or base64 of the raw bytes.
        encoding: Which of the two encodings ``body`` uses.
    """

    status_code: int
    headers: dict[str, str] = field(default_factory=dict)
    body: str = ""
    encoding: BodyEncoding = BodyEncoding.BASE64
