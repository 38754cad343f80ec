"""Pydantic schemas for the proxy endpoint."""

import base64
import binascii
from typing import Any

from pydantic import BaseModel, Field, ValidationInfo, field_validator

from webman.domain.entities import BodyEncoding


class ProxyRequest(BaseModel):
    """Outbound request description sent by the front-end.

    ``body`` is a byte array: either a standard base64 string (the usual
    JSON encoding of bytes) or a JSON array of integers 0-255.
    """

    method: str = Field(default="GET", description="HTTP method")
    url: str = Field(..., description="Absolute http(s) target URL")
    headers: dict[str, str] = Field(default_factory=dict)
    body: bytes | None = Field(default=None, description="Raw request body")

    @field_validator("method", "headers", mode="before")
    @classmethod
    def null_as_default(cls, v: Any, info: ValidationInfo) -> Any:
        """Treat JSON null as an omitted method or header map."""
        if v is None:
            return "GET" if info.field_name == "method" else {}
        return v

    @field_validator("body", mode="before")
    @classmethod
    def decode_body(cls, v: Any) -> bytes | None:
        """Decode the byte array from base64 text or a list of ints."""
        if v is None or isinstance(v, bytes):
            return v
        if isinstance(v, str):
            try:
                return base64.b64decode(v, validate=True)
            except binascii.Error as e:
                raise ValueError(f"body is not valid base64: {e}") from e
        if isinstance(v, list):
            if not all(isinstance(b, int) and not isinstance(b, bool) for b in v):
                raise ValueError("body array must contain integers")
            try:
                return bytes(v)
            except ValueError as e:
                raise ValueError("body array values must be in range 0-255") from e
        raise ValueError("body must be a base64 string or an array of bytes")


class ProxyResponse(BaseModel):
    """Normalized upstream response envelope."""

    status_code: int = Field(..., serialization_alias="statusCode")
    headers: dict[str, str] = Field(default_factory=dict)
    body: str = Field(
        ...,
        description="Upstream JSON text verbatim, or base64 of the raw bytes",
    )
    encoding: BodyEncoding = Field(
        ...,
        description="Which encoding body uses: json or base64",
    )

    model_config = {"from_attributes": True}
