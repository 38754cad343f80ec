"""Pydantic schemas for error envelopes."""

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Generic error envelope."""

    error: str


class ProxyErrorResponse(BaseModel):
    """Error envelope of the proxy endpoint."""

    message: str = "fail"
    error: str
