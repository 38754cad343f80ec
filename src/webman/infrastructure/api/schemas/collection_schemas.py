"""Pydantic schemas for collection and saved request endpoints."""

from datetime import datetime
from typing import Any

from pydantic import AliasChoices, BaseModel, Field, ValidationInfo, field_validator


class CollectionRequest(BaseModel):
    """Request body for creating or updating a collection."""

    name: str = Field(..., min_length=1, description="Collection name")
    description: str = Field(default="", description="Optional description")

    @field_validator("description", mode="before")
    @classmethod
    def null_as_empty(cls, v: Any) -> Any:
        """Treat JSON null as an empty description."""
        return "" if v is None else v


class SavedRequestPayload(BaseModel):
    """Request body for adding or updating a saved request.

    ``id`` and ``collection_id`` are accepted for round-tripping but the
    server always assigns or forces them.
    """

    id: str | None = Field(default=None, description="Ignored; assigned by the server")
    collection_id: str | None = Field(
        default=None, description="Ignored; taken from the URL path"
    )
    name: str = Field(..., description="Display name")
    method: str = Field(..., description="HTTP method")
    url: str = Field(..., description="Target URL")
    headers: dict[str, str] = Field(default_factory=dict)
    body: str = Field(default="", description="Stored request body template")
    body_type: str = Field(
        default="",
        validation_alias=AliasChoices("body_type", "bodyType"),
        description="Free-form body encoding tag, e.g. json or raw",
    )

    @field_validator("headers", "body", "body_type", mode="before")
    @classmethod
    def null_as_zero_value(cls, v: Any, info: ValidationInfo) -> Any:
        """Treat JSON null in optional fields as the empty value."""
        if v is None:
            return {} if info.field_name == "headers" else ""
        return v


class SavedRequestResponse(BaseModel):
    """A saved request as returned inside a collection."""

    id: str
    collection_id: str
    name: str
    method: str
    url: str
    headers: dict[str, str]
    body: str
    body_type: str
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class CollectionResponse(BaseModel):
    """A collection with its saved requests."""

    id: str = Field(..., description="Collection ID (UUID)")
    name: str = Field(..., description="Collection name")
    description: str = Field(default="", description="Collection description")
    requests: list[SavedRequestResponse] = Field(default_factory=list)
    created_at: datetime = Field(..., description="When the collection was created")
    updated_at: datetime = Field(..., description="When the collection was last updated")

    model_config = {"from_attributes": True}
