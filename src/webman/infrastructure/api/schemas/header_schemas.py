"""Pydantic schemas for the default header catalog."""

from pydantic import BaseModel


class DefaultHeaderResponse(BaseModel):
    """One catalog entry. The static catalog carries no row ID, so ``id`` is empty."""

    id: str = ""
    name: str
    value: str
    description: str

    model_config = {"from_attributes": True}
