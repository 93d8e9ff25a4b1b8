"""Pydantic DTOs (Data Transfer Objects) for the client feature."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from client_browser.domain.entities import ClientType


class ClientCreate(BaseModel):
    """Schema for the add-client form.

    Empty, null or absent ``name`` / ``email`` are accepted here and
    rejected by the record factory, which reports every missing field at once.
    """

    model_config = ConfigDict(populate_by_name=True)

    name: str | None = Field(None, examples=["John Doe"])
    type: ClientType = Field(ClientType.INDIVIDUAL, examples=["Individual"])
    email: str | None = Field(None, examples=["johndoe@email.com"])
    updated_by: str | None = Field(None, alias="updatedBy", examples=["current user"])


class ClientResponse(BaseModel):
    """Schema handed to the presentation layer, serialized with camelCase keys."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int
    name: str
    type: ClientType
    email: str
    updated_by: str = Field(serialization_alias="updatedBy")
    created_at: datetime = Field(serialization_alias="createdAt")
    updated_at: datetime = Field(serialization_alias="updatedAt")
