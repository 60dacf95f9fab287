# app/application/dtos/client_dto.py

"""
Schemas for client data.

Input schemas only coerce types; every field is optional at this level so
that the domain validators can report all missing or invalid fields of a
request at once.
"""

from uuid import UUID
from datetime import datetime
from typing import Optional
from pydantic import ConfigDict, Field

from app.application.dtos.base_dto import CustomBaseModel, TrimmedStr


class ClientCreate(CustomBaseModel):
    """
    Schema for creating a client.
    """
    model_config = ConfigDict(
        json_schema_extra={
            "required": ["name", "email", "password", "phone", "age"],
            "example": {
                "name": "Ana Ruiz",
                "email": "ana@x.com",
                "password": "123456",
                "phone": "+573000000",
                "age": 25,
            },
        }
    )

    name: Optional[TrimmedStr] = Field(None, description="Full name, 2 to 50 characters.")
    email: Optional[TrimmedStr] = Field(None, description="Unique email address.")
    password: Optional[str] = Field(None, description="Password, at least 6 characters.")
    phone: Optional[TrimmedStr] = Field(None, description="Phone number, optional leading '+'.")
    age: Optional[int] = Field(None, description="Age between 18 and 120.")


class ClientUpdate(CustomBaseModel):
    """
    Schema for a partial client update.

    Only the fields present in the body are validated and written.
    """
    model_config = ConfigDict(json_schema_extra={"example": {"phone": "+573001112233"}})

    name: Optional[TrimmedStr] = Field(None, description="Full name, 2 to 50 characters.")
    email: Optional[TrimmedStr] = Field(None, description="Unique email address.")
    password: Optional[str] = Field(None, description="New password, at least 6 characters.")
    phone: Optional[TrimmedStr] = Field(None, description="Phone number, optional leading '+'.")
    age: Optional[int] = Field(None, description="Age between 18 and 120.")


class ClientOutput(CustomBaseModel):
    """
    Schema for returning client data without the password.
    """
    id: UUID = Field(..., description="Unique identifier of the client.")
    name: str
    email: str
    phone: str
    age: int
    created_at: datetime = Field(..., description="Creation date and time.")
    updated_at: Optional[datetime] = Field(None, description="Last update date and time.")


class ClientSummary(CustomBaseModel):
    """Contact data embedded in reservation responses."""
    id: UUID
    name: str
    email: str
    phone: str
