"""Pydantic request/response schemas used by the API.

Schemas keep API input/output shapes stable and provide validation for
resource handlers and tests. A missing or null `name` fails validation
before any database work is attempted.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional

# ids are stored as signed 64-bit integers
MAX_ID = 2**63 - 1


class TitleIn(BaseModel):
    """Payload for creating or updating a `Title`."""
    id: Optional[int] = Field(default=None, le=MAX_ID)
    name: str


class TitleOut(BaseModel):
    """Serialized `Title` returned by the API."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str


class CompanyIn(BaseModel):
    """Payload for creating or updating a `Company`."""
    id: Optional[int] = Field(default=None, le=MAX_ID)
    name: str


class CompanyOut(BaseModel):
    """Serialized `Company` returned by the API."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str


class FieldErrorOut(BaseModel):
    objectName: str
    field: str
    message: str


class ErrorOut(BaseModel):
    """Error body produced by the exception handlers."""
    message: str
    title: Optional[str] = None
    entityName: Optional[str] = None
    errorKey: Optional[str] = None
    fieldErrors: Optional[list[FieldErrorOut]] = None
