"""SQLModel data models.

This module defines the application's database tables using SQLModel.
Entities are flat: no relationships are declared between them.
"""

from typing import Optional
from sqlmodel import SQLModel, Field


class IdentityEquality:
    """Entities are equal when they are the same type and share a non-null id."""

    def __eq__(self, other):
        if self is other:
            return True
        if type(self) is not type(other):
            return False
        return self.id is not None and self.id == other.id

    def __hash__(self):
        return hash((type(self).__name__, self.id))


class Title(IdentityEquality, SQLModel, table=True):
    """A job title.

    Fields:
    - `id`: assigned by the database on first save, never changed afterwards
    - `name`: required display name
    """
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(nullable=False)


class Company(IdentityEquality, SQLModel, table=True):
    """A company offering jobs."""
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(nullable=False)
