"""
Pydantic models for user data.

``UserCreate`` and ``UserUpdate`` describe request bodies.  Each store
variant returns its own read schema: ``UserRead`` for the in‑memory
store (sequential integer ids) and ``StoredUserRead`` for the SQLite
store (opaque string ids plus timestamps).  The two are deliberately
not merged so identifier types are never mixed.
"""

from typing import Optional

from pydantic import BaseModel, Field


class UserBase(BaseModel):
    name: str = Field(..., examples=["Ann"])
    email: str = Field(..., examples=["ann@example.com"])


class UserCreate(UserBase):
    """Schema for creating a user."""


class UserUpdate(BaseModel):
    """Schema for updating a user.

    All fields are optional; only values present in the request body
    are applied.  The identifier cannot be changed.
    """

    name: Optional[str] = None
    email: Optional[str] = None


class UserRead(UserBase):
    """A user held by the in‑memory store."""

    id: int

    model_config = {
        "from_attributes": True,
    }


class StoredUserRead(UserBase):
    """A user persisted by the SQLite store."""

    id: str
    created_at: str
    updated_at: str

    model_config = {
        "from_attributes": True,
    }
