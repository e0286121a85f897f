"""
Pydantic models for user data.

``UserCreate`` accepts every field as optional so that missing values
reach the service layer, which reports them with the API's own error
message instead of a generic validation failure.
"""

from typing import Optional

from pydantic import Field

from .common import CamelModel


class UserCreate(CamelModel):
    """Schema for creating a user.

    ``name`` and ``email`` are required by the service; ``role``
    defaults to ``"user"`` when omitted.
    """

    name: Optional[str] = Field(None, examples=["Test User"])
    email: Optional[str] = Field(None, examples=["test@example.com"])
    role: Optional[str] = Field(None, examples=["user"])


class UserRead(CamelModel):
    """Schema for reading a user from the API."""

    id: int
    name: str
    email: str
    role: str

    model_config = {"from_attributes": True}
