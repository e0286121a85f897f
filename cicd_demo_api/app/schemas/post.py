"""
Pydantic models for posts.

Posts reference their author by ``userId``.  Read models carry the
author's display name, resolved when the post is read.
"""

from typing import Any, Optional

from pydantic import Field

from .common import CamelModel


class PostCreate(CamelModel):
    """Schema for creating a post.

    All fields are required by the service.  ``userId`` is kept as sent
    and parsed by the service, so values that are not ids (``"abc"``,
    ``true``) are reported as an invalid reference rather than a
    malformed body.
    """

    title: Optional[str] = Field(None, examples=["Test Post"])
    content: Optional[str] = Field(None, examples=["This is a test post content"])
    user_id: Any = Field(None, examples=[1])


class PostRead(CamelModel):
    """Schema for reading a post, including its resolved author."""

    id: int
    title: str
    content: str
    user_id: int
    author: str
