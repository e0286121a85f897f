"""Pydantic model for the dashboard summary."""

from typing import List

from .common import CamelModel
from .post import PostRead
from .user import UserRead


class DashboardSummary(CamelModel):
    """Totals plus the three most recently created users and posts."""

    total_users: int
    total_posts: int
    recent_posts: List[PostRead]
    recent_users: List[UserRead]
