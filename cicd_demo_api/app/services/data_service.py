"""
Operations spanning both collections.

The dashboard summary and the global reset read or modify users and
posts together, so they take the store lock for their whole duration.
"""

import logging

from ..core.store import InMemoryStore
from ..schemas.dashboard import DashboardSummary
from ..schemas.user import UserRead
from .post_service import with_author


logger = logging.getLogger(__name__)

RECENT_LIMIT = 3


class DataService:
    """Dashboard statistics and data reset."""

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    def dashboard_summary(self) -> DashboardSummary:
        """Return totals and the last three users and posts.

        Recent entries keep insertion order (oldest of the three
        first), matching how they appear in the full listings.
        """
        with self.store.lock:
            return DashboardSummary(
                total_users=self.store.count_users(),
                total_posts=self.store.count_posts(),
                recent_posts=[with_author(self.store, post) for post in self.store.recent_posts(RECENT_LIMIT)],
                recent_users=[UserRead.model_validate(user) for user in self.store.recent_users(RECENT_LIMIT)],
            )

    def reset(self) -> None:
        """Clear all users and posts and restart the id counters."""
        logger.warning("Clearing all users and posts")
        self.store.reset()
