"""
Business logic for users.

The ``UserService`` validates incoming user data and delegates storage
to the injected ``InMemoryStore``.  Users can only be added; there is
no update or delete.
"""

import logging
from typing import List, Optional

from ..core.errors import InvalidInput, NotFound
from ..core.store import InMemoryStore
from ..schemas.user import UserCreate, UserRead


logger = logging.getLogger(__name__)

DEFAULT_ROLE = "user"


class UserService:
    """Service for listing, reading and creating users."""

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    def list_users(self) -> List[UserRead]:
        """Return all users in insertion order."""
        return [UserRead.model_validate(user) for user in self.store.list_users()]

    def get_user(self, user_id: Optional[int]) -> UserRead:
        """Retrieve a user by ID.

        Raises ``NotFound`` when no user has this id.  ``None`` (an id
        that could not be parsed) is treated the same way.
        """
        user = self.store.find_user(user_id) if user_id is not None else None
        if user is None:
            raise NotFound("User not found")
        return UserRead.model_validate(user)

    def create_user(self, data: UserCreate) -> UserRead:
        """Create a new user.

        ``name`` and ``email`` must be present and non-empty, otherwise
        ``InvalidInput`` is raised and nothing is stored.  ``role``
        falls back to ``"user"`` when omitted.
        """
        if not data.name or not data.email:
            logger.info("Rejected user creation: name or email missing")
            raise InvalidInput("Name and email are required")
        role = data.role if data.role is not None else DEFAULT_ROLE
        user = self.store.add_user(name=data.name, email=data.email, role=role)
        logger.info("Created user %d (%s)", user.id, user.email)
        return UserRead.model_validate(user)
