"""
Business logic for posts.

Posts reference users by id.  The reference is checked once, when the
post is created; on every read the author's name is looked up again,
so a post whose user no longer exists is shown with the author
``"Unknown"``.
"""

import logging
from typing import List, Optional

from ..core.errors import InvalidInput, InvalidReference, NotFound
from ..core.ids import is_blank, parse_leading_int
from ..core.store import InMemoryStore, Post
from ..schemas.post import PostCreate, PostRead


logger = logging.getLogger(__name__)

UNKNOWN_AUTHOR = "Unknown"


def with_author(store: InMemoryStore, post: Post) -> PostRead:
    """Build the read model for ``post`` with its author's name resolved."""
    user = store.find_user(post.user_id)
    return PostRead(
        id=post.id,
        title=post.title,
        content=post.content,
        user_id=post.user_id,
        author=user.name if user is not None else UNKNOWN_AUTHOR,
    )


class PostService:
    """Service for listing, reading and creating posts."""

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    def list_posts(self) -> List[PostRead]:
        """Return all posts in insertion order, each with its author."""
        with self.store.lock:
            return [with_author(self.store, post) for post in self.store.list_posts()]

    def get_post(self, post_id: Optional[int]) -> PostRead:
        """Retrieve a post by ID with its author.

        Raises ``NotFound`` when no post has this id.
        """
        with self.store.lock:
            post = self.store.find_post(post_id) if post_id is not None else None
            if post is None:
                raise NotFound("Post not found")
            return with_author(self.store, post)

    def create_post(self, data: PostCreate) -> PostRead:
        """Create a new post.

        Required fields are checked before the author reference, so a
        request missing ``title`` reports the missing field even when
        ``userId`` is also wrong.  The reference check and the insert
        happen under the store lock; a rejected post never consumes an
        id.

        ``userId`` is read up to its first non-digit, so ``"2"`` and
        ``"2abc"`` both mean user 2; values with no leading integer
        never match a user.
        """
        if not data.title or not data.content or is_blank(data.user_id):
            logger.info("Rejected post creation: required field missing")
            raise InvalidInput("Title, content, and userId are required")
        user_id = parse_leading_int(data.user_id)
        with self.store.lock:
            if user_id is None or self.store.find_user(user_id) is None:
                logger.info("Rejected post creation: unknown user %r", data.user_id)
                raise InvalidReference("Invalid userId")
            post = self.store.add_post(title=data.title, content=data.content, user_id=user_id)
            created = with_author(self.store, post)
        logger.info("Created post %d by user %d", post.id, post.user_id)
        return created
