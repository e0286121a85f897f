"""
In-memory data tier.

``InMemoryStore`` owns the user and post collections together with
their id counters.  Each collection is kept twice: as a list that
preserves insertion order for listings, and as a dictionary keyed by
id for lookups.  Both views are only touched while holding ``lock``.

The store deliberately knows nothing about validation or HTTP.  The
service layer enforces required fields and referential integrity and
uses ``lock`` to make its check-then-act sequences atomic.  The lock
is re-entrant so services can call store methods while holding it.
"""

import logging
import threading
from dataclasses import asdict, dataclass
from typing import Dict, List, Optional


logger = logging.getLogger(__name__)

# Counters restart here after ``reset``.
COUNTER_FLOOR = 1


@dataclass
class User:
    id: int
    name: str
    email: str
    role: str = "user"

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class Post:
    id: int
    title: str
    content: str
    user_id: int

    def to_dict(self) -> dict:
        return asdict(self)


class InMemoryStore:
    """Process-local storage for users and posts."""

    def __init__(self) -> None:
        self.lock = threading.RLock()
        self._users: List[User] = []
        self._users_by_id: Dict[int, User] = {}
        self._posts: List[Post] = []
        self._posts_by_id: Dict[int, Post] = {}
        self.next_user_id = COUNTER_FLOOR
        self.next_post_id = COUNTER_FLOOR

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------
    def list_users(self) -> List[User]:
        with self.lock:
            return list(self._users)

    def list_posts(self) -> List[Post]:
        with self.lock:
            return list(self._posts)

    def find_user(self, user_id: int) -> Optional[User]:
        with self.lock:
            return self._users_by_id.get(user_id)

    def find_post(self, post_id: int) -> Optional[Post]:
        with self.lock:
            return self._posts_by_id.get(post_id)

    def count_users(self) -> int:
        with self.lock:
            return len(self._users)

    def count_posts(self) -> int:
        with self.lock:
            return len(self._posts)

    def recent_users(self, limit: int) -> List[User]:
        """Return the last ``limit`` users, oldest first."""
        with self.lock:
            return self._users[-limit:] if limit > 0 else []

    def recent_posts(self, limit: int) -> List[Post]:
        """Return the last ``limit`` posts, oldest first."""
        with self.lock:
            return self._posts[-limit:] if limit > 0 else []

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------
    def add_user(self, name: str, email: str, role: str) -> User:
        """Append a user under the next free id."""
        with self.lock:
            user = User(id=self.next_user_id, name=name, email=email, role=role)
            self._users.append(user)
            self._users_by_id[user.id] = user
            self.next_user_id += 1
            return user

    def add_post(self, title: str, content: str, user_id: int) -> Post:
        """Append a post under the next free id.

        No check is made that ``user_id`` exists; callers do that
        while holding ``lock``.
        """
        with self.lock:
            post = Post(id=self.next_post_id, title=title, content=content, user_id=user_id)
            self._posts.append(post)
            self._posts_by_id[post.id] = post
            self.next_post_id += 1
            return post

    def insert_user(self, user: User) -> None:
        """Insert a user with a preassigned id (used for seeding)."""
        with self.lock:
            if user.id in self._users_by_id:
                raise ValueError(f"User {user.id} already exists")
            self._users.append(user)
            self._users_by_id[user.id] = user
            self.next_user_id = max(self.next_user_id, user.id + 1)

    def insert_post(self, post: Post) -> None:
        """Insert a post with a preassigned id (used for seeding)."""
        with self.lock:
            if post.id in self._posts_by_id:
                raise ValueError(f"Post {post.id} already exists")
            self._posts.append(post)
            self._posts_by_id[post.id] = post
            self.next_post_id = max(self.next_post_id, post.id + 1)

    def reset(self) -> None:
        """Drop every record and restart both counters at the floor."""
        with self.lock:
            self._users.clear()
            self._users_by_id.clear()
            self._posts.clear()
            self._posts_by_id.clear()
            self.next_user_id = COUNTER_FLOOR
            self.next_post_id = COUNTER_FLOOR
        logger.info("Store reset; counters restarted at %d", COUNTER_FLOOR)


DEMO_USERS = (
    User(id=1, name="John Doe", email="john@example.com", role="admin"),
    User(id=2, name="Jane Smith", email="jane@example.com", role="user"),
)

DEMO_POSTS = (
    Post(id=1, title="Welcome to Our App", content="This is a 3-tier application demo", user_id=1),
    Post(id=2, title="CI/CD Best Practices", content="Learn about continuous integration", user_id=2),
)


def seed_demo_data(store: InMemoryStore) -> None:
    """Load the two demo users and two demo posts into ``store``.

    Records are copied so the module-level demo tuples are never
    shared between stores.
    """
    with store.lock:
        for user in DEMO_USERS:
            store.insert_user(User(**user.to_dict()))
        for post in DEMO_POSTS:
            store.insert_post(Post(**post.to_dict()))
    logger.debug("Seeded %d users and %d posts", len(DEMO_USERS), len(DEMO_POSTS))
