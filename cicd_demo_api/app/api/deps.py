"""
FastAPI dependencies.

The store, settings and system service live on ``app.state`` (see
``main.create_app``).  Handlers obtain services through these
providers, so each application instance works on its own store.
"""

from typing import Optional

from fastapi import Depends, Request

from ..core.ids import parse_leading_int
from ..core.store import InMemoryStore
from ..services.data_service import DataService
from ..services.post_service import PostService
from ..services.system_service import SystemService
from ..services.user_service import UserService


def get_store(request: Request) -> InMemoryStore:
    return request.app.state.store


def get_user_service(store: InMemoryStore = Depends(get_store)) -> UserService:
    return UserService(store)


def get_post_service(store: InMemoryStore = Depends(get_store)) -> PostService:
    return PostService(store)


def get_data_service(store: InMemoryStore = Depends(get_store)) -> DataService:
    return DataService(store)


def get_system_service(request: Request) -> SystemService:
    # Shared per application so uptime counts from startup.
    return request.app.state.system_service


def parse_id(raw: str) -> Optional[int]:
    """Parse a path id by its leading digits; ``None`` if there are none."""
    return parse_leading_int(raw)
