"""
Top-level routers.

``api_router`` aggregates the data endpoints mounted under ``/api``;
``system_router`` carries the root-level health, version and metrics
routes.  When new domains are introduced, include their routers here.
"""

from fastapi import APIRouter

from .endpoints import dashboard, posts, system, users


api_router = APIRouter()

api_router.include_router(users.router, prefix="/users", tags=["users"])
api_router.include_router(posts.router, prefix="/posts", tags=["posts"])
# Defines "/dashboard" and "/reset" itself.
api_router.include_router(dashboard.router, tags=["dashboard"])

system_router = APIRouter()
system_router.include_router(system.router, tags=["system"])
