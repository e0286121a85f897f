"""
Post endpoints.

Posts are always returned with an ``author`` field holding the name
of the user they reference.
"""

from typing import Optional

from fastapi import APIRouter, Depends, status

from ...schemas.common import ApiListResponse, ApiResponse
from ...schemas.post import PostCreate, PostRead
from ...services.post_service import PostService
from ..deps import get_post_service, parse_id


router = APIRouter()


@router.get("", response_model=ApiListResponse[PostRead])
async def list_posts(service: PostService = Depends(get_post_service)) -> ApiListResponse[PostRead]:
    posts = service.list_posts()
    return ApiListResponse[PostRead](data=posts, count=len(posts))


@router.get("/{post_id}", response_model=ApiResponse[PostRead])
async def get_post(post_id: str, service: PostService = Depends(get_post_service)) -> ApiResponse[PostRead]:
    """Retrieve a single post by ID.  Returns HTTP 404 if not found."""
    return ApiResponse[PostRead](data=service.get_post(parse_id(post_id)))


@router.post("", response_model=ApiResponse[PostRead], status_code=status.HTTP_201_CREATED)
async def create_post(
    payload: Optional[PostCreate] = None,
    service: PostService = Depends(get_post_service),
) -> ApiResponse[PostRead]:
    """Create a post for an existing user.

    Missing fields are reported before an unknown ``userId``; both
    produce HTTP 400.
    """
    return ApiResponse[PostRead](data=service.create_post(payload or PostCreate()))
