"""
User endpoints.

List, read and create users.  Validation failures and unknown ids are
raised by ``UserService`` and rendered by the application's exception
handlers as ``{"success": false, "message": ...}``.
"""

from typing import Optional

from fastapi import APIRouter, Depends, status

from ...schemas.common import ApiListResponse, ApiResponse
from ...schemas.user import UserCreate, UserRead
from ...services.user_service import UserService
from ..deps import get_user_service, parse_id


router = APIRouter()


@router.get("", response_model=ApiListResponse[UserRead])
async def list_users(service: UserService = Depends(get_user_service)) -> ApiListResponse[UserRead]:
    """Return every user in creation order."""
    users = service.list_users()
    return ApiListResponse[UserRead](data=users, count=len(users))


@router.get("/{user_id}", response_model=ApiResponse[UserRead])
async def get_user(user_id: str, service: UserService = Depends(get_user_service)) -> ApiResponse[UserRead]:
    """Retrieve a single user by ID.

    Returns HTTP 404 if the user is not found.  The id is read up to
    its first non-digit (``"2abc"`` is 2); an id with no leading
    digits cannot match any user and is reported the same way.
    """
    return ApiResponse[UserRead](data=service.get_user(parse_id(user_id)))


@router.post("", response_model=ApiResponse[UserRead], status_code=status.HTTP_201_CREATED)
async def create_user(
    payload: Optional[UserCreate] = None,
    service: UserService = Depends(get_user_service),
) -> ApiResponse[UserRead]:
    """Create a user.

    ``name`` and ``email`` are required (HTTP 400 otherwise); ``role``
    defaults to ``"user"``.
    """
    return ApiResponse[UserRead](data=service.create_user(payload or UserCreate()))
