"""
User endpoints for API v1.

Registration hashes the password before storing it; neither the
plaintext nor the digest is ever part of a response.
"""

from typing import List

from fastapi import APIRouter, Depends, Query, status

from shop_api.app.api.deps import get_user_service
from shop_api.app.schemas.user import UserCreate, UserRead
from shop_api.app.services.user_service import UserService

router = APIRouter()


@router.post("", response_model=UserRead, status_code=status.HTTP_201_CREATED)
async def register_user(
    user: UserCreate,
    service: UserService = Depends(get_user_service),
) -> UserRead:
    """Register a new user.

    The password must be at least 6 characters and the email must be
    syntactically valid; otherwise 400 is returned with one error per
    offending field.
    """
    return await service.create_user(user)


@router.get("", response_model=List[UserRead])
async def list_users(
    page: int = Query(1, ge=1, le=1_000_000),
    limit: int = Query(10, ge=1, le=1000),
    service: UserService = Depends(get_user_service),
) -> List[UserRead]:
    """Return one page of users (``page`` starts at 1)."""
    return await service.list_users(page=page, limit=limit)
