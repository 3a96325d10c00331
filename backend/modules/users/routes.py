"""
User API endpoints.

GET lists every user; POST validates the body and creates one. Whether the
routes require a bearer token is decided when the router is mounted (see
api/app.py), not here.
"""

from fastapi import APIRouter, Depends
from starlette.concurrency import run_in_threadpool

from api.dependencies import get_user_repository

from .interfaces import IUserRepository
from .models import CreateUserRequest, User

router = APIRouter()


@router.get("", response_model=list[User])
async def list_users(
    repository: IUserRepository = Depends(get_user_repository),
) -> list[User]:
    """List all users."""
    return await run_in_threadpool(repository.list_users)


@router.post("", response_model=User)
async def create_user(
    request: CreateUserRequest,
    repository: IUserRepository = Depends(get_user_repository),
) -> User:
    """
    Create a user.

    Validation failures are rendered as 400 by api/errors.py.
    """
    return await run_in_threadpool(repository.create_user, request.name, request.email)
