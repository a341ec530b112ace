"""
User endpoints for API v1.

CRUD over the users held by the application's ``UserService``.
Request bodies are validated by the pydantic schemas before a handler
runs; service error variants are converted to ``ApiError`` so the
exception handlers render them as ``{"status": ..., "errors": [...]}``.
"""

from typing import List, TypeVar, Union

from fastapi import APIRouter, Depends, Request, status

from user_management_api.app.core.errors import ApiError, ServiceError
from user_management_api.app.schemas.user import UserCreate, UserPartialUpdate, UserRead
from user_management_api.app.services.user_service import UserService

router = APIRouter()

T = TypeVar("T")


def get_user_service(request: Request) -> UserService:
    """Return the service created by ``create_app`` for this application."""
    return request.app.state.user_service


def _unwrap(result: Union[T, ServiceError]) -> T:
    if isinstance(result, ServiceError):
        raise ApiError.from_service_error(result)
    return result


@router.get("", response_model=List[UserRead])
async def list_users(service: UserService = Depends(get_user_service)) -> List[UserRead]:
    """Return all users in insertion order.  An empty list is valid."""
    return [UserRead.model_validate(user) for user in service.get_all_users()]


@router.get("/{user_id}", response_model=UserRead)
async def get_user(user_id: int, service: UserService = Depends(get_user_service)) -> UserRead:
    """Return a single user or 404."""
    return UserRead.model_validate(_unwrap(service.get_user_by_id(user_id)))


@router.post("", response_model=UserRead, status_code=status.HTTP_201_CREATED)
async def create_user(user: UserCreate, service: UserService = Depends(get_user_service)) -> UserRead:
    """Create a user.

    Returns 400 if the email is already registered.
    """
    return UserRead.model_validate(_unwrap(service.create_user(user)))


@router.put("/{user_id}", response_model=UserRead)
async def update_user(
    user_id: int,
    user: UserCreate,
    service: UserService = Depends(get_user_service),
) -> UserRead:
    """Replace all fields of a user."""
    return UserRead.model_validate(_unwrap(service.update_user(user_id, user)))


@router.patch("/{user_id}", response_model=UserRead)
async def partial_update_user(
    user_id: int,
    user: UserPartialUpdate,
    service: UserService = Depends(get_user_service),
) -> UserRead:
    """Update only the fields present in the body."""
    return UserRead.model_validate(_unwrap(service.partial_update_user(user_id, user)))


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(user_id: int, service: UserService = Depends(get_user_service)) -> None:
    """Delete a user by ID."""
    error = service.delete_user(user_id)
    if error is not None:
        raise ApiError.from_service_error(error)
    return None
