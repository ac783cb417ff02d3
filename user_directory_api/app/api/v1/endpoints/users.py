"""
User endpoints for API v1.

CRUD over the in‑memory user directory plus search, soft delete
(deactivation) and statistics.  Unknown ids yield an empty 404.
Request bodies are checked with ``validate_user_payload`` before the
service is called; failures become a 400 with per‑field messages (see
``core.errors``).

Static paths (``/active``, ``/search``, ``/stats``) are declared
before ``/{user_id}`` so they are not parsed as ids.
"""

from typing import List

from fastapi import APIRouter, Body, Query, Response, status

from user_directory_api.app.core.errors import UserValidationError
from user_directory_api.app.schemas.user import UserCreate, UserRead, UserStats
from user_directory_api.app.services.user_service import UserService
from user_directory_api.app.services.validation import validate_user_payload


router = APIRouter()


def _parse_user_payload(body: dict) -> UserCreate:
    cleaned, errors = validate_user_payload(body)
    if errors:
        raise UserValidationError(errors)
    return UserCreate.model_validate(cleaned)


def _not_found() -> Response:
    return Response(status_code=status.HTTP_404_NOT_FOUND)


@router.get("", response_model=List[UserRead])
async def get_all_users() -> List[UserRead]:
    """List all users in creation order."""
    return await UserService.get_all_users()


@router.get("/active", response_model=List[UserRead])
async def get_active_users() -> List[UserRead]:
    """List users that have not been deactivated."""
    return await UserService.get_active_users()


@router.get("/search", response_model=List[UserRead])
async def search_users(name: str = Query(..., description="Substring of the first or last name")) -> List[UserRead]:
    """Find users whose first or last name contains ``name``, ignoring case.

    An empty ``name`` matches every user.
    """
    return await UserService.search_users_by_name(name)


@router.get("/stats", response_model=UserStats)
async def get_user_stats() -> UserStats:
    return await UserService.get_user_stats()


@router.get("/{user_id}", response_model=UserRead)
async def get_user_by_id(user_id: int):
    user = await UserService.get_user_by_id(user_id)
    if user is None:
        return _not_found()
    return user


@router.post("", response_model=UserRead, status_code=status.HTTP_201_CREATED)
async def create_user(body: dict = Body(...)) -> UserRead:
    """Create a user.

    The id is assigned by the server and the user always starts
    active; ``id`` and ``active`` in the body are ignored.
    """
    return await UserService.create_user(_parse_user_payload(body))


@router.put("/{user_id}", response_model=UserRead)
async def update_user(user_id: int, body: dict = Body(...)):
    """Replace every field of a user except its id."""
    data = _parse_user_payload(body)
    user = await UserService.update_user(user_id, data)
    if user is None:
        return _not_found()
    return user


@router.patch("/{user_id}/deactivate", response_model=UserRead)
async def deactivate_user(user_id: int):
    """Soft delete a user by marking it inactive."""
    user = await UserService.deactivate_user(user_id)
    if user is None:
        return _not_found()
    return user


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(user_id: int) -> Response:
    """Permanently remove a user."""
    if not await UserService.delete_user(user_id):
        return _not_found()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
