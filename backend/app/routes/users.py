"""
Users API Backend — User Route Handlers
=========================================

What:  CRUD endpoints under /api/users.
How:   Extracts path/body data, delegates to UserService, returns JSON.
       Failures surface as application exceptions and are formatted by the
       global handlers in main.py; no handler here catches anything.

Endpoints:
    GET    /api/users        → list every user
    GET    /api/users/{id}   → one user, 404 if absent
    POST   /api/users        → create, 201 / 400
    PUT    /api/users/{id}   → partial update, 200 / 404
    DELETE /api/users/{id}   → delete, 204 / 404
"""

import logging
import re
from typing import List, Optional

from fastapi import APIRouter, Depends, Response, status

from app.exceptions import NotFoundError
from app.schemas.user import ErrorResponse, UserCreate, UserResponse, UserUpdate
from app.services.user_service import RESOURCE, user_service
from app.store import UserStore, get_user_store

logger = logging.getLogger(__name__)

# ── Router Configuration ──────────────────────────────────────────────────
router = APIRouter(prefix="/api/users", tags=["Users"])

NOT_FOUND = {404: {"description": "User not found", "model": ErrorResponse}}

USER_ID_PATTERN = re.compile(r"-?[0-9]+")


def parse_user_id(raw: str) -> int:
    """
    Convert the {id} path segment to an integer.

    Only an optionally signed run of ASCII digits is an id. Anything else
    ("1_0", " 1", "1.5", non-ASCII digits) cannot match any record, so it is
    reported the same way as an unknown id.
    """
    if not USER_ID_PATTERN.fullmatch(raw):
        raise NotFoundError(resource=RESOURCE, resource_id=raw)
    return int(raw)


@router.get(
    "",
    response_model=List[UserResponse],
    summary="List all users",
)
async def list_users(store: UserStore = Depends(get_user_store)) -> List[UserResponse]:
    return [UserResponse.model_validate(user) for user in user_service.list_users(store)]


@router.get(
    "/{user_id}",
    response_model=UserResponse,
    responses=NOT_FOUND,
    summary="Get a single user by ID",
)
async def get_user(
    user_id: str,
    store: UserStore = Depends(get_user_store),
) -> UserResponse:
    user = user_service.get_user(store, parse_user_id(user_id))
    return UserResponse.model_validate(user)


@router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"description": "Name or email missing", "model": ErrorResponse}},
    summary="Create a user",
)
async def create_user(
    payload: Optional[UserCreate] = None,
    store: UserStore = Depends(get_user_store),
) -> UserResponse:
    """
    Create a user from `{name, email}`.

    The id is assigned by the server; an `id` in the body is ignored.
    A missing body is treated as `{}` and fails presence validation.
    """
    payload = payload or UserCreate()
    user = user_service.create_user(store, name=payload.name, email=payload.email)
    return UserResponse.model_validate(user)


@router.put(
    "/{user_id}",
    response_model=UserResponse,
    responses=NOT_FOUND,
    summary="Update a user",
)
async def update_user(
    user_id: str,
    payload: Optional[UserUpdate] = None,
    store: UserStore = Depends(get_user_store),
) -> UserResponse:
    """Apply `name` and/or `email` when present and non-empty."""
    payload = payload or UserUpdate()
    user = user_service.update_user(
        store,
        parse_user_id(user_id),
        name=payload.name,
        email=payload.email,
    )
    return UserResponse.model_validate(user)


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=NOT_FOUND,
    summary="Delete a user",
)
async def delete_user(
    user_id: str,
    store: UserStore = Depends(get_user_store),
) -> Response:
    user_service.delete_user(store, parse_user_id(user_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
