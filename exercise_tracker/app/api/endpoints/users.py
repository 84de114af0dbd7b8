"""
User endpoints.

Register users and list them.  Responses only ever carry ``username``
and ``id``; failures come back as ``{"error", "message"}`` with the
status attached to the domain exception (duplicates are a 500).
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Request

from ...core.errors import StoreError
from ...schemas.error import ErrorRead
from ...schemas.user import UserCreate, UserRead
from ...services.user_service import UserService, get_user_service
from ..deps import error_response, parse_body

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "",
    response_model=UserRead,
    responses={400: {"model": ErrorRead}, 500: {"model": ErrorRead}},
)
async def create_user(request: Request, service: UserService = Depends(get_user_service)):
    """Register a new user from a JSON or form body with ``username``."""
    try:
        data = await parse_body(request, UserCreate)
        return await service.create_user(data.username)
    except StoreError as exc:
        logger.error("Error creating user: %s", exc.message)
        return error_response(exc)
    except Exception as exc:
        logger.exception("Unexpected error while creating user")
        return error_response(StoreError(str(exc)))


@router.get("", response_model=List[UserRead], responses={500: {"model": ErrorRead}})
async def list_users(service: UserService = Depends(get_user_service)):
    """Return all users as ``[{username, id}]`` in registration order."""
    try:
        return await service.list_users()
    except StoreError as exc:
        logger.error("Error in retrieving users: %s", exc.message)
        return error_response(exc)
    except Exception as exc:
        logger.exception("Unexpected error while listing users")
        return error_response(StoreError(str(exc)))
