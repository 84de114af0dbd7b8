"""
Exercise endpoints: append entries and read a user's log.

Both routes live under ``/users/{user_id}``.  A malformed id is a 400;
a well-formed id that matches no user is reported as a 500 with
``"User not found"`` as the message.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request

from ...core.coercion import parse_limit
from ...core.errors import StoreError
from ...schemas.error import ErrorRead
from ...schemas.exercise import ExerciseCreate, ExerciseRead, LogRead
from ...services.user_service import UserService, get_user_service
from ..deps import error_response, parse_body

logger = logging.getLogger(__name__)

router = APIRouter()

ERROR_RESPONSES = {400: {"model": ErrorRead}, 500: {"model": ErrorRead}}


@router.post("/{user_id}/exercises", response_model=ExerciseRead, responses=ERROR_RESPONSES)
async def add_exercise(
    user_id: str,
    request: Request,
    service: UserService = Depends(get_user_service),
):
    """Append an entry from ``description``, ``duration`` and optional ``date``.

    The response is the user flattened with the new entry's fields.
    """
    try:
        data = await parse_body(request, ExerciseCreate)
        return await service.append_entry(user_id, data)
    except StoreError as exc:
        logger.error("Error while updating exercises of user %s: %s", user_id, exc.message)
        return error_response(exc)
    except Exception as exc:
        logger.exception("Unexpected error while updating exercises of user %s", user_id)
        return error_response(StoreError(str(exc)))


@router.get("/{user_id}/logs", response_model=LogRead, responses=ERROR_RESPONSES)
async def get_logs(
    user_id: str,
    from_: Optional[str] = Query(None, alias="from", description="Inclusive lower date bound"),
    to: Optional[str] = Query(None, description="Inclusive upper date bound"),
    limit: Optional[str] = Query(None, description="Maximum number of entries to return"),
    service: UserService = Depends(get_user_service),
):
    """Return the user's entries, newest first, narrowed by ``from``/``to``/``limit``.

    Bounds that cannot be parsed as dates and limits that are not
    positive integers are ignored rather than rejected.
    """
    try:
        return await service.get_log(
            user_id,
            from_value=from_,
            to_value=to,
            limit=parse_limit(limit),
        )
    except StoreError as exc:
        logger.error("Error while retrieving logs of user %s: %s", user_id, exc.message)
        return error_response(exc)
    except Exception as exc:
        logger.exception("Unexpected error while retrieving logs of user %s", user_id)
        return error_response(StoreError(str(exc)))
