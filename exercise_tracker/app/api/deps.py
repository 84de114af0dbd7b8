"""
Request helpers shared by the endpoint modules.

The POST endpoints accept JSON as well as urlencoded or multipart
form posts (the landing page submits plain HTML forms), so bodies are
read here and validated into the pydantic schema explicitly instead of
through FastAPI's body binding.
"""

import json
import logging
from typing import Any, Dict, Type, TypeVar

from fastapi import Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ValidationError

from ..core.errors import RequestValidationFailed, StoreError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

FORM_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


async def read_payload(request: Request) -> Dict[str, Any]:
    """Return the request body as a plain dict, whatever its encoding."""
    content_type = request.headers.get("content-type", "")
    if content_type.startswith(FORM_TYPES):
        form = await request.form()
        return {key: value for key, value in form.items() if isinstance(value, str)}
    raw = await request.body()
    if not raw.strip():
        return {}
    try:
        payload = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise RequestValidationFailed(f"Malformed JSON body: {exc.msg}") from exc
    if not isinstance(payload, dict):
        raise RequestValidationFailed("Request body must be an object")
    return payload


async def parse_body(request: Request, model: Type[ModelT]) -> ModelT:
    payload = await read_payload(request)
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in exc.errors()
        )
        raise RequestValidationFailed(problems) from exc


def error_response(exc: StoreError) -> JSONResponse:
    """Render a domain error as ``{"error": ..., "message": ...}``."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.error, "message": exc.message},
    )
