"""Greeting endpoint, used as a quick liveness check."""

from typing import Dict

from fastapi import APIRouter

router = APIRouter()


@router.get("/hello")
async def hello() -> Dict[str, str]:
    return {"greeting": "hello API"}
