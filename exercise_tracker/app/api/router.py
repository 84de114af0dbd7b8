"""
Top‑level API router.

Aggregates the endpoint routers; the application factory mounts it
under ``/api``.  New domains are added here.
"""

from fastapi import APIRouter

from .endpoints import exercises, hello, users

router = APIRouter()

router.include_router(hello.router, tags=["hello"])
router.include_router(users.router, prefix="/users", tags=["users"])
# Exercise routes are nested under a user and share the users prefix.
router.include_router(exercises.router, prefix="/users", tags=["exercises"])
