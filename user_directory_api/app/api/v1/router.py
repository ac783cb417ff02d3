"""
Top‑level router for version 1 of the API.

This router aggregates domain‑specific routers under their prefixes.
When new domains are introduced, update this file to include their
routers.
"""

from fastapi import APIRouter

from .endpoints import hello, users

router = APIRouter()

router.include_router(users.router, prefix="/users", tags=["users"])
router.include_router(hello.router, prefix="/hello", tags=["hello"])
