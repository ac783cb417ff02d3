"""
Hello and health‑check endpoints for API v1.

Both routes are static and are meant for verifying that the service
is up and reachable.
"""

import platform
import time

from fastapi import APIRouter

from user_directory_api.app.core.config import settings
from user_directory_api.app.schemas.hello import HealthStatus, HelloMessage

router = APIRouter()


@router.get("", response_model=HelloMessage)
async def say_hello() -> HelloMessage:
    """Return a static welcome message."""
    return HelloMessage(message=f"Hello from {settings.project_name}!", status="success")


@router.get("/health", response_model=HealthStatus)
async def health() -> HealthStatus:
    """Report that the application is up, with its name and runtime."""
    return HealthStatus(
        status="UP",
        application=settings.application_name,
        python_version=platform.python_version(),
        timestamp=int(time.time() * 1000),
    )
