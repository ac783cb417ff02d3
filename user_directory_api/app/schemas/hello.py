"""Schemas for the hello and health‑check endpoints."""

from pydantic import BaseModel, Field


class HelloMessage(BaseModel):
    message: str
    status: str


class HealthStatus(BaseModel):
    status: str
    application: str
    python_version: str = Field(..., alias="pythonVersion")
    # Milliseconds since the epoch.
    timestamp: int

    model_config = {
        "populate_by_name": True,
    }
