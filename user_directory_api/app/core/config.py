"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields, so the
service starts with no configuration at all.
"""

import os
from dataclasses import dataclass


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "User Directory API")
    # Reported by the health endpoint.
    application_name: str = os.getenv("APPLICATION_NAME", "user-directory-api")
    api_version: str = os.getenv("API_VERSION", "1.0.0")

    # Prefix under which all routers are mounted.  Empty by default so
    # that users live at ``/users``; set ``API_PREFIX=/api`` to serve
    # them from ``/api/users`` instead.
    api_prefix: str = os.getenv("API_PREFIX", "")

    debug: bool = _env_flag("DEBUG", "false")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    # Optional path of a log file.  Empty means console only.
    log_file: str = os.getenv("LOG_FILE", "")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8080"))

    # Whether a fresh store is populated with the three sample users.
    seed_users: bool = _env_flag("SEED_USERS", "true")


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
