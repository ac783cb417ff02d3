"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules.  Configuration, logging, the in‑memory store and error
handling live in ``core``; the user record lives in ``models``; API
payloads in ``schemas``; business logic in ``services``; and HTTP
routes under ``api/<version>/endpoints``.
"""

from .main import app  # noqa: F401
