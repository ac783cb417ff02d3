"""
Logging configuration for the application.

``setup_logging`` attaches a console handler (and, when ``LOG_FILE``
is set, a file handler) to the root logger.  It runs once per process
even though ``create_app`` may be called several times, e.g. by the
test suite.  Uvicorn's per‑request access log is kept at WARNING
unless the service itself logs at DEBUG, so that application messages
are not drowned out.
"""

import logging
from pathlib import Path
from typing import Optional


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_configured = False


def _file_handler(logfile: str, formatter: logging.Formatter) -> logging.FileHandler:
    log_path = Path(logfile).expanduser().resolve()
    log_path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(log_path, encoding="utf-8")
    handler.setFormatter(formatter)
    return handler


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger for the service.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive; unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Path of a log file.  Missing parent directories are created.
        If omitted or empty, only the console handler is added.
    """
    global _configured
    if _configured:
        return

    numeric_level = getattr(logging, level.upper(), logging.INFO)
    root = logging.getLogger()
    root.setLevel(numeric_level)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)
    if logfile:
        root.addHandler(_file_handler(logfile, formatter))

    access_level = logging.DEBUG if numeric_level <= logging.DEBUG else logging.WARNING
    logging.getLogger("uvicorn.access").setLevel(access_level)

    _configured = True
    logging.getLogger(__name__).debug("Logging configured at %s", logging.getLevelName(numeric_level))
