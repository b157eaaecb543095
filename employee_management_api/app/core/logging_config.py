"""
Logging setup for the employee service.

``setup_logging`` attaches a console handler (and optionally a file
handler) to the root logger, so records from the stores, the service
and uvicorn share one format.  uvicorn's per-request access log gets a
level of its own: with the default ``WARNING`` a busy web client does
not drown out store and startup messages.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

ACCESS_LOGGER = "uvicorn.access"


def _level(name: str) -> int:
    # Unknown names fall back to INFO rather than failing startup.
    return getattr(logging, name.upper(), logging.INFO)


def setup_logging(
    level: str = "INFO",
    logfile: Optional[str] = None,
    access_log_level: str = "WARNING",
) -> None:
    """Configure the root logger and uvicorn's access logger.

    The access logger level is applied on every call.  Handlers are
    attached only when the root logger has none yet, so repeated
    ``create_app`` calls (or pytest's own capture handlers) never
    produce duplicate output.

    Parameters
    ----------
    level : str
        Root level name, e.g. ``"DEBUG"``.  Case insensitive.
    logfile : Optional[str]
        Also write records to this file when given.
    access_log_level : str
        Level for the ``uvicorn.access`` logger.
    """
    logging.getLogger(ACCESS_LOGGER).setLevel(_level(access_log_level))

    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(_level(level))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    if logfile:
        file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
