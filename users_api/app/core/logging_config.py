"""
Logging setup for the Users API.

``create_app`` calls ``setup_logging`` with ``LOG_LEVEL`` and
``LOG_FILE`` from the settings.  Records go to stderr and, when a log
file is configured, to that file as well.  Stores and the client log
through ``logging.getLogger(__name__)`` and inherit this setup.

When the root logger already has handlers (uvicorn started with its own
log config, or a test runner) nothing is changed.
"""

import logging
from pathlib import Path
from typing import List, Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _build_handlers(logfile: Optional[str]) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    return handlers


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Attach the API's handlers to the root logger.

    Parameters
    ----------
    level : str
        Level name such as ``"DEBUG"``; case insensitive, unknown names
        mean ``INFO``.
    logfile : Optional[str]
        File that receives a copy of every record, created if missing.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
    for handler in _build_handlers(logfile):
        handler.setFormatter(formatter)
        root.addHandler(handler)
