"""
Logging setup for the Shop API process.

``create_app`` calls ``setup_logging`` once with ``LOG_LEVEL`` and
``LOG_FILE`` from the settings.  Records go to the console and, when a
log file is configured, to that file as well, all in one format:

    2026-01-01 12:00:00 [INFO] shop_api.app.services.order_service: Created order ...

Service modules log creates and deletes at INFO; the data-access layer
and the catalog client log failures at ERROR with a traceback.  The
MongoDB driver and urllib3 (used by the catalog client) are chatty at
DEBUG, so they never log below WARNING even when the application
itself runs at DEBUG.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_QUIET_LOGGERS = ("pymongo", "urllib3")


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger for the service.

    Does nothing when the root logger already has handlers, so that
    building several applications in one process (tests) does not
    duplicate output.

    Parameters
    ----------
    level : str
        Logging level name, case insensitive.  Unknown names fall back
        to ``INFO``.
    logfile : Optional[str]
        Optional path of a file receiving the same records as the
        console.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    numeric_level = getattr(logging, level.upper(), logging.INFO)
    root.setLevel(numeric_level)
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(numeric_level, logging.WARNING))
