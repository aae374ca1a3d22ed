"""
Logging configuration
Sets up console and optional rotating file output for the whole process
"""

import logging
import logging.handlers
from typing import Optional

from .config import settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

def setup_logging(level: Optional[str] = None, logfile: Optional[str] = None) -> None:
    """
    Configure the root logger once

    Args:
        level: Level name, defaults to ``settings.LOG_LEVEL``
        logfile: Optional log file path, defaults to ``settings.LOG_FILE``
    """
    root = logging.getLogger()
    if root.handlers:
        # Already configured (uvicorn, tests, repeated app creation)
        return

    root.setLevel(getattr(logging, (level or settings.LOG_LEVEL).upper(), logging.INFO))
    formatter = logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    logfile = logfile or settings.LOG_FILE
    if logfile:
        file_handler = logging.handlers.RotatingFileHandler(
            logfile,
            maxBytes=10 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    # SQL echo is controlled by DATABASE_ECHO, keep the engine logger quiet otherwise
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
