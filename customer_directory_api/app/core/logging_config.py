"""
Logging setup for the API process.

``setup_logging`` attaches a stdout handler (and, when ``LOG_FILE`` is
set, a file handler) to the root logger.  Modules obtain their logger
with ``logging.getLogger(__name__)``.  The root logger is only
configured once, so building several apps in one process (as the test
suite does) does not duplicate output.
"""

import logging
import sys
from pathlib import Path
from typing import List, Optional

_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger.

    Parameters
    ----------
    level : str
        Level name such as ``"DEBUG"`` or ``"info"``; unknown names
        fall back to ``INFO``.
    logfile : Optional[str]
        Also write to this file (appending, UTF-8).
    """
    root = logging.getLogger()
    if root.handlers:
        return

    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))

    formatter = logging.Formatter(_LOG_FORMAT, _DATE_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
