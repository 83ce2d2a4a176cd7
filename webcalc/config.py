# config.py
"""Runtime settings read from the environment, plus logging setup for the hosts."""

import logging
import os
from typing import Optional, Union

HISTORY_FILE = os.path.expanduser(os.getenv("WEBCALC_HISTORY_FILE", "~/.webcalc_history"))
LOG_LEVEL = os.getenv("WEBCALC_LOG_LEVEL", "WARNING")
HOST = os.getenv("WEBCALC_HOST", "127.0.0.1")
PORT = int(os.getenv("WEBCALC_PORT", "8000"))

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: Optional[Union[str, int]] = None) -> None:
    """Configure root logging once for a host process."""
    if level is None:
        level = LOG_LEVEL
    if isinstance(level, str):
        level = level.upper()
    logging.basicConfig(level=level, format=LOG_FORMAT)
