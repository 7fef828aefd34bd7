"""Environment-driven defaults and logging setup for the command line."""
from __future__ import annotations

import logging
import os
import sys

from dotenv import load_dotenv

from .models import Mode

load_dotenv()

DEFAULT_LOG_LEVEL = "WARNING"


def default_mode() -> str:
    """Mode used when none is given on the command line (``SICI_MODE``)."""
    return os.getenv("SICI_MODE", Mode.LAX)


def default_log_level() -> int:
    name = os.getenv("SICI_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    if isinstance(level, int):
        return level
    return logging.WARNING


def configure_logging(level: int | None = None) -> None:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s %(levelname)s %(name)s %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S",
        )
    )
    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(default_log_level() if level is None else level)
