"""Logging setup shared by the Flask app and the maintenance scripts."""

from __future__ import annotations

import logging
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level_name: Optional[str] = None) -> None:
    root_logger = logging.getLogger()
    level = getattr(logging, (level_name or "INFO").upper(), logging.INFO)
    root_logger.setLevel(level)

    if root_logger.handlers:
        # Avoid double-configuration under test runners and the Flask reloader.
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(handler)
