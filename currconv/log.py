from __future__ import annotations

import logging
from typing import Optional

from .settings import get_settings


def configure_logging(level: Optional[str] = None) -> None:
    """basicConfig for scripts; the library itself never installs handlers."""
    name = (level or get_settings().LOG_LEVEL).upper()
    logging.basicConfig(level=getattr(logging, name, logging.INFO))
