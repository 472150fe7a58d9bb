"""Process-wide logging setup (JSON lines on stderr)."""

from __future__ import annotations

import logging
import os
from typing import Optional

from pythonjsonlogger.json import JsonFormatter

_CONFIGURED = False


def setup_logging(level: Optional[str] = None) -> None:
    """Configure root logging with a JSON formatter. Safe to call more than once."""

    global _CONFIGURED
    if _CONFIGURED:
        return

    log_level = (level or os.getenv("LOG_LEVEL", "INFO")).upper()

    handler = logging.StreamHandler()
    handler.setFormatter(
        JsonFormatter("%(asctime)s %(levelname)s %(name)s %(message)s")
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(log_level)
    logging.captureWarnings(True)
    _CONFIGURED = True


__all__ = ["setup_logging"]
