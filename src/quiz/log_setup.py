"""
Loguru configuration for hosts embedding the quiz runtime.
"""

from __future__ import annotations

import sys
from typing import Optional

from loguru import logger

from config import get_settings


def configure_logging(level: Optional[str] = None, sink=sys.stderr) -> int:
    """
    Replace loguru's default handler with one at the configured level.

    Args:
        level: Minimum level; defaults to ``Settings.log_level``
        sink: Where messages go (stream, path or callable)

    Returns:
        Handler id, usable with ``logger.remove``
    """
    logger.remove()
    return logger.add(
        sink,
        level=level or get_settings().log_level,
        format="<dim>{time:HH:mm:ss}</dim> | <level>{level: <8}</level> | {message}",
    )
