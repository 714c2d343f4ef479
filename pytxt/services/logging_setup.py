from __future__ import annotations

import sys
from typing import Any

from loguru import logger

LOG_FORMAT = "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {name}:{function} - {message}"


def configure_logging(level: str = "INFO", sink: Any = None) -> int:
    """
    Replace loguru's default handler with a single sink at `level`.
    Returns the handler id so callers (tests) can remove it again.
    """
    logger.remove()
    return logger.add(
        sink if sink is not None else sys.stderr,
        level=level.upper(),
        format=LOG_FORMAT,
    )
