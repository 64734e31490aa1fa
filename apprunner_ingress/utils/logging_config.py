"""Logging configuration."""

import logging
from typing import Optional

from ..config import Settings, settings


def configure_logging(config: Optional[Settings] = None) -> None:
    """
    Configure root logging from settings.

    Args:
        config: Settings to apply. Uses the global settings if None.
    """
    config = config or settings()
    level = getattr(logging, config.log_level.upper(), logging.INFO)

    logging.basicConfig(level=level, format=config.log_format, force=True)
    logging.getLogger(__name__).debug(
        f"Logging configured: level={logging.getLevelName(level)}, "
        f"environment={config.environment}"
    )
