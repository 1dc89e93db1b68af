"""
Logging setup.

Configures loguru logger for the affiliate engine.
Sets up log rotation and retention policies.
"""

from loguru import logger

from affiliate.config.settings import settings


def setup_logging() -> int:
    """Configure logger with file rotation. Returns the sink id."""
    sink_id = logger.add(
        settings.log_file,
        rotation=settings.log_rotation,
        retention=settings.log_retention,
        level=settings.log_level,
        encoding="utf-8",
    )

    logger.info(
        "Affiliate engine logging configured",
        extra={"environment": settings.environment},
    )
    return sink_id
