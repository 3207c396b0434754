"""Loguru configuration for the portal process."""

import sys

from loguru import logger

from portal.core.config import Settings


def setup_logging(settings: Settings) -> None:
    """Configure loguru sinks from settings.

    Removes the default handler, adds a stderr sink at the configured level and,
    when enabled, a rotating file sink.

    Args:
        settings: Application settings holding the log_* options
    """
    logger.remove()
    logger.add(
        sys.stderr,
        level=settings.log_level.upper(),
        backtrace=False,
        diagnose=False,
    )

    if settings.log_to_file:
        logger.add(
            settings.log_file_path,
            level=settings.log_level.upper(),
            rotation=settings.log_rotation,
            retention=settings.log_retention,
            enqueue=True,
        )

    logger.bind(
        environment=settings.ENVIRONMENT,
        api_base_url=settings.API_BASE_URL,
    ).info(f"Logging configured at level {settings.log_level.upper()}")


__all__ = ["logger", "setup_logging"]
