"""
Logging configuration using loguru.
"""
import sys
from loguru import logger
from clientstore.config import settings
from clientstore.constants import LOG_FILE_ROTATION, LOG_FILE_RETENTION


def setup_logger():
    """Configure loguru sinks for console and optional log file."""
    # Remove default handler
    logger.remove()

    # Records without a bound repo show "-"
    logger.configure(extra={"repo": "-"})

    level = "DEBUG" if settings.debug else settings.log_level

    logger.add(
        sys.stderr,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <dim>{extra[repo]}</dim> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
        level=level,
        colorize=True,
    )

    if settings.log_dir:
        settings.log_dir.mkdir(parents=True, exist_ok=True)

        logger.add(
            settings.log_dir / "clientstore.log",
            rotation=LOG_FILE_ROTATION,
            retention=LOG_FILE_RETENTION,
            level=level,
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {extra[repo]} | {name}:{function}:{line} - {message}",
        )

    logger.info("Logger initialized")
