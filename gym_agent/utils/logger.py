"""
Logging utility with loguru.
Console logging with optional rotating file output.
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

from gym_agent.config.settings import settings, PROJECT_ROOT


def setup_logger(level: Optional[str] = None, log_to_file: Optional[bool] = None):
    """
    Configure loguru logger with console and (optionally) file outputs.

    Args:
        level: Console log level (defaults to settings.log_level)
        log_to_file: Also write DEBUG logs to data/logs/app.log (defaults to settings.log_to_file)
    """
    logger.remove()

    logger.add(
        sys.stdout,
        colorize=True,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
        level=(level or settings.log_level).upper(),
    )

    if settings.log_to_file if log_to_file is None else log_to_file:
        log_dir = PROJECT_ROOT / "data" / "logs"
        log_dir.mkdir(parents=True, exist_ok=True)

        logger.add(
            log_dir / "app.log",
            rotation="10 MB",
            retention="1 week",
            compression="zip",
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
            level="DEBUG",
        )

    logger.debug("Logger initialized")
    return logger
