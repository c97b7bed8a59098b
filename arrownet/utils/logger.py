"""Logging configuration for arrownet."""
import logging
import os

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(name: str = "arrownet", level=None) -> logging.Logger:
    """
    Configure logging for a module.

    The library itself never calls this; applications and the command
    line entry point do.

    Args:
        name: Logger name (typically the package name)
        level: Log level name or number, defaults to the
            ARROWNET_LOG_LEVEL environment variable or INFO

    Returns:
        Configured logger instance
    """
    if level is None:
        level = os.getenv("ARROWNET_LOG_LEVEL", "INFO")
    if isinstance(level, str):
        level = level.upper()

    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Avoid stacking handlers when called more than once
    if not any(getattr(h, "_arrownet", False) for h in logger.handlers):
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        console_handler._arrownet = True
        logger.addHandler(console_handler)

    return logger
