"""Logging setup for sortkit"""

import sys

from loguru import logger

from sortkit.core.config import Config


def configure_logging(config: Config) -> None:
    """Install loguru sinks for the given configuration.

    Logs always go to stderr, leaving stdout to sort output.

    Args:
        config: Loaded configuration
    """
    logger.remove()
    logger.add(sys.stderr, level=config.log_level)

    if config.log_file:
        logger.add(
            config.log_file,
            rotation="1 day",
            retention="30 days",
            compression="gz",
            level=config.log_level,
        )
