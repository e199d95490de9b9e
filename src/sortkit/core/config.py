"""Configuration management for sortkit"""

import os
from dataclasses import dataclass

from loguru import logger

from sortkit.shared.exceptions import ConfigurationError

LOG_LEVELS = (
    "TRACE",
    "DEBUG",
    "INFO",
    "SUCCESS",
    "WARNING",
    "ERROR",
    "CRITICAL",
)


@dataclass
class Config:
    """Configuration for sortkit loaded from environment variables"""

    # Registry name of the strategy used when none is given on the CLI
    default_strategy: str = "quick"

    log_level: str = "WARNING"

    # Optional rotating log file, disabled when unset
    log_file: str | None = None

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables

        Returns:
            Config instance with values from environment

        Raises:
            ConfigurationError: If a variable holds an invalid value
        """
        log_level = os.getenv("SORTKIT_LOG_LEVEL", cls.log_level).upper()
        if log_level not in LOG_LEVELS:
            raise ConfigurationError(
                f"Invalid SORTKIT_LOG_LEVEL: {log_level}. "
                f"Expected one of: {', '.join(LOG_LEVELS)}"
            )

        default_strategy = (
            os.getenv("SORTKIT_STRATEGY", cls.default_strategy).strip().lower()
        )
        if not default_strategy:
            raise ConfigurationError("SORTKIT_STRATEGY must not be empty")

        config = cls(
            default_strategy=default_strategy,
            log_level=log_level,
            log_file=os.getenv("SORTKIT_LOG_FILE") or None,
        )

        logger.debug("Configuration loaded:")
        logger.debug(f"  Default Strategy: {config.default_strategy}")
        logger.debug(f"  Log Level: {config.log_level}")
        logger.debug(f"  Log File: {config.log_file or 'Not configured'}")

        return config
