"""
EventStore Configuration Module

Centralized configuration from environment variables.
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional


DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = "INFO"
    format: str = DEFAULT_LOG_FORMAT


@dataclass
class EventStoreConfig:
    """Main configuration container."""
    logging: LoggingConfig
    debug: bool = False

    @property
    def log_level(self) -> str:
        """Effective log level (debug mode forces DEBUG)."""
        return "DEBUG" if self.debug else self.logging.level


def load_config() -> EventStoreConfig:
    """
    Load configuration from environment variables.

    Environment Variables:
        EVENTSTORE_LOG_LEVEL: Log level (default: INFO)
        EVENTSTORE_LOG_FORMAT: logging format string
        EVENTSTORE_DEBUG: Enable debug mode, forces DEBUG logging (default: false)
    """
    level = os.getenv("EVENTSTORE_LOG_LEVEL", "INFO").upper()
    if level not in logging.getLevelNamesMapping():
        level = "INFO"

    return EventStoreConfig(
        logging=LoggingConfig(
            level=level,
            format=os.getenv("EVENTSTORE_LOG_FORMAT", DEFAULT_LOG_FORMAT),
        ),
        debug=os.getenv("EVENTSTORE_DEBUG", "false").lower() in ("true", "1", "yes"),
    )


def configure_logging(config: Optional[EventStoreConfig] = None) -> None:
    """Apply the logging configuration to the root logger."""
    config = config or get_config()
    logging.basicConfig(
        level=config.log_level,
        format=config.logging.format,
    )


# Singleton config instance
_config: Optional[EventStoreConfig] = None


def get_config() -> EventStoreConfig:
    """Get the global configuration (lazy-loaded singleton)."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reset_config() -> None:
    """Reset configuration (useful for testing)."""
    global _config
    _config = None
