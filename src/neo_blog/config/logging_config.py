"""Centralized logging configuration for neo-blog.

Environment variables control verbosity and format:

- ``LOG_LEVEL``: explicit level, used when ``LOG_VERBOSITY`` is unset
- ``LOG_VERBOSITY``: QUIET, NORMAL, VERBOSE or DEBUG
- ``LOG_FORMAT``: simple, detailed or json
"""

import logging
import logging.config
import os
from enum import Enum
from typing import Any, Dict, Optional


class LogLevel(str, Enum):
    """Supported log levels."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogVerbosity(str, Enum):
    """Log verbosity modes."""
    QUIET = "QUIET"      # errors only
    NORMAL = "NORMAL"    # info and above
    VERBOSE = "VERBOSE"  # info, including chatty modules
    DEBUG = "DEBUG"


class LogFormat(str, Enum):
    """Log format options."""
    SIMPLE = "simple"
    DETAILED = "detailed"
    JSON = "json"


FORMAT_STRINGS = {
    LogFormat.SIMPLE: "%(asctime)s - %(levelname)s - %(message)s",
    LogFormat.DETAILED: "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s",
    LogFormat.JSON: '{"time":"%(asctime)s","level":"%(levelname)s","module":"%(name)s","message":"%(message)s"}',
}


def get_log_level_from_verbosity(verbosity: str) -> str:
    """Map verbosity mode to log level."""
    verbosity_map = {
        LogVerbosity.QUIET: LogLevel.ERROR.value,
        LogVerbosity.NORMAL: LogLevel.INFO.value,
        LogVerbosity.VERBOSE: LogLevel.INFO.value,
        LogVerbosity.DEBUG: LogLevel.DEBUG.value,
    }
    try:
        return verbosity_map[LogVerbosity(verbosity.upper())]
    except ValueError:
        return LogLevel.INFO.value


class LoggingConfig:
    """Builds and applies the dictConfig for the process."""

    # Third-party loggers that are noisy at INFO
    QUIET_MODULES = [
        "asyncpg",
        "uvicorn.access",
    ]

    # Modules that should only log errors
    ERROR_ONLY_MODULES = [
        "httpx",
        "httpcore",
        "asyncio",
    ]

    @classmethod
    def build_config(
        cls,
        level: Optional[str] = None,
        verbosity: Optional[str] = None,
        log_format: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Build a dictConfig mapping from arguments or the environment."""
        level = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
        verbosity = verbosity or os.getenv("LOG_VERBOSITY")
        log_format = (log_format or os.getenv("LOG_FORMAT", LogFormat.SIMPLE.value)).lower()

        effective_level = get_log_level_from_verbosity(verbosity) if verbosity else level
        if effective_level not in LogLevel.__members__:
            effective_level = LogLevel.INFO.value

        try:
            format_string = FORMAT_STRINGS[LogFormat(log_format)]
        except ValueError:
            format_string = FORMAT_STRINGS[LogFormat.SIMPLE]

        config: Dict[str, Any] = {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {
                    "format": format_string,
                    "datefmt": "%Y-%m-%d %H:%M:%S",
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "level": effective_level,
                    "formatter": "default",
                    "stream": "ext://sys.stdout",
                },
            },
            "root": {
                "level": effective_level,
                "handlers": ["console"],
            },
            "loggers": {},
        }

        quiet_level = "DEBUG" if effective_level == "DEBUG" else "WARNING"
        for module in cls.QUIET_MODULES:
            config["loggers"][module] = {
                "level": quiet_level,
                "handlers": ["console"],
                "propagate": False,
            }

        for module in cls.ERROR_ONLY_MODULES:
            config["loggers"][module] = {
                "level": "ERROR",
                "handlers": ["console"],
                "propagate": False,
            }

        return config

    @classmethod
    def configure(
        cls,
        level: Optional[str] = None,
        verbosity: Optional[str] = None,
        log_format: Optional[str] = None,
    ) -> None:
        """Configure logging for the process."""
        config = cls.build_config(level, verbosity, log_format)
        logging.config.dictConfig(config)
        logging.getLogger(__name__).debug(
            f"Logging configured: level={config['root']['level']}, format={log_format or 'env'}"
        )


def setup_logging(level: Optional[str] = None, log_format: Optional[str] = None) -> None:
    """Setup logging configuration.

    This is the main entry point for configuring logging in the application.
    It should be called once at application startup.
    """
    LoggingConfig.configure(level=level, log_format=log_format)
