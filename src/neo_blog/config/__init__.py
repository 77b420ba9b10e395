"""Configuration: settings and logging."""

from .settings import BlogSettings, get_settings
from .logging_config import LoggingConfig, setup_logging

__all__ = ["BlogSettings", "get_settings", "LoggingConfig", "setup_logging"]
