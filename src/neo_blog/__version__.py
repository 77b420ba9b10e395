"""Version information for neo-blog."""

__version__ = "0.1.0"
