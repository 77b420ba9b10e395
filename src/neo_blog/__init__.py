"""neo-blog: blogging platform backend.

Users, posts, categories, comments and replies organised as feature
packages with a shared domain kernel, CQRS command/query handlers and a
FastAPI presentation layer.
"""

from .__version__ import __version__

__all__ = ["__version__"]
