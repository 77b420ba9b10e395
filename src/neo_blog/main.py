"""neo-blog entry point: ``uvicorn neo_blog.main:app`` or ``python -m neo_blog.main``."""

import logging

import uvicorn

from .app import create_app
from .config import get_settings

logger = logging.getLogger(__name__)

app = create_app()


def main() -> None:
    """Run the application."""
    settings = get_settings()
    logger.info(f"Starting {settings.app_name} on {settings.host}:{settings.port}")

    uvicorn.run(
        "neo_blog.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level="debug" if settings.debug else "info",
        access_log=True,
    )


if __name__ == "__main__":
    main()
