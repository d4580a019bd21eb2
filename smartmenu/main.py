from __future__ import annotations

import sys

import structlog

from smartmenu.core.config import settings
from smartmenu.core.logging import configure_logging
from smartmenu.core.sentry import init_sentry
from smartmenu.server import create_server

logger = structlog.get_logger(__name__)


def main() -> None:
    configure_logging(settings.log_level)
    init_sentry()
    try:
        mcp = create_server()
        logger.info(
            "server_starting",
            transport="stdio",
            menu_api_url=settings.menu_api_url,
            environment=settings.environment,
        )
        mcp.run(transport="stdio")
    except Exception:
        logger.exception("server_fatal_error")
        sys.exit(1)


if __name__ == "__main__":
    main()
