"""
Entry point for the holiday calendar MCP server.
"""

import logging

from . import mcp
from .config import Settings

logger = logging.getLogger(__name__)


def main():
    """Starts the server."""
    settings = Settings.from_env()
    logging.basicConfig(level=settings.log_level)
    logger.info("Server running at http://%s:%d", settings.host, settings.port)

    mcp.run(transport="streamable-http", host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
