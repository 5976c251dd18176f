"""Entry point: load config, configure logging, serve with uvicorn."""

import logging
import sys

import uvicorn

from linear_discord.adapters.web.server import create_app
from linear_discord.config import AppConfig
from linear_discord.domain.errors import ConfigError
from linear_discord.infrastructure.log import setup_logging

logger = logging.getLogger(__name__)


def main() -> int:
    setup_logging()
    try:
        config = AppConfig.from_env()
    except ConfigError as e:
        logger.error("Invalid configuration: %s", e)
        return 1
    setup_logging(config.log_level)

    app = create_app(config)
    logger.info("🚀 Server is running on port %d", config.port)
    logger.info("Health check: http://localhost:%d/health", config.port)
    uvicorn.run(app, host=config.host, port=config.port, log_level=config.log_level.lower())
    return 0


if __name__ == "__main__":
    sys.exit(main())
