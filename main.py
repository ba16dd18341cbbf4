"""
Main entry point for the threat radar bot.
"""
import sys
import asyncio
import logging

from dotenv import load_dotenv

from core.config import Settings
from core.errors import ConfigError, GazetteerError
from core.gazetteer import Gazetteer
from ingest.dispatcher import create_and_run_dispatcher
from utils.health import maybe_start_health_server
from utils.logging import get_log_level, setup_logging
from utils.metrics import get_metrics


def main():
    """Application entry point."""
    load_dotenv()
    setup_logging(get_log_level())
    logger = logging.getLogger(__name__)

    try:
        settings = Settings.from_env()
    except ConfigError as e:
        logger.error(str(e))
        sys.exit(1)

    try:
        if settings.gazetteer_file:
            gazetteer = Gazetteer.from_file(settings.gazetteer_file)
        else:
            gazetteer = Gazetteer.default()
    except GazetteerError as e:
        logger.error(str(e))
        sys.exit(1)

    maybe_start_health_server(settings.health_port)

    logger.info("Telegram bot starting")
    try:
        asyncio.run(create_and_run_dispatcher(settings, gazetteer))
    except KeyboardInterrupt:
        logger.info("Shutdown requested")
    except Exception as e:
        logger.error(f"Fatal error: {e}")
        raise
    finally:
        get_metrics().log()


if __name__ == '__main__':
    main()
