"""
Health check module for monitoring.
Verifies that the price store is reachable with the configured credentials.
"""

import asyncio
import sys

from hintanyt.config import Settings, load_settings
from hintanyt.database.service import PriceStore
from hintanyt.exceptions import ConfigurationError
from hintanyt.logging_config import get_logger, setup_logging

logger = get_logger(__name__)


async def health_check(settings: Settings) -> bool:
    """
    Perform health check of the price store.
    """
    store = PriceStore(settings)
    try:
        return await store.health_check()
    finally:
        await store.close()


async def main():
    """
    Main health check entry point for command line usage.
    """
    setup_logging()
    try:
        settings = load_settings()
    except ConfigurationError as e:
        logger.error("Health check failed", error=str(e))
        sys.exit(1)

    setup_logging(settings.log_level, settings.log_format)
    is_healthy = await health_check(settings)

    if is_healthy:
        logger.info("Health check passed")
        print("Health check passed")
        sys.exit(0)
    else:
        logger.error("Health check failed")
        print("Health check failed", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    asyncio.run(main())
