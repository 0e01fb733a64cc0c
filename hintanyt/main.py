"""
Main application entry point for the price dashboard.
Loads settings, draws the banner, fetches prices, draws the chart and prints the summary.
"""

import asyncio
import sys
from typing import Optional

from hintanyt.config import Settings, load_settings
from hintanyt.dashboard.renderer import DashboardRenderer
from hintanyt.exceptions import HintaNytException
from hintanyt.logging_config import get_logger, setup_logging
from hintanyt.services.price_service import PriceService
from hintanyt.services.price_transformer import summarize
from hintanyt.utils.time_utils import current_hour

logger = get_logger(__name__)


async def run(
    settings: Settings,
    renderer: Optional[DashboardRenderer] = None,
    price_service: Optional[PriceService] = None,
) -> None:
    """
    Draw the dashboard once.

    Order: banner, fetch and transform, chart, summary text.
    """
    if renderer is None:
        renderer = DashboardRenderer()
    if price_service is None:
        price_service = PriceService(settings)

    renderer.draw_banner()

    try:
        series = await price_service.fetch_hourly_prices()
    finally:
        await price_service.store.close()

    renderer.draw_chart(series)

    summary = summarize(series, current_hour(settings.display_timezone))
    renderer.print_summary(summary)


def main() -> int:
    """
    Command line entry point. Returns the process exit status.
    """
    setup_logging()
    try:
        settings = load_settings()
        setup_logging(settings.log_level, settings.log_format)
        asyncio.run(run(settings))
        return 0

    except HintaNytException as e:
        logger.error("Dashboard failed", error=str(e), error_type=type(e).__name__)
        print(f"Virhe: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        logger.exception("Unexpected error", error=str(e))
        print(f"Virhe: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
