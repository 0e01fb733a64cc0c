"""
Dashboard renderer - banner, hourly price chart and the printed summary.
"""

import sys
from typing import Optional, TextIO

from rich.align import Align
from rich.text import Text

from hintanyt.dashboard.widgets import BarChart, Region, TerminalSurface
from hintanyt.logging_config import get_logger
from hintanyt.models.price import PriceSeries, PriceSummary
from hintanyt.services.price_transformer import format_summary

logger = get_logger(__name__)

BANNER = r"""
 _    _ _       _                      _
| |  | (_)     | |                    | |
| |__| |_ _ __ | |_ __ _   _ __  _   _| |_
|  __  | | '_ \| __/ _` | | '_ \| | | | __|
| |  | | | | | | || (_| | | | | | |_| | |_
|_|  |_|_|_| |_|\__\__,_| |_| |_|\__, |\__|
                                  __/ |
                                 |___/
"""

LOADING_CAPTION = "Loading..."

CHART_TITLE = "Sähkön-tuntihinta"

BANNER_HEIGHT = 12
CHART_TOP = 10
CHART_HEIGHT = 18


class DashboardRenderer:
    """Draws the banner and chart once, each on its own surface."""

    def __init__(
        self,
        banner_surface: Optional[TerminalSurface] = None,
        chart_surface: Optional[TerminalSurface] = None,
    ):
        self.banner_surface = banner_surface or TerminalSurface()
        self.chart_surface = chart_surface or TerminalSurface()

    def draw_banner(self) -> None:
        """Draw the banner panel over the top rows of the terminal."""
        width, _ = self.banner_surface.size
        art = BANNER.strip("\n")
        art_width = max(len(line) for line in art.splitlines())
        banner = Text(f"{art}\n\n{LOADING_CAPTION.center(art_width)}")
        self.banner_surface.draw(
            Align.center(banner),
            Region(0, 0, width, BANNER_HEIGHT),
            style="white",
        )

    def draw_chart(self, series: PriceSeries) -> None:
        """Draw the hourly price bar chart below the banner."""
        width, _ = self.chart_surface.size
        chart = BarChart(
            series.bars(),
            bar_width=4,
            bar_gap=0,
            bar_style="green",
            value_style="white",
        )
        self.chart_surface.draw(chart, Region(0, CHART_TOP, width, CHART_HEIGHT), title=CHART_TITLE)
        logger.debug("Chart drawn", bars=len(series), width=width)

    def print_summary(self, summary: PriceSummary, file: Optional[TextIO] = None) -> None:
        """Print the summary lines to standard output, outside the rich surfaces."""
        for line in format_summary(summary):
            print(line, file=file or sys.stdout)
