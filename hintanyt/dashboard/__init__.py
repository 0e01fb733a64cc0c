"""
Dashboard package for the price dashboard.
Contains the rich based terminal surfaces, bar chart and renderer.
"""

from .renderer import DashboardRenderer
from .widgets import BarChart, Region, TerminalSurface

__all__ = [
    "BarChart",
    "DashboardRenderer",
    "Region",
    "TerminalSurface",
]
