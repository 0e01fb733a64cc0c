"""
Terminal surface and bar chart widget built on rich.
"""

from typing import NamedTuple, Optional, Sequence, Tuple

from rich import box
from rich.console import Console, ConsoleOptions, RenderableType, RenderResult
from rich.control import Control
from rich.panel import Panel
from rich.style import Style
from rich.text import Text

# Eighth-block glyphs, index = filled eighths of one cell
BAR_SYMBOLS = " ▁▂▃▄▅▆▇█"

DEFAULT_CHART_HEIGHT = 16


class Region(NamedTuple):
    """Rectangular area of a terminal surface, in cells."""
    x: int
    y: int
    width: int
    height: int


class TerminalSurface:
    """
    A rendering target owned by one widget.

    Draws bordered panels at absolute positions. Cursor movement is only
    emitted on a real terminal; other consoles get the panel appended.
    """

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    @property
    def size(self) -> Tuple[int, int]:
        """(width, height) of the surface in cells."""
        width, height = self.console.size
        return width, height

    def draw(
        self,
        content: RenderableType,
        region: Region,
        title: str = "",
        border_style: str = "black",
        style: str = "",
    ) -> None:
        panel = Panel(
            content,
            title=title or None,
            box=box.SQUARE,
            border_style=border_style,
            style=style,
            width=region.width,
            height=region.height,
            padding=0,
        )
        self.console.control(Control.move_to(region.x, region.y))
        self.console.print(panel, crop=True)


class BarChart:
    """
    Vertical bar chart of (label, value) pairs.

    Bars are scaled to the largest visible value, drawn with eighth-block
    resolution, and carry their value in the bottom bar row. The last row
    holds the labels. Bars that do not fit the width are cropped.
    """

    def __init__(
        self,
        data: Sequence[Tuple[str, int]],
        bar_width: int = 4,
        bar_gap: int = 0,
        bar_style: str = "green",
        value_style: str = "white",
        label_style: str = "",
        height: Optional[int] = None,
    ):
        if bar_width < 1:
            raise ValueError("bar_width must be at least 1")
        self.data = list(data)
        self.bar_width = bar_width
        self.bar_gap = bar_gap
        self.bar_style = bar_style
        self.value_style = value_style
        self.label_style = label_style
        self.height = height

    def visible_bars(self, width: int) -> Sequence[Tuple[str, int]]:
        """Bars that fit in the given width."""
        slot = self.bar_width + self.bar_gap
        count = max((width + self.bar_gap) // slot, 0)
        return self.data[:count]

    def _eighths(self, values: Sequence[int], rows: int) -> list:
        ceiling = max(max(values, default=0), 1)
        return [max(value, 0) * rows * 8 // ceiling for value in values]

    def _value_cell(self, value: int, filled: bool) -> Text:
        style = Style.parse(self.value_style)
        if filled:
            style += Style(bgcolor=Style.parse(self.bar_style).color)
        label = str(value)
        if len(label) > self.bar_width:
            label = ""
        return Text(label.center(self.bar_width), style=style)

    def __rich_console__(self, console: Console, options: ConsoleOptions) -> RenderResult:
        height = self.height or options.height or DEFAULT_CHART_HEIGHT
        bars = self.visible_bars(options.max_width)
        values = [value for _, value in bars]
        bar_rows = max(height - 1, 1)
        eighths = self._eighths(values, bar_rows)
        gap = " " * self.bar_gap

        lines = []
        for row in range(bar_rows, 0, -1):
            line = Text()
            for index, value in enumerate(values):
                filled = eighths[index] - (row - 1) * 8
                if row == 1:
                    line.append_text(self._value_cell(value, filled > 0))
                else:
                    symbol = BAR_SYMBOLS[min(max(filled, 0), 8)]
                    line.append(symbol * self.bar_width, style=self.bar_style)
                line.append(gap)
            lines.append(line)

        labels = Text()
        for label, _ in bars:
            labels.append(label[: self.bar_width].center(self.bar_width), style=self.label_style)
            labels.append(gap)
        lines.append(labels)

        yield Text("\n", no_wrap=True, overflow="crop").join(lines)
