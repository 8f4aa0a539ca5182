"""Terminal rendering of chart descriptors.

Hidden design decisions:
- Charts are drawn with block characters through rich, so they work in any
  terminal and inside Textual widgets
- Pie slice colours derive from slice position only (evenly spaced hues)
- Bar and line charts share one accent colour
"""

import colorsys
import math
from dataclasses import dataclass

from rich.console import Console, ConsoleOptions, Group, RenderResult
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .models import ChartDescriptor, ChartKind, ChartPoint, DecodeFailure

ACCENT_COLOR = "#8884d8"
PIE_SATURATION = 70
PIE_LIGHTNESS = 50

BAR_CHAR = "█"
PIE_CHAR = "■"
LINE_MARKER = "●"
SPARK_CHARS = "▁▂▃▄▅▆▇█"

MAX_LABEL_WIDTH = 24
MIN_PLOT_WIDTH = 10


def slice_hue(index: int, count: int) -> float:
    """Hue in degrees for slice ``index`` of ``count``."""
    return (index * 360) / count


def hsl_to_hex(hue: float, saturation: float, lightness: float) -> str:
    """Convert CSS-style HSL (degrees, percent, percent) to ``#rrggbb``."""
    r, g, b = colorsys.hls_to_rgb((hue % 360) / 360, lightness / 100, saturation / 100)
    return "#{:02x}{:02x}{:02x}".format(round(r * 255), round(g * 255), round(b * 255))


def finite(value: float) -> float:
    """Value used for geometry; NaN and infinities draw as zero."""
    return value if math.isfinite(value) else 0.0


def format_value(value: float) -> str:
    """Thousands separators, at most two decimals."""
    if float(value).is_integer():
        return f"{value:,.0f}"
    return f"{value:,.2f}"


@dataclass(frozen=True)
class SliceStyle:
    """Colour assignment of one pie slice."""

    hue: float
    css: str
    hex: str


@dataclass(frozen=True)
class ChartFigure:
    """A chart ready for display.

    Built by ``render_chart``; renders itself through rich's console protocol.
    """

    kind: ChartKind
    title: str | None
    points: tuple[ChartPoint, ...]
    slices: tuple[SliceStyle, ...] = ()
    color: str = ACCENT_COLOR

    def __rich_console__(self, console: Console, options: ConsoleOptions) -> RenderResult:
        width = max(options.max_width - 4, MIN_PLOT_WIDTH + 8)
        if not self.points:
            body = Text("No data to chart", style="dim italic")
        elif self.kind == ChartKind.PIE:
            body = self._pie(width)
        elif self.kind == ChartKind.LINE:
            body = self._line(width)
        else:
            body = self._bar(width)

        title = Text(self.title, style="bold") if self.title else None
        yield Panel(body, title=title, border_style="dim", expand=True)

    def _label_width(self) -> int:
        return max(min(max(len(p.name) for p in self.points), MAX_LABEL_WIDTH), 1)

    def _value_texts(self) -> list[str]:
        return [format_value(p.value) for p in self.points]

    def _bar(self, width: int) -> Table:
        values = self._value_texts()
        label_width = self._label_width()
        plot_width = max(width - label_width - max(map(len, values)) - 4, MIN_PLOT_WIDTH)
        peak = max(abs(finite(p.value)) for p in self.points) or 1.0

        grid = Table.grid(padding=(0, 1))
        grid.add_column(justify="right", width=label_width, no_wrap=True)
        grid.add_column(no_wrap=True)
        for point, value_text in zip(self.points, values, strict=True):
            length = round(max(finite(point.value), 0.0) / peak * plot_width)
            bar = Text(BAR_CHAR * length, style=self.color)
            bar.append(f" {value_text}", style="bold")
            grid.add_row(Text(point.name, overflow="ellipsis"), bar)
        return grid

    def _line(self, width: int) -> Group:
        values = self._value_texts()
        label_width = self._label_width()
        plot_width = max(width - label_width - max(map(len, values)) - 4, MIN_PLOT_WIDTH)
        low = min(finite(p.value) for p in self.points)
        high = max(finite(p.value) for p in self.points)
        # Halved so the extremes of the float range cannot overflow.
        span = (high / 2 - low / 2) or 1.0

        def position(value: float) -> float:
            return (finite(value) / 2 - low / 2) / span

        grid = Table.grid(padding=(0, 1))
        grid.add_column(justify="right", width=label_width, no_wrap=True)
        grid.add_column(no_wrap=True)
        for point, value_text in zip(self.points, values, strict=True):
            offset = round(position(point.value) * (plot_width - 1))
            row = Text("·" * offset, style="dim")
            row.append(LINE_MARKER, style=self.color)
            row.append(f" {value_text}", style="bold")
            grid.add_row(Text(point.name, overflow="ellipsis"), row)

        spark = Text(style=self.color)
        for point in self.points:
            level = round(position(point.value) * (len(SPARK_CHARS) - 1))
            spark.append(SPARK_CHARS[level])
        return Group(grid, Text(), spark)

    def _pie(self, width: int) -> Group:
        total = sum(max(finite(p.value), 0.0) for p in self.points)
        shares = [max(finite(p.value), 0.0) / total if total else 0.0 for p in self.points]

        strip = Text()
        for share, style in zip(shares, self.slices, strict=True):
            strip.append(BAR_CHAR * round(share * width), style=style.hex)

        legend = Table.grid(padding=(0, 1))
        legend.add_column(no_wrap=True)
        legend.add_column(overflow="ellipsis")
        legend.add_column(justify="right", no_wrap=True)
        legend.add_column(justify="right", no_wrap=True)
        for point, share, style in zip(self.points, shares, self.slices, strict=True):
            legend.add_row(
                Text(PIE_CHAR, style=style.hex),
                Text(point.name, overflow="ellipsis"),
                format_value(point.value),
                Text(f"{share * 100:.2f}%", style="dim"),
            )
        return Group(strip, Text(), legend)


@dataclass(frozen=True)
class ChartNotice:
    """Inert placeholder shown where a chart failed to decode."""

    message: str

    def __rich_console__(self, console: Console, options: ConsoleOptions) -> RenderResult:
        yield Panel(Text(self.message, style="bold red"), border_style="red", expand=True)


def pie_slices(count: int) -> tuple[SliceStyle, ...]:
    """Deterministic colours for ``count`` pie slices."""
    slices = []
    for index in range(count):
        hue = slice_hue(index, count)
        slices.append(SliceStyle(
            hue=hue,
            css=f"hsl({hue:g}, {PIE_SATURATION}%, {PIE_LIGHTNESS}%)",
            hex=hsl_to_hex(hue, PIE_SATURATION, PIE_LIGHTNESS),
        ))
    return tuple(slices)


def render_chart(descriptor: ChartDescriptor) -> ChartFigure:
    """Turn a descriptor into a displayable figure.

    Pure function of the descriptor; the descriptor is left untouched.
    """
    slices = pie_slices(len(descriptor.series)) if descriptor.kind == ChartKind.PIE else ()
    return ChartFigure(
        kind=descriptor.kind,
        title=descriptor.title,
        points=descriptor.series,
        slices=slices,
    )


def render_failure(failure: DecodeFailure) -> ChartNotice:
    """Turn a decode failure into an inline notice."""
    return ChartNotice(message=failure.message)
