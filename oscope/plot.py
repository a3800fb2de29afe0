"""Scrolling oscilloscope plot: axis state, curve settings and rendering."""

from __future__ import annotations

import enum
import io
from dataclasses import dataclass

import numpy as np
from matplotlib.axes import Axes
from matplotlib.backends.backend_agg import FigureCanvasAgg
from matplotlib.colors import LinearSegmentedColormap
from matplotlib.figure import Figure
from matplotlib.ticker import FixedLocator, MaxNLocator

from .controls import WheelBox
from .signal_data import SignalData

TIMER_INTERVAL_MS = 10
X_AXIS_TITLE = "Time [s]"
DEFAULT_CURVE_COLOR = "#00ff00"

_Y_AXIS = (-200.0, 200.0)
_MINOR_DIVISIONS = 5
_DPI = 100
_GRADIENT = LinearSegmentedColormap.from_list(
    "oscope_canvas",
    [(0 / 255, 49 / 255, 110 / 255), (0 / 255, 87 / 255, 174 / 255)],
)


@dataclass
class Interval:
    """A closed range of axis values."""

    minimum: float
    maximum: float

    def width(self) -> float:
        return self.maximum - self.minimum


class LegendBackground(enum.Enum):
    LEGEND = 0
    ITEM = 1


@dataclass(frozen=True)
class LegendStyle:
    """How the in-canvas legend is drawn."""

    background_mode: LegendBackground
    border_radius: int
    margin: int
    spacing: int
    item_margin: int
    max_columns: int = 2
    alignment: tuple[str, str] = ("right", "top")
    font_size: int = 12
    text_color: str = "white"
    border_color: str = "white"
    background: tuple[float, float, float, float] = (
        160 / 255,
        160 / 255,
        164 / 255,
        200 / 255,
    )

    @classmethod
    def for_mode(cls, mode: LegendBackground) -> LegendStyle:
        if mode is LegendBackground.ITEM:
            return cls(mode, border_radius=4, margin=0, spacing=4, item_margin=2)
        return cls(mode, border_radius=8, margin=4, spacing=2, item_margin=0)


def _axis_ticks(low: float, high: float) -> tuple[list[float], list[float]]:
    """Major and minor ticks for the range ``[low, high]``."""
    eps = (high - low) * 1e-9
    values = MaxNLocator(nbins=10, steps=[1, 2, 5, 10]).tick_values(low, high)
    major = [float(v) for v in values if low - eps <= v <= high + eps]
    if len(major) < 2:
        return major, []
    step = (major[1] - major[0]) / _MINOR_DIVISIONS
    minor: list[float] = []
    for start in [major[0] - major[1] + major[0], *major]:
        for k in range(1, _MINOR_DIVISIONS):
            value = start + k * step
            if low - eps <= value <= high + eps:
                minor.append(value)
    return major, minor


def _gradient_image(size: int = 64) -> np.ndarray:
    ramp = np.linspace(0.0, 1.0, size)
    return (ramp[:, None] + ramp[None, :]) / 2.0


class Plot:
    """A time plot that scrolls forward one interval at a time."""

    def __init__(self, data: SignalData | None = None, interval_length: float = 10.0) -> None:
        self.data = data if data is not None else SignalData.instance()
        self.interval = Interval(0.0, 10.0)
        self.y_axis = _Y_AXIS
        self.x_major_ticks, self.x_minor_ticks = _axis_ticks(
            self.interval.minimum, self.interval.maximum
        )
        self.origin = (self.interval.minimum + self.interval.width() / 2.0, 0.0)
        self.curve_color = DEFAULT_CURVE_COLOR
        self.curve_title = ""
        self.legend: LegendStyle | None = None
        self.running = False
        self.painted_points = 0
        self.captures: list[bytes] = []

        self.level_wheel = WheelBox("Zero Level", -400.0, 0.0, 1.0)
        self.level_wheel.set_value(-200.0)
        self.level_wheel.connect(self.scroll_left_axis)

        self.set_interval_length(interval_length)

    def set_interval_length(self, length: float) -> None:
        """Change the width of the displayed time window."""
        if length > 0.0 and length != self.interval.width():
            self.interval.maximum = self.interval.minimum + length
            self.x_major_ticks, self.x_minor_ticks = _axis_ticks(
                self.interval.minimum, self.interval.maximum
            )

    def increment_interval(self) -> None:
        """Move the window forward by its own width and drop stale samples."""
        width = self.interval.width()
        self.interval = Interval(self.interval.maximum, self.interval.maximum + width)
        self.data.clear_stale_values(self.interval.minimum)

        # Shift the ticks rather than recomputing them so the grid does not jump.
        self.x_major_ticks = [t + width for t in self.x_major_ticks]
        self.x_minor_ticks = [t + width for t in self.x_minor_ticks]

        self.origin = (self.interval.minimum + width / 2.0, 0.0)
        self.painted_points = 0

    def scroll_left_axis(self, value: float) -> None:
        """Move the y axis so that it starts at ``value``, keeping its range."""
        low, high = self.y_axis
        self.y_axis = (value, value + (high - low))

    def toggle_timer(self) -> bool:
        """Start or pause updating; True when the plot is now running."""
        self.running = not self.running
        return self.running

    def update_legend(self, visible: bool) -> None:
        """Show or hide the legend inside the canvas."""
        self.legend = LegendStyle.for_mode(LegendBackground.LEGEND) if visible else None

    def set_curve_title(self, title: str) -> None:
        self.curve_title = title

    def set_curve_color(self, color) -> None:
        self.curve_color = color

    def tick(self, elapsed: float) -> bool:
        """Handle one timer tick at ``elapsed`` seconds; True if the window moved."""
        if not self.running:
            return False
        with self.data.locked():
            self.painted_points = len(self.data)
        if elapsed > self.interval.maximum:
            self.increment_interval()
            return True
        return False

    def render(self, ax: Axes) -> Axes:
        """Draw the canvas, grid, origin marker, curve and legend on ``ax``."""
        ax.clear()
        ax.imshow(
            _gradient_image(),
            cmap=_GRADIENT,
            extent=(0, 1, 0, 1),
            transform=ax.transAxes,
            aspect="auto",
            interpolation="bilinear",
            zorder=0,
        )
        with self.data.locked():
            points = np.array(list(self.data), dtype=float).reshape(-1, 2)
            self.painted_points = len(points)

        ax.axvline(self.origin[0], color="gray", linestyle="--", linewidth=0.8, zorder=2)
        ax.axhline(self.origin[1], color="gray", linestyle="--", linewidth=0.8, zorder=2)
        ax.plot(
            points[:, 0],
            points[:, 1],
            color=self.curve_color,
            linewidth=1.0,
            antialiased=True,
            label=self.curve_title,
            zorder=3,
        )

        ax.set_xlim(self.interval.minimum, self.interval.maximum)
        ax.set_ylim(*self.y_axis)
        ax.set_aspect("auto")
        ax.xaxis.set_major_locator(FixedLocator(self.x_major_ticks))
        ax.xaxis.set_minor_locator(FixedLocator(self.x_minor_ticks))
        ax.grid(True, which="major", axis="both", color="gray", linestyle=":", linewidth=0.8)
        ax.grid(True, which="minor", axis="x", color="gray", linestyle=":", linewidth=0.5)
        ax.set_xlabel(X_AXIS_TITLE)

        if self.legend is not None:
            style = self.legend
            legend = ax.legend(
                loc=f"upper {style.alignment[0]}",
                ncol=style.max_columns,
                fontsize=style.font_size,
                labelcolor=style.text_color,
                facecolor=style.background[:3],
                edgecolor=style.border_color,
                framealpha=style.background[3],
                borderpad=style.margin / style.font_size,
                labelspacing=style.spacing / style.font_size,
                columnspacing=style.spacing / style.font_size,
                fancybox=True,
            )
            legend.set_zorder(4)
        return ax

    def capture(self, width: int, height: int) -> bytes:
        """Render the plot to a PNG of ``width`` x ``height`` pixels and keep it."""
        if width <= 0 or height <= 0:
            raise ValueError(f"invalid capture size: {width}x{height}")
        fig = Figure(figsize=(width / _DPI, height / _DPI), dpi=_DPI)
        FigureCanvasAgg(fig)
        self.render(fig.add_subplot())
        buffer = io.BytesIO()
        fig.savefig(buffer, format="png", dpi=_DPI)
        image = buffer.getvalue()
        self.captures.append(image)
        return image

    def capture_image(self, index: int) -> bytes:
        """PNG bytes of a previous capture."""
        return self.captures[index]