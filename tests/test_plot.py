import io

import matplotlib.image as mpimg
import pytest
from matplotlib.backends.backend_agg import FigureCanvasAgg
from matplotlib.figure import Figure

from oscope.plot import Interval, LegendBackground, Plot
from oscope.signal_data import SignalData


@pytest.fixture
def data():
    return SignalData()


@pytest.fixture
def plot(data):
    return Plot(data, 10.0)


def test_interval_width():
    assert Interval(2.0, 7.5).width() == 5.5


def test_initial_axes(plot):
    assert (plot.interval.minimum, plot.interval.maximum) == (0.0, 10.0)
    assert plot.y_axis == (-200.0, 200.0)
    assert plot.origin == (5.0, 0.0)
    assert plot.running is False


def test_ticks_inside_interval(plot):
    assert plot.x_major_ticks[0] >= plot.interval.minimum
    assert plot.x_major_ticks[-1] <= plot.interval.maximum
    assert plot.x_major_ticks == sorted(plot.x_major_ticks)
    assert all(plot.interval.minimum <= t <= plot.interval.maximum for t in plot.x_minor_ticks)


def test_set_interval_length(plot):
    plot.set_interval_length(5.0)
    assert plot.interval.maximum == 5.0
    assert plot.x_major_ticks[-1] <= 5.0


@pytest.mark.parametrize("length", [0.0, -3.0])
def test_set_interval_length_ignores_non_positive(plot, length):
    plot.set_interval_length(length)
    assert plot.interval.width() == 10.0


def test_increment_interval_shifts_window_and_ticks(plot, data):
    majors = list(plot.x_major_ticks)
    minors = list(plot.x_minor_ticks)
    for x in range(0, 15):
        data.append((float(x), 1.0))
    plot.painted_points = 7
    plot.increment_interval()
    assert (plot.interval.minimum, plot.interval.maximum) == (10.0, 20.0)
    assert plot.x_major_ticks == pytest.approx([t + 10.0 for t in majors])
    assert plot.x_minor_ticks == pytest.approx([t + 10.0 for t in minors])
    assert plot.origin == (15.0, 0.0)
    assert plot.painted_points == 0
    assert all(data[i][0] >= 9.0 for i in range(len(data)))


def test_scroll_left_axis_keeps_range(plot):
    plot.scroll_left_axis(-100.0)
    low, high = plot.y_axis
    assert low == -100.0
    assert high - low == 400.0


def test_level_wheel_scrolls_axis(plot):
    assert plot.level_wheel.value == -200.0
    plot.level_wheel.set_value(-150.0)
    assert plot.y_axis[0] == -150.0


def test_toggle_timer(plot):
    assert plot.toggle_timer() is True
    assert plot.toggle_timer() is False
    assert plot.running is False


def test_tick_when_stopped_does_nothing(plot):
    assert plot.tick(50.0) is False
    assert plot.interval.minimum == 0.0


def test_tick_updates_points_and_advances(plot, data):
    plot.toggle_timer()
    data.append((1.0, 2.0))
    data.append((2.0, 3.0))
    assert plot.tick(3.0) is False
    assert plot.painted_points == len(data)
    assert plot.tick(10.5) is True
    assert plot.interval.minimum == 10.0


def test_update_legend(plot):
    plot.update_legend(True)
    style = plot.legend
    assert style.background_mode is LegendBackground.LEGEND
    assert (style.border_radius, style.margin, style.spacing, style.item_margin) == (8, 4, 2, 0)
    assert style.max_columns == 2
    assert style.font_size == 12
    plot.update_legend(False)
    assert plot.legend is None


def test_curve_title_and_color(plot):
    plot.set_curve_title("Amplitude: 160 V")
    plot.set_curve_color("yellow")
    assert plot.curve_title == "Amplitude: 160 V"
    assert plot.curve_color == "yellow"


def test_render_draws_curve(plot, data):
    data.append((1.0, 10.0))
    data.append((2.0, -20.0))
    plot.set_curve_title("signal")
    plot.update_legend(True)
    fig = Figure()
    FigureCanvasAgg(fig)
    ax = plot.render(fig.add_subplot())
    curve = [line for line in ax.get_lines() if line.get_label() == "signal"][0]
    assert list(curve.get_xdata()) == [1.0, 2.0]
    assert list(curve.get_ydata()) == [10.0, -20.0]
    assert ax.get_xlim() == (0.0, 10.0)
    assert ax.get_ylim() == (-200.0, 200.0)
    assert ax.get_xlabel() == "Time [s]"
    assert ax.get_legend() is not None


def test_capture_produces_png_of_requested_size(plot, data):
    data.append((1.0, 1.0))
    image = plot.capture(800, 600)
    assert image[:8] == b"\x89PNG\r\n\x1a\n"
    pixels = mpimg.imread(io.BytesIO(image), format="png")
    assert pixels.shape[:2] == (600, 800)
    assert plot.capture_image(0) == image


def test_capture_image_out_of_range(plot):
    plot.capture(200, 100)
    with pytest.raises(IndexError):
        plot.capture_image(1)


def test_capture_rejects_empty_size(plot):
    with pytest.raises(ValueError):
        plot.capture(0, 100)
    assert plot.captures == []