"""Main window of the oscilloscope and the command that starts it."""

from __future__ import annotations

import argparse
import time
from datetime import datetime

from .controls import Knob, WheelBox
from .image_viewer import ImageViewer
from .plot import TIMER_INTERVAL_MS, Plot
from .sampling import SamplingThread
from .signal_data import SignalData

INTERVAL_LENGTH = 10.0
CAPTURE_SIZE = (800, 600)
CAPTURE_TIME_FORMAT = "%y%m%d_%H-%M-%S_"
WINDOW_SIZE = (12.0, 4.0)


class MainWindow:
    """The plot together with the controls that steer it and the sampler."""

    def __init__(self, data: SignalData | None = None) -> None:
        self.plot = Plot(data, INTERVAL_LENGTH)

        self.amplitude_knob = Knob("Amplitude", 0.0, 200.0)
        self.amplitude_knob.set_value(160.0)

        self.frequency_knob = Knob("Frequency [Hz]", 0.1, 20.0)
        self.frequency_knob.set_value(17.8)

        self.interval_wheel = WheelBox("Displayed [s]", 1.0, 100.0, 1.0)
        self.interval_wheel.set_value(INTERVAL_LENGTH)

        self.timer_wheel = WheelBox("Sample Interval [ms]", 0.0, 20.0, 0.1)
        self.timer_wheel.set_value(10.0)

        self.stop_label = "Stop"
        self.legend_visible = False
        self.capture_names: list[str] = []

        self.amplitude_knob.connect(self._update_curve_title)
        self.frequency_knob.connect(self._update_curve_title)
        self.interval_wheel.connect(self.plot.set_interval_length)
        self._update_curve_title()

    def curve_title(self) -> str:
        """Legend text naming the current amplitude and frequency."""
        return (
            f"Amplitude: {self.amplitude_knob.value:g} V\n"
            f"Frequency: {self.frequency_knob.value:g} Hz"
        )

    def _update_curve_title(self, _value: float | None = None) -> None:
        self.plot.set_curve_title(self.curve_title())

    def _set_legend_visible(self, visible: bool) -> None:
        self.legend_visible = visible
        if visible:
            self._update_curve_title()
        self.plot.update_legend(visible)

    def capture_name(self, when: datetime) -> str:
        """Name of a capture taken at ``when`` with the current settings."""
        return (
            when.strftime(CAPTURE_TIME_FORMAT)
            + f"Amp_{self.amplitude_knob.value:g} V_"
            + f"Freq_{self.frequency_knob.value:g} Hz"
        )

    def toggle_stop(self) -> str:
        """Pause or resume the plot; returns the new label of the stop button."""
        self.stop_label = "Stop" if self.plot.toggle_timer() else "Play"
        return self.stop_label

    def capture(self) -> str:
        """Take a screenshot of the plot and return the name it is listed under."""
        name = self.capture_name(datetime.now())
        self.capture_names.append(name)
        self.plot.capture(*CAPTURE_SIZE)
        return name

    def open_capture(self, index: int) -> ImageViewer:
        """A viewer for the capture listed at ``index``."""
        filename = self.capture_names[index] + ".png"
        return ImageViewer(self.plot.capture_image(index), filename)

    def show(self) -> None:
        """Open the interactive window and run until it is closed."""
        import matplotlib.pyplot as plt
        from matplotlib.animation import FuncAnimation
        from matplotlib.colors import is_color_like
        from matplotlib.widgets import Button, CheckButtons, Slider, TextBox

        fig = plt.figure(figsize=WINDOW_SIZE)
        plot_ax = fig.add_axes((0.05, 0.12, 0.60, 0.82))

        def redraw() -> None:
            self.plot.render(plot_ax)
            fig.canvas.draw_idle()

        sliders = []
        controls = [
            self.interval_wheel,
            self.timer_wheel,
            self.plot.level_wheel,
            self.amplitude_knob,
            self.frequency_knob,
        ]
        for row, control in enumerate(controls):
            ax = fig.add_axes((0.80, 0.93 - row * 0.06, 0.15, 0.04))
            low, high = sorted((control.minimum, control.maximum))
            slider = Slider(
                ax,
                control.title,
                low,
                high,
                valinit=control.value,
                valstep=control.step or None,
            )
            slider.on_changed(control.set_value)
            slider.on_changed(lambda _v: redraw())
            sliders.append(slider)

        legend_box = CheckButtons(
            fig.add_axes((0.70, 0.56, 0.25, 0.06)), ["Show Item Legend"], [False]
        )
        legend_box.on_clicked(
            lambda _label: (self._set_legend_visible(legend_box.get_status()[0]), redraw())
        )

        stop_button = Button(fig.add_axes((0.70, 0.48, 0.08, 0.06)), self.stop_label)
        capture_button = Button(fig.add_axes((0.79, 0.48, 0.08, 0.06)), "Capture")
        color_box = TextBox(fig.add_axes((0.90, 0.48, 0.08, 0.06)), "Color ", initial="yellow")
        open_box = TextBox(fig.add_axes((0.80, 0.40, 0.15, 0.06)), "Open capture # ")
        list_ax = fig.add_axes((0.70, 0.02, 0.28, 0.36))
        list_ax.set_axis_off()
        viewers: list[ImageViewer] = []

        def refresh_list(message: str = "") -> None:
            list_ax.clear()
            list_ax.set_axis_off()
            lines = [f"{i}: {name}" for i, name in enumerate(self.capture_names)]
            if message:
                lines.append(message)
            list_ax.text(0.0, 1.0, "\n".join(lines), va="top", fontsize=8)
            fig.canvas.draw_idle()

        def on_stop(_event) -> None:
            stop_button.label.set_text(self.toggle_stop())
            fig.canvas.draw_idle()

        def on_capture(_event) -> None:
            self.capture()
            refresh_list()

        def on_color(text: str) -> None:
            if is_color_like(text):
                self.plot.set_curve_color(text)
                redraw()

        def on_open(text: str) -> None:
            try:
                viewer = self.open_capture(int(text))
            except (ValueError, IndexError):
                refresh_list(f"no capture {text!r}")
                return
            viewers.append(viewer)
            viewer.show()

        stop_button.on_clicked(on_stop)
        capture_button.on_clicked(on_capture)
        color_box.on_submit(on_color)
        open_box.on_submit(on_open)

        if not self.plot.running:
            self.plot.toggle_timer()
        start = time.monotonic()

        def update(_frame):
            if self.plot.running:
                self.plot.tick(time.monotonic() - start)
                self.plot.render(plot_ax)
            return ()

        animation = FuncAnimation(
            fig, update, interval=TIMER_INTERVAL_MS, cache_frame_data=False
        )
        redraw()
        self._widgets = (sliders, legend_box, stop_button, capture_button, color_box, open_box, animation)
        plt.show()


def main(argv: list[str] | None = None) -> int:
    """Run the oscilloscope until its window is closed."""
    parser = argparse.ArgumentParser(
        prog="oscope", description="Show a sampled sine signal on a scrolling plot."
    )
    parser.parse_args(argv)

    data = SignalData.instance()
    window = MainWindow(data)

    sampler = SamplingThread(
        frequency=window.frequency_knob.value,
        amplitude=window.amplitude_knob.value,
        interval=window.timer_wheel.value,
        data=data,
    )
    window.frequency_knob.connect(lambda value: setattr(sampler, "frequency", value))
    window.amplitude_knob.connect(lambda value: setattr(sampler, "amplitude", value))
    window.timer_wheel.connect(lambda value: setattr(sampler, "interval", value))

    sampler.start()
    try:
        window.show()
    finally:
        sampler.stop()
        sampler.join(1.0)
    return 0