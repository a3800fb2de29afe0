"""Background thread producing samples of a sine signal."""

from __future__ import annotations

import math
import threading
import time

from .signal_data import SignalData


class SamplingThread(threading.Thread):
    """Samples a sine wave every ``interval`` milliseconds into a SignalData.

    ``frequency`` (Hz), ``amplitude`` and ``interval`` may be changed while
    the thread is running.
    """

    def __init__(
        self,
        frequency: float = 5.0,
        amplitude: float = 20.0,
        interval: float = 1000.0,
        data: SignalData | None = None,
    ) -> None:
        super().__init__(daemon=True)
        self.frequency = frequency
        self.amplitude = amplitude
        self.interval = interval
        self.data = data if data is not None else SignalData.instance()
        self._halt = threading.Event()

    def value(self, timestamp: float) -> float:
        """Signal value at ``timestamp`` seconds."""
        period = 1.0 / self.frequency
        x = math.fmod(timestamp, period)
        return self.amplitude * math.sin(x / period * 2 * math.pi)

    def sample(self, elapsed: float) -> None:
        """Append the sample for ``elapsed`` seconds, if the frequency is positive."""
        if self.frequency > 0.0:
            self.data.append((elapsed, self.value(elapsed)))

    def run(self) -> None:
        start = time.monotonic()
        while not self._halt.is_set():
            self.sample(time.monotonic() - start)
            self._halt.wait(max(self.interval, 0.0) / 1000.0)

    def stop(self) -> None:
        """Ask the sampling loop to finish."""
        self._halt.set()