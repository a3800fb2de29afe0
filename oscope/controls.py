"""Value controls of the oscilloscope: a labelled knob and a wheel box."""

from __future__ import annotations

import math
from collections.abc import Callable

ValueCallback = Callable[[float], None]

_KNOB_TOTAL_STEPS = 100
_KNOB_MAJOR_STEPS = 5
_WHEEL_PAGE_STEP_COUNT = 5


class RangeControl:
    """A titled value bounded to ``[minimum, maximum]`` that notifies listeners."""

    def __init__(self, title: str, minimum: float, maximum: float, step: float) -> None:
        if step < 0:
            raise ValueError(f"step must not be negative: {step}")
        self.title = title
        self.minimum = minimum
        self.maximum = maximum
        self.step = step
        self._listeners: list[ValueCallback] = []
        self._value = self._bounded(0.0)

    def _bounded(self, value: float) -> float:
        low, high = sorted((self.minimum, self.maximum))
        return min(max(value, low), high)

    @property
    def value(self) -> float:
        return self._value

    def set_value(self, value: float) -> None:
        """Set the value, clamped to the range; listeners hear of a change."""
        value = self._bounded(value)
        if value == self._value:
            return
        self._value = value
        for callback in list(self._listeners):
            callback(value)

    def connect(self, callback: ValueCallback) -> None:
        """Call ``callback(value)`` whenever the value changes."""
        self._listeners.append(callback)


def _nice_step(span: float, max_steps: int) -> float:
    raw = span / max_steps
    power = 10.0 ** math.floor(math.log10(raw))
    for factor in (1.0, 2.0, 5.0, 10.0):
        if factor * power >= raw * (1 - 1e-9):
            return factor * power
    return 10.0 * power


def _major_ticks(minimum: float, maximum: float, max_steps: int) -> list[float]:
    low, high = sorted((minimum, maximum))
    if high == low:
        return [low]
    step = _nice_step(high - low, max_steps)
    first = math.ceil(low / step - 1e-9)
    last = math.floor(high / step + 1e-9)
    return [round(k * step, 12) for k in range(first, last + 1)]


class Knob(RangeControl):
    """A round knob whose scale always shows its bounds as major ticks."""

    def __init__(self, title: str, minimum: float, maximum: float) -> None:
        super().__init__(title, minimum, maximum, abs(maximum - minimum) / _KNOB_TOTAL_STEPS)
        ticks = _major_ticks(minimum, maximum, _KNOB_MAJOR_STEPS)
        if ticks and ticks[0] > minimum:
            ticks.insert(0, minimum)
            if ticks[-1] < maximum:
                ticks.append(maximum)
        self.ticks = ticks


class WheelBox(RangeControl):
    """A wheel stepping through its range next to a numeric display."""

    def __init__(self, title: str, minimum: float, maximum: float, step: float) -> None:
        super().__init__(title, minimum, maximum, step)
        self.page_step = step * _WHEEL_PAGE_STEP_COUNT