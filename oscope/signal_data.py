"""Thread-safe store of the sampled signal points shown by the plot."""

from __future__ import annotations

import threading
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, replace
from typing import ClassVar

Point = tuple[float, float]


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle given by its edges; ``top`` is the smaller y."""

    left: float
    top: float
    right: float
    bottom: float

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.bottom - self.top

    def is_valid(self) -> bool:
        """A rectangle with a negative width or height is invalid."""
        return self.width >= 0 and self.height >= 0


_INVALID_RECT = Rect(1.0, 1.0, -1.0, -1.0)


class _ReadWriteLock:
    """Many readers or one writer; writers may try without blocking."""

    def __init__(self) -> None:
        self._cond = threading.Condition()
        self._readers = 0
        self._writer = False

    def acquire_read(self) -> None:
        with self._cond:
            while self._writer:
                self._cond.wait()
            self._readers += 1

    def release_read(self) -> None:
        with self._cond:
            self._readers -= 1
            if self._readers == 0:
                self._cond.notify_all()

    def acquire_write(self, blocking: bool = True) -> bool:
        with self._cond:
            if not blocking and (self._writer or self._readers):
                return False
            while self._writer or self._readers:
                self._cond.wait()
            self._writer = True
            return True

    def release_write(self) -> None:
        with self._cond:
            self._writer = False
            self._cond.notify_all()


class SignalData:
    """Points of the signal plus their bounding rectangle.

    Producers call :meth:`append`; when readers hold the data, new points
    are kept pending and merged on a later append.
    """

    _instance: ClassVar[SignalData | None] = None
    _instance_lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(self) -> None:
        self._lock = _ReadWriteLock()
        self._values: list[Point] = []
        self._bounding_rect = _INVALID_RECT
        self._pending_mutex = threading.Lock()
        self._pending: list[Point] = []

    @classmethod
    def instance(cls) -> SignalData:
        """Return the process-wide shared store."""
        with cls._instance_lock:
            if cls._instance is None:
                cls._instance = cls()
            return cls._instance

    def _store(self, point: Point) -> None:
        self._values.append(point)
        x, y = point
        rect = self._bounding_rect
        if not rect.is_valid():
            self._bounding_rect = Rect(x, y, x, y)
            return
        rect = replace(rect, right=x)
        if y > rect.bottom:
            rect = replace(rect, bottom=y)
        if y < rect.top:
            rect = replace(rect, top=y)
        self._bounding_rect = rect

    def append(self, point: tuple[float, float]) -> None:
        """Add a sample; it becomes visible as soon as no reader holds the data."""
        x, y = point
        with self._pending_mutex:
            self._pending.append((float(x), float(y)))
            if self._lock.acquire_write(blocking=False):
                try:
                    for pending in self._pending:
                        self._store(pending)
                    self._pending.clear()
                finally:
                    self._lock.release_write()

    def clear_stale_values(self, limit: float) -> None:
        """Drop points older than ``limit``, keeping the last one before it."""
        self._lock.acquire_write()
        try:
            values = self._values
            self._values = []
            self._bounding_rect = _INVALID_RECT

            start = next(
                (i for i in range(len(values) - 1, -1, -1) if values[i][0] < limit),
                -1,
            )
            if start > 0:
                kept = [values[start], *values[start + 1 : len(values) - 1]]
            else:
                kept = values[max(start, 0) : len(values) - 1]
            for point in kept:
                self._store(point)
        finally:
            self._lock.release_write()

    def __len__(self) -> int:
        return len(self._values)

    def __getitem__(self, index: int) -> Point:
        return self._values[index]

    def bounding_rect(self) -> Rect:
        """Bounding rectangle of the stored points; invalid when empty."""
        return self._bounding_rect

    @contextmanager
    def locked(self) -> Iterator[SignalData]:
        """Hold the data for reading; appends meanwhile are kept pending."""
        self._lock.acquire_read()
        try:
            yield self
        finally:
            self._lock.release_read()