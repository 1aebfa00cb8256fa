"""Repeating timers driven by frame delta time."""

from __future__ import annotations

from typing import ClassVar

__all__ = ["Timer"]


class Timer:
    """Counts from a start value toward an end value and wraps around.

    ``value`` wraps back to ``start_value`` each time it passes
    ``end_value``; ``triggered`` tells whether the last update wrapped.
    A separate running total is consumed by :meth:`take`.
    """

    _active_all: ClassVar[bool] = True

    def __init__(
        self,
        start_value: float,
        end_value: float,
        increment_per_second: float = 1.0,
        active: bool = True,
    ) -> None:
        self.start_value = start_value
        self.end_value = end_value
        self.increment_per_second = increment_per_second
        self.active = active
        self.value = start_value
        self.total_value = start_value
        self.triggered = False

    def _passed_end(self, amount: float) -> bool:
        if self.increment_per_second > 0:
            return amount > self.end_value
        if self.increment_per_second < 0:
            return amount < self.end_value
        return False

    def update(self, delta_time: float) -> None:
        """Advance the timer by ``delta_time`` seconds."""
        increment = delta_time * self.increment_per_second
        self.value += increment
        self.total_value += increment
        if self._passed_end(self.value):
            self.value = self.start_value
            self.triggered = True
        else:
            self.triggered = False

    def take(self) -> bool:
        """Return True and reset the running total if it passed the end value."""
        if self._passed_end(self.total_value):
            self.total_value = self.start_value
            return True
        return False

    def start(self) -> None:
        self.active = True

    def stop(self) -> None:
        self.active = False

    @classmethod
    def start_all(cls) -> None:
        """Mark all timers as globally active."""
        Timer._active_all = True

    @classmethod
    def stop_all(cls) -> None:
        """Mark all timers as globally stopped."""
        Timer._active_all = False

    @classmethod
    def is_active_all(cls) -> bool:
        return Timer._active_all