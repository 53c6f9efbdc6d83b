"""Wheel-speed measurement from hall-sensor pulses."""

from __future__ import annotations

import threading
import time
from collections.abc import Callable

WHEEL_DIAMETER = 0.616
WHEEL_CIRCUMFERENCE = 3.14 * WHEEL_DIAMETER
PULSE_RESET = 9998


def velocity_from_period(period: float) -> float:
    """Return the speed in km/h for the given time in seconds between pulses."""
    if period <= 0:
        raise ValueError("period must be positive")
    frequency = 1.0 / period
    return WHEEL_CIRCUMFERENCE * frequency * 3.6 * 2


class VelocityMeter:
    """Counts hall pulses and turns the time between them into a velocity."""

    def __init__(self, clock: Callable[[], float] | None = None) -> None:
        self._clock = clock if clock is not None else time.monotonic
        self._lock = threading.Lock()
        self._pulse_count = 0
        self._velocity = 0.0
        self._start: float | None = None

    @property
    def pulse_count(self) -> int:
        """Pulses counted since the last reset."""
        with self._lock:
            return self._pulse_count

    @property
    def velocity(self) -> float:
        """Most recently measured velocity in km/h."""
        with self._lock:
            return self._velocity

    def pulse(self) -> None:
        """Record one rising edge of the hall sensor."""
        with self._lock:
            self._pulse_count += 1

    def sample(self) -> float:
        """Take one measurement step and return the current velocity."""
        with self._lock:
            count = self._pulse_count

        if count % 2 == 1:
            self._start = self._clock()
        elif self._start is not None:
            period = self._clock() - self._start
            if period > 0:
                velocity = velocity_from_period(period)
                with self._lock:
                    self._velocity = velocity

        with self._lock:
            if self._pulse_count >= PULSE_RESET:
                self._pulse_count = 0
            return self._velocity