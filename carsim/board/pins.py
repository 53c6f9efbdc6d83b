"""Board pin map and an in-memory GPIO bank that tracks pin levels."""

from __future__ import annotations

import enum
import threading

LOW = 0
HIGH = 1


class Pin(enum.IntEnum):
    """Broadcom pin numbers used by the vehicle board."""

    BRAKE_PEDAL = 22
    ACCEL_PEDAL = 27
    LOW_BEAM = 19
    HIGH_BEAM = 26
    BRAKE_LIGHT = 25
    LEFT_SIGNAL_LIGHT = 8
    RIGHT_SIGNAL_LIGHT = 7
    LOW_BEAM_SWITCH = 16
    HIGH_BEAM_SWITCH = 1
    LEFT_SIGNAL_SWITCH = 20
    RIGHT_SIGNAL_SWITCH = 21
    CRUISE_RESUME_SWITCH = 13
    CRUISE_CANCEL_SWITCH = 0
    MOTOR_POWER = 23
    BRAKE_POWER = 24
    MOTOR_DIR1 = 17
    MOTOR_DIR2 = 18
    WHEEL_HALL_SENSOR = 5


class Pull(enum.Enum):
    """Pull resistor configuration of an input pin."""

    OFF = "off"
    DOWN = "down"
    UP = "up"


class PinBank:
    """Thread-safe set of pin levels; every pin starts LOW with no pull resistor."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._levels = {pin: LOW for pin in Pin}
        self._pulls = {pin: Pull.OFF for pin in Pin}

    @staticmethod
    def _resolve(pin: int) -> Pin:
        # Raises ValueError for a number that is not on the board.
        return Pin(pin)

    def read(self, pin: int) -> int:
        """Return the level of ``pin`` (LOW or HIGH)."""
        key = self._resolve(pin)
        with self._lock:
            return self._levels[key]

    def write(self, pin: int, value: int) -> None:
        """Drive ``pin`` HIGH for a truthy value, LOW otherwise."""
        key = self._resolve(pin)
        with self._lock:
            self._levels[key] = HIGH if value else LOW

    def toggle(self, pin: int) -> int:
        """Invert the level of ``pin`` and return the new level."""
        key = self._resolve(pin)
        with self._lock:
            level = LOW if self._levels[key] else HIGH
            self._levels[key] = level
            return level

    def set_pull(self, pin: int, pull: Pull) -> None:
        """Configure the pull resistor of ``pin``."""
        key = self._resolve(pin)
        with self._lock:
            self._pulls[key] = Pull(pull)

    def pull(self, pin: int) -> Pull:
        """Return the pull resistor configuration of ``pin``."""
        key = self._resolve(pin)
        with self._lock:
            return self._pulls[key]