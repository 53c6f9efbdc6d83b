"""Software PWM for the engine and brake outputs."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import NamedTuple

from .pins import HIGH, LOW, Pin, PinBank

MICROSECONDS = 1_000_000
INTER_CYCLE_GAP_US = 1000


class DutyTimes(NamedTuple):
    """On and off times, in microseconds, for both PWM outputs."""

    accel_on: int
    accel_off: int
    brake_on: int
    brake_off: int


@dataclass
class PwmParams:
    """Pins, power percentages and frequency of the two PWM outputs."""

    ac_pin: Pin = Pin.MOTOR_POWER
    ac_power: int = 50
    br_pin: Pin = Pin.BRAKE_POWER
    br_power: int = 30
    frequency: int = 100

    def duty_times(self) -> DutyTimes:
        """Split one PWM period into on and off times for each output."""
        if self.frequency <= 0:
            raise ValueError("frequency must be positive")
        period = MICROSECONDS // self.frequency
        accel_on = self.ac_power * period // 100
        brake_on = self.br_power * period // 100
        return DutyTimes(accel_on, period - accel_on, brake_on, period - brake_on)


class PwmDriver:
    """Drives the PWM outputs of a pin bank from shared, mutable parameters."""

    def __init__(self, pins: PinBank, params: PwmParams) -> None:
        self.pins = pins
        self.params = params
        self.sleep = time.sleep

    def cycle(self) -> None:
        """Run one PWM period on the engine output, then on the brake output."""
        times = self.params.duty_times()
        outputs = (
            (self.params.ac_pin, times.accel_on, times.accel_off),
            (self.params.br_pin, times.brake_on, times.brake_off),
        )
        for pin, on_time, off_time in outputs:
            self.pins.write(pin, HIGH)
            self.sleep(on_time / MICROSECONDS)
            self.pins.write(pin, LOW)
            self.sleep(off_time / MICROSECONDS)
        self.sleep(INTER_CYCLE_GAP_US / MICROSECONDS)