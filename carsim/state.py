"""Shared vehicle state used by the sensor, panel and controller stages."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class CarData:
    """Snapshot of the simulated vehicle shared by every stage of a cycle."""

    car_velocity: int = 0
    en_rotation: int = 0
    en_temp: int = 0
    exit_flag: bool = False
    adas_count: int = 0
    actuator_count: int = 0

    def request_exit(self) -> None:
        """Mark the simulation as finished; every stage stops at its next check."""
        self.exit_flag = True