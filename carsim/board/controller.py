"""Actuator controller: applies panel commands and the cruise-control law."""

from __future__ import annotations

from collections.abc import Callable

from .panel import Command
from .pins import HIGH, LOW, Pin, PinBank
from .pwm import PwmParams

CRUISE_LOW = 35.0
CRUISE_SLOW = 40.0
CRUISE_HOLD_TOP = 45.0
CRUISE_HIGH = 55.0

BRAKE_PEDAL_POWER = 50
FULL_POWER = 100

_PAIRED_LIGHTS = {
    Command.LEFT_SIGNAL: (
        Pin.LEFT_SIGNAL_LIGHT,
        Pin.RIGHT_SIGNAL_LIGHT,
        "Ativando atuador de seta para esquerda",
    ),
    Command.RIGHT_SIGNAL: (
        Pin.RIGHT_SIGNAL_LIGHT,
        Pin.LEFT_SIGNAL_LIGHT,
        "Ativando atuador de seta para direita",
    ),
    Command.LOW_BEAM: (Pin.LOW_BEAM, Pin.HIGH_BEAM, "Ativando atuador de farol baixo"),
    Command.HIGH_BEAM: (Pin.HIGH_BEAM, Pin.LOW_BEAM, "Ativando atuador de farol alto"),
}


class BoardController:
    """Drives lights, motor direction and PWM power from panel commands."""

    def __init__(
        self,
        pins: PinBank,
        pwm: PwmParams,
        velocity_source: Callable[[], float] | None = None,
    ) -> None:
        self.pins = pins
        self.pwm = pwm
        self.velocity_source = velocity_source if velocity_source is not None else (lambda: 0.0)
        self.cruise_control = False
        self.engine_power = 0
        self.brake_power = 0
        self.last_velocity = 0.0
        self._accel_presses = 0
        self._brake_presses = 0

    def _forward(self) -> None:
        self.pins.write(Pin.MOTOR_DIR1, HIGH)
        self.pins.write(Pin.MOTOR_DIR2, LOW)

    def _set_power(self, engine: int, brake: int) -> None:
        self.pwm.ac_power = engine
        self.pwm.br_power = brake
        self.engine_power = engine
        self.brake_power = brake

    def _brake(self) -> None:
        self.pins.toggle(Pin.BRAKE_LIGHT)
        self._brake_presses += 1
        if self._brake_presses == 1:
            self.pwm.ac_power = self.engine_power
            self.pwm.br_power = BRAKE_PEDAL_POWER
            self.brake_power = BRAKE_PEDAL_POWER
            self.pins.write(Pin.MOTOR_DIR1, HIGH)
            self.pins.write(Pin.MOTOR_DIR2, HIGH)
        else:
            self._forward()
            self.pwm.ac_power = self.engine_power
            self.pwm.br_power = 0
            self.brake_power = 0
            self._brake_presses = 0

    def _accelerate(self) -> None:
        self._accel_presses += 1
        if self._accel_presses == 1:
            self.pwm.ac_power = FULL_POWER
            self.pwm.br_power = self.brake_power
            self.engine_power = FULL_POWER
            self._forward()
        else:
            self.pins.write(Pin.MOTOR_POWER, LOW)
            self.pwm.ac_power = 0
            self.engine_power = 0
            self.pwm.br_power = self.brake_power
            self._accel_presses = 0

    def _apply(self, command: Command) -> list[str]:
        if command in _PAIRED_LIGHTS:
            light, other, message = _PAIRED_LIGHTS[command]
            if self.pins.toggle(light) == HIGH:
                self.pins.write(other, LOW)
            return [message]
        if command is Command.BRAKE:
            self._brake()
            return ["Ativando atuador de freio"]
        if command is Command.ACCELERATE:
            self._accelerate()
            return ["Ativando atuador da Aceleracao"]
        if command is Command.CRUISE_ON:
            self.cruise_control = True
            return ["Ativando cruise control"]
        if command is Command.CRUISE_CANCEL:
            self._forward()
            self.pwm.ac_power = 0
            self.pwm.br_power = 0
            self.cruise_control = False
            return ["Cancelando cruise control"]
        return []

    def handle(self, command: Command | int | None) -> list[str]:
        """Apply ``command`` (None for no command), run cruise control and return log lines."""
        messages = [] if command is None else self._apply(Command(command))
        self.update_cruise(self.velocity_source())
        return messages

    def update_cruise(self, velocity: float) -> None:
        """Adjust power toward the cruise band once the velocity reading is steady."""
        if self.cruise_control and self.last_velocity == velocity:
            if velocity < CRUISE_LOW:
                self._forward()
                self._set_power(FULL_POWER, 0)
            elif velocity > CRUISE_HIGH:
                self._set_power(0, 20)
            elif velocity < CRUISE_SLOW:
                self._set_power(20, 0)
            elif velocity >= CRUISE_HOLD_TOP:
                self._set_power(0, 10)
            else:
                self._set_power(0, 0)
        self.last_velocity = velocity