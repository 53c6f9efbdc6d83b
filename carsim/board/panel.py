"""Driver panel: watches the input switches and reports each new press once."""

from __future__ import annotations

import enum

from .pins import HIGH, LOW, Pin, PinBank, Pull


class Command(enum.IntEnum):
    """Requests the panel sends to the controller."""

    CRUISE_CANCEL = 0
    HIGH_BEAM = 1
    CRUISE_ON = 13
    LOW_BEAM = 16
    LEFT_SIGNAL = 20
    RIGHT_SIGNAL = 21
    BRAKE = 22
    ACCELERATE = 27

    @property
    def message(self) -> str:
        """Log line announcing this command."""
        return _MESSAGES[self]


_MESSAGES = {
    Command.LEFT_SIGNAL: "Mandando sinal para modificar seta esquerda",
    Command.RIGHT_SIGNAL: "Mandando sinal para modificar seta direita",
    Command.LOW_BEAM: "Mandando sinal para modificar farol baixo",
    Command.HIGH_BEAM: "Mandando sinal para modificar farol alto",
    Command.BRAKE: "Mandando sinal para modificar luz freio",
    Command.ACCELERATE: "Mandando sinal para acelerar o veiculo",
    Command.CRUISE_ON: "Mandando sinal para ativar o cruise control",
    Command.CRUISE_CANCEL: "Mandando sinal para cancelar o cruise control",
}

INPUTS = (
    (Pin.LEFT_SIGNAL_SWITCH, Command.LEFT_SIGNAL),
    (Pin.RIGHT_SIGNAL_SWITCH, Command.RIGHT_SIGNAL),
    (Pin.LOW_BEAM_SWITCH, Command.LOW_BEAM),
    (Pin.HIGH_BEAM_SWITCH, Command.HIGH_BEAM),
    (Pin.BRAKE_PEDAL, Command.BRAKE),
    (Pin.ACCEL_PEDAL, Command.ACCELERATE),
    (Pin.CRUISE_RESUME_SWITCH, Command.CRUISE_ON),
    (Pin.CRUISE_CANCEL_SWITCH, Command.CRUISE_CANCEL),
)

# Cruise buttons are released independently; the others one per poll, in order.
_INDEPENDENT_RELEASE = (Pin.CRUISE_RESUME_SWITCH, Pin.CRUISE_CANCEL_SWITCH)
_CHAINED_RELEASE = tuple(pin for pin, _ in INPUTS if pin not in _INDEPENDENT_RELEASE)


class PanelMonitor:
    """Edge detector over the panel inputs of a pin bank."""

    def __init__(self, pins: PinBank) -> None:
        self.pins = pins
        self._active = {pin: HIGH for pin, _ in INPUTS}
        self._latched = {pin: False for pin, _ in INPUTS}

    @property
    def active_levels(self) -> dict[Pin, int]:
        """Level each input shows while it is pressed."""
        return dict(self._active)

    def calibrate(self) -> dict[Pin, int]:
        """Take the current levels as idle, set the pull resistors and return the active levels."""
        for pin, _ in INPUTS:
            if self.pins.read(pin) == LOW:
                self.pins.set_pull(pin, Pull.DOWN)
                self._active[pin] = HIGH
            else:
                self.pins.set_pull(pin, Pull.UP)
                self._active[pin] = LOW
        return self.active_levels

    def _pressed(self, pin: Pin) -> bool:
        return self.pins.read(pin) == self._active[pin]

    def _release(self, pin: Pin) -> bool:
        if self._latched[pin] and not self._pressed(pin):
            self._latched[pin] = False
            return True
        return False

    def poll(self) -> Command | None:
        """Return the first newly pressed input's command, or None."""
        command = None
        for pin, candidate in INPUTS:
            if self._pressed(pin) and not self._latched[pin]:
                self._latched[pin] = True
                command = candidate
                break

        for pin in _INDEPENDENT_RELEASE:
            self._release(pin)
        for pin in _CHAINED_RELEASE:
            if self._release(pin):
                break
        return command