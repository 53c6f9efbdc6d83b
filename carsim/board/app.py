"""Board application: ties the panel, controller, PWM and speed meter together."""

from __future__ import annotations

import argparse
import threading
import time
from collections.abc import Callable

from .controller import BoardController
from .panel import PanelMonitor
from .pins import HIGH, LOW, Pin, PinBank, Pull
from .pwm import PwmDriver, PwmParams
from .velocity import VelocityMeter

OUTPUTS = (
    Pin.LEFT_SIGNAL_LIGHT,
    Pin.RIGHT_SIGNAL_LIGHT,
    Pin.LOW_BEAM,
    Pin.HIGH_BEAM,
    Pin.BRAKE_LIGHT,
    Pin.MOTOR_DIR1,
    Pin.MOTOR_DIR2,
)

_INPUT_LABELS = (
    ("SETA ESQ", Pin.LEFT_SIGNAL_SWITCH),
    ("SETA DIR", Pin.RIGHT_SIGNAL_SWITCH),
    ("FAROL BAIXO", Pin.LOW_BEAM_SWITCH),
    ("FAROL ALTO", Pin.HIGH_BEAM_SWITCH),
    ("FREIO", Pin.BRAKE_PEDAL),
    ("Acelerador", Pin.ACCEL_PEDAL),
    ("Cruise Control", Pin.CRUISE_RESUME_SWITCH),
    ("Cancel CC", Pin.CRUISE_CANCEL_SWITCH),
)


class BoardApp:
    """One board: each step counts hall pulses, measures speed and serves the panel."""

    def __init__(
        self,
        pins: PinBank | None = None,
        clock: Callable[[], float] | None = None,
    ) -> None:
        self.pins = pins if pins is not None else PinBank()
        self.meter = VelocityMeter(clock)

        hall_level = self.pins.read(Pin.WHEEL_HALL_SENSOR)
        self.pins.set_pull(Pin.WHEEL_HALL_SENSOR, Pull.DOWN if hall_level == LOW else Pull.UP)
        self._hall_level = hall_level

        self.pwm = PwmParams()
        self.pwm_driver = PwmDriver(self.pins, self.pwm)

        for pin in OUTPUTS:
            self.pins.write(pin, LOW)
        self.pwm.ac_power = 100
        self.pwm.br_power = 100

        self.panel = PanelMonitor(self.pins)
        self.panel.calibrate()
        self.controller = BoardController(self.pins, self.pwm, lambda: self.meter.velocity)

    def input_report(self) -> list[str]:
        """Describe each panel input's current level and its pressed level."""
        active = self.panel.active_levels
        return [
            f"{label}: {self.pins.read(pin)}, ST= {active[pin]}"
            for label, pin in _INPUT_LABELS
        ]

    def step(self) -> list[str]:
        """Run one panel/controller exchange and return the log lines it produced."""
        level = self.pins.read(Pin.WHEEL_HALL_SENSOR)
        if level == HIGH and self._hall_level == LOW:
            self.meter.pulse()
        self._hall_level = level
        self.meter.sample()

        command = self.panel.poll()
        messages = [] if command is None else [command.message]
        messages.extend(self.controller.handle(command))
        return messages


def main(argv: list[str] | None = None) -> int:
    """Run the board loop until interrupted or until the requested number of steps."""
    parser = argparse.ArgumentParser(description="Vehicle board controller.")
    parser.add_argument("--steps", type=int, default=None, help="stop after this many steps")
    parser.add_argument(
        "--interval", type=float, default=0.001, help="seconds between steps"
    )
    args = parser.parse_args(argv)

    app = BoardApp()
    print("(Main) aplicação inicializada!")
    for line in app.input_report():
        print(line)

    stop = threading.Event()

    def run_pwm() -> None:
        while not stop.is_set():
            app.pwm_driver.cycle()

    pwm_thread = threading.Thread(target=run_pwm, daemon=True)
    pwm_thread.start()
    print("Loop do processo de atuadores inicializado")

    try:
        done = 0
        while args.steps is None or done < args.steps:
            for line in app.step():
                print(line)
            done += 1
            time.sleep(args.interval)
    except KeyboardInterrupt:
        pass
    finally:
        stop.set()
        pwm_thread.join()
        app.pins.write(Pin.MOTOR_DIR1, LOW)
        app.pins.write(Pin.MOTOR_DIR2, LOW)

    print("Aplicacao finalizada com sucesso")
    return 0