from carsim.board.panel import INPUTS, Command, PanelMonitor
from carsim.board.pins import HIGH, LOW, Pin, PinBank, Pull


def make_monitor():
    pins = PinBank()
    monitor = PanelMonitor(pins)
    monitor.calibrate()
    return pins, monitor


def test_calibrate_with_idle_low_inputs():
    pins, monitor = make_monitor()
    assert set(monitor.active_levels.values()) == {HIGH}
    assert all(pins.pull(pin) is Pull.DOWN for pin, _ in INPUTS)


def test_calibrate_with_idle_high_input():
    pins = PinBank()
    pins.write(Pin.BRAKE_PEDAL, HIGH)
    monitor = PanelMonitor(pins)
    levels = monitor.calibrate()
    assert levels[Pin.BRAKE_PEDAL] == LOW
    assert pins.pull(Pin.BRAKE_PEDAL) is Pull.UP
    assert levels[Pin.ACCEL_PEDAL] == HIGH


def test_idle_panel_reports_nothing():
    _, monitor = make_monitor()
    assert monitor.poll() is None


def test_press_reported_once_until_released():
    pins, monitor = make_monitor()
    pins.write(Pin.LEFT_SIGNAL_SWITCH, HIGH)
    assert monitor.poll() is Command.LEFT_SIGNAL
    assert monitor.poll() is None
    pins.write(Pin.LEFT_SIGNAL_SWITCH, LOW)
    assert monitor.poll() is None
    pins.write(Pin.LEFT_SIGNAL_SWITCH, HIGH)
    assert monitor.poll() is Command.LEFT_SIGNAL


def test_active_low_input():
    pins = PinBank()
    pins.write(Pin.ACCEL_PEDAL, HIGH)
    monitor = PanelMonitor(pins)
    monitor.calibrate()
    assert monitor.poll() is None
    pins.write(Pin.ACCEL_PEDAL, LOW)
    assert monitor.poll() is Command.ACCELERATE


def test_simultaneous_presses_reported_in_order():
    pins, monitor = make_monitor()
    pins.write(Pin.BRAKE_PEDAL, HIGH)
    pins.write(Pin.RIGHT_SIGNAL_SWITCH, HIGH)
    assert monitor.poll() is Command.RIGHT_SIGNAL
    assert monitor.poll() is Command.BRAKE
    assert monitor.poll() is None


def test_each_input_maps_to_its_command():
    for pin, command in INPUTS:
        pins, monitor = make_monitor()
        pins.write(pin, HIGH)
        assert monitor.poll() is command


def test_chained_inputs_release_one_per_poll():
    pins, monitor = make_monitor()
    pins.write(Pin.LEFT_SIGNAL_SWITCH, HIGH)
    pins.write(Pin.RIGHT_SIGNAL_SWITCH, HIGH)
    assert monitor.poll() is Command.LEFT_SIGNAL
    assert monitor.poll() is Command.RIGHT_SIGNAL
    pins.write(Pin.LEFT_SIGNAL_SWITCH, LOW)
    pins.write(Pin.RIGHT_SIGNAL_SWITCH, LOW)
    assert monitor.poll() is None
    pins.write(Pin.LEFT_SIGNAL_SWITCH, HIGH)
    pins.write(Pin.RIGHT_SIGNAL_SWITCH, HIGH)
    assert monitor.poll() is Command.LEFT_SIGNAL
    assert monitor.poll() is None


def test_cruise_buttons_release_independently():
    pins, monitor = make_monitor()
    pins.write(Pin.CRUISE_RESUME_SWITCH, HIGH)
    pins.write(Pin.CRUISE_CANCEL_SWITCH, HIGH)
    assert monitor.poll() is Command.CRUISE_ON
    assert monitor.poll() is Command.CRUISE_CANCEL
    pins.write(Pin.CRUISE_RESUME_SWITCH, LOW)
    pins.write(Pin.CRUISE_CANCEL_SWITCH, LOW)
    assert monitor.poll() is None
    pins.write(Pin.CRUISE_RESUME_SWITCH, HIGH)
    pins.write(Pin.CRUISE_CANCEL_SWITCH, HIGH)
    assert monitor.poll() is Command.CRUISE_ON
    assert monitor.poll() is Command.CRUISE_CANCEL


def test_command_values_and_messages():
    pins, monitor = make_monitor()
    pins.write(Pin.LEFT_SIGNAL_SWITCH, HIGH)
    left = monitor.poll()
    assert left == 20

    pins, monitor = make_monitor()
    pins.write(Pin.ACCEL_PEDAL, HIGH)
    accelerate = monitor.poll()
    assert accelerate == 27

    pins, monitor = make_monitor()
    pins.write(Pin.CRUISE_CANCEL_SWITCH, HIGH)
    cancel = monitor.poll()
    assert cancel.message == "Mandando sinal para cancelar o cruise control"

    reported = []
    for pin, _ in INPUTS:
        pins, monitor = make_monitor()
        pins.write(pin, HIGH)
        reported.append(monitor.poll())
    assert all(command.message.startswith("Mandando sinal para") for command in reported)