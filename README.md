# carsim

A small vehicle control simulation in two parts.

**The virtual car** (`carsim`) runs three stages in turn, once per cycle:

- a *sensor* stage (`carsim.sensor.read_sensors`) that produces a car
  velocity (0–200), an engine rotation of 37 times the velocity, and an
  engine temperature (55–145);
- a *panel* stage that shows a menu and reads one line of driver options;
- a *controller* stage (`carsim.controller.controller_cycle`) that applies
  ADAS limits, keeping the velocity between 60 and 120, and then executes
  the options.

When the run ends, it reports how many times ADAS intervened and how many
times the actuators were used.

**The board model** (`carsim.board`) models a GPIO-driven vehicle: turn
signals, low and high beams, brake light, accelerator and brake PWM outputs,
a wheel hall sensor for velocity, and a simple cruise control.

## Installation

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Running the virtual car

```
carsim
carsim --seed 42
```

`--seed` makes the sensor readings repeatable.

Each cycle the panel shows a menu and reads one line of options separated by
spaces. Only the first character of each option counts, and at most nine
options are taken from one line:

| Option | Action                             |
|--------|------------------------------------|
| 1      | accelerate (+10)                   |
| 2      | brake (−10)                        |
| 3      | left turn signal on                |
| 4      | right turn signal on               |
| 5      | high beam on                       |
| 6      | low beam on                        |
| 7      | pause: waits for Enter             |
| 0      | quit                               |

For example, `1 1 3` accelerates twice and switches on the left turn signal.
A `0` or `7` ends the line; options after it are ignored. After accelerating
or braking, ADAS clamps the velocity back into the 60–120 band. End of input
also ends the run, and on systems that have it, `SIGUSR2` asks the run to
stop at its next check.

## Running the board model

```
carsim-board
carsim-board --steps 1000 --interval 0.01
```

It prints the level of each panel input and the level that counts as
pressed, starts a PWM thread for the engine and brake outputs, and then
steps the panel and controller every `--interval` seconds (default 0.001)
until `--steps` steps have run or it is interrupted with Ctrl+C.

## Using it as a library

```python
import random

from carsim.controller import controller_cycle
from carsim.panel import PanelAction, parse_commands
from carsim.sensor import read_sensors
from carsim.state import CarData

car = CarData()
for line in read_sensors(car, random.Random(1)):
    print(line)

requests = parse_commands("1 2 5")
commands = [r.command for r in requests if r.action is PanelAction.COMMAND]
for line in controller_cycle(car, commands):
    print(line)

print(car.car_velocity, car.adas_count, car.actuator_count)
```

`carsim.simulation.Simulation(car, input_stream, output, rng)` ties the
stages together over any text streams and random generator; `run()` loops
until exit is requested and returns the final `CarData`, and
`request_stop()` ends the run from outside.

The board side is built from:

- `carsim.board.pins.PinBank` – a thread-safe set of pin levels and pull
  settings, keyed by `carsim.board.pins.Pin`;
- `carsim.board.velocity.VelocityMeter` and `velocity_from_period` – speed in
  km/h from the time between hall-sensor pulses;
- `carsim.board.pwm.PwmParams` and `PwmDriver` – software PWM on the engine
  and brake outputs;
- `carsim.board.panel.PanelMonitor` – reports each new switch press once as
  a `Command`;
- `carsim.board.controller.BoardController` – applies commands and the
  cruise-control law (full power below 35, braking above 55);
- `carsim.board.app.BoardApp` – assembles them; each `step()` returns the
  log lines it produced.

## What it does not do

The board model does not talk to real GPIO hardware. `PinBank` holds pin
levels in memory, so `carsim-board` only drives and reads that in-memory
bank: nothing outside the program presses its switches or pulses its hall
sensor. To exercise it, write levels into a `PinBank` and call
`BoardApp.step()` from your own code.