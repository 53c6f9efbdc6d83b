[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "carsim"
version = "0.1.0"
description = "Vehicle control simulation: sensors, driver panel, actuator controller with ADAS limits, and a modelled GPIO board with cruise control"
requires-python = ">=3.10"
dependencies = []
keywords = ["vehicle", "simulation", "adas", "cruise-control", "gpio", "pwm"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Human Machine Interfaces",
    "Topic :: Software Development :: Embedded Systems",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
carsim = "carsim.simulation:main"
carsim-board = "carsim.board.app:main"

[tool.hatch.build.targets.wheel]
packages = ["carsim"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
