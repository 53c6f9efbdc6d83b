"""Vehicle control simulation: sensors, driver panel and controller with ADAS."""

__version__ = "0.1.0"