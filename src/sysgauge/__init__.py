"""sysgauge - disk, RAM, CPU load and battery gauges for the terminal."""

__version__ = "0.1.0"
