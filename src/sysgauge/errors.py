"""Exceptions raised by sysgauge."""


class SysgaugeError(Exception):
    """Base class for sysgauge errors."""


class ConfigError(SysgaugeError):
    """Invalid configuration values."""


class MountEnumerationError(SysgaugeError):
    """The mount table could not be read while disk metrics are mandatory."""
