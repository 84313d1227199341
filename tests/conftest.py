"""Shared fixtures for sysgauge tests."""

import logging
from types import SimpleNamespace

import pytest

from sysgauge.logger import LOG_FORMAT


@pytest.fixture(autouse=True)
def reset_logging():
    """Remove the handlers installed by ``configure_logging``."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in root.handlers[:]:
        if handler.formatter is not None and handler.formatter._fmt == LOG_FORMAT:
            root.removeHandler(handler)
    root.setLevel(level)


def make_statvfs(blocks: int, free: int, frsize: int = 4096) -> SimpleNamespace:
    """Build an ``os.statvfs`` result with the fields the collector reads."""
    return SimpleNamespace(f_blocks=blocks, f_bfree=free, f_frsize=frsize)


def make_partition(mountpoint: str, fstype: str) -> SimpleNamespace:
    """Build a ``psutil.disk_partitions`` entry."""
    return SimpleNamespace(device="/dev/test", mountpoint=mountpoint, fstype=fstype, opts="rw")
