"""System metrics collection for sysgauge."""

import logging
import os
from pathlib import Path

import psutil

from sysgauge.errors import MountEnumerationError
from sysgauge.filesystems import keep_filesystem
from sysgauge.formatting import format_bytes
from sysgauge.models import ActiveMetricSet, MetricKind, MetricSample, MountEntry, Snapshot

logger = logging.getLogger(__name__)

DEFAULT_BATTERY_DIR = Path("/sys/class/power_supply/BAT0")

LOAD_WINDOWS = ("1 mn", "5 mn", "15 mn")


def usage_percent(total: int, used: int) -> float:
    """Percentage of ``total`` that is ``used``; 0.0 when ``total`` is 0."""
    if total <= 0:
        return 0.0
    return used / total * 100


def list_mounts() -> list[MountEntry]:
    """
    Enumerate mounted filesystems, in mount-table order.

    Raises:
        OSError: The mount table could not be read.
    """
    return [
        MountEntry(mountpoint=part.mountpoint, fstype=part.fstype)
        for part in psutil.disk_partitions(all=True)
    ]


class MetricsCollector:
    """
    Collects disk, RAM, CPU load and battery readings using psutil.

    Each domain is queried independently: a failure in one is logged and
    only that domain is left out of the snapshot.
    """

    def __init__(self, battery_dir: Path = DEFAULT_BATTERY_DIR) -> None:
        """
        Initialize the MetricsCollector.

        Args:
            battery_dir: sysfs directory exposing ``capacity`` and ``status``.
        """
        self._battery_dir = Path(battery_dir)

    @property
    def battery_dir(self) -> Path:
        """Get the battery status directory."""
        return self._battery_dir

    def collect(self, config: ActiveMetricSet) -> Snapshot:
        """
        Collect a snapshot of the domains enabled in ``config``.

        Raises:
            MountEnumerationError: Mounts could not be listed and
                ``config.strict_disks`` is set.
        """
        samples: list[MetricSample] = []
        if config.disks:
            samples.extend(self._collect_disks(strict=config.strict_disks))
        if config.ram:
            samples.extend(self._collect_ram())
        if config.cpu:
            samples.extend(self._collect_cpu())
        if config.battery:
            samples.extend(self._collect_battery())
        return Snapshot(samples=tuple(samples))

    def _collect_disks(self, strict: bool = False) -> list[MetricSample]:
        """Collect one sample per kept mount point."""
        try:
            mounts = list_mounts()
        except (OSError, psutil.Error) as exc:
            if strict:
                raise MountEnumerationError(f"Failed to get mount information: {exc}") from exc
            logger.warning("Failed to get mount information: %s", exc)
            return []

        samples: list[MetricSample] = []
        for mount in mounts:
            if not keep_filesystem(mount.fstype):
                continue

            try:
                stat = os.statvfs(mount.mountpoint)
            except OSError as exc:
                # Stale network mounts, permission denied, ...
                logger.warning("Failed to get statfs for %s: %s", mount.mountpoint, exc)
                continue

            block_size = stat.f_frsize
            total_space = stat.f_blocks * block_size
            free_space = stat.f_bfree * block_size
            used_space = total_space - free_space

            samples.append(
                MetricSample(
                    kind=MetricKind.DISK,
                    label=mount.mountpoint,
                    usage_percent=usage_percent(total_space, used_space),
                    size_text=format_bytes(total_space),
                )
            )
        return samples

    def _collect_ram(self) -> list[MetricSample]:
        """Collect the virtual memory sample."""
        try:
            mem = psutil.virtual_memory()
        except (OSError, psutil.Error) as exc:
            logger.warning("Failed to get virtual memory information: %s", exc)
            return []

        return [
            MetricSample(
                kind=MetricKind.RAM,
                label="RAM",
                usage_percent=mem.percent,
                size_text=format_bytes(mem.total),
            )
        ]

    def _collect_cpu(self) -> list[MetricSample]:
        """Collect 1/5/15-minute load averages normalized by core count."""
        try:
            load_avg = psutil.getloadavg()
        except (OSError, psutil.Error) as exc:
            logger.warning("Failed to get CPU load average: %s", exc)
            return []

        num_cpu = psutil.cpu_count() or 0
        if num_cpu <= 0:
            logger.debug("Logical CPU count unavailable, skipping CPU metrics")
            return []

        return [
            MetricSample(
                kind=MetricKind.CPU,
                label="CPU",
                usage_percent=load / num_cpu * 100,
                size_text=window,
            )
            for window, load in zip(LOAD_WINDOWS, load_avg)
        ]

    def _collect_battery(self) -> list[MetricSample]:
        """
        Collect the battery sample, if the machine has one.

        A missing battery directory is the common case and is not reported.
        Unreadable or malformed values fall back to 0 / "".
        """
        if not self._battery_dir.is_dir():
            return []

        capacity_text = self._read_battery_file("capacity")
        try:
            capacity = float(capacity_text)
        except ValueError:
            logger.debug("Unparsable battery capacity: %r", capacity_text)
            capacity = 0.0
        capacity = max(0.0, min(capacity, 100.0))

        return [
            MetricSample(
                kind=MetricKind.BATTERY,
                label="Battery",
                usage_percent=capacity,
                status_text=self._read_battery_file("status"),
                inverted=True,
            )
        ]

    def _read_battery_file(self, name: str) -> str:
        """Read and strip a battery attribute, returning "" on failure."""
        try:
            return (self._battery_dir / name).read_text(encoding="utf-8").strip()
        except (OSError, UnicodeDecodeError) as exc:
            logger.debug("Failed to read battery %s: %s", name, exc)
            return ""
