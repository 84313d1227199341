"""Data models for sysgauge."""

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum


class MetricKind(Enum):
    """Metric domains that can be reported."""

    DISK = "disk"
    RAM = "ram"
    CPU = "cpu"
    BATTERY = "battery"


@dataclass(slots=True, frozen=True)
class MetricSample:
    """Immutable reading of one gauge line."""

    kind: MetricKind
    label: str
    usage_percent: float  # 0.0 - 100.0 (CPU load may go higher)
    size_text: str | None = None
    status_text: str | None = None
    inverted: bool = False  # Low values are bad (battery)

    @property
    def column_text(self) -> str:
        """Text shown between the label and the gauge."""
        return self.size_text or self.status_text or ""


@dataclass(slots=True, frozen=True)
class Snapshot:
    """Ordered samples of a single collection cycle."""

    samples: tuple[MetricSample, ...] = ()

    def __iter__(self) -> Iterator[MetricSample]:
        return iter(self.samples)

    def __len__(self) -> int:
        return len(self.samples)

    def kinds(self) -> list[MetricKind]:
        """Return the kind of every sample, in order."""
        return [sample.kind for sample in self.samples]


@dataclass(slots=True, frozen=True)
class MountEntry:
    """A mounted filesystem as reported by the OS."""

    mountpoint: str
    fstype: str


@dataclass(slots=True, frozen=True)
class ActiveMetricSet:
    """Resolved command-line configuration, fixed for the process lifetime."""

    disks: bool = True
    ram: bool = True
    cpu: bool = True
    battery: bool = True
    monochrome: bool = False
    watch_seconds: int = 0
    strict_disks: bool = False

    @property
    def watch_mode(self) -> bool:
        """Whether the snapshot is redrawn periodically."""
        return self.watch_seconds > 0
