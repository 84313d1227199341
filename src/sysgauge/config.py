"""Command-line configuration for sysgauge."""

import argparse
from collections.abc import Sequence

from sysgauge import __version__
from sysgauge.errors import ConfigError
from sysgauge.logger import LOG_LEVELS
from sysgauge.models import ActiveMetricSet


def resolve_config(
    *,
    disks: bool = False,
    ram: bool = False,
    cpu: bool = False,
    battery: bool = False,
    all_metrics: bool = False,
    monochrome: bool = False,
    watch_seconds: int = 0,
    strict_disks: bool = False,
) -> ActiveMetricSet:
    """
    Map user flags to the set of metrics to display.

    ``all_metrics`` enables every domain. Without it the per-domain flags are
    used, unless none of them is set, in which case every domain is shown.
    """
    if watch_seconds < 0:
        raise ConfigError(f"Watch interval must be >= 0 seconds, got {watch_seconds}")

    if all_metrics or not (disks or ram or cpu or battery):
        disks = ram = cpu = battery = True

    return ActiveMetricSet(
        disks=disks,
        ram=ram,
        cpu=cpu,
        battery=battery,
        monochrome=monochrome,
        watch_seconds=watch_seconds,
        strict_disks=strict_disks,
    )


def _non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}") from None
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line parser."""
    parser = argparse.ArgumentParser(
        prog="sysgauge",
        description="Display disk, RAM, CPU load and battery usage as colored gauges.",
    )
    parser.add_argument("-m", dest="monochrome", action="store_true",
                        help="Display output in monochrome without colors")
    parser.add_argument("-d", dest="disks", action="store_true",
                        help="Display file systems metrics")
    parser.add_argument("-r", dest="ram", action="store_true", help="Display RAM metrics")
    parser.add_argument("-c", dest="cpu", action="store_true", help="Display CPU metrics")
    parser.add_argument("-b", dest="battery", action="store_true",
                        help="Display battery metrics (if any)")
    parser.add_argument("-a", dest="all_metrics", action="store_true",
                        help="Display all metrics")
    parser.add_argument("-w", dest="watch_seconds", type=_non_negative_int, default=0,
                        metavar="N", help="Watch every N seconds (0 = run once)")
    parser.add_argument("-s", "--strict-disks", dest="strict_disks", action="store_true",
                        help="Exit with an error if the mount table cannot be read")
    parser.add_argument("--log-level", default="WARNING", choices=LOG_LEVELS,
                        type=str.upper, help="Diagnostics level (default: WARNING)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def parse_args(argv: Sequence[str] | None = None) -> tuple[ActiveMetricSet, str]:
    """Parse command-line arguments into a configuration and a log level name."""
    args = build_parser().parse_args(argv)
    config = resolve_config(
        disks=args.disks,
        ram=args.ram,
        cpu=args.cpu,
        battery=args.battery,
        all_metrics=args.all_metrics,
        monochrome=args.monochrome,
        watch_seconds=args.watch_seconds,
        strict_disks=args.strict_disks,
    )
    return config, args.log_level
