"""sysgauge - refresh loop and command-line entry point."""

import logging
import signal
import sys
import threading
import time
from collections.abc import Sequence
from typing import TextIO

from sysgauge.config import parse_args
from sysgauge.errors import MountEnumerationError
from sysgauge.gauge import CLEAR_SCREEN, render_sample
from sysgauge.logger import configure_logging
from sysgauge.models import ActiveMetricSet, Snapshot
from sysgauge.monitor import MetricsCollector

logger = logging.getLogger(__name__)


def render_snapshot(snapshot: Snapshot, monochrome: bool = False) -> str:
    """Render every sample of a snapshot, one line each."""
    return "".join(render_sample(sample, monochrome) + "\n" for sample in snapshot)


def watch_header(watch_seconds: int) -> str:
    """Header printed above each redraw in watch mode."""
    return f"Refreshing every {watch_seconds} second(s). Press Ctrl+C to exit.\n"


class RefreshScheduler:
    """
    Drives collect + render cycles.

    Single-shot when ``watch_seconds`` is 0, otherwise redraws on a fixed
    period until the stop event is set.
    """

    def __init__(
        self,
        config: ActiveMetricSet,
        collector: MetricsCollector | None = None,
        stream: TextIO | None = None,
    ) -> None:
        """
        Initialize the RefreshScheduler.

        Args:
            config: Resolved configuration.
            collector: Metrics source. Defaults to a MetricsCollector.
            stream: Output stream. Defaults to stdout.
        """
        self._config = config
        self._collector = collector if collector is not None else MetricsCollector()
        self._stream = stream if stream is not None else sys.stdout
        self._cycles = 0

    @property
    def cycles(self) -> int:
        """Number of completed cycles."""
        return self._cycles

    def run_once(self) -> None:
        """Collect and print a single snapshot."""
        self._write(self._render_cycle())

    def run(self, stop_event: threading.Event | None = None) -> None:
        """
        Run single-shot or watch mode according to the configuration.

        Args:
            stop_event: Ends watch mode when set. Without one the loop only
                ends when the process is interrupted.
        """
        if not self._config.watch_mode:
            self.run_once()
            return

        stop_event = stop_event if stop_event is not None else threading.Event()
        interval = float(self._config.watch_seconds)
        next_tick = time.monotonic()

        while True:
            self._write(CLEAR_SCREEN + watch_header(self._config.watch_seconds) + self._render_cycle())

            next_tick += interval
            now = time.monotonic()
            if next_tick <= now:
                # Cycle overran one or more ticks; skip them like a ticker would
                missed = int((now - next_tick) // interval) + 1
                next_tick += missed * interval

            if stop_event.wait(timeout=next_tick - now):
                logger.debug("Stop requested after %d cycle(s)", self._cycles)
                return

    def _render_cycle(self) -> str:
        snapshot = self._collector.collect(self._config)
        self._cycles += 1
        return render_snapshot(snapshot, self._config.monochrome)

    def _write(self, text: str) -> None:
        self._stream.write(text)
        self._stream.flush()


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for the sysgauge command."""
    config, log_level = parse_args(argv)
    configure_logging(log_level)

    stop_event = threading.Event()

    def handle_terminate(signum, frame) -> None:
        stop_event.set()

    previous_handler = signal.signal(signal.SIGTERM, handle_terminate)
    try:
        RefreshScheduler(config).run(stop_event)
    except MountEnumerationError as exc:
        logger.error("%s", exc)
        return 1
    except KeyboardInterrupt:
        stop_event.set()
    finally:
        if previous_handler is not None:
            signal.signal(signal.SIGTERM, previous_handler)
    return 0


if __name__ == "__main__":
    sys.exit(main())
