"""Gauge rendering with ANSI color coding."""

import math

from sysgauge.models import MetricSample

# ANSI escape codes
GREEN = "\033[32m"
YELLOW = "\033[33m"
RED = "\033[31m"
RESET = "\033[0m"
CLEAR_SCREEN = "\033[H\033[2J"

DEFAULT_WIDTH = 30
LABEL_WIDTH = 25
COLUMN_WIDTH = 15


def filled_cells(usage_percent: float, width: int) -> int:
    """Number of ``#`` cells for a usage value, within ``[0, width]``."""
    filled = math.floor(usage_percent / 100.0 * width)
    return max(0, min(filled, width))


def _segment_color(segment_end: float, inverted: bool) -> str:
    """Color of a single cell from its own position along the bar."""
    if not inverted:
        if segment_end <= 50:
            return GREEN
        if segment_end <= 80:
            return YELLOW
        return RED
    if segment_end <= 20:
        return RED
    if segment_end <= 80:
        return YELLOW
    return GREEN


def overall_color(usage_percent: float, inverted: bool = False) -> str:
    """Color of the printed percentage, from the aggregate usage."""
    if not inverted:
        if usage_percent < 50:
            return GREEN
        if usage_percent < 80:
            return YELLOW
        return RED
    if usage_percent < 20:
        return RED
    if usage_percent < 80:
        return YELLOW
    return GREEN


def render_gauge(
    usage_percent: float,
    width: int = DEFAULT_WIDTH,
    monochrome: bool = False,
    inverted: bool = False,
) -> tuple[str, str]:
    """
    Render a bracketed gauge bar.

    Args:
        usage_percent: Value to display, 0.0 - 100.0.
        width: Number of cells inside the brackets.
        monochrome: Emit no escape codes at all.
        inverted: Use battery thresholds, where a low value is bad.

    Returns:
        The bar text and the color for the percentage ("" in monochrome mode).
    """
    num_filled = filled_cells(usage_percent, width)

    if monochrome:
        bar = "#" * num_filled + "-" * (width - num_filled)
        return f"[{bar}]", ""

    cells = []
    for i in range(width):
        if i < num_filled:
            segment_end = (i + 1) / width * 100
            cells.append(_segment_color(segment_end, inverted) + "#" + RESET)
        else:
            cells.append("-")
    return "[" + "".join(cells) + "]" + RESET, overall_color(usage_percent, inverted)


def render_sample(
    sample: MetricSample,
    monochrome: bool = False,
    width: int = DEFAULT_WIDTH,
) -> str:
    """Render one sample as a full output line (without newline)."""
    bar, color = render_gauge(sample.usage_percent, width, monochrome, sample.inverted)
    reset = "" if monochrome else RESET
    return (
        f"{sample.label:<{LABEL_WIDTH}} {sample.column_text:>{COLUMN_WIDTH}} "
        f"{bar} {color}{sample.usage_percent:5.2f}%{reset}"
    )
