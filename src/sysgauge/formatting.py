"""Human-readable size formatting."""

UNIT = 1000
SIZE_UNITS = ["kB", "MB", "GB", "TB", "PB", "EB"]


def format_bytes(size: int) -> str:
    """Format a byte count using decimal (1000-based) units."""
    if size < 0:
        raise ValueError(f"Byte count must be non-negative, got {size}")
    if size < UNIT:
        return f"{size} B"

    div, exp = UNIT, 0
    while size >= div * UNIT and exp < len(SIZE_UNITS) - 1:
        div *= UNIT
        exp += 1
    return f"{size / div:.1f} {SIZE_UNITS[exp]}"
