"""Human-readable byte sizes (binary multiples, JEDEC unit labels)."""

import math
from typing import Optional

UNITS = ("B", "KB", "MB", "GB", "TB", "PB", "EB", "ZB", "YB")
BASE = 1024


def format_size(size: Optional[float], precision: int = 2) -> str:
    """Format *size* bytes as e.g. ``"1.5 KB"``.

    ``None`` renders as ``"0 B"`` so missing sizes still get a label.
    Values are rounded to *precision* decimals with trailing zeros dropped.
    """
    if not size:
        return "0 B"

    sign = "-" if size < 0 else ""
    size = abs(size)

    exponent = min(int(math.log(size, BASE)), len(UNITS) - 1) if size >= 1 else 0
    value = round(size / BASE**exponent, precision)
    if value >= BASE and exponent < len(UNITS) - 1:
        exponent += 1
        value = round(size / BASE**exponent, precision)

    text = f"{value:.{precision}f}".rstrip("0").rstrip(".") if precision else f"{value:.0f}"
    return f"{sign}{text} {UNITS[exponent]}"
