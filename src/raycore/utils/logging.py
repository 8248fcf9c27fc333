from __future__ import annotations

import logging
import math
import os
import platform
from typing import Iterable, Iterator, Optional

import numpy as np
from tqdm import tqdm


def setup_logging(level: str = "INFO") -> None:
    lvl = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(level=lvl, format="%(asctime)s | %(levelname)s | %(message)s")


def log_runtime_env() -> None:
    logging.info("Python: %s", platform.python_version())
    logging.info("NumPy: %s", np.__version__)


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "0").lower() in ("1", "true", "yes", "on")


def _progress_enabled() -> bool:
    return _env_flag("RAYCORE_PROGRESS")


def progress_iter(iterable: Iterable, *, total: Optional[int] = None, desc: str = "") -> Iterator:
    """Yield elements from iterable, showing a tqdm progress bar if enabled.

    Enable by setting environment variable `RAYCORE_PROGRESS=1` or calling CLIs with `--progress`.
    `RAYCORE_PROGRESS_LEAVE=1` keeps finished bars on screen.
    """
    if not _progress_enabled():
        yield from iterable
        return
    leave = _env_flag("RAYCORE_PROGRESS_LEAVE")
    yield from tqdm(iterable, total=total, desc=desc, dynamic_ncols=True, leave=leave)


def format_duration(seconds: float | None) -> str:
    """Render a wall-clock duration as a compact human-readable string."""
    if seconds is None:
        return "-"
    try:
        value = float(seconds)
    except (TypeError, ValueError):
        return "-"
    if not math.isfinite(value):
        return "-"
    value = max(value, 0.0)
    if value < 1e-3:
        return f"{value * 1e6:.0f}µs"
    if value < 1.0:
        return f"{value * 1e3:.0f}ms" if value < 0.1 else f"{value:.2f}s"

    minutes, seconds_rem = divmod(value, 60.0)
    hours, minutes = divmod(minutes, 60.0)
    if hours >= 1.0:
        return f"{int(hours)}h{int(minutes):02d}m{seconds_rem:04.1f}s"
    if minutes >= 1.0:
        return f"{int(minutes)}m{seconds_rem:04.1f}s"
    return f"{seconds_rem:.1f}s"
