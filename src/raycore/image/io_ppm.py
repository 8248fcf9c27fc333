"""Plain-text PPM (P3) file IO.

Writing goes through a temporary file in the target directory that is renamed
into place once complete, so an interrupted or failed write never leaves a
truncated image at the destination path.
"""

from __future__ import annotations

import logging
import os
import re
import tempfile
from typing import Any, Dict, List

import numpy as np

from .buffer import PPM_MAGIC, Image
from .pixel import CHANNEL_MAX


LOG = logging.getLogger(__name__)

_PIXEL_LINE = re.compile(r"^(\d{1,3}) (\d{1,3}) (\d{1,3})$")
_HEADER_LINE = re.compile(r"^P3 (\d+) (\d+) (\d+)$")


def save_ppm(path: str, image: Image, *, overwrite: bool = True) -> str:
    """Write ``image`` to ``path`` as P3 text. Returns the path.

    Parent directories are created. With ``overwrite=False`` an existing file
    raises FileExistsError, including one created while the image is being
    written. IO errors propagate to the caller.
    """
    path = os.fspath(path)
    if not overwrite and os.path.exists(path):
        raise FileExistsError(path)
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)

    fd, tmp_path = tempfile.mkstemp(
        dir=parent or ".", prefix=f".{os.path.basename(path)}.", suffix=".tmp"
    )
    try:
        with os.fdopen(fd, "w", encoding="ascii", newline="\n") as f:
            image.write_ppm(f)
        os.chmod(tmp_path, 0o644)
        if overwrite:
            os.replace(tmp_path, path)
        else:
            # link fails with FileExistsError if the target appeared meanwhile
            os.link(tmp_path, path)
            os.unlink(tmp_path)
    except BaseException:
        if os.path.exists(tmp_path):
            os.unlink(tmp_path)
        raise
    LOG.info("Wrote %dx%d PPM to %s", image.width, image.height, path)
    return path


def _strip_comments(text: str) -> str:
    return "\n".join(line.split("#", 1)[0] for line in text.splitlines())


def parse_ppm(text: str) -> Image:
    """Parse P3 text into an Image.

    Accepts any whitespace layout and ``#`` comments; the max value must be 255.
    """
    tokens = _strip_comments(text).split()
    if not tokens or tokens[0] != PPM_MAGIC:
        raise ValueError(f"not a {PPM_MAGIC} image: missing magic token")
    if len(tokens) < 4:
        raise ValueError("truncated header")
    try:
        width, height, maxval = (int(t) for t in tokens[1:4])
    except ValueError as exc:
        raise ValueError(f"malformed header {tokens[:4]!r}") from exc
    if width < 1 or height < 1:
        raise ValueError(f"invalid dimensions {width}x{height}")
    if maxval != CHANNEL_MAX:
        raise ValueError(f"max channel value must be {CHANNEL_MAX}, got {maxval}")

    body = tokens[4:]
    expected = width * height * 3
    if len(body) != expected:
        raise ValueError(f"expected {expected} channel values, found {len(body)}")
    try:
        values = np.array([int(t) for t in body], dtype=np.int64)
    except ValueError as exc:
        raise ValueError("non-integer channel value") from exc
    return Image.from_array(values.reshape(height, width, 3))


def load_ppm(path: str) -> Image:
    with open(os.fspath(path), "r", encoding="ascii") as f:
        return parse_ppm(f.read())


def validate_ppm(path: str) -> Dict[str, Any]:
    """Strict layout check. Returns a report dict; empty `issues` means OK.

    Unlike parse_ppm this enforces the exact text shape written by save_ppm:
    header line, blank line, then one "r g b" line per pixel.
    """
    report: Dict[str, Any] = {"issues": []}
    issues: List[str] = report["issues"]
    try:
        with open(os.fspath(path), "r", encoding="ascii", newline="") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as exc:
        issues.append(f"Cannot read file: {exc}")
        return report

    if not text.endswith("\n"):
        issues.append("Missing trailing newline")
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    if not lines:
        issues.append("Empty file")
        return report

    m = _HEADER_LINE.match(lines[0])
    if m is None:
        issues.append(f"Malformed header line {lines[0]!r}")
        return report
    width, height, maxval = (int(g) for g in m.groups())
    report["width"], report["height"] = width, height
    if width < 1 or height < 1:
        issues.append(f"Invalid dimensions {width}x{height}")
    if maxval != CHANNEL_MAX:
        issues.append(f"Max channel value must be {CHANNEL_MAX}, got {maxval}")
    if len(lines) < 2 or lines[1] != "":
        issues.append("Missing blank separator line after header")

    pixel_lines = lines[2:]
    if len(pixel_lines) != width * height:
        issues.append(f"Expected {width * height} pixel lines, found {len(pixel_lines)}")
    for n, line in enumerate(pixel_lines, start=3):
        pm = _PIXEL_LINE.match(line)
        if pm is None:
            issues.append(f"Line {n}: malformed pixel {line!r}")
        elif any(int(g) > CHANNEL_MAX for g in pm.groups()):
            issues.append(f"Line {n}: channel value out of range {line!r}")
        if len(issues) >= 20:
            issues.append("Too many issues, stopping")
            break
    return report
