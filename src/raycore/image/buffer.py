"""Fixed-size RGB pixel buffer with plain-text PPM (P3) serialization.

The grid is stored as a (height, width, 3) uint8 array and addressed with
(x, y) coordinates, x along a row and y down the rows. Width and height are
fixed at construction and never change.

Serialized layout (compatibility contract for image viewers):

    P3 <width> <height> 255
    <blank line>
    r g b        one line per pixel, row-major, top row first
"""

from __future__ import annotations

import io
from numbers import Integral
from typing import Any, Iterator, NamedTuple, TextIO, Tuple

import numpy as np

from ..utils.logging import progress_iter
from .pixel import CHANNEL_MAX, Pixel

PPM_MAGIC = "P3"


class ImageCoordinate(NamedTuple):
    x: int
    y: int


def _check_dimension(name: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, Integral) or value < 1:
        raise ValueError(f"{name} must be a positive int, got {value!r}")
    return int(value)


def _scan_channel(n: int) -> np.ndarray:
    """Gradient ramp for one axis: coord * 256 / (n - 1), saturated to 8 bits."""
    if n == 1:
        # 0 * (256 / 0) is NaN, which saturates to 0
        return np.zeros((1,), dtype=np.uint8)
    ratio = 256.0 / float(n - 1)
    vals = np.arange(n, dtype=np.float64) * ratio
    return np.clip(np.trunc(vals), 0, CHANNEL_MAX).astype(np.uint8)


class Image:
    """Width x height grid of pixels, zeroed (black) on construction."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, width: int, height: int):
        self._width = _check_dimension("width", width)
        self._height = _check_dimension("height", height)
        self._pixels = np.zeros((self._height, self._width, 3), dtype=np.uint8)

    @classmethod
    def default(cls, width: int, height: int) -> "Image":
        return cls(width, height)

    @classmethod
    def generate_red_green_scan(cls, width: int, height: int) -> "Image":
        """Red ramps with x, green ramps with y, blue stays 0."""
        img = cls(width, height)
        red = _scan_channel(img.width)
        green = _scan_channel(img.height)
        img._pixels[:, :, 0] = red[None, :]
        img._pixels[:, :, 1] = green[:, None]
        return img

    @classmethod
    def from_array(cls, arr: Any) -> "Image":
        a = np.asarray(arr)
        if a.ndim != 3 or a.shape[2] != 3:
            raise ValueError(f"expected array of shape (height, width, 3), got {a.shape}")
        if np.issubdtype(a.dtype, np.floating):
            if not np.all(np.isfinite(a)):
                raise ValueError("channel values must be finite")
            if not np.all(a == np.trunc(a)):
                raise ValueError("channel values must be whole numbers")
        elif a.dtype == np.bool_ or not np.issubdtype(a.dtype, np.integer):
            raise ValueError(f"channel values must be integers, got dtype {a.dtype}")
        if a.size and (a.min() < 0 or a.max() > CHANNEL_MAX):
            raise ValueError(f"channel values must lie in [0, {CHANNEL_MAX}]")
        img = cls(a.shape[1], a.shape[0])
        img._pixels[...] = a.astype(np.uint8)
        return img

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def shape(self) -> Tuple[int, int]:
        return (self._height, self._width)

    def to_array(self) -> np.ndarray:
        return self._pixels.copy()

    def _index(self, key: Any) -> Tuple[int, int]:
        if not isinstance(key, tuple) or len(key) != 2:
            raise TypeError("image index must be an (x, y) pair")
        x, y = key
        for v in (x, y):
            if isinstance(v, bool) or not isinstance(v, Integral):
                raise TypeError(f"image coordinates must be ints, got {v!r}")
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise IndexError(
                f"coordinate ({x}, {y}) outside {self._width}x{self._height} image"
            )
        return int(x), int(y)

    def __getitem__(self, key: Any) -> Pixel:
        x, y = self._index(key)
        r, g, b = self._pixels[y, x]
        return Pixel(int(r), int(g), int(b))

    def __setitem__(self, key: Any, pixel: Pixel) -> None:
        x, y = self._index(key)
        if not isinstance(pixel, Pixel):
            raise TypeError(f"expected Pixel, got {type(pixel).__name__}")
        self._pixels[y, x] = pixel.to_tuple()

    def __len__(self) -> int:
        return self._width * self._height

    def pixels(self) -> Iterator[Pixel]:
        """Single-pass row-major traversal."""
        for row in self._pixels:
            for r, g, b in row:
                yield Pixel(int(r), int(g), int(b))

    def __iter__(self) -> Iterator[Pixel]:
        return self.pixels()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Image):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._pixels, other._pixels))

    def __repr__(self) -> str:
        return f"Image(width={self._width}, height={self._height})"

    def ppm_header(self) -> str:
        return f"{PPM_MAGIC} {self._width} {self._height} {CHANNEL_MAX}"

    def write_ppm(self, sink: TextIO) -> None:
        """Write the P3 text form to a text sink. Sink errors propagate."""
        sink.write(self.ppm_header() + "\n\n")
        for y in progress_iter(range(self._height), total=self._height, desc="Write: rows"):
            np.savetxt(sink, self._pixels[y], fmt="%d", delimiter=" ", newline="\n")

    def to_ppm(self) -> str:
        buf = io.StringIO()
        self.write_ppm(buf)
        return buf.getvalue()

    def __str__(self) -> str:
        return self.to_ppm()
