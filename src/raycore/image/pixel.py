from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Integral
from typing import Tuple

CHANNEL_MAX = 255


def saturate_channel(value: float) -> int:
    """Reduce a computed channel value into the 8-bit range.

    Truncates toward zero and clamps to [0, 255]; NaN maps to 0.
    """
    v = float(value)
    if math.isnan(v):
        return 0
    if v <= 0.0:
        return 0
    if v >= CHANNEL_MAX:
        return CHANNEL_MAX
    return int(v)


@dataclass(frozen=True)
class Pixel:
    """8-bit RGB sample. No alpha, channels are independent."""

    r: int = 0
    g: int = 0
    b: int = 0

    def __post_init__(self) -> None:
        for name in ("r", "g", "b"):
            v = getattr(self, name)
            if isinstance(v, bool) or not isinstance(v, Integral):
                raise ValueError(f"channel {name} must be an int, got {type(v).__name__}")
            if not 0 <= v <= CHANNEL_MAX:
                raise ValueError(f"channel {name}={v} outside [0, {CHANNEL_MAX}]")
            object.__setattr__(self, name, int(v))

    @classmethod
    def black(cls) -> "Pixel":
        return cls(0, 0, 0)

    @classmethod
    def from_floats(cls, r: float, g: float, b: float) -> "Pixel":
        return cls(saturate_channel(r), saturate_channel(g), saturate_channel(b))

    def to_tuple(self) -> Tuple[int, int, int]:
        return (self.r, self.g, self.b)

    def __str__(self) -> str:
        return f"{self.r} {self.g} {self.b}"
