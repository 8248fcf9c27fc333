"""Scalar field interfaces.

A field supplies the identity elements and equality used by vector code. The
arithmetic itself (+, -, *, /, unary -) comes from the scalar type's operators.
"""

from __future__ import annotations

from typing import Any, Protocol


class Field(Protocol):
    """Algebraic scalar type usable as vector components.

    Contract: zero() is the additive identity, one() the multiplicative
    identity, equals(a, b) is exact (no tolerance at this layer).
    """

    def zero(self) -> Any:
        """Returns the additive identity."""

    def one(self) -> Any:
        """Returns the multiplicative identity."""

    def equals(self, a: Any, b: Any) -> bool:
        """Returns True when a and b are the same field element."""


class Float64Field:
    """Double-precision floats."""

    def zero(self) -> float:
        return 0.0

    def one(self) -> float:
        return 1.0

    def equals(self, a: float, b: float) -> bool:
        return a == b

    def __repr__(self) -> str:
        return "Float64Field()"


FLOAT64 = Float64Field()
