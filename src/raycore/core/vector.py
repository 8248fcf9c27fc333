"""Dimension-generic vector algebra over a scalar field.

Subclasses fix the dimension with the ``DIM`` class attribute and the scalar
type with ``FIELD``. Every arithmetic operation is built from the two
component-wise combinators, so a new dimension only needs ``DIM`` and ``norm``.
"""

from __future__ import annotations

from itertools import islice
from numbers import Integral
from typing import Any, Callable, ClassVar, Iterable, Iterator, Tuple, Type, TypeVar

import numpy as np

from .field import FLOAT64, Field

V = TypeVar("V", bound="Vector")


class Vector:
    DIM: ClassVar[int] = 0
    FIELD: ClassVar[Field] = FLOAT64

    __slots__ = ("_components",)

    # numpy scalars on the left defer to the reflected operator instead of
    # treating the vector as a sequence.
    __array_ufunc__ = None

    def __init__(self, components: Iterable[Any]):
        comps = tuple(self._coerce(c) for c in components)
        if len(comps) != self.DIM:
            raise ValueError(
                f"{type(self).__name__} needs exactly {self.DIM} components, got {len(comps)}"
            )
        self._components: Tuple[Any, ...] = comps

    @classmethod
    def _coerce(cls, value: Any) -> Any:
        return value

    @classmethod
    def new(cls: Type[V], components: Iterable[Any]) -> V:
        return cls(components)

    @classmethod
    def from_iter(cls: Type[V], values: Iterable[Any]) -> V:
        """Build from the first ``DIM`` values of an iterable."""
        comps = list(islice(values, cls.DIM))
        if len(comps) < cls.DIM:
            raise ValueError(f"iterable yielded {len(comps)} values, {cls.DIM} required")
        return cls(comps)

    @classmethod
    def zero(cls: Type[V]) -> V:
        return cls([cls.FIELD.zero()] * cls.DIM)

    @classmethod
    def unit(cls: Type[V], i: int) -> V:
        """The i-th standard basis vector."""
        cls._check_index(i)
        comps = [cls.FIELD.zero()] * cls.DIM
        comps[i] = cls.FIELD.one()
        return cls(comps)

    @classmethod
    def _check_index(cls, i: int) -> None:
        if isinstance(i, bool) or not isinstance(i, Integral):
            raise TypeError(f"component index must be an int, got {i!r}")
        if not 0 <= i < cls.DIM:
            raise IndexError(f"component index {i} out of range for dimension {cls.DIM}")

    # Access

    def component(self, i: int) -> Any:
        self._check_index(i)
        return self._components[i]

    def __getitem__(self, i: int) -> Any:
        return self.component(i)

    def __len__(self) -> int:
        return self.DIM

    def __iter__(self) -> Iterator[Any]:
        return iter(self._components)

    def as_array(self) -> np.ndarray:
        return np.array(self._components, dtype=np.float64)

    # Combinators

    def component_wise_binary_operation(self: V, other: V, op: Callable[[Any, Any], Any]) -> V:
        self._check_same_kind(other)
        return type(self)(op(a, b) for a, b in zip(self._components, other._components))

    def component_wise_unary_operation(self: V, op: Callable[[Any], Any]) -> V:
        return type(self)(op(a) for a in self._components)

    def _check_same_kind(self, other: Any) -> None:
        if type(other) is not type(self):
            raise TypeError(
                f"cannot combine {type(self).__name__} with {type(other).__name__}"
            )

    # Algebra

    def add(self: V, other: V) -> V:
        return self.component_wise_binary_operation(other, lambda a, b: a + b)

    def sub(self: V, other: V) -> V:
        return self.component_wise_binary_operation(other, lambda a, b: a - b)

    def mul(self: V, other: V) -> V:
        """Component-wise (Hadamard) product."""
        return self.component_wise_binary_operation(other, lambda a, b: a * b)

    def neg(self: V) -> V:
        return self.component_wise_unary_operation(lambda a: -a)

    def scale(self: V, scalar: Any) -> V:
        return self.component_wise_unary_operation(lambda a: a * scalar)

    def dot(self: V, other: V) -> Any:
        self._check_same_kind(other)
        return sum(
            (a * b for a, b in zip(self._components, other._components)),
            self.FIELD.zero(),
        )

    def norm_squared(self) -> Any:
        return self.dot(self)

    def norm(self) -> Any:
        # Needs a square root, which is not part of the field contract.
        raise NotImplementedError(f"{type(self).__name__} does not define norm()")

    def equals(self, other: Any) -> bool:
        if type(other) is not type(self):
            return False
        return all(
            self.FIELD.equals(a, b) for a, b in zip(self._components, other._components)
        )

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._components))

    def __repr__(self) -> str:
        inner = ", ".join(repr(c) for c in self._components)
        return f"{type(self).__name__}([{inner}])"
