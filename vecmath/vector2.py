"""Single-precision 2D vector value type."""

from __future__ import annotations

import operator
from dataclasses import dataclass
from numbers import Real
from typing import Iterator

import numpy as np

from . import config

_COMPONENTS = ("x", "y")


def _scalar(value: float) -> np.float32:
    with np.errstate(over="ignore"):
        return config.DTYPE(value)


def _ieee() -> np.errstate:
    """Let inf/NaN propagate without numpy floating-point warnings."""
    return np.errstate(over="ignore", divide="ignore", invalid="ignore")


def _format_component(value: np.float32) -> str:
    if np.isnan(value):
        return "NaN"
    return np.format_float_positional(value, trim="-")


def _component_name(index: int) -> str:
    index = operator.index(index)
    if index == 0 or index == 1:
        return _COMPONENTS[index]
    raise IndexError(config.INDEX_ERROR_MESSAGE)


@dataclass(eq=False)
class Vector2:
    """2D vector whose components are stored as float32.

    Vectors are mutable: ``set``, ``normalize``, ``scale``, index assignment and
    the in-place operators ``*=`` and ``/=`` modify the receiver. Every other
    operation returns a new vector and never one of its arguments.

    ``__array_ufunc__`` is ``None`` so numpy scalars on the left of an operator
    fall through to the reflected methods here.
    """

    x: np.float32
    y: np.float32

    __array_ufunc__ = None

    def __setattr__(self, name: str, value) -> None:
        if name in _COMPONENTS:
            value = _scalar(value)
        object.__setattr__(self, name, value)

    # Constants ------------------------------------------------------------
    @classmethod
    def zero(cls) -> "Vector2":
        return cls(0.0, 0.0)

    @classmethod
    def one(cls) -> "Vector2":
        return cls(1.0, 1.0)

    @classmethod
    def up(cls) -> "Vector2":
        return cls(0.0, 1.0)

    @classmethod
    def down(cls) -> "Vector2":
        return cls(0.0, -1.0)

    @classmethod
    def left(cls) -> "Vector2":
        return cls(-1.0, 0.0)

    @classmethod
    def right(cls) -> "Vector2":
        return cls(1.0, 0.0)

    @classmethod
    def positive_infinity(cls) -> "Vector2":
        return cls(np.inf, np.inf)

    @classmethod
    def negative_infinity(cls) -> "Vector2":
        return cls(-np.inf, -np.inf)

    # Mutation -------------------------------------------------------------
    def set(self, x: float, y: float) -> None:
        self.x = x
        self.y = y

    def copy(self) -> "Vector2":
        return Vector2(self.x, self.y)

    __copy__ = copy

    def scale(self, other: "Vector2") -> None:
        """Multiply component-wise by ``other`` in place."""
        with _ieee():
            self.set(self.x * other.x, self.y * other.y)

    def normalize(self) -> None:
        """Rescale to unit length in place.

        Vectors whose magnitude does not exceed ``config.NORMALIZE_EPSILON``
        become the zero vector instead.
        """
        num = self.magnitude()
        if num > config.NORMALIZE_EPSILON:
            with _ieee():
                self.set(self.x / num, self.y / num)
        else:
            self.set(0.0, 0.0)

    def normalized(self) -> "Vector2":
        result = self.copy()
        result.normalize()
        return result

    # Measures -------------------------------------------------------------
    def sqr_magnitude(self) -> np.float32:
        with _ieee():
            return self.x * self.x + self.y * self.y

    def magnitude(self) -> np.float32:
        return np.sqrt(self.sqr_magnitude())

    def dot(self, other: "Vector2") -> np.float32:
        with _ieee():
            return self.x * other.x + self.y * other.y

    def cross(self, other: "Vector2") -> np.float32:
        """2D cross product returning a scalar (z-component)."""
        with _ieee():
            return self.x * other.y - self.y * other.x

    @staticmethod
    def distance(a: "Vector2", b: "Vector2") -> np.float32:
        return (b - a).magnitude()

    # Interpolation --------------------------------------------------------
    @staticmethod
    def lerp(a: "Vector2", b: "Vector2", t: float) -> "Vector2":
        """Interpolate between ``a`` and ``b`` with ``t`` clamped to [0, 1]."""
        t = min(max(_scalar(t), _scalar(0.0)), _scalar(1.0))
        return Vector2.lerp_unclamped(a, b, t)

    @staticmethod
    def lerp_unclamped(a: "Vector2", b: "Vector2", t: float) -> "Vector2":
        return a + (b - a) * t

    @staticmethod
    def move_towards(current: "Vector2", target: "Vector2", max_distance_delta: float) -> "Vector2":
        """Step from ``current`` towards ``target`` by at most ``max_distance_delta``.

        Returns ``target`` (as a copy) when it lies within reach, so repeated
        calls land on it exactly. A negative step moves away from ``target``.
        """
        step = _scalar(max_distance_delta)
        delta = target - current
        num = delta.magnitude()
        if num <= step or num == 0.0:
            return target.copy()
        return current + delta / num * step

    # Operators ------------------------------------------------------------
    def __add__(self, other: "Vector2") -> "Vector2":
        if not isinstance(other, Vector2):
            return NotImplemented
        with _ieee():
            return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector2") -> "Vector2":
        if not isinstance(other, Vector2):
            return NotImplemented
        with _ieee():
            return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, other: "Vector2 | float") -> "Vector2":
        if isinstance(other, Vector2):
            with _ieee():
                return Vector2(self.x * other.x, self.y * other.y)
        if isinstance(other, Real):
            scalar = _scalar(other)
            with _ieee():
                return Vector2(self.x * scalar, self.y * scalar)
        return NotImplemented

    def __rmul__(self, scalar: float) -> "Vector2":
        if not isinstance(scalar, Real):
            return NotImplemented
        return self.__mul__(scalar)

    def __imul__(self, other: "Vector2 | float") -> "Vector2":
        if isinstance(other, Vector2):
            with _ieee():
                self.set(self.x * other.x, self.y * other.y)
            return self
        if isinstance(other, Real):
            scalar = _scalar(other)
            with _ieee():
                self.set(self.x * scalar, self.y * scalar)
            return self
        return NotImplemented

    def __truediv__(self, other: "Vector2 | float") -> "Vector2":
        if isinstance(other, Vector2):
            with _ieee():
                return Vector2(self.x / other.x, self.y / other.y)
        if isinstance(other, Real):
            scalar = _scalar(other)
            with _ieee():
                return Vector2(self.x / scalar, self.y / scalar)
        return NotImplemented

    def __itruediv__(self, scalar: float) -> "Vector2":
        if not isinstance(scalar, Real):
            return NotImplemented
        scalar = _scalar(scalar)
        with _ieee():
            self.set(self.x / scalar, self.y / scalar)
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector2):
            return NotImplemented
        return bool(self.x == other.x and self.y == other.y)

    # Component access -----------------------------------------------------
    def __getitem__(self, index: int) -> np.float32:
        return getattr(self, _component_name(index))

    def __setitem__(self, index: int, value: float) -> None:
        setattr(self, _component_name(index), value)

    def __iter__(self) -> Iterator[np.float32]:
        yield self.x
        yield self.y

    def to_tuple(self) -> tuple[float, float]:
        return float(self.x), float(self.y)

    # Text -----------------------------------------------------------------
    def __str__(self) -> str:
        return f"({_format_component(self.x)}, {_format_component(self.y)})"

    def __repr__(self) -> str:
        return f"Vector2(x={float(self.x)!r}, y={float(self.y)!r})"
