"""Immutable 2D vector value type.

Instances are plain data containers. Geometric operations live in
``vector2d.ops`` (two-argument form) and ``vector2d.transforms`` (curried
form for ``pipe``/``split``).
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass
from functools import reduce
from typing import Any, Callable

from vector2d.errors import InvalidVectorSource


@dataclass(frozen=True, slots=True)
class Vector2D:
    """Immutable 2D vector.

    Coordinates are stored exactly as given; ``Vector2D(3, 4)`` keeps its
    ints. Every operation returns a new instance.
    """
    x: float = 0
    y: float = 0

    # =========================================================================
    # Construction
    # =========================================================================

    @classmethod
    def from_object(cls, source: Any) -> Vector2D:
        """Copy the coordinates of any vector-like object.

        Accepts objects exposing ``x``/``y`` attributes as well as mappings
        with ``"x"``/``"y"`` keys. The result never aliases ``source``.

        Raises:
            InvalidVectorSource: If ``source`` exposes no coordinates.
        """
        if isinstance(source, Mapping):
            try:
                return cls(source["x"], source["y"])
            except KeyError as exc:
                raise InvalidVectorSource(
                    f"mapping is missing coordinate key {exc}"
                ) from exc
        try:
            return cls(source.x, source.y)
        except AttributeError as exc:
            raise InvalidVectorSource(
                f"{type(source).__name__} has no x/y coordinates"
            ) from exc

    @classmethod
    def from_tuple(cls, t: tuple[float, float]) -> Vector2D:
        """Create from an ``(x, y)`` tuple."""
        return cls(t[0], t[1])

    @classmethod
    def from_dict(cls, data: dict) -> Vector2D:
        """Create from a dictionary; missing keys default to 0."""
        return cls(x=data.get("x", 0), y=data.get("y", 0))

    @classmethod
    def from_angle(cls, radians: float, length: float = 1.0) -> Vector2D:
        """Create vector from angle (from +X axis) and length."""
        return cls(math.cos(radians) * length, math.sin(radians) * length)

    @classmethod
    def zero(cls) -> Vector2D:
        """Zero vector."""
        return cls()

    # =========================================================================
    # Computed Properties
    # =========================================================================

    @property
    def norm(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.x ** 2 + self.y ** 2)

    @property
    def inverse(self) -> Vector2D:
        """Additive inverse ``(-x, -y)``."""
        return Vector2D(-self.x, -self.y)

    # =========================================================================
    # Composition
    # =========================================================================

    def pipe(self, *fns: Callable[[Any], Any]) -> Any:
        """Apply ``fns`` left to right, each consuming the previous result.

        With no functions the vector itself is returned.
        """
        return reduce(lambda value, fn: fn(value), fns, self)

    def split(self, *fns: Callable[[Vector2D], Any]) -> list[Any]:
        """Apply each function to this vector independently, in order."""
        return [fn(self) for fn in fns]

    # =========================================================================
    # Operators
    # =========================================================================

    def __add__(self, other: Vector2D) -> Vector2D:
        return Vector2D(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2D) -> Vector2D:
        return self + other.inverse

    def __neg__(self) -> Vector2D:
        return self.inverse

    def __mul__(self, scalar: float) -> Vector2D:
        return Vector2D(self.x * scalar, self.y * scalar)

    def __rmul__(self, scalar: float) -> Vector2D:
        return self.__mul__(scalar)

    def __abs__(self) -> float:
        return self.norm

    # =========================================================================
    # Utility
    # =========================================================================

    def to_tuple(self) -> tuple[float, float]:
        """Convert to tuple."""
        return (self.x, self.y)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {"x": self.x, "y": self.y}

    def __str__(self) -> str:
        return f"Vector2D {{ x: {self.x}, y: {self.y} }}"
