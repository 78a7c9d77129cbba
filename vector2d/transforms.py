"""Curried vector transformations for pipe/split composition.

Each factory takes the "other" operand and returns a unary function of the
receiver::

    v.pipe(rotate90(), scale(2))
    v.split(norm, inverse)
"""

from __future__ import annotations

from typing import Callable, Optional

from vector2d import ops
from vector2d.ops import sum_vectors
from vector2d.vector import Vector2D

VectorFn = Callable[[Vector2D], Vector2D]
ScalarFn = Callable[[Vector2D], float]
Predicate = Callable[[Vector2D], bool]

__all__ = [
    "VectorFn",
    "ScalarFn",
    "Predicate",
    "rotate",
    "rotate90",
    "add",
    "sum_vectors",
    "mult",
    "sub",
    "scale",
    "resize",
    "dot",
    "det",
    "angle_to",
    "angle_between",
    "proximity",
    "is_close",
    "distance",
    "norm",
    "inverse",
]


def rotate(alpha: float) -> VectorFn:
    return lambda v: ops.rotate(v, alpha)


def rotate90(clockwise: bool = True) -> VectorFn:
    return lambda v: ops.rotate90(v, clockwise)


def add(v2: Vector2D) -> VectorFn:
    return lambda v1: ops.add(v1, v2)


def mult(v2: Vector2D) -> VectorFn:
    return lambda v1: ops.mult(v1, v2)


def sub(v2: Vector2D) -> VectorFn:
    return lambda v1: ops.sub(v1, v2)


def scale(s: float) -> VectorFn:
    return lambda v: ops.scale(v, s)


def resize(length: float) -> VectorFn:
    return lambda v: ops.resize(v, length)


def dot(v2: Vector2D) -> ScalarFn:
    return lambda v1: ops.dot(v1, v2)


def det(v2: Vector2D) -> ScalarFn:
    return lambda v1: ops.det(v1, v2)


def angle_to(v2: Vector2D) -> ScalarFn:
    """Signed angle rotating ``v2`` onto the receiver.

    ``angle_to(Vector2D(1, 0))(Vector2D(0, 1))`` is pi/2.
    """
    return lambda v1: ops.angle_to(v2, v1)


def angle_between(v2: Vector2D) -> ScalarFn:
    return lambda v1: ops.angle_between(v1, v2)


def proximity(epsilon: float) -> Callable[[Vector2D], Predicate]:
    """``proximity(eps)(center)(v)`` tests ``v`` against a square around ``center``."""
    return lambda center: lambda v: ops.proximity(v, center, epsilon)


def is_close(v2: Vector2D, tol: Optional[float] = None) -> Predicate:
    return lambda v1: ops.is_close(v1, v2, tol)


def distance(v2: Vector2D) -> ScalarFn:
    return lambda v1: ops.distance(v1, v2)


# Unary helpers, usable directly in pipe/split


def norm(v: Vector2D) -> float:
    return v.norm


def inverse(v: Vector2D) -> Vector2D:
    return v.inverse
