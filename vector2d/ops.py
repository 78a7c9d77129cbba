"""Geometric operations on Vector2D.

Plain functions taking the operand vector first. All are pure and return
new instances. Degenerate inputs follow IEEE-754 and yield NaN, unless
strict mode is enabled in the config.
"""

from __future__ import annotations

import logging
import math
from typing import Iterable, Optional

from vector2d.config import get_config
from vector2d.errors import DegenerateVectorError
from vector2d.vector import Vector2D

logger = logging.getLogger(__name__)


def _degenerate(operation: str) -> None:
    """Raise in strict mode, otherwise note that NaN is being returned."""
    if get_config().strict:
        raise DegenerateVectorError(f"{operation} of a zero-length vector")
    logger.debug("%s of a zero-length vector, result is NaN", operation)


# =============================================================================
# Rotation
# =============================================================================


def rotate(v: Vector2D, alpha: float) -> Vector2D:
    """Rotate counter-clockwise about the origin by ``alpha`` radians."""
    cos_a = math.cos(alpha)
    sin_a = math.sin(alpha)
    return Vector2D(
        cos_a * v.x - sin_a * v.y,
        sin_a * v.x + cos_a * v.y,
    )


def rotate90(v: Vector2D, clockwise: bool = True) -> Vector2D:
    """Rotate by exactly 90 degrees."""
    if clockwise:
        return Vector2D(v.y, -v.x)
    return Vector2D(-v.y, v.x)


# =============================================================================
# Component-wise Arithmetic
# =============================================================================


def add(v1: Vector2D, v2: Vector2D) -> Vector2D:
    return Vector2D(v1.x + v2.x, v1.y + v2.y)


def sum_vectors(vectors: Iterable[Vector2D]) -> Vector2D:
    """Component-wise sum; an empty iterable gives the zero vector."""
    x = 0
    y = 0
    for v in vectors:
        x += v.x
        y += v.y
    return Vector2D(x, y)


def mult(v1: Vector2D, v2: Vector2D) -> Vector2D:
    """Component-wise (Hadamard) product."""
    return Vector2D(v1.x * v2.x, v1.y * v2.y)


def negate(v: Vector2D) -> Vector2D:
    return v.inverse


def sub(v1: Vector2D, v2: Vector2D) -> Vector2D:
    return add(v1, v2.inverse)


def scale(v: Vector2D, s: float) -> Vector2D:
    return Vector2D(v.x * s, v.y * s)


def resize(v: Vector2D, length: float) -> Vector2D:
    """Rescale ``v`` to ``length`` keeping its direction.

    A zero-length ``v`` has no direction; the result is ``(nan, nan)``.
    """
    norm = v.norm
    if norm == 0:
        _degenerate("resize")
        return Vector2D(math.nan, math.nan)
    return scale(v, length / norm)


# =============================================================================
# Products and Angles
# =============================================================================


def dot(v1: Vector2D, v2: Vector2D) -> float:
    return v1.x * v2.x + v1.y * v2.y


def det(v1: Vector2D, v2: Vector2D) -> float:
    """2D cross product (signed area of the parallelogram).

    Positive if v2 is counter-clockwise from v1, zero if parallel.
    """
    return v1.x * v2.y - v1.y * v2.x


def angle_to(v1: Vector2D, v2: Vector2D) -> float:
    """Signed angle rotating v1 onto v2, in (-pi, pi]."""
    return math.atan2(det(v1, v2), dot(v1, v2))


def angle_between(v1: Vector2D, v2: Vector2D) -> float:
    """Unsigned angle between v1 and v2, in [0, pi].

    NaN if either vector has zero length.
    """
    lengths = v1.norm * v2.norm
    if lengths == 0:
        _degenerate("angle_between")
        return math.nan
    cos_angle = dot(v1, v2) / lengths
    if math.isnan(cos_angle):
        return math.nan
    # Rounding can push parallel vectors slightly outside acos' domain
    return math.acos(max(-1.0, min(1.0, cos_angle)))


# =============================================================================
# Comparison
# =============================================================================


def proximity(v: Vector2D, center: Vector2D, epsilon: float) -> bool:
    """True if ``v`` lies in the open square of half-width ``epsilon`` around ``center``.

    Bounds are per axis, not a circular radius.
    """
    return (
        center.x - epsilon < v.x < center.x + epsilon
        and center.y - epsilon < v.y < center.y + epsilon
    )


def is_close(v1: Vector2D, v2: Vector2D, tol: Optional[float] = None) -> bool:
    """Per-axis equality within an absolute tolerance (config default)."""
    if tol is None:
        tol = get_config().tolerance
    return math.isclose(v1.x, v2.x, abs_tol=tol) and math.isclose(v1.y, v2.y, abs_tol=tol)


def distance(v1: Vector2D, v2: Vector2D) -> float:
    """Euclidean distance between two points."""
    return sub(v1, v2).norm
