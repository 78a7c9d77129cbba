"""Immutable 2D vectors and pure geometric transformations."""

from vector2d import ops, transforms
from vector2d.config import VectorConfig, get_config, reset_config, set_config, set_strict
from vector2d.errors import DegenerateVectorError, InvalidVectorSource, Vector2DError
from vector2d.vector import Vector2D

__all__ = [
    "Vector2D",
    "ops",
    "transforms",
    "VectorConfig",
    "get_config",
    "set_config",
    "reset_config",
    "set_strict",
    "Vector2DError",
    "InvalidVectorSource",
    "DegenerateVectorError",
]
