"""Pydantic schemas for vector serialization."""

from pydantic import BaseModel

from vector2d.vector import Vector2D


class Vector2DSchema(BaseModel):
    """2D vector as a serializable model."""

    x: float = 0.0
    y: float = 0.0

    @classmethod
    def from_vector(cls, v: Vector2D) -> "Vector2DSchema":
        return cls(x=v.x, y=v.y)

    def to_vector(self) -> Vector2D:
        return Vector2D(self.x, self.y)
