"""Exceptions raised by vector2d."""


class Vector2DError(Exception):
    """Base class for vector2d errors."""
    pass


class InvalidVectorSource(Vector2DError, TypeError):
    """Raised when an object without x/y coordinates is copied into a vector."""
    pass


class DegenerateVectorError(Vector2DError, ArithmeticError):
    """Raised in strict mode when an operation needs a non-zero vector."""
    pass
