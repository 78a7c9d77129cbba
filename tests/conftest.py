"""Shared pytest fixtures for vector2d tests."""

import pytest

from vector2d import Vector2D, reset_config


# =============================================================================
# Config Isolation
# =============================================================================


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    """Run every test against a config built from a clean environment."""
    monkeypatch.delenv("VECTOR2D_TOLERANCE", raising=False)
    monkeypatch.delenv("VECTOR2D_STRICT", raising=False)
    reset_config()
    yield
    reset_config()


# =============================================================================
# Vector Fixtures
# =============================================================================


@pytest.fixture
def origin() -> Vector2D:
    return Vector2D()


@pytest.fixture
def unit_x() -> Vector2D:
    return Vector2D(1, 0)


@pytest.fixture
def unit_y() -> Vector2D:
    return Vector2D(0, 1)


@pytest.fixture
def v34() -> Vector2D:
    """The 3-4-5 vector."""
    return Vector2D(3, 4)


@pytest.fixture
def samples() -> list[Vector2D]:
    """Assorted non-zero vectors across all quadrants."""
    return [
        Vector2D(1, 0),
        Vector2D(3, 4),
        Vector2D(-2.5, 7.25),
        Vector2D(-1e3, -0.001),
        Vector2D(0.3, -12.0),
    ]
