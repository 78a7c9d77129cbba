"""
Vector math configuration.

Controls comparison tolerance and how degenerate inputs (zero-length
vectors) are treated. All settings can be overridden via environment
variables.
"""

import math
import os
from dataclasses import dataclass, field
from typing import Optional


@dataclass
class VectorConfig:
    """Process-wide settings for vector operations."""

    # Default absolute tolerance for is_close()
    tolerance: float = field(
        default_factory=lambda: float(os.getenv("VECTOR2D_TOLERANCE", "1e-9"))
    )

    # Raise DegenerateVectorError instead of returning NaN
    strict: bool = field(
        default_factory=lambda: os.getenv("VECTOR2D_STRICT", "false").lower() == "true"
    )

    @classmethod
    def from_env(cls) -> "VectorConfig":
        """Create config from environment variables."""
        return cls()

    def validate(self) -> list[str]:
        """Validate configuration, return list of errors."""
        errors = []
        if math.isnan(self.tolerance) or math.isinf(self.tolerance):
            errors.append("VECTOR2D_TOLERANCE must be finite")
        elif self.tolerance < 0:
            errors.append("VECTOR2D_TOLERANCE must be non-negative")
        return errors


# Singleton config instance
_config: Optional[VectorConfig] = None


def get_config() -> VectorConfig:
    """Get the global vector configuration."""
    global _config
    if _config is None:
        _config = VectorConfig.from_env()
    return _config


def set_config(config: VectorConfig) -> None:
    """Replace the global configuration."""
    global _config
    _config = config


def reset_config() -> None:
    """Drop the cached config so the next get_config() re-reads the environment."""
    global _config
    _config = None


def set_strict(enabled: bool) -> None:
    """
    Programmatically enable/disable strict mode.

    Useful for testing or runtime toggling.
    """
    config = get_config()
    config.strict = enabled
