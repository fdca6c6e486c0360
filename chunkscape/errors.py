from __future__ import annotations


class ConfigurationError(ValueError):
    """Raised when terrain parameters are rejected before any generation."""
