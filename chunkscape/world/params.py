from __future__ import annotations

from dataclasses import dataclass

from chunkscape.config import (
    DEFAULT_BUILDING_THRESHOLD,
    DEFAULT_CHUNK_LOAD_RADIUS,
    DEFAULT_CHUNK_SIZE,
    DEFAULT_FOOTPRINT_LONG,
    DEFAULT_FOOTPRINT_SHORT,
    DEFAULT_NOISE,
    DEFAULT_NOISE_OFFSET,
    DEFAULT_NOISE_SCALE,
    DEFAULT_SEED,
)
from chunkscape.errors import ConfigurationError

NOISE_MODES = ("perlin", "simplex")


@dataclass(frozen=True)
class TerrainParams:
    """Run-wide generation settings. Set once, never mutated during a run."""

    chunk_size: int = DEFAULT_CHUNK_SIZE
    chunk_load_radius: int = DEFAULT_CHUNK_LOAD_RADIUS
    noise_scale: float = DEFAULT_NOISE_SCALE
    seed: int = DEFAULT_SEED
    noise_offset: tuple[float, float] = DEFAULT_NOISE_OFFSET
    building_threshold: float = DEFAULT_BUILDING_THRESHOLD
    footprint_long: int = DEFAULT_FOOTPRINT_LONG
    footprint_short: int = DEFAULT_FOOTPRINT_SHORT
    noise_mode: str = DEFAULT_NOISE

    def __post_init__(self) -> None:
        if int(self.chunk_size) <= 0:
            raise ConfigurationError(f"chunk_size must be positive, got {self.chunk_size}")
        if int(self.chunk_load_radius) < 0:
            raise ConfigurationError(f"chunk_load_radius must be >= 0, got {self.chunk_load_radius}")
        if not 0.0 <= float(self.building_threshold) <= 1.0:
            raise ConfigurationError(f"building_threshold must be in [0, 1], got {self.building_threshold}")
        if self.footprint_short <= 0 or self.footprint_long <= 0:
            raise ConfigurationError("footprint dimensions must be positive")
        if self.footprint_short > self.footprint_long:
            raise ConfigurationError(
                f"footprint_short ({self.footprint_short}) exceeds footprint_long ({self.footprint_long})"
            )
        if len(self.noise_offset) != 2:
            raise ConfigurationError(f"noise_offset must be an (x, y) pair, got {self.noise_offset!r}")
        if self.noise_mode not in NOISE_MODES:
            raise ConfigurationError(f"unknown noise mode {self.noise_mode!r} (expected one of {NOISE_MODES})")
