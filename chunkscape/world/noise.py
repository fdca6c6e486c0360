from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from opensimplex import OpenSimplex

from chunkscape.config import NOISE_BOOST, NOISE_SEED_SHIFT
from chunkscape.errors import ConfigurationError
from chunkscape.world.params import TerrainParams

# Unit gradients on the lattice: 4 axis + 4 diagonal directions
_D = float(np.sqrt(0.5))
_GRADIENTS = np.array(
    [(1.0, 0.0), (-1.0, 0.0), (0.0, 1.0), (0.0, -1.0), (_D, _D), (-_D, _D), (_D, -_D), (-_D, -_D)],
    dtype=np.float64,
)


@dataclass(frozen=True)
class NoiseConfig:
    scale: float
    seed: int
    offset: tuple[float, float] = (0.0, 0.0)
    boost: float = NOISE_BOOST
    seed_shift: float = NOISE_SEED_SHIFT

    @classmethod
    def from_params(cls, params: TerrainParams) -> "NoiseConfig":
        ox, oy = params.noise_offset
        return cls(scale=float(params.noise_scale), seed=int(params.seed), offset=(float(ox), float(oy)))


class GradientNoise2D:
    """Perlin-style 2D gradient noise with a fully vectorized numpy implementation.

    Lattice points get one of 8 unit gradients from an integer hash; corner
    contributions are blended with a quintic fade. The raw value (|n| <= sqrt(0.5))
    maps to (n + 1) / 2, so output stays inside [0,1] and is 0.5 on every
    lattice point. Deterministic for a given salt.
    """

    def __init__(self, salt: int = 0) -> None:
        self.salt = int(salt)

    @staticmethod
    def _fade(t: np.ndarray) -> np.ndarray:
        # smootherstep
        return t * t * t * (t * (t * 6 - 15) + 10)

    def _hash(self, xi: np.ndarray, yi: np.ndarray) -> np.ndarray:
        x = (xi.astype(np.uint32) * np.uint32(374761393)) ^ (yi.astype(np.uint32) * np.uint32(668265263)) ^ np.uint32(self.salt & 0xFFFFFFFF)
        x ^= (x >> np.uint32(13))
        x *= np.uint32(1274126177)
        x ^= (x >> np.uint32(16))
        return x

    def _corner(self, xi: np.ndarray, yi: np.ndarray, dx: np.ndarray, dy: np.ndarray) -> np.ndarray:
        g = _GRADIENTS[self._hash(xi, yi) & np.uint32(7)]
        return g[..., 0] * dx + g[..., 1] * dy

    def noise(self, x: np.ndarray, y: np.ndarray) -> np.ndarray:
        x = np.asarray(x, dtype=np.float64)
        y = np.asarray(y, dtype=np.float64)
        xi0 = np.floor(x).astype(np.int64)
        yi0 = np.floor(y).astype(np.int64)
        tx = x - xi0
        ty = y - yi0

        n00 = self._corner(xi0, yi0, tx, ty)
        n10 = self._corner(xi0 + 1, yi0, tx - 1.0, ty)
        n01 = self._corner(xi0, yi0 + 1, tx, ty - 1.0)
        n11 = self._corner(xi0 + 1, yi0 + 1, tx - 1.0, ty - 1.0)

        u = self._fade(tx)
        v = self._fade(ty)
        nx0 = n00 + (n10 - n00) * u
        nx1 = n01 + (n11 - n01) * u
        n = nx0 + (nx1 - nx0) * v
        return np.clip(n * 0.5 + 0.5, 0.0, 1.0)


class SimplexNoise2D:
    """OpenSimplex 2D noise remapped to [0,1]. Slower (per-point calls)."""

    def __init__(self, seed: int) -> None:
        self.seed = int(seed)
        self._simp = OpenSimplex(self.seed)

    def noise(self, x: np.ndarray, y: np.ndarray) -> np.ndarray:
        x = np.asarray(x, dtype=np.float64)
        y = np.asarray(y, dtype=np.float64)
        flat = np.fromiter(
            (self._simp.noise2(float(a), float(b)) for a, b in zip(x.ravel(), y.ravel())),
            dtype=np.float64,
            count=x.size,
        )
        return np.clip(flat.reshape(x.shape) * 0.5 + 0.5, 0.0, 1.0)


class NoiseField:
    """Deterministic scalar field over integer world tiles.

    ``sample(x, y) == min(base(p) * boost, 1.0)`` where
    ``p = ((x + offset_x + seed * 0.1) * scale, (y + offset_y + seed * 0.1) * scale)``.
    """

    def __init__(self, cfg: NoiseConfig, mode: str = "perlin") -> None:
        self.cfg = cfg
        self.mode = mode
        if mode == "perlin":
            self.base = GradientNoise2D()
        elif mode == "simplex":
            self.base = SimplexNoise2D(cfg.seed)
        else:
            raise ConfigurationError(f"unknown noise mode {mode!r}")

    def _sample_points(self, xs: np.ndarray, ys: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
        shift = self.cfg.seed * self.cfg.seed_shift
        ox, oy = self.cfg.offset
        px = (np.asarray(xs, dtype=np.float64) + ox + shift) * self.cfg.scale
        py = (np.asarray(ys, dtype=np.float64) + oy + shift) * self.cfg.scale
        return px, py

    def raw_grid(self, xs: np.ndarray, ys: np.ndarray) -> np.ndarray:
        px, py = self._sample_points(xs, ys)
        return self.base.noise(px, py)

    def grid(self, xs: np.ndarray, ys: np.ndarray) -> np.ndarray:
        # Boost then clamp the top; the base is already non-negative
        return np.minimum(self.raw_grid(xs, ys) * self.cfg.boost, 1.0)

    def chunk_grid(self, origin_x: int, origin_y: int, size: int) -> np.ndarray:
        """Return a (size, size) array indexed [x, y] for one chunk."""
        ax = np.arange(origin_x, origin_x + size, dtype=np.int64)
        ay = np.arange(origin_y, origin_y + size, dtype=np.int64)
        gx, gy = np.meshgrid(ax, ay, indexing="ij")
        return self.grid(gx, gy)

    def raw(self, x: int, y: int) -> float:
        return float(self.raw_grid(np.array([x]), np.array([y]))[0])

    def sample(self, x: int, y: int) -> float:
        return float(self.grid(np.array([x]), np.array([y]))[0])
