import numpy as np
import pytest

from chunkscape.errors import ConfigurationError
from chunkscape.world.noise import GradientNoise2D, NoiseConfig, NoiseField
from chunkscape.world.params import TerrainParams


def _field(**kw):
    cfg = NoiseConfig(scale=kw.pop("scale", 0.1), seed=kw.pop("seed", 12345), offset=kw.pop("offset", (0.0, 0.0)), **kw)
    return NoiseField(cfg)


def _coords(n=64):
    rng = np.random.default_rng(7)
    return rng.integers(-5000, 5000, size=n), rng.integers(-5000, 5000, size=n)


def test_noise_is_deterministic():
    xs, ys = _coords()
    a = _field().grid(xs, ys)
    b = _field().grid(xs, ys)
    assert np.array_equal(a, b)


def test_noise_in_unit_range():
    xs, ys = _coords(2000)
    v = _field().grid(xs, ys)
    assert v.min() >= 0.0
    assert v.max() <= 1.0


def test_boost_then_clamp():
    xs, ys = _coords(2000)
    f = _field()
    raw = f.raw_grid(xs, ys)
    assert raw.min() >= 0.0
    assert np.allclose(f.grid(xs, ys), np.minimum(raw * 1.2, 1.0))


def test_large_boost_saturates_at_one():
    xs, ys = _coords(2000)
    v = _field(boost=10.0).grid(xs, ys)
    assert v.max() == 1.0
    assert np.count_nonzero(v == 1.0) > 0


def test_seed_shifts_sample_domain():
    # seed * 0.1 is added to both axes, same as an explicit offset
    xs, ys = _coords()
    a = _field(seed=10, offset=(0.0, 0.0)).grid(xs, ys)
    b = _field(seed=0, offset=(1.0, 1.0)).grid(xs, ys)
    assert np.allclose(a, b)


def test_offset_changes_field():
    xs, ys = _coords()
    a = _field(offset=(0.0, 0.0)).grid(xs, ys)
    b = _field(offset=(3.3, -7.1)).grid(xs, ys)
    assert not np.allclose(a, b)


def test_lattice_points_are_mid_gray():
    n = GradientNoise2D().noise(np.arange(-4, 5, dtype=np.float64), np.arange(9, dtype=np.float64))
    assert np.allclose(n, 0.5)


def test_noise_is_continuous():
    f = _field(scale=0.01)
    xs = np.arange(0, 500)
    ys = np.full_like(xs, 42)
    v = f.grid(xs, ys)
    assert np.abs(np.diff(v)).max() < 0.1


def test_sample_matches_chunk_grid():
    f = _field()
    g = f.chunk_grid(-16, 32, 16)
    assert g.shape == (16, 16)
    for x, y in [(0, 0), (15, 0), (3, 9), (15, 15)]:
        assert g[x, y] == pytest.approx(f.sample(-16 + x, 32 + y))


def test_simplex_mode_in_range_and_deterministic():
    cfg = NoiseConfig(scale=0.1, seed=99)
    xs, ys = _coords(200)
    a = NoiseField(cfg, mode="simplex").grid(xs, ys)
    b = NoiseField(cfg, mode="simplex").grid(xs, ys)
    assert np.array_equal(a, b)
    assert a.min() >= 0.0 and a.max() <= 1.0


def test_unknown_mode_rejected():
    with pytest.raises(ConfigurationError):
        NoiseField(NoiseConfig(scale=0.1, seed=1), mode="worley")


def test_config_from_params():
    cfg = NoiseConfig.from_params(TerrainParams(noise_scale=0.05, seed=7, noise_offset=(2, -3)))
    assert cfg == NoiseConfig(scale=0.05, seed=7, offset=(2.0, -3.0))
