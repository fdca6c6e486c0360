from __future__ import annotations

# App
APP_VERSION = "0.3.0"

# Chunks
DEFAULT_CHUNK_SIZE = 16  # tiles per chunk side
DEFAULT_CHUNK_LOAD_RADIUS = 3  # Chebyshev radius, (2r+1)^2 chunks kept

# Noise
DEFAULT_SEED = 12345
DEFAULT_NOISE_SCALE = 0.1
DEFAULT_NOISE_OFFSET = (0.0, 0.0)
DEFAULT_NOISE = "perlin"  # "perlin" | "simplex"
NOISE_SEED_SHIFT = 0.1  # seed * shift is added to both sample axes
NOISE_BOOST = 1.2  # raw noise is multiplied then clamped to 1.0

# Buildings
DEFAULT_BUILDING_THRESHOLD = 0.40
# Minimum footprint, accepted in either orientation (5x3 or 3x5)
DEFAULT_FOOTPRINT_LONG = 5
DEFAULT_FOOTPRINT_SHORT = 3

# Terrain shading
GRADIENT_LEVELS = 256
BUILDING_COLOR = (0.6, 0.4, 0.2)

# Observer
DEFAULT_MOVE_SPEED = 5.0  # tiles / sec

# Driver
DEFAULT_TICKS = 120
DEFAULT_DT = 0.1
DEFAULT_DIRECTION = (1.0, 0.0)
DEFAULT_WORKERS = 1
