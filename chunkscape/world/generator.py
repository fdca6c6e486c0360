from __future__ import annotations

import logging

import numpy as np

from chunkscape.config import GRADIENT_LEVELS
from chunkscape.util.math import to_gradient_index
from chunkscape.world.blobs import extract_blobs
from chunkscape.world.chunk import Chunk, ChunkCoord, chunk_origin
from chunkscape.world.noise import NoiseConfig, NoiseField
from chunkscape.world.params import TerrainParams
from chunkscape.world.rects import FootprintRule, Rect, fit_rectangle

logger = logging.getLogger(__name__)


class ChunkGenerator:
    """Noise -> occupancy -> blobs -> fitted rectangles -> per-cell classification.

    Pure for a given ``TerrainParams``; safe to call from several threads.
    """

    def __init__(self, params: TerrainParams, noise: NoiseField | None = None) -> None:
        self.params = params
        self.noise = noise or NoiseField(NoiseConfig.from_params(params), mode=params.noise_mode)
        self.rule = FootprintRule(min_long=params.footprint_long, min_short=params.footprint_short)

    def occupancy(self, noise: np.ndarray) -> np.ndarray:
        return noise > self.params.building_threshold

    def footprints(self, occupancy: np.ndarray) -> list[Rect]:
        accepted: list[Rect] = []
        for blob in extract_blobs(occupancy):
            rect = fit_rectangle(blob, occupancy)
            if self.rule.accepts(rect):
                accepted.append(rect)
        return accepted

    def generate(self, coord: tuple[int, int]) -> Chunk:
        coord = ChunkCoord(int(coord[0]), int(coord[1]))
        size = int(self.params.chunk_size)
        ox, oy = chunk_origin(coord, size)

        noise = self.noise.chunk_grid(ox, oy, size)
        occ = self.occupancy(noise)

        building = np.zeros((size, size), dtype=bool)
        rects = self.footprints(occ)
        for r in rects:
            # the whole rectangle, even cells owned by a neighbouring blob
            building[r.x:r.x_max, r.y:r.y_max] = True

        gradient = to_gradient_index(noise, GRADIENT_LEVELS)
        logger.debug("generated chunk %s: %d footprints, %d building cells", tuple(coord), len(rects), int(building.sum()))
        return Chunk(coord=coord, size=size, noise=noise, building=building, gradient=gradient, footprints=tuple(rects))
