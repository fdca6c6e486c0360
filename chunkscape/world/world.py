from __future__ import annotations

import logging
from typing import Optional

from chunkscape.world.chunk import chunk_origin, chunk_tile_positions
from chunkscape.world.chunk_manager import ChunkDelta, ChunkStore
from chunkscape.world.params import TerrainParams
from chunkscape.world.view import TerrainView

logger = logging.getLogger(__name__)


class TerrainWorld:
    def __init__(self, params: TerrainParams, view: Optional[TerrainView] = None, *, workers: int = 1) -> None:
        self.params = params
        self.view = view
        self.store = ChunkStore(params, workers=workers)

    def shutdown(self) -> None:
        self.store.shutdown()

    def update(self, x: float, y: float) -> ChunkDelta:
        """Per-tick entry point: stream chunks around (x, y) and forward paints/clears."""
        delta = self.store.tick(x, y)
        if self.view is not None and delta:
            # clear first so a view never holds tiles of an evicted chunk
            for coord in delta.unloaded:
                self.view.clear(chunk_tile_positions(coord, self.params.chunk_size))
            for chunk in delta.loaded:
                self.view.paint(chunk.paint_instructions())
        if delta:
            logger.debug("world update at (%.1f, %.1f): %d loaded, %d unloaded", x, y, len(delta.loaded), len(delta.unloaded))
        return delta

    def chunk_bounds(self) -> list[tuple[int, int, int, int]]:
        """(x0, y0, x1, y1) world rectangles of every loaded chunk, for debug outlines."""
        size = self.params.chunk_size
        out = []
        for coord in sorted(self.store.loaded_coords()):
            ox, oy = chunk_origin(coord, size)
            out.append((ox, oy, ox + size, oy + size))
        return out
