from __future__ import annotations

import logging
import os
import threading
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Dict, Iterator, Optional, Set

from chunkscape.util.math import floor_div_coord
from chunkscape.world.chunk import Chunk, ChunkCoord
from chunkscape.world.generator import ChunkGenerator
from chunkscape.world.params import TerrainParams

logger = logging.getLogger(__name__)


@dataclass
class ChunkDelta:
    loaded: list[Chunk] = field(default_factory=list)
    unloaded: list[ChunkCoord] = field(default_factory=list)

    def __bool__(self) -> bool:
        return bool(self.loaded or self.unloaded)


class ChunkStore:
    """Owns the loaded chunks and keeps them equal to the observer's retention set.

    Callers only ever see load/unload deltas and read-only lookups; the
    mapping itself never leaves the store.
    """

    def __init__(self, params: TerrainParams, generator: ChunkGenerator | None = None, *, workers: int = 1) -> None:
        self.params = params
        self.size = int(params.chunk_size)
        self.radius = int(params.chunk_load_radius)
        self.generator = generator or ChunkGenerator(params)

        self._chunks: Dict[ChunkCoord, Chunk] = {}
        self._current: Optional[ChunkCoord] = None
        # set when a hand load may have left the store off its retention set
        self._stale = False
        self._lock = threading.Lock()

        workers = int(workers) if workers else (os.cpu_count() or 1)
        self._pool = ThreadPoolExecutor(max_workers=workers, thread_name_prefix="chunkgen") if workers > 1 else None

    def shutdown(self) -> None:
        if self._pool is not None:
            self._pool.shutdown(wait=True)
            self._pool = None

    # read-only views

    @property
    def current_chunk(self) -> Optional[ChunkCoord]:
        return self._current

    def loaded_coords(self) -> frozenset[ChunkCoord]:
        with self._lock:
            return frozenset(self._chunks)

    def get(self, coord: tuple[int, int]) -> Optional[Chunk]:
        with self._lock:
            return self._chunks.get(ChunkCoord(*coord))

    def __contains__(self, coord: object) -> bool:
        with self._lock:
            return coord in self._chunks

    def __len__(self) -> int:
        with self._lock:
            return len(self._chunks)

    def __iter__(self) -> Iterator[ChunkCoord]:
        return iter(self.loaded_coords())

    # retention

    def world_to_chunk(self, x: float, y: float) -> ChunkCoord:
        return ChunkCoord(*floor_div_coord(x, y, self.size))

    def retention_set(self, center: tuple[int, int]) -> Set[ChunkCoord]:
        cx, cy = center
        r = self.radius
        needed: Set[ChunkCoord] = set()
        for dx in range(-r, r + 1):
            for dy in range(-r, r + 1):
                needed.add(ChunkCoord(cx + dx, cy + dy))
        return needed

    def load(self, coord: tuple[int, int]) -> Optional[Chunk]:
        """Generate and insert one chunk. Already loaded coordinates are ignored."""
        coord = ChunkCoord(*coord)
        if coord in self:
            return None
        chunk = self.generator.generate(coord)
        inserted = self._insert(chunk)
        if inserted is not None:
            self._stale = True
        return inserted

    def _insert(self, chunk: Chunk) -> Optional[Chunk]:
        with self._lock:
            if chunk.coord in self._chunks:
                return None
            self._chunks[chunk.coord] = chunk
        return chunk

    def _evict(self, coord: ChunkCoord) -> bool:
        with self._lock:
            return self._chunks.pop(coord, None) is not None

    def _generate_many(self, coords: list[ChunkCoord]) -> list[Chunk]:
        if self._pool is None or len(coords) < 2:
            return [self.generator.generate(c) for c in coords]
        # worker exceptions re-raise here
        return list(self._pool.map(self.generator.generate, coords))

    def on_observer_moved(self, x: float, y: float) -> ChunkDelta:
        center = self.world_to_chunk(x, y)
        if center == self._current and not self._stale:
            return ChunkDelta()

        needed = self.retention_set(center)
        existing = self.loaded_coords()

        delta = ChunkDelta()
        missing = sorted(needed - existing)
        for chunk in self._generate_many(missing):
            if self._insert(chunk) is not None:
                delta.loaded.append(chunk)

        for coord in sorted(existing - needed):
            if self._evict(coord):
                delta.unloaded.append(coord)

        # recorded last so a failed generation is retried on the next call
        self._current = center
        self._stale = False
        logger.debug(
            "observer chunk -> %s: +%d -%d (loaded=%d)",
            tuple(center), len(delta.loaded), len(delta.unloaded), len(self),
        )
        return delta

    tick = on_observer_moved
