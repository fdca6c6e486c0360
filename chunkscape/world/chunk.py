from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Optional

import numpy as np

from chunkscape.world.rects import Rect


class ChunkCoord(NamedTuple):
    cx: int
    cy: int


class TileKind(str, Enum):
    TERRAIN = "terrain"
    BUILDING = "building"


@dataclass(frozen=True)
class TilePaint:
    position: tuple[int, int]  # world tile
    kind: TileKind
    gradient: Optional[int]  # 0..255 for terrain, None marks a building


@dataclass(frozen=True)
class Cell:
    position: tuple[int, int]
    noise: float
    kind: TileKind
    gradient: int


def chunk_origin(coord: ChunkCoord, size: int) -> tuple[int, int]:
    return coord[0] * size, coord[1] * size


def chunk_tile_positions(coord: ChunkCoord, size: int) -> list[tuple[int, int]]:
    """World tile positions covered by a chunk, x-major."""
    ox, oy = chunk_origin(coord, size)
    return [(ox + x, oy + y) for x in range(size) for y in range(size)]


@dataclass(frozen=True, eq=False)
class Chunk:
    coord: ChunkCoord
    size: int
    noise: np.ndarray  # float64 (size, size), [x, y]
    building: np.ndarray  # bool (size, size)
    gradient: np.ndarray  # uint8 (size, size)
    footprints: tuple[Rect, ...] = ()

    def __post_init__(self) -> None:
        # private read-only copies; the caller keeps its own arrays writable
        for name in ("noise", "building", "gradient"):
            arr = np.array(getattr(self, name), copy=True)
            assert arr.shape == (self.size, self.size), f"bad grid shape {arr.shape} for size {self.size}"
            arr.flags.writeable = False
            object.__setattr__(self, name, arr)

    @property
    def origin(self) -> tuple[int, int]:
        return chunk_origin(self.coord, self.size)

    @property
    def building_count(self) -> int:
        return int(np.count_nonzero(self.building))

    def cell(self, x: int, y: int) -> Cell:
        assert 0 <= x < self.size and 0 <= y < self.size, f"cell ({x},{y}) outside chunk of size {self.size}"
        ox, oy = self.origin
        kind = TileKind.BUILDING if self.building[x, y] else TileKind.TERRAIN
        return Cell(
            position=(ox + x, oy + y),
            noise=float(self.noise[x, y]),
            kind=kind,
            gradient=int(self.gradient[x, y]),
        )

    def paint_instructions(self) -> list[TilePaint]:
        ox, oy = self.origin
        tiles: list[TilePaint] = []
        for x in range(self.size):
            for y in range(self.size):
                if self.building[x, y]:
                    tiles.append(TilePaint((ox + x, oy + y), TileKind.BUILDING, None))
                else:
                    tiles.append(TilePaint((ox + x, oy + y), TileKind.TERRAIN, int(self.gradient[x, y])))
        return tiles

    def tile_positions(self) -> list[tuple[int, int]]:
        return chunk_tile_positions(self.coord, self.size)
