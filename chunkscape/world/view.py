from __future__ import annotations

from typing import Dict, Iterable, Optional, Protocol

from chunkscape.config import BUILDING_COLOR, GRADIENT_LEVELS
from chunkscape.world.chunk import TileKind, TilePaint

# dark -> light, used by render_ascii
_SHADES = " .:-=+*%@"


class TerrainView(Protocol):
    """Whatever draws tiles. The core only hands it instructions."""

    def paint(self, tiles: Iterable[TilePaint]) -> None: ...

    def clear(self, positions: Iterable[tuple[int, int]]) -> None: ...


def tile_color(tile: TilePaint) -> tuple[float, float, float]:
    """RGB in [0,1]: gray ramp for terrain, brown for buildings."""
    if tile.kind is TileKind.BUILDING:
        return BUILDING_COLOR
    g = float(tile.gradient) / (GRADIENT_LEVELS - 1)
    return g, g, g


class TileMapView:
    """In-memory tilemap (world tile -> last painted tile)."""

    def __init__(self) -> None:
        self.tiles: Dict[tuple[int, int], TilePaint] = {}

    def paint(self, tiles: Iterable[TilePaint]) -> None:
        for t in tiles:
            self.tiles[t.position] = t

    def clear(self, positions: Iterable[tuple[int, int]]) -> None:
        for p in positions:
            self.tiles.pop(p, None)

    def tile_at(self, x: int, y: int) -> Optional[TilePaint]:
        return self.tiles.get((x, y))

    def __len__(self) -> int:
        return len(self.tiles)

    def render_ascii(self, x0: int, y0: int, x1: int, y1: int, *, marker: Optional[tuple[int, int]] = None) -> str:
        """Text dump of [x0, x1) x [y0, y1), top row = highest y. '#' building, '?' unloaded."""
        rows = []
        for y in range(y1 - 1, y0 - 1, -1):
            line = []
            for x in range(x0, x1):
                if marker is not None and (x, y) == marker:
                    line.append("P")
                    continue
                t = self.tiles.get((x, y))
                if t is None:
                    line.append("?")
                elif t.kind is TileKind.BUILDING:
                    line.append("#")
                else:
                    line.append(_SHADES[t.gradient * len(_SHADES) // GRADIENT_LEVELS])
            rows.append("".join(line))
        return "\n".join(rows)
