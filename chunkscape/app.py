from __future__ import annotations

import logging
import math
import time

from chunkscape.config import APP_VERSION
from chunkscape.observer import Observer
from chunkscape.world.params import TerrainParams
from chunkscape.world.view import TileMapView
from chunkscape.world.world import TerrainWorld

logger = logging.getLogger(__name__)


def run_app(
    *,
    params: TerrainParams,
    speed: float,
    direction: tuple[float, float],
    ticks: int,
    dt: float,
    workers: int,
    ascii_map: bool,
) -> TerrainWorld:
    """Headless driver: walk an observer for `ticks` steps and stream terrain around it."""
    logger.info(
        "chunkscape v%s seed=%d noise=%s chunk_size=%d radius=%d threshold=%.2f",
        APP_VERSION, params.seed, params.noise_mode, params.chunk_size,
        params.chunk_load_radius, params.building_threshold,
    )
    view = TileMapView()
    world = TerrainWorld(params, view, workers=workers)
    obs = Observer(speed=speed)

    loads = 0
    unloads = 0
    buildings = 0
    t0 = time.perf_counter()
    try:
        # Prime at the start position
        delta = world.update(obs.x, obs.y)
        loads += len(delta.loaded)
        buildings += sum(len(c.footprints) for c in delta.loaded)

        vx, vy = obs.velocity(*direction)
        for _ in range(max(0, int(ticks))):
            obs.advance(vx, vy, dt)
            delta = world.update(obs.x, obs.y)
            loads += len(delta.loaded)
            unloads += len(delta.unloaded)
            buildings += sum(len(c.footprints) for c in delta.loaded)
            if delta:
                logger.info(
                    "observer (%.1f, %.1f) chunk=%s +%d -%d",
                    obs.x, obs.y, tuple(world.store.current_chunk), len(delta.loaded), len(delta.unloaded),
                )
    finally:
        world.shutdown()

    elapsed = time.perf_counter() - t0
    logger.info(
        "done: %d chunks generated, %d evicted, %d footprints, %d tiles on view, %.3fs",
        loads, unloads, buildings, len(view), elapsed,
    )

    if ascii_map:
        size = params.chunk_size
        span = (2 * params.chunk_load_radius + 1) * size
        px, py = int(math.floor(obs.x)), int(math.floor(obs.y))
        cx, cy = world.store.current_chunk
        x0 = (cx - params.chunk_load_radius) * size
        y0 = (cy - params.chunk_load_radius) * size
        print(view.render_ascii(x0, y0, x0 + span, y0 + span, marker=(px, py)))
    return world
