from __future__ import annotations

import argparse
import logging
import random

from chunkscape.app import run_app
from chunkscape.config import (
    APP_VERSION,
    DEFAULT_BUILDING_THRESHOLD,
    DEFAULT_CHUNK_LOAD_RADIUS,
    DEFAULT_CHUNK_SIZE,
    DEFAULT_DIRECTION,
    DEFAULT_DT,
    DEFAULT_FOOTPRINT_LONG,
    DEFAULT_FOOTPRINT_SHORT,
    DEFAULT_MOVE_SPEED,
    DEFAULT_NOISE,
    DEFAULT_NOISE_OFFSET,
    DEFAULT_NOISE_SCALE,
    DEFAULT_SEED,
    DEFAULT_TICKS,
    DEFAULT_WORKERS,
)
from chunkscape.errors import ConfigurationError
from chunkscape.world.params import TerrainParams

def _direction(text: str) -> tuple[float, float]:
    try:
        dx, dy = (float(v) for v in text.split(","))
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"expected DX,DY, got {text!r}") from e
    return dx, dy

def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="chunkscape", description=f"Streamed procedural tile terrain with building footprints v{APP_VERSION}")
    p.add_argument("--seed", default=str(DEFAULT_SEED), help="int seed or 'random' (default: 12345)")
    p.add_argument("--chunk-size", type=int, default=DEFAULT_CHUNK_SIZE, help="tiles per chunk side (default: 16)")
    p.add_argument("--radius", type=int, default=DEFAULT_CHUNK_LOAD_RADIUS, help="chunk load radius (Chebyshev, default: 3)")
    p.add_argument("--noise-scale", type=float, default=DEFAULT_NOISE_SCALE, help="noise spatial frequency")
    p.add_argument("--offset-x", type=float, default=DEFAULT_NOISE_OFFSET[0], help="noise offset x")
    p.add_argument("--offset-y", type=float, default=DEFAULT_NOISE_OFFSET[1], help="noise offset y")
    p.add_argument("--threshold", type=float, default=DEFAULT_BUILDING_THRESHOLD, help="building threshold in [0,1]")
    p.add_argument("--footprint-long", type=int, default=DEFAULT_FOOTPRINT_LONG, help="minimum footprint long side (default: 5)")
    p.add_argument("--footprint-short", type=int, default=DEFAULT_FOOTPRINT_SHORT, help="minimum footprint short side (default: 3)")
    p.add_argument("--noise", choices=["perlin", "simplex"], default=DEFAULT_NOISE, help="base noise (perlin or simplex)")
    p.add_argument("--speed", type=float, default=DEFAULT_MOVE_SPEED, help="observer speed (tiles / sec)")
    p.add_argument("--direction", type=_direction, default=DEFAULT_DIRECTION, help="walk direction DX,DY (default: 1,0)")
    p.add_argument("--ticks", type=int, default=DEFAULT_TICKS, help="number of simulation ticks")
    p.add_argument("--dt", type=float, default=DEFAULT_DT, help="seconds per tick")
    p.add_argument("--workers", type=int, default=DEFAULT_WORKERS, help="chunk generation threads (0 = one per core)")
    p.add_argument("--ascii", action="store_true", help="print an ASCII map around the observer at the end")
    p.add_argument("--debug", action="store_true", help="debug logs")
    return p.parse_args(argv)

def main(argv: list[str] | None = None) -> None:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="[chunkscape] %(levelname)s %(name)s: %(message)s",
    )
    if isinstance(args.seed, str) and args.seed.lower() == "random":
        seed = random.randint(0, 2**31 - 1)
    else:
        seed = int(args.seed)

    try:
        params = TerrainParams(
            chunk_size=int(args.chunk_size),
            chunk_load_radius=int(args.radius),
            noise_scale=float(args.noise_scale),
            seed=seed,
            noise_offset=(float(args.offset_x), float(args.offset_y)),
            building_threshold=float(args.threshold),
            footprint_long=int(args.footprint_long),
            footprint_short=int(args.footprint_short),
            noise_mode=str(args.noise),
        )
    except ConfigurationError as e:
        raise SystemExit(f"chunkscape: {e}") from e

    run_app(
        params=params,
        speed=float(args.speed),
        direction=args.direction,
        ticks=int(args.ticks),
        dt=float(args.dt),
        workers=int(args.workers),
        ascii_map=bool(args.ascii),
    )

if __name__ == "__main__":
    main()
