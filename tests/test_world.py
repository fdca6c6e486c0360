from chunkscape.config import BUILDING_COLOR
from chunkscape.world.chunk import TileKind, TilePaint
from chunkscape.world.params import TerrainParams
from chunkscape.world.view import TileMapView, tile_color
from chunkscape.world.world import TerrainWorld


def _world(radius=1, **kw):
    view = TileMapView()
    return TerrainWorld(TerrainParams(chunk_size=16, chunk_load_radius=radius, **kw), view), view


def test_update_paints_every_loaded_tile():
    world, view = _world()
    world.update(0.0, 0.0)
    assert len(view) == 9 * 256
    assert view.tile_at(-16, -16) is not None
    assert view.tile_at(47, 0) is None


def test_update_clears_evicted_tiles():
    world, view = _world()
    world.update(0.0, 0.0)
    world.update(16.0, 0.0)
    assert len(view) == 9 * 256
    assert all(view.tile_at(x, 0) is None for x in range(-16, 0))
    assert all(view.tile_at(x, 0) is not None for x in range(32, 48))


def test_repeat_update_does_not_repaint():
    world, view = _world()
    world.update(0.0, 0.0)
    view.tiles.clear()
    assert not world.update(4.0, 4.0)
    assert len(view) == 0


def test_view_matches_chunk_classification():
    world, view = _world(radius=0)
    delta = world.update(0.0, 0.0)
    (chunk,) = delta.loaded
    for x in range(16):
        for y in range(16):
            t = view.tile_at(x, y)
            if chunk.building[x, y]:
                assert t.kind is TileKind.BUILDING and t.gradient is None
            else:
                assert t.kind is TileKind.TERRAIN and t.gradient == int(chunk.gradient[x, y])


def test_chunk_bounds():
    world, _ = _world()
    world.update(0.0, 0.0)
    bounds = world.chunk_bounds()
    assert len(bounds) == 9
    assert (0, 0, 16, 16) in bounds
    assert (-16, -16, 0, 0) in bounds


def test_world_without_view():
    world = TerrainWorld(TerrainParams(chunk_load_radius=0))
    assert len(world.update(0.0, 0.0).loaded) == 1


def test_tile_color():
    assert tile_color(TilePaint((0, 0), TileKind.BUILDING, None)) == BUILDING_COLOR
    assert tile_color(TilePaint((0, 0), TileKind.TERRAIN, 255)) == (1.0, 1.0, 1.0)
    assert tile_color(TilePaint((0, 0), TileKind.TERRAIN, 0)) == (0.0, 0.0, 0.0)


def test_render_ascii():
    view = TileMapView()
    view.paint([
        TilePaint((0, 0), TileKind.BUILDING, None),
        TilePaint((1, 0), TileKind.TERRAIN, 255),
        TilePaint((0, 1), TileKind.TERRAIN, 0),
    ])
    text = view.render_ascii(0, 0, 3, 2, marker=(2, 1))
    assert text.splitlines() == [" ?P", "#@?"]
