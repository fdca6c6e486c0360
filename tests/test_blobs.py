import numpy as np

from chunkscape.world.blobs import extract_blobs


def _grid(size=16):
    return np.zeros((size, size), dtype=bool)


def _connected(blob):
    cells = set(blob)
    start = blob[0]
    seen = {start}
    stack = [start]
    while stack:
        x, y = stack.pop()
        for n in ((x + 1, y), (x - 1, y), (x, y + 1), (x, y - 1)):
            if n in cells and n not in seen:
                seen.add(n)
                stack.append(n)
    return seen == cells


def test_empty_grid_has_no_blobs():
    assert extract_blobs(_grid()) == []


def test_single_block():
    occ = _grid()
    occ[2:7, 4:7] = True
    blobs = extract_blobs(occ)
    assert len(blobs) == 1
    assert len(blobs[0]) == 15


def test_diagonal_cells_are_separate():
    occ = _grid(4)
    occ[0, 0] = True
    occ[1, 1] = True
    blobs = extract_blobs(occ)
    assert len(blobs) == 2
    assert sorted(len(b) for b in blobs) == [1, 1]


def test_l_shape_is_one_blob():
    occ = _grid()
    occ[0:6, 0] = True
    occ[5, 0:6] = True
    blobs = extract_blobs(occ)
    assert len(blobs) == 1
    assert len(blobs[0]) == 11


def test_blobs_partition_true_cells():
    rng = np.random.default_rng(3)
    for _ in range(20):
        occ = rng.random((16, 16)) > 0.45
        blobs = extract_blobs(occ)
        cells = [c for b in blobs for c in b]
        assert len(cells) == len(set(cells))
        assert set(cells) == {(int(x), int(y)) for x, y in zip(*np.nonzero(occ))}
        for b in blobs:
            assert b
            assert all(occ[x, y] for x, y in b)
            assert _connected(b)


def test_full_grid_is_one_blob():
    occ = np.ones((16, 16), dtype=bool)
    blobs = extract_blobs(occ)
    assert len(blobs) == 1
    assert len(blobs[0]) == 256
