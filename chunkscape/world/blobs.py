from __future__ import annotations

from collections import deque

import numpy as np

# up, down, left, right (no diagonals)
_NEIGHBOURS = ((0, 1), (0, -1), (-1, 0), (1, 0))


def extract_blobs(occupancy: np.ndarray) -> list[list[tuple[int, int]]]:
    """Split the true cells of a 2D bool grid into 4-connected blobs (BFS flood fill).

    Every true cell lands in exactly one blob; false cells in none. Discovery
    order and the order of cells inside a blob are not part of the contract.
    """
    occ = np.asarray(occupancy, dtype=bool)
    size_x, size_y = occ.shape
    visited = np.zeros_like(occ)
    blobs: list[list[tuple[int, int]]] = []

    for x in range(size_x):
        for y in range(size_y):
            if not occ[x, y] or visited[x, y]:
                continue
            blob: list[tuple[int, int]] = []
            q: deque[tuple[int, int]] = deque([(x, y)])
            visited[x, y] = True
            while q:
                px, py = q.popleft()
                blob.append((px, py))
                for dx, dy in _NEIGHBOURS:
                    nx, ny = px + dx, py + dy
                    if 0 <= nx < size_x and 0 <= ny < size_y and occ[nx, ny] and not visited[nx, ny]:
                        visited[nx, ny] = True
                        q.append((nx, ny))
            blobs.append(blob)
    return blobs
