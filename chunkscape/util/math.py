from __future__ import annotations
import numpy as np

def normalize(v: np.ndarray) -> np.ndarray:
    n = np.linalg.norm(v)
    if n == 0:
        return v
    return v / n

def floor_div_coord(x: float, y: float, size: int) -> tuple[int, int]:
    """World position -> chunk coordinate (floor division, works for negatives)."""
    return int(np.floor(x / size)), int(np.floor(y / size))

def to_gradient_index(values: np.ndarray, levels: int = 256) -> np.ndarray:
    """Scale [0,1] values to integer shade indices in [0, levels-1].

    Rounds half to even, like the integer rounding of the engine the tiles were
    first tuned in.
    """
    top = levels - 1
    return np.clip(np.rint(np.asarray(values, dtype=np.float64) * top), 0, top).astype(np.uint8)
