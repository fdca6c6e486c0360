from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from chunkscape.config import DEFAULT_MOVE_SPEED
from chunkscape.util.math import normalize


def movement_velocity(dx: float, dy: float, speed: float) -> tuple[float, float]:
    """Unit direction times speed; no input gives zero velocity."""
    d = normalize(np.array([dx, dy], dtype=np.float64))
    return float(d[0] * speed), float(d[1] * speed)


@dataclass
class Observer:
    """Position the chunk store follows. Moving it is up to the host."""

    x: float = 0.0
    y: float = 0.0
    speed: float = DEFAULT_MOVE_SPEED

    def velocity(self, dx: float, dy: float) -> tuple[float, float]:
        return movement_velocity(dx, dy, self.speed)

    def advance(self, vx: float, vy: float, dt: float) -> None:
        self.x += vx * dt
        self.y += vy * dt

    @property
    def position(self) -> tuple[float, float]:
        return self.x, self.y
