"""Procedural lightning bolt geometry."""

from __future__ import annotations

from typing import Sequence

import numpy as np


def generate_bolt(
    seed: int,
    depth: int = 5,
    jitter: float = 0.25,
    start: Sequence[float] = (0.5, 0.0),
    end: Sequence[float] = (0.5, 1.0),
) -> np.ndarray:
    """Generate a jagged bolt polyline by midpoint displacement.

    Each level splits every segment and pushes its midpoint sideways by a
    random offset. The offset range halves per level. Pure: the same
    arguments always give the same points.

    Args:
        seed: Random seed.
        depth: Subdivision levels. The result has ``2**depth + 1`` points.
        jitter: Initial offset range as a fraction of the bolt length.
        start: First point (x, y).
        end: Last point (x, y).

    Returns:
        Array of shape (2**depth + 1, 2).
    """
    if depth < 0:
        raise ValueError(f"depth must be non-negative, got {depth}")

    rng = np.random.default_rng(seed)
    points = np.array([start, end], dtype=float)
    offset = jitter * float(np.linalg.norm(points[1] - points[0]))

    for _ in range(depth):
        a, b = points[:-1], points[1:]
        segment = b - a
        normal = np.stack([-segment[:, 1], segment[:, 0]], axis=1)
        lengths = np.linalg.norm(normal, axis=1, keepdims=True)
        normal = np.divide(normal, lengths, out=np.zeros_like(normal), where=lengths > 0)

        midpoints = (a + b) / 2 + normal * rng.uniform(-offset, offset, size=(len(a), 1))

        merged = np.empty((len(points) + len(midpoints), 2))
        merged[0::2] = points
        merged[1::2] = midpoints
        points = merged
        offset *= 0.5

    return points
