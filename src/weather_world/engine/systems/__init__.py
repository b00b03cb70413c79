"""Per-tick systems driven by the weather controller."""

from __future__ import annotations

from .wind import WindModel, WindState
from .biome_scheduler import BiomeScheduler

__all__ = [
    "WindModel",
    "WindState",
    "BiomeScheduler",
]
