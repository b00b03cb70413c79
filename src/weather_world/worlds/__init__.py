"""Static weather tables and biome package."""

from __future__ import annotations

from .weather_tables import (
    CATALOG_ENTRIES,
    ADJACENCY_ROWS,
    REGISTERED_ROUTES,
)
from .biomes import BIOME_PROFILES
from .biome_loader import BiomeLoader

__all__ = [
    "CATALOG_ENTRIES",
    "ADJACENCY_ROWS",
    "REGISTERED_ROUTES",
    "BIOME_PROFILES",
    "BiomeLoader",
]
