"""Weather state machine engine."""

from __future__ import annotations

from .catalog import StateCatalog
from .adjacency import AdjacencyMatrix
from .router import TransitionRouter, MAX_ROUTE_DEPTH
from .interpolation import (
    InterpolationEngine,
    blend,
    crossfade_layers,
    precipitation_layers,
    steady_layers,
)
from .config import WeatherConfig
from .controller import WeatherController

__all__ = [
    "StateCatalog",
    "AdjacencyMatrix",
    "TransitionRouter",
    "MAX_ROUTE_DEPTH",
    "InterpolationEngine",
    "blend",
    "precipitation_layers",
    "crossfade_layers",
    "steady_layers",
    "WeatherConfig",
    "WeatherController",
]
