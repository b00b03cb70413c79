"""Main application package."""

from __future__ import annotations

from .game_loop import WeatherLoop

__all__ = [
    "WeatherLoop",
]
