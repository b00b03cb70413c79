"""Weather controller configuration."""

from __future__ import annotations

import math
from dataclasses import dataclass, fields
from typing import Any, Mapping

from weather_world.types import ConfigurationError


@dataclass
class WeatherConfig:
    """Configuration for a weather controller."""

    transition_duration: float = 2.5  # Seconds per hop
    base_wind_speed: float = 4.0
    wind_direction: tuple[float, float, float] = (1.0, 0.0, 0.0)
    turbulence: float = 0.15
    gust_frequency: float = 0.35  # Radians of gust cycle per second
    strict_routes: bool = False

    def __post_init__(self) -> None:
        if not math.isfinite(self.transition_duration) or self.transition_duration <= 0:
            raise ConfigurationError(
                f"transition_duration must be positive, got {self.transition_duration}"
            )
        for name in ("base_wind_speed", "turbulence", "gust_frequency"):
            value = getattr(self, name)
            if not math.isfinite(value) or value < 0:
                raise ConfigurationError(f"{name} must be non-negative, got {value}")
        if len(self.wind_direction) != 3:
            raise ConfigurationError(
                f"wind_direction must have 3 components, got {self.wind_direction}"
            )
        self.wind_direction = tuple(float(c) for c in self.wind_direction)

    @property
    def speed(self) -> float:
        """Interpolation progress per second."""
        return 1.0 / self.transition_duration

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "WeatherConfig":
        """Create from a dictionary, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})
