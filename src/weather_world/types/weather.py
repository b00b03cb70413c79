"""Weather state types."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

import numpy as np

from .errors import ConfigurationError, UnknownStateError


class WeatherType(str, Enum):
    """The twelve named weather conditions, in table column order."""

    CLEAR = "clear"
    CLOUDY = "cloudy"
    FOG = "fog"
    DRIZZLE = "drizzle"
    RAIN = "rain"
    HEAVY_RAIN = "heavyRain"
    STORM = "storm"
    LIGHT_SNOW = "lightSnow"
    SNOW = "snow"
    BLIZZARD = "blizzard"
    DUSTY = "dusty"
    SANDSTORM = "sandstorm"

    def __str__(self) -> str:
        return self.value

    @property
    def index(self) -> int:
        """Column index of this state in the adjacency grid."""
        return _WEATHER_INDEX[self]

    @classmethod
    def parse(cls, value: Any) -> "WeatherType":
        """Coerce a name or member into a WeatherType.

        Raises:
            UnknownStateError: If the value names no weather state.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except (ValueError, TypeError):
            raise UnknownStateError(value) from None


_WEATHER_INDEX: dict[WeatherType, int] = {w: i for i, w in enumerate(WeatherType)}


class PrecipitationKind(str, Enum):
    """Particle family a renderer should emit."""

    NONE = "none"
    RAIN = "rain"
    SNOW = "snow"
    DUST = "dust"

    def __str__(self) -> str:
        return self.value


class TransitionKind(Enum):
    """Physical plausibility of a direct transition."""

    NATURAL = 0
    ABRUPT = 1
    FORBIDDEN = 2


# Inclusive bounds for every numeric parameter
PARAMETER_RANGES: dict[str, tuple[float, float]] = {
    "precipitation_intensity": (0.0, 1.0),
    "haze_density": (0.0, 0.05),
    "discharge_frequency": (0.0, 1.0),
    "sky_darkness": (0.0, 1.0),
    "wind_multiplier": (0.0, 3.0),
}

NUMERIC_FIELDS: tuple[str, ...] = tuple(PARAMETER_RANGES)


@dataclass(frozen=True)
class WeatherParameters:
    """Normalized parameter vector describing one weather condition."""

    precipitation_kind: PrecipitationKind = PrecipitationKind.NONE
    precipitation_intensity: float = 0.0
    haze_density: float = 0.0  # Exponential fog coefficient
    discharge_frequency: float = 0.0
    sky_darkness: float = 0.0
    wind_multiplier: float = 1.0

    def __post_init__(self) -> None:
        if not isinstance(self.precipitation_kind, PrecipitationKind):
            try:
                kind = PrecipitationKind(self.precipitation_kind)
            except ValueError:
                raise ConfigurationError(
                    f"Unknown precipitation kind: {self.precipitation_kind!r}"
                ) from None
            object.__setattr__(self, "precipitation_kind", kind)

        for name, (low, high) in PARAMETER_RANGES.items():
            value = getattr(self, name)
            if not isinstance(value, (int, float)) or not math.isfinite(value):
                raise ConfigurationError(f"{name} must be a finite number, got {value!r}")
            if not low <= value <= high:
                raise ConfigurationError(
                    f"{name}={value} outside [{low}, {high}]"
                )

    def as_dict(self) -> dict[str, Any]:
        """Flatten to the dictionary shape renderers consume."""
        return {
            "precipitation_kind": self.precipitation_kind.value,
            "precipitation_intensity": self.precipitation_intensity,
            "haze_density": self.haze_density,
            "discharge_frequency": self.discharge_frequency,
            "sky_darkness": self.sky_darkness,
            "wind_multiplier": self.wind_multiplier,
        }


@dataclass(frozen=True)
class RenderHints:
    """Opaque rendering payload carried through the state machine untouched."""

    sky_color: tuple[int, int, int] = (135, 185, 235)
    precipitation_color: tuple[int, int, int] = (200, 210, 230)
    particle_size: float = 1.0
    streak_length: float = 0.0


@dataclass(frozen=True)
class WeatherState:
    """Immutable catalog entry for a weather condition."""

    id: WeatherType
    parameters: WeatherParameters
    hints: RenderHints = field(default_factory=RenderHints)


@dataclass(frozen=True)
class Via:
    """Route entry that expands to the route from the current position to `destination`."""

    destination: WeatherType

    def __post_init__(self) -> None:
        try:
            object.__setattr__(self, "destination", WeatherType.parse(self.destination))
        except UnknownStateError:
            raise ConfigurationError(
                f"Route alias references unknown state {self.destination!r}"
            ) from None


@dataclass(frozen=True)
class TransitionPlan:
    """Ordered hop path from a source state to a destination state."""

    source: WeatherType
    destination: WeatherType
    hops: tuple[WeatherType, ...]
    degraded: bool = False  # Forbidden pair with no registered route

    def __post_init__(self) -> None:
        if not self.hops:
            raise ConfigurationError(
                f"Empty transition plan {self.source} -> {self.destination}"
            )
        if self.hops[-1] != self.destination:
            raise ConfigurationError(
                f"Plan {self.source} -> {self.destination} ends at {self.hops[-1]}"
            )

    def __len__(self) -> int:
        return len(self.hops)

    def __iter__(self):
        return iter(self.hops)

    @property
    def pairs(self) -> list[tuple[WeatherType, WeatherType]]:
        """Consecutive (from, to) legs including the leg out of the source."""
        path = (self.source,) + self.hops
        return list(zip(path, path[1:]))


@dataclass
class TransitionCursor:
    """Mutable interpolation position owned by a WeatherController."""

    current_state: WeatherType
    target_state: WeatherType
    origin: WeatherParameters
    progress: float = 1.0
    remaining_plan: list[WeatherType] = field(default_factory=list)
    # Live crossfade captured at a mid-hop retarget; None derives from origin
    origin_layers: Optional[dict[PrecipitationKind, float]] = None

    @property
    def is_converged(self) -> bool:
        """True once every hop has been walked."""
        return not self.remaining_plan and self.progress >= 1.0

    @property
    def next_state(self) -> Optional[WeatherType]:
        """The state the current hop is blending towards."""
        return self.remaining_plan[0] if self.remaining_plan else None


@dataclass(frozen=True)
class WindForce:
    """Wind force vector (y is up)."""

    x: float
    y: float
    z: float

    @classmethod
    def from_array(cls, values: np.ndarray) -> "WindForce":
        """Create from a length-3 array."""
        return cls(float(values[0]), float(values[1]), float(values[2]))

    def as_array(self) -> np.ndarray:
        """Return as a numpy vector."""
        return np.array([self.x, self.y, self.z], dtype=float)

    @property
    def magnitude(self) -> float:
        """Length of the force vector."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)


@dataclass(frozen=True)
class WeatherFrame:
    """Live output of one controller tick."""

    parameters: WeatherParameters
    wind: WindForce
    current_state: WeatherType
    target_state: WeatherType
    progress: float
    precipitation_layers: dict[PrecipitationKind, float] = field(default_factory=dict)
    hints: RenderHints = field(default_factory=RenderHints)  # Of the dominant endpoint

    def as_dict(self) -> dict[str, Any]:
        """Flatten parameters and wind for renderers."""
        data = self.parameters.as_dict()
        data["wind"] = {"x": self.wind.x, "y": self.wind.y, "z": self.wind.z}
        return data

