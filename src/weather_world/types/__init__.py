"""Type definitions for Weather World."""

from .errors import (
    WeatherError,
    ConfigurationError,
    UnknownStateError,
    InvalidTickError,
)
from .weather import (
    WeatherType,
    PrecipitationKind,
    TransitionKind,
    WeatherParameters,
    RenderHints,
    WeatherState,
    Via,
    TransitionPlan,
    TransitionCursor,
    WindForce,
    WeatherFrame,
    PARAMETER_RANGES,
    NUMERIC_FIELDS,
)
from .biome import BiomeProfile

__all__ = [
    # Errors
    "WeatherError",
    "ConfigurationError",
    "UnknownStateError",
    "InvalidTickError",
    # Weather
    "WeatherType",
    "PrecipitationKind",
    "TransitionKind",
    "WeatherParameters",
    "RenderHints",
    "WeatherState",
    "Via",
    "TransitionPlan",
    "TransitionCursor",
    "WindForce",
    "WeatherFrame",
    "PARAMETER_RANGES",
    "NUMERIC_FIELDS",
    # Biomes
    "BiomeProfile",
]
