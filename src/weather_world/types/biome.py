"""Biome profile types."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Mapping

from .errors import ConfigurationError, UnknownStateError
from .weather import WeatherType

WEIGHT_TOLERANCE = 1e-6


@dataclass(frozen=True)
class BiomeProfile:
    """Weather distribution and dwell range for an environment archetype."""

    id: str
    weights: Mapping[WeatherType, float]
    dwell_minutes: tuple[float, float]  # Inclusive min/max between resamples

    def __post_init__(self) -> None:
        normalized: dict[WeatherType, float] = {}
        for state_id, weight in self.weights.items():
            try:
                state = WeatherType.parse(state_id)
            except UnknownStateError:
                raise ConfigurationError(
                    f"Biome {self.id!r} weights unknown state {state_id!r}"
                ) from None
            if not isinstance(weight, (int, float)) or not math.isfinite(weight) or weight < 0:
                raise ConfigurationError(
                    f"Biome {self.id!r} has invalid weight {weight!r} for {state}"
                )
            normalized[state] = float(weight)

        total = sum(normalized.values())
        if not math.isclose(total, 1.0, abs_tol=WEIGHT_TOLERANCE):
            raise ConfigurationError(
                f"Biome {self.id!r} weights sum to {total:.6f}, expected 1"
            )

        low, high = self.dwell_minutes
        if low < 0 or high < low:
            raise ConfigurationError(
                f"Biome {self.id!r} has invalid dwell range {self.dwell_minutes}"
            )

        # Keep a stable column order regardless of how weights were authored
        ordered = {w: normalized[w] for w in WeatherType if w in normalized}
        object.__setattr__(self, "weights", ordered)
        object.__setattr__(self, "dwell_minutes", (float(low), float(high)))

    @property
    def states(self) -> list[WeatherType]:
        """States with a non-zero weight."""
        return [state for state, weight in self.weights.items() if weight > 0]

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "BiomeProfile":
        """Create from a dictionary with string state names."""
        try:
            dwell = data["dwell_minutes"]
            return cls(
                id=data["id"],
                weights=dict(data["weights"]),
                dwell_minutes=(dwell[0], dwell[1]),
            )
        except (KeyError, IndexError, TypeError) as e:
            raise ConfigurationError(f"Malformed biome profile: {e}") from e
