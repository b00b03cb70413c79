"""Wind model producing a gusting, turbulent force vector."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np

from weather_world.types import ConfigurationError, WindForce

UP = np.array([0.0, 1.0, 0.0])

# Fraction of base speed a full gust adds on top
GUST_SHARE = 0.6


@dataclass
class WindState:
    """Mutable wind conditions."""

    direction: np.ndarray  # Unit vector, y is up
    base_speed: float
    gust_speed: float = 0.0
    turbulence: float = 0.15
    phase: float = 0.0  # Seconds of wind clock


class WindModel:
    """Periodic gust and turbulence model around a prevailing direction."""

    def __init__(
        self,
        direction: Sequence[float] = (1.0, 0.0, 0.0),
        base_speed: float = 4.0,
        turbulence: float = 0.15,
        gust_frequency: float = 0.35,
    ):
        """Initialize the wind model.

        Args:
            direction: Prevailing direction, normalized on load.
            base_speed: Speed before gusts.
            turbulence: Turbulence amplitude as a fraction of base speed.
            gust_frequency: Radians of gust cycle per second.
        """
        vector = np.asarray(direction, dtype=float)
        norm = float(np.linalg.norm(vector)) if vector.shape == (3,) else 0.0
        if not math.isfinite(norm) or norm == 0.0:
            raise ConfigurationError(f"Wind direction must be a non-zero 3-vector, got {direction}")

        self.state = WindState(
            direction=vector / norm,
            base_speed=max(0.0, base_speed),
            turbulence=turbulence,
        )
        self._gust_frequency = gust_frequency

        side = np.cross(self.state.direction, UP)
        side_norm = float(np.linalg.norm(side))
        # Vertical wind has no horizontal perpendicular; fall back to x
        self._side = side / side_norm if side_norm > 1e-9 else np.array([1.0, 0.0, 0.0])
        self._refresh_gust()

    def tick(self, dt: float) -> None:
        """Advance the wind clock.

        Args:
            dt: Delta time in seconds.
        """
        self.state.phase += dt
        self._refresh_gust()

    def set_base_speed(self, speed: float) -> None:
        """Override the base speed (driven by the weather controller)."""
        self.state.base_speed = max(0.0, speed)
        self._refresh_gust()

    def gust_envelope(self, phase: Optional[float] = None) -> float:
        """Smooth periodic gust strength in [0, 1]."""
        if phase is None:
            phase = self.state.phase
        return 0.5 * (1.0 + math.sin(phase * self._gust_frequency))

    def turbulence_vector(self, phase: Optional[float] = None) -> np.ndarray:
        """Small perturbation across and above the prevailing direction."""
        if phase is None:
            phase = self.state.phase
        amplitude = self.state.turbulence * self.state.base_speed
        return amplitude * (
            self._side * math.sin(1.7 * phase) + UP * 0.5 * math.cos(2.3 * phase)
        )

    def force(self) -> WindForce:
        """Current wind force vector."""
        speed = self.state.base_speed + self.state.gust_speed
        return WindForce.from_array(self.state.direction * speed + self.turbulence_vector())

    def _refresh_gust(self) -> None:
        self.state.gust_speed = self.gust_envelope() * self.state.base_speed * GUST_SHARE
