"""Biome scheduler picking successive weather states over time."""

from __future__ import annotations

import bisect
import logging
import math
import numbers
import random
from itertools import accumulate
from typing import TYPE_CHECKING, Optional

from weather_world.types import BiomeProfile, InvalidTickError, WeatherType

if TYPE_CHECKING:
    from weather_world.engine.controller import WeatherController

logger = logging.getLogger(__name__)


class BiomeScheduler:
    """Periodically samples a biome's weather distribution and requests it."""

    def __init__(
        self,
        controller: WeatherController,
        profile: BiomeProfile,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
    ):
        """Initialize the scheduler.

        Args:
            controller: Controller that receives state requests.
            profile: Biome distribution and dwell range.
            rng: Random source. Built from ``seed`` when omitted.
            seed: Seed for a fresh random source.
        """
        self._controller = controller
        self._profile = profile
        self._rng = rng or random.Random(seed)
        # Zero-weight states get no bucket at all
        self._states = profile.states
        cumulative = list(accumulate(profile.weights[s] for s in self._states))
        # Absorb float drift below 1.0 into the last non-empty bucket
        cumulative[-1] = max(cumulative[-1], 1.0)
        self._cumulative = cumulative
        self.requests: list[WeatherType] = []
        self._countdown = self._draw_dwell()

    @property
    def profile(self) -> BiomeProfile:
        """The biome being scheduled."""
        return self._profile

    @property
    def countdown(self) -> float:
        """Seconds until the next resample."""
        return self._countdown

    def sample(self) -> WeatherType:
        """Draw a state from the biome distribution.

        Uses cumulative-weight inversion on a uniform [0, 1) draw.
        """
        u = self._rng.random()
        return self._states[bisect.bisect_right(self._cumulative, u)]

    def tick(self, dt: float) -> Optional[WeatherType]:
        """Advance the dwell countdown.

        Args:
            dt: Delta time in seconds.

        Returns:
            The state requested on this tick, if any.

        Raises:
            InvalidTickError: If dt is negative or not finite.
        """
        if (
            isinstance(dt, bool)
            or not isinstance(dt, numbers.Real)
            or not math.isfinite(dt)
            or dt < 0
        ):
            raise InvalidTickError(f"Invalid tick delta: {dt!r}")
        dt = float(dt)

        self._countdown -= dt
        if self._countdown > 0:
            return None

        requested = None
        drawn = self.sample()
        if drawn != self._controller.target_state:
            self._controller.set_state(drawn)
            self.requests.append(drawn)
            requested = drawn
            logger.debug("Biome %s requested %s", self._profile.id, drawn)

        self._countdown = self._draw_dwell()
        return requested

    def _draw_dwell(self) -> float:
        low, high = self._profile.dwell_minutes
        return self._rng.uniform(low, high) * 60.0
