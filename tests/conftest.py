"""Pytest configuration and fixtures."""

from __future__ import annotations

import pytest

from weather_world.engine import (
    AdjacencyMatrix,
    StateCatalog,
    TransitionRouter,
    WeatherConfig,
    WeatherController,
)
from weather_world.types import BiomeProfile, WeatherType


@pytest.fixture
def catalog() -> StateCatalog:
    """Create the shipped state catalog."""
    return StateCatalog.default()


@pytest.fixture
def adjacency() -> AdjacencyMatrix:
    """Create the shipped adjacency matrix."""
    return AdjacencyMatrix.default()


@pytest.fixture
def router(adjacency) -> TransitionRouter:
    """Create a router over the shipped tables."""
    return TransitionRouter.default(adjacency)


@pytest.fixture
def fast_config() -> WeatherConfig:
    """One second per hop, so quarter-second ticks land exactly on hop ends."""
    return WeatherConfig(transition_duration=1.0)


@pytest.fixture
def controller(catalog, router, fast_config) -> WeatherController:
    """Create a controller starting clear."""
    return WeatherController(catalog, router, fast_config, initial_state=WeatherType.CLEAR)


@pytest.fixture
def converge():
    """Tick a controller until its plan is walked."""

    def run(controller: WeatherController, dt: float = 0.25, max_ticks: int = 10_000):
        for _ in range(max_ticks):
            frame = controller.tick(dt)
            if controller.is_converged:
                return frame
        raise AssertionError(f"Controller did not converge on {controller.target_state}")

    return run


@pytest.fixture
def quick_biome() -> BiomeProfile:
    """A biome that resamples every few seconds."""
    return BiomeProfile(
        id="quick",
        weights={
            WeatherType.CLEAR: 0.4,
            WeatherType.CLOUDY: 0.3,
            WeatherType.RAIN: 0.2,
            WeatherType.STORM: 0.1,
        },
        dwell_minutes=(0.0, 0.05),
    )
