"""Error types raised by the weather state machine."""

from __future__ import annotations

from typing import Any


class WeatherError(Exception):
    """Base class for all weather state machine errors."""


class ConfigurationError(WeatherError, ValueError):
    """Static weather tables or settings are invalid.

    Raised at load time. A state machine is never built from a
    configuration that fails validation.
    """


class UnknownStateError(WeatherError, KeyError):
    """A weather state identifier is not in the catalog."""

    def __init__(self, state_id: Any):
        self.state_id = state_id
        super().__init__(state_id)

    def __str__(self) -> str:
        return f"Unknown weather state: {self.state_id!r}"


class InvalidTickError(WeatherError, ValueError):
    """A tick was requested with a negative or non-finite delta time."""
