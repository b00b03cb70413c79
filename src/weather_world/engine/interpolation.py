"""Interpolation engine for weather transitions."""

from __future__ import annotations

import logging
from typing import Mapping

from weather_world.types import (
    NUMERIC_FIELDS,
    PrecipitationKind,
    TransitionCursor,
    WeatherParameters,
)

from .catalog import StateCatalog

logger = logging.getLogger(__name__)

# Progress at which the active precipitation kind switches
KIND_SWITCH_PROGRESS = 0.5


def blend(start: WeatherParameters, end: WeatherParameters, t: float) -> WeatherParameters:
    """Linearly blend two parameter vectors.

    Numeric fields are interpolated and clamped to the span of their
    endpoints. Precipitation kind switches to ``end``'s at the midpoint.

    Args:
        start: Vector at t=0.
        end: Vector at t=1.
        t: Blend factor, clamped to [0, 1].

    Returns:
        The blended vector.
    """
    t = min(max(t, 0.0), 1.0)
    values = {}
    for name in NUMERIC_FIELDS:
        a = getattr(start, name)
        b = getattr(end, name)
        value = a * (1.0 - t) + b * t
        values[name] = min(max(value, min(a, b)), max(a, b))

    kind = end.precipitation_kind if t >= KIND_SWITCH_PROGRESS else start.precipitation_kind
    return WeatherParameters(precipitation_kind=kind, **values)


def precipitation_layers(
    start: WeatherParameters,
    end: WeatherParameters,
    t: float,
) -> dict[PrecipitationKind, float]:
    """Per-kind intensities for renderers that crossfade particle systems.

    When both endpoints share a kind this is the plain blended intensity.
    Otherwise the outgoing kind fades out while the incoming one fades in.
    """
    return crossfade_layers(steady_layers(start), end, t)


def steady_layers(params: WeatherParameters) -> dict[PrecipitationKind, float]:
    """Layers of a single parameter vector at rest."""
    if params.precipitation_kind is PrecipitationKind.NONE:
        return {}
    return {params.precipitation_kind: params.precipitation_intensity}


def crossfade_layers(
    origin_layers: Mapping[PrecipitationKind, float],
    end: WeatherParameters,
    t: float,
) -> dict[PrecipitationKind, float]:
    """Fade a set of layers out while ``end``'s kind fades in.

    Args:
        origin_layers: Per-kind intensities at t=0.
        end: Vector at t=1.
        t: Blend factor, clamped to [0, 1].

    Returns:
        Per-kind intensities at t.
    """
    t = min(max(t, 0.0), 1.0)
    layers = {kind: value * (1.0 - t) for kind, value in origin_layers.items()}
    if end.precipitation_kind is not PrecipitationKind.NONE:
        kind = end.precipitation_kind
        layers[kind] = layers.get(kind, 0.0) + end.precipitation_intensity * t
    return layers


class InterpolationEngine:
    """Walks a TransitionCursor along its plan, one hop at a time."""

    def __init__(self, catalog: StateCatalog):
        """Initialize the engine.

        Args:
            catalog: Source of each state's parameter vector.
        """
        self._catalog = catalog

    def live_parameters(self, cursor: TransitionCursor) -> WeatherParameters:
        """Parameter vector at the cursor's current position, without advancing."""
        if not cursor.remaining_plan:
            return self._catalog.lookup(cursor.current_state).parameters
        end = self._catalog.lookup(cursor.remaining_plan[0]).parameters
        return blend(cursor.origin, end, cursor.progress)

    def layers(self, cursor: TransitionCursor) -> dict[PrecipitationKind, float]:
        """Precipitation layers at the cursor's current position."""
        if not cursor.remaining_plan:
            return steady_layers(self._catalog.lookup(cursor.current_state).parameters)
        end = self._catalog.lookup(cursor.remaining_plan[0]).parameters
        if cursor.origin_layers is not None:
            return crossfade_layers(cursor.origin_layers, end, cursor.progress)
        return precipitation_layers(cursor.origin, end, cursor.progress)

    def advance(self, cursor: TransitionCursor, dt: float, speed: float) -> WeatherParameters:
        """Advance the cursor and return the live parameter vector.

        A speed of zero or less leaves progress where it is; the
        transition then never completes.

        Args:
            cursor: Cursor to mutate.
            dt: Delta time in seconds.
            speed: Progress per second (1 / hop duration).

        Returns:
            The live parameter vector after advancing.
        """
        if cursor.is_converged:
            return self._catalog.lookup(cursor.current_state).parameters

        if not cursor.remaining_plan:
            # Plan already walked but progress was reset externally
            cursor.progress = 1.0
            return self._catalog.lookup(cursor.current_state).parameters

        if speed > 0 and dt > 0:
            cursor.progress = min(1.0, cursor.progress + dt * speed)

        live = self.live_parameters(cursor)

        if cursor.progress >= 1.0:
            reached = cursor.remaining_plan.pop(0)
            cursor.current_state = reached
            cursor.origin = self._catalog.lookup(reached).parameters
            cursor.origin_layers = None
            if cursor.remaining_plan:
                cursor.progress = 0.0
                logger.debug(
                    "Reached %s, continuing to %s", reached, cursor.remaining_plan[0]
                )
            else:
                logger.debug("Transition to %s complete", reached)

        return live
