"""Weather controller: the facade rendering collaborators talk to."""

from __future__ import annotations

import logging
import math
import numbers
from typing import Any, Callable, Optional

from weather_world.types import (
    InvalidTickError,
    TransitionCursor,
    WeatherFrame,
    WeatherParameters,
    WeatherType,
)

from .catalog import StateCatalog
from .config import WeatherConfig
from .interpolation import KIND_SWITCH_PROGRESS, InterpolationEngine
from .router import TransitionRouter
from .systems.wind import WindModel

logger = logging.getLogger(__name__)


class WeatherController:
    """Holds the transition cursor and wind, and produces a frame per tick."""

    def __init__(
        self,
        catalog: StateCatalog,
        router: TransitionRouter,
        config: Optional[WeatherConfig] = None,
        initial_state: Any = WeatherType.CLEAR,
    ):
        """Initialize the controller.

        Args:
            catalog: Shared read-only state catalog.
            router: Shared read-only transition router.
            config: Optional configuration.
            initial_state: State the controller starts converged on.
        """
        self._config = config or WeatherConfig()
        self._catalog = catalog
        self._router = router
        self._engine = InterpolationEngine(catalog)

        start = catalog.lookup(initial_state)
        self._cursor = TransitionCursor(
            current_state=start.id,
            target_state=start.id,
            origin=start.parameters,
        )
        self._wind = WindModel(
            direction=self._config.wind_direction,
            base_speed=self._config.base_wind_speed * start.parameters.wind_multiplier,
            turbulence=self._config.turbulence,
            gust_frequency=self._config.gust_frequency,
        )
        self._parameters = start.parameters
        self._listeners: list[Callable[[WeatherFrame], None]] = []
        self.degraded_transitions = 0

    @classmethod
    def create(
        cls,
        config: Optional[WeatherConfig] = None,
        initial_state: Any = WeatherType.CLEAR,
    ) -> "WeatherController":
        """Create a controller over the shipped weather tables."""
        config = config or WeatherConfig()
        router = TransitionRouter.default(strict=config.strict_routes)
        return cls(StateCatalog.default(), router, config, initial_state)

    @property
    def config(self) -> WeatherConfig:
        """The controller configuration."""
        return self._config

    @property
    def current_state(self) -> WeatherType:
        """State the current hop started from."""
        return self._cursor.current_state

    @property
    def target_state(self) -> WeatherType:
        """Final state of the active plan."""
        return self._cursor.target_state

    @property
    def progress(self) -> float:
        """Progress through the current hop, 0 to 1."""
        return self._cursor.progress

    @property
    def remaining_plan(self) -> list[WeatherType]:
        """Hops still to traverse, head first."""
        return list(self._cursor.remaining_plan)

    @property
    def is_converged(self) -> bool:
        """True when the target has been reached."""
        return self._cursor.is_converged

    @property
    def parameters(self) -> WeatherParameters:
        """Last live parameter vector."""
        return self._parameters

    @property
    def wind(self) -> WindModel:
        """The wind model."""
        return self._wind

    def set_state(self, state_id: Any) -> None:
        """Request a transition to a state.

        Routing starts from the current blended position, replacing any
        plan in flight.

        Args:
            state_id: Requested state.

        Raises:
            UnknownStateError: If the state is unknown. The cursor is untouched.
        """
        target = WeatherType.parse(state_id)
        cursor = self._cursor

        if target == cursor.target_state and cursor.is_converged:
            return

        if cursor.remaining_plan:
            # Mid-hop: blend onward from where we are now
            origin = self._engine.live_parameters(cursor)
            origin_layers = self._engine.layers(cursor)
            if cursor.progress >= KIND_SWITCH_PROGRESS:
                source = cursor.remaining_plan[0]
            else:
                source = cursor.current_state
        else:
            origin = self._catalog.lookup(cursor.current_state).parameters
            origin_layers = None
            source = cursor.current_state

        plan = self._router.route(source, target)
        if plan.degraded:
            self.degraded_transitions += 1

        cursor.current_state = source
        cursor.target_state = target
        cursor.origin = origin
        cursor.origin_layers = origin_layers
        cursor.progress = 0.0
        cursor.remaining_plan = list(plan.hops)
        logger.debug("Transition %s -> %s via %s", source, target, [str(h) for h in plan.hops])

    def tick(self, dt: float) -> WeatherFrame:
        """Advance weather and wind by one frame.

        Args:
            dt: Delta time in seconds.

        Returns:
            The live frame for rendering collaborators.

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

        self._wind.tick(dt)
        self._parameters = self._engine.advance(self._cursor, dt, self._config.speed)
        self._wind.set_base_speed(
            self._config.base_wind_speed * self._parameters.wind_multiplier
        )

        dominant = self._cursor.current_state
        if self._cursor.remaining_plan and self._cursor.progress >= KIND_SWITCH_PROGRESS:
            dominant = self._cursor.remaining_plan[0]

        frame = WeatherFrame(
            parameters=self._parameters,
            wind=self._wind.force(),
            current_state=self._cursor.current_state,
            target_state=self._cursor.target_state,
            progress=self._cursor.progress,
            precipitation_layers=self._engine.layers(self._cursor),
            hints=self._catalog.lookup(dominant).hints,
        )
        for listener in self._listeners:
            listener(frame)
        return frame

    def subscribe(self, listener: Callable[[WeatherFrame], None]) -> Callable[[], None]:
        """Subscribe to frames.

        Args:
            listener: Called with each frame.

        Returns:
            An unsubscribe function.
        """
        self._listeners.append(listener)
        return lambda: self._listeners.remove(listener)
