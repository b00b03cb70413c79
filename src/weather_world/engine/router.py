"""Transition routing between weather states."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Sequence

from weather_world.types import (
    ConfigurationError,
    TransitionPlan,
    UnknownStateError,
    Via,
    WeatherType,
)

from .adjacency import AdjacencyMatrix

logger = logging.getLogger(__name__)

# Nesting limit for Via expansion
MAX_ROUTE_DEPTH = 4

RouteKey = tuple[WeatherType, WeatherType]


class TransitionRouter:
    """Computes hop paths that avoid forbidden direct transitions.

    Registered routes are expanded and validated once, at construction.
    Routing afterwards is a pure lookup on (from, to).
    """

    def __init__(
        self,
        adjacency: AdjacencyMatrix,
        routes: Mapping[tuple[Any, Any], Sequence[Any]],
        strict: bool = False,
    ):
        """Initialize the router.

        Args:
            adjacency: Classification of direct transitions.
            routes: (from, to) -> hop entries, each a state or a Via alias.
            strict: Raise instead of warning when a forbidden pair has no route.

        Raises:
            ConfigurationError: If a route is unknown, cyclic, too deep,
                contains a forbidden hop or misses its destination.
        """
        self._adjacency = adjacency
        self._raw: dict[RouteKey, tuple[Any, ...]] = {}

        for (from_state, to_state), entries in routes.items():
            key = (_parse_config_state(from_state), _parse_config_state(to_state))
            parsed = tuple(
                entry if isinstance(entry, Via) else _parse_config_state(entry)
                for entry in entries
            )
            if not parsed:
                raise ConfigurationError(f"Empty route registered for {key[0]} -> {key[1]}")
            self._raw[key] = parsed

        self._routes: dict[RouteKey, tuple[WeatherType, ...]] = {}
        for key in self._raw:
            hops = self._resolve(key, ())
            self._validate(key, hops)
            self._routes[key] = hops

        missing = self.missing_routes()
        if missing and strict:
            names = ", ".join(f"{a}->{b}" for a, b in missing)
            raise ConfigurationError(f"Forbidden transitions without routes: {names}")
        for from_state, to_state in missing:
            logger.warning(
                "Forbidden transition %s -> %s has no registered route", from_state, to_state
            )

    @classmethod
    def default(
        cls,
        adjacency: Optional[AdjacencyMatrix] = None,
        strict: bool = False,
    ) -> "TransitionRouter":
        """Create a router over the shipped adjacency and route tables."""
        from weather_world.worlds.weather_tables import REGISTERED_ROUTES

        return cls(adjacency or AdjacencyMatrix.default(), REGISTERED_ROUTES, strict=strict)

    @property
    def adjacency(self) -> AdjacencyMatrix:
        """The adjacency matrix routes are checked against."""
        return self._adjacency

    def route(self, from_state: Any, to_state: Any) -> TransitionPlan:
        """Compute the hop path from one state to another.

        Args:
            from_state: Source state.
            to_state: Destination state.

        Returns:
            The plan. Forbidden pairs without a registered route degrade to
            a direct hop with ``degraded`` set.

        Raises:
            UnknownStateError: If either state is unknown.
        """
        source = WeatherType.parse(from_state)
        destination = WeatherType.parse(to_state)

        if not self._adjacency.is_forbidden(source, destination):
            return TransitionPlan(source, destination, (destination,))

        hops = self._routes.get((source, destination))
        if hops is None:
            logger.warning(
                "No route for forbidden transition %s -> %s, using direct hop",
                source,
                destination,
            )
            return TransitionPlan(source, destination, (destination,), degraded=True)

        return TransitionPlan(source, destination, hops)

    def missing_routes(self) -> list[RouteKey]:
        """Forbidden pairs that have no registered route."""
        return [pair for pair in self._adjacency.forbidden_pairs() if pair not in self._raw]

    def has_route(self, from_state: Any, to_state: Any) -> bool:
        """Check whether a registered route exists for a pair."""
        return (WeatherType.parse(from_state), WeatherType.parse(to_state)) in self._routes

    def _resolve(self, key: RouteKey, stack: tuple[RouteKey, ...]) -> tuple[WeatherType, ...]:
        """Expand a registered route, splicing in Via aliases."""
        if key in stack:
            chain = " => ".join(f"{a}->{b}" for a, b in stack + (key,))
            raise ConfigurationError(f"Route alias cycle: {chain}")
        if len(stack) >= MAX_ROUTE_DEPTH:
            raise ConfigurationError(
                f"Route {key[0]} -> {key[1]} exceeds alias depth {MAX_ROUTE_DEPTH}"
            )

        stack = stack + (key,)
        position = key[0]
        hops: list[WeatherType] = []
        for entry in self._raw[key]:
            if isinstance(entry, Via):
                hops.extend(self._expand_alias(position, entry.destination, stack))
            else:
                hops.append(entry)
            if hops:
                position = hops[-1]
        return tuple(hops)

    def _expand_alias(
        self,
        position: WeatherType,
        destination: WeatherType,
        stack: tuple[RouteKey, ...],
    ) -> tuple[WeatherType, ...]:
        if position == destination:
            return ()
        key = (position, destination)
        if key in self._raw:
            return self._resolve(key, stack)
        if not self._adjacency.is_forbidden(position, destination):
            return (destination,)
        raise ConfigurationError(
            f"Route alias {position} -> {destination} has no registered route"
        )

    def _validate(self, key: RouteKey, hops: tuple[WeatherType, ...]) -> None:
        source, destination = key
        if not hops or hops[-1] != destination:
            raise ConfigurationError(f"Route {source} -> {destination} does not end at {destination}")
        if hops[0] == source:
            raise ConfigurationError(f"Route {source} -> {destination} repeats its source")

        path = (source,) + hops
        for a, b in zip(path, path[1:]):
            if self._adjacency.is_forbidden(a, b):
                raise ConfigurationError(
                    f"Route {source} -> {destination} contains forbidden hop {a} -> {b}"
                )


def _parse_config_state(value: Any) -> WeatherType:
    try:
        return WeatherType.parse(value)
    except UnknownStateError:
        raise ConfigurationError(f"Route references unknown state {value!r}") from None
