"""Tests for transition routing."""

from __future__ import annotations

import logging

import pytest

from weather_world.engine import AdjacencyMatrix, TransitionRouter
from weather_world.types import ConfigurationError, UnknownStateError, Via, WeatherType

W = WeatherType


class TestRouteLookup:
    """Tests for routing over the shipped tables."""

    def test_clear_to_storm_builds_up(self, router):
        """Test clear to storm passes through cloud and rain."""
        plan = router.route("clear", "storm")
        assert plan.hops == ("cloudy", "rain", "heavyRain", "storm")
        assert not plan.degraded

    def test_natural_transition_is_direct(self, router):
        """Test a natural pair is a single hop."""
        plan = router.route("rain", "cloudy")
        assert plan.hops == (W.CLOUDY,)

    def test_abrupt_transition_is_direct(self, router):
        """Test abrupt pairs are allowed directly."""
        assert router.route("clear", "drizzle").hops == (W.DRIZZLE,)

    def test_storm_clears_gradually(self, router):
        """Test storm to clear steps down through rain and cloud."""
        assert router.route("storm", "clear").hops == (W.RAIN, W.CLOUDY, W.CLEAR)

    def test_sandstorm_to_rain_passes_clear(self, router):
        """Test the alias route from sandstorm to rain."""
        plan = router.route("sandstorm", "rain")
        assert plan.hops == ("dusty", "clear", "cloudy", "drizzle", "rain")
        assert plan.hops[-1] is W.RAIN

    def test_nested_aliases_expand(self, router):
        """Test aliases inside aliases splice fully."""
        plan = router.route("sandstorm", "storm")
        assert plan.hops == (
            W.DUSTY,
            W.CLEAR,
            W.CLOUDY,
            W.DRIZZLE,
            W.RAIN,
            W.HEAVY_RAIN,
            W.STORM,
        )

    def test_same_state_is_single_hop(self, router):
        """Test routing a state to itself is one hop."""
        assert router.route("fog", "fog").hops == (W.FOG,)

    def test_every_pair_has_valid_plan(self, router, adjacency):
        """Test every pair routes without a forbidden hop."""
        for source in WeatherType:
            for destination in WeatherType:
                plan = router.route(source, destination)
                assert plan.hops, (source, destination)
                assert plan.hops[-1] is destination
                assert not plan.degraded, (source, destination)
                for a, b in plan.pairs:
                    assert not adjacency.is_forbidden(a, b), (source, destination, a, b)

    def test_shipped_routes_complete(self, router):
        """Test every forbidden pair has a registered route."""
        assert router.missing_routes() == []
        assert router.has_route("clear", "storm")
        assert not router.has_route("rain", "cloudy")

    def test_strict_default_builds(self):
        """Test the shipped tables pass strict validation."""
        TransitionRouter.default(strict=True)

    def test_unknown_state_raises(self, router):
        """Test routing an unknown state raises UnknownStateError."""
        with pytest.raises(UnknownStateError):
            router.route("clear", "hail")
        with pytest.raises(UnknownStateError):
            router.route("hail", "clear")


class TestMissingRoutes:
    """Tests for forbidden pairs without routes."""

    def test_missing_routes_degrade_to_direct_hop(self, adjacency, caplog):
        """Test a forbidden pair without a route falls back with a warning."""
        with caplog.at_level(logging.WARNING, logger="weather_world.engine.router"):
            router = TransitionRouter(adjacency, {})
            caplog.clear()
            plan = router.route("clear", "storm")

        assert plan.degraded
        assert plan.hops == (W.STORM,)
        assert any("clear -> storm" in r.getMessage() for r in caplog.records)

    def test_missing_routes_warned_at_construction(self, adjacency, caplog):
        """Test missing routes are reported when the router is built."""
        with caplog.at_level(logging.WARNING, logger="weather_world.engine.router"):
            router = TransitionRouter(adjacency, {})

        assert len(router.missing_routes()) == len(adjacency.forbidden_pairs())
        assert len(caplog.records) == len(adjacency.forbidden_pairs())

    def test_strict_mode_rejects_missing_routes(self, adjacency):
        """Test strict routers refuse incomplete tables."""
        with pytest.raises(ConfigurationError, match="without routes"):
            TransitionRouter(adjacency, {}, strict=True)


class TestRouteValidation:
    """Tests for route validation at load time."""

    def test_forbidden_hop_rejected(self, adjacency):
        """Test a route whose hop is forbidden is rejected."""
        with pytest.raises(ConfigurationError, match="forbidden hop"):
            TransitionRouter(adjacency, {(W.CLEAR, W.STORM): (W.RAIN, W.STORM)})

    def test_route_must_end_at_destination(self, adjacency):
        """Test a route that stops short is rejected."""
        with pytest.raises(ConfigurationError):
            TransitionRouter(adjacency, {(W.CLEAR, W.STORM): (W.CLOUDY, W.RAIN)})

    def test_route_must_not_repeat_source(self, adjacency):
        """Test a route starting with its own source is rejected."""
        with pytest.raises(ConfigurationError, match="repeats"):
            TransitionRouter(adjacency, {(W.CLEAR, W.RAIN): (W.CLEAR, W.CLOUDY, W.RAIN)})

    def test_empty_route_rejected(self, adjacency):
        """Test registered routes need hops."""
        with pytest.raises(ConfigurationError):
            TransitionRouter(adjacency, {(W.CLEAR, W.RAIN): ()})

    def test_unknown_state_in_route_rejected(self, adjacency):
        """Test unknown names in tables are configuration errors."""
        with pytest.raises(ConfigurationError):
            TransitionRouter(adjacency, {("clear", "hail"): ("cloudy",)})
        with pytest.raises(ConfigurationError):
            TransitionRouter(adjacency, {("clear", "rain"): ("mist", "rain")})

    def test_alias_cycle_rejected(self, adjacency):
        """Test an alias that expands to itself is rejected."""
        with pytest.raises(ConfigurationError, match="cycle"):
            TransitionRouter(adjacency, {(W.CLEAR, W.STORM): (Via(W.STORM),)})

    def test_mutual_alias_cycle_rejected(self, adjacency):
        """Test two routes aliasing each other are rejected."""
        routes = {
            (W.CLEAR, W.RAIN): (Via(W.HEAVY_RAIN), W.RAIN),
            (W.CLEAR, W.HEAVY_RAIN): (Via(W.RAIN), W.HEAVY_RAIN),
        }
        with pytest.raises(ConfigurationError, match="cycle"):
            TransitionRouter(adjacency, routes)

    def test_alias_depth_limited(self, adjacency):
        """Test alias nesting deeper than the limit is rejected."""
        routes = {
            (W.CLEAR, W.STORM): (Via(W.HEAVY_RAIN), W.STORM),
            (W.CLEAR, W.HEAVY_RAIN): (Via(W.RAIN), W.HEAVY_RAIN),
            (W.CLEAR, W.RAIN): (Via(W.DRIZZLE), W.RAIN),
            (W.CLEAR, W.DRIZZLE): (Via(W.CLOUDY), W.DRIZZLE),
            (W.CLEAR, W.CLOUDY): (W.CLOUDY,),
        }
        with pytest.raises(ConfigurationError, match="depth"):
            TransitionRouter(adjacency, routes)

    def test_alias_to_unrouted_forbidden_pair_rejected(self, adjacency):
        """Test an alias must resolve to something reachable."""
        routes = {(W.CLOUDY, W.SANDSTORM): (W.CLEAR, Via(W.SANDSTORM))}
        with pytest.raises(ConfigurationError, match="no registered route"):
            TransitionRouter(adjacency, routes)

    def test_alias_to_allowed_pair_is_direct(self, adjacency):
        """Test an alias over an allowed pair expands to one hop."""
        routes = {(W.CLEAR, W.RAIN): (Via(W.CLOUDY), W.RAIN)}
        router = TransitionRouter(adjacency, routes)
        assert router.route(W.CLEAR, W.RAIN).hops == (W.CLOUDY, W.RAIN)

    def test_custom_adjacency(self):
        """Test routing follows a custom grid."""
        rows = {state: "N" * 12 for state in WeatherType}
        rows[W.CLEAR] = "NNNNNNFNNNNN"
        adjacency = AdjacencyMatrix(rows)
        router = TransitionRouter(adjacency, {(W.CLEAR, W.STORM): (W.FOG, W.STORM)}, strict=True)
        assert router.route("clear", "storm").hops == (W.FOG, W.STORM)
        assert router.route("clear", "rain").hops == (W.RAIN,)
