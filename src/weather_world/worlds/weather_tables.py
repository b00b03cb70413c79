"""Static weather tables: catalog entries, adjacency grid and registered routes."""

from __future__ import annotations

from typing import Union

from weather_world.types import (
    PrecipitationKind,
    RenderHints,
    Via,
    WeatherParameters,
    WeatherState,
    WeatherType,
)

W = WeatherType
P = PrecipitationKind

RouteEntry = Union[WeatherType, Via]


def _state(
    state_id: WeatherType,
    kind: PrecipitationKind,
    intensity: float,
    haze: float,
    discharge: float,
    darkness: float,
    wind: float,
    hints: RenderHints,
) -> WeatherState:
    return WeatherState(
        id=state_id,
        parameters=WeatherParameters(
            precipitation_kind=kind,
            precipitation_intensity=intensity,
            haze_density=haze,
            discharge_frequency=discharge,
            sky_darkness=darkness,
            wind_multiplier=wind,
        ),
        hints=hints,
    )


CATALOG_ENTRIES: tuple[WeatherState, ...] = (
    _state(W.CLEAR, P.NONE, 0.0, 0.002, 0.0, 0.0, 0.5,
           RenderHints(sky_color=(120, 180, 240))),
    _state(W.CLOUDY, P.NONE, 0.0, 0.006, 0.0, 0.35, 1.0,
           RenderHints(sky_color=(150, 160, 175))),
    _state(W.FOG, P.NONE, 0.0, 0.045, 0.0, 0.3, 0.2,
           RenderHints(sky_color=(190, 195, 200))),
    _state(W.DRIZZLE, P.RAIN, 0.3, 0.01, 0.0, 0.45, 0.8,
           RenderHints(sky_color=(140, 150, 165), precipitation_color=(170, 190, 215),
                       particle_size=0.6, streak_length=4.0)),
    _state(W.RAIN, P.RAIN, 0.7, 0.015, 0.0, 0.6, 1.2,
           RenderHints(sky_color=(110, 120, 140), precipitation_color=(160, 185, 220),
                       particle_size=0.8, streak_length=8.0)),
    _state(W.HEAVY_RAIN, P.RAIN, 0.9, 0.02, 0.1, 0.75, 1.6,
           RenderHints(sky_color=(85, 95, 115), precipitation_color=(150, 175, 215),
                       particle_size=1.0, streak_length=12.0)),
    _state(W.STORM, P.RAIN, 1.0, 0.025, 0.8, 0.85, 2.5,
           RenderHints(sky_color=(55, 60, 80), precipitation_color=(140, 165, 210),
                       particle_size=1.1, streak_length=16.0)),
    _state(W.LIGHT_SNOW, P.SNOW, 0.3, 0.01, 0.0, 0.3, 0.6,
           RenderHints(sky_color=(185, 190, 205), precipitation_color=(245, 245, 255),
                       particle_size=1.2)),
    _state(W.SNOW, P.SNOW, 0.7, 0.02, 0.0, 0.45, 1.0,
           RenderHints(sky_color=(170, 175, 190), precipitation_color=(250, 250, 255),
                       particle_size=1.5)),
    _state(W.BLIZZARD, P.SNOW, 1.0, 0.04, 0.0, 0.6, 3.0,
           RenderHints(sky_color=(160, 165, 180), precipitation_color=(255, 255, 255),
                       particle_size=1.3, streak_length=6.0)),
    _state(W.DUSTY, P.DUST, 0.3, 0.015, 0.0, 0.15, 1.5,
           RenderHints(sky_color=(200, 180, 140), precipitation_color=(190, 160, 110),
                       particle_size=0.5, streak_length=2.0)),
    _state(W.SANDSTORM, P.DUST, 1.0, 0.05, 0.0, 0.5, 3.0,
           RenderHints(sky_color=(170, 130, 80), precipitation_color=(180, 140, 90),
                       particle_size=0.7, streak_length=5.0)),
)


# One letter per destination, in WeatherType order:
#   clear cloudy fog drizzle rain heavyRain storm lightSnow snow blizzard dusty sandstorm
# N = natural, A = abrupt, F = forbidden
ADJACENCY_ROWS: dict[WeatherType, str] = {
    W.CLEAR:      "NNNAFFFAFFNF",
    W.CLOUDY:     "NNNNNAFNNFAF",
    W.FOG:        "NNNNAFFNAFFF",
    W.DRIZZLE:    "ANNNNAFAFFFF",
    W.RAIN:       "FNANNNAAAFFF",
    W.HEAVY_RAIN: "FAFANNNFAFFF",
    W.STORM:      "FFFFNNNFFFFF",
    W.LIGHT_SNOW: "NNNAAFFNNAFF",
    W.SNOW:       "FNAFAFFNNNFF",
    W.BLIZZARD:   "FFFFFFFANNFF",
    W.DUSTY:      "NAFFFFFFFFNN",
    W.SANDSTORM:  "FFFFFFFFFFNN",
}


# Hop sequences for every forbidden pair. Via(x) splices in the route from
# the current position to x.
REGISTERED_ROUTES: dict[tuple[WeatherType, WeatherType], tuple[RouteEntry, ...]] = {
    # Clear
    (W.CLEAR, W.RAIN): (W.CLOUDY, W.RAIN),
    (W.CLEAR, W.HEAVY_RAIN): (W.CLOUDY, W.RAIN, W.HEAVY_RAIN),
    (W.CLEAR, W.STORM): (W.CLOUDY, W.RAIN, W.HEAVY_RAIN, W.STORM),
    (W.CLEAR, W.SNOW): (W.CLOUDY, W.SNOW),
    (W.CLEAR, W.BLIZZARD): (W.CLOUDY, W.SNOW, W.BLIZZARD),
    (W.CLEAR, W.SANDSTORM): (W.DUSTY, W.SANDSTORM),
    # Cloudy
    (W.CLOUDY, W.STORM): (W.RAIN, W.HEAVY_RAIN, W.STORM),
    (W.CLOUDY, W.BLIZZARD): (W.SNOW, W.BLIZZARD),
    (W.CLOUDY, W.SANDSTORM): (W.CLEAR, Via(W.SANDSTORM)),
    # Fog
    (W.FOG, W.HEAVY_RAIN): (W.DRIZZLE, W.RAIN, W.HEAVY_RAIN),
    (W.FOG, W.STORM): (W.DRIZZLE, Via(W.STORM)),
    (W.FOG, W.BLIZZARD): (W.SNOW, W.BLIZZARD),
    (W.FOG, W.DUSTY): (W.CLEAR, W.DUSTY),
    (W.FOG, W.SANDSTORM): (W.CLEAR, Via(W.SANDSTORM)),
    # Drizzle
    (W.DRIZZLE, W.STORM): (W.RAIN, W.HEAVY_RAIN, W.STORM),
    (W.DRIZZLE, W.SNOW): (W.LIGHT_SNOW, W.SNOW),
    (W.DRIZZLE, W.BLIZZARD): (W.LIGHT_SNOW, W.SNOW, W.BLIZZARD),
    (W.DRIZZLE, W.DUSTY): (W.CLEAR, W.DUSTY),
    (W.DRIZZLE, W.SANDSTORM): (W.CLEAR, Via(W.SANDSTORM)),
    # Rain
    (W.RAIN, W.CLEAR): (W.CLOUDY, W.CLEAR),
    (W.RAIN, W.BLIZZARD): (W.SNOW, W.BLIZZARD),
    (W.RAIN, W.DUSTY): (Via(W.CLEAR), W.DUSTY),
    (W.RAIN, W.SANDSTORM): (Via(W.CLEAR), Via(W.SANDSTORM)),
    # Heavy rain
    (W.HEAVY_RAIN, W.CLEAR): (W.RAIN, W.CLOUDY, W.CLEAR),
    (W.HEAVY_RAIN, W.FOG): (W.RAIN, W.FOG),
    (W.HEAVY_RAIN, W.LIGHT_SNOW): (W.RAIN, W.LIGHT_SNOW),
    (W.HEAVY_RAIN, W.BLIZZARD): (W.SNOW, W.BLIZZARD),
    (W.HEAVY_RAIN, W.DUSTY): (Via(W.CLEAR), W.DUSTY),
    (W.HEAVY_RAIN, W.SANDSTORM): (Via(W.CLEAR), Via(W.SANDSTORM)),
    # Storm
    (W.STORM, W.CLEAR): (W.RAIN, W.CLOUDY, W.CLEAR),
    (W.STORM, W.CLOUDY): (W.RAIN, W.CLOUDY),
    (W.STORM, W.FOG): (W.RAIN, W.FOG),
    (W.STORM, W.DRIZZLE): (W.RAIN, W.DRIZZLE),
    (W.STORM, W.LIGHT_SNOW): (W.RAIN, W.LIGHT_SNOW),
    (W.STORM, W.SNOW): (W.RAIN, W.SNOW),
    (W.STORM, W.BLIZZARD): (W.RAIN, W.SNOW, W.BLIZZARD),
    (W.STORM, W.DUSTY): (Via(W.CLEAR), W.DUSTY),
    (W.STORM, W.SANDSTORM): (Via(W.CLEAR), Via(W.SANDSTORM)),
    # Light snow
    (W.LIGHT_SNOW, W.HEAVY_RAIN): (W.RAIN, W.HEAVY_RAIN),
    (W.LIGHT_SNOW, W.STORM): (W.RAIN, W.HEAVY_RAIN, W.STORM),
    (W.LIGHT_SNOW, W.DUSTY): (W.CLEAR, W.DUSTY),
    (W.LIGHT_SNOW, W.SANDSTORM): (W.CLEAR, Via(W.SANDSTORM)),
    # Snow
    (W.SNOW, W.CLEAR): (W.LIGHT_SNOW, W.CLEAR),
    (W.SNOW, W.DRIZZLE): (W.CLOUDY, W.DRIZZLE),
    (W.SNOW, W.HEAVY_RAIN): (W.RAIN, W.HEAVY_RAIN),
    (W.SNOW, W.STORM): (W.RAIN, W.HEAVY_RAIN, W.STORM),
    (W.SNOW, W.DUSTY): (Via(W.CLEAR), W.DUSTY),
    (W.SNOW, W.SANDSTORM): (Via(W.CLEAR), Via(W.SANDSTORM)),
    # Blizzard
    (W.BLIZZARD, W.CLEAR): (W.SNOW, W.LIGHT_SNOW, W.CLEAR),
    (W.BLIZZARD, W.CLOUDY): (W.SNOW, W.CLOUDY),
    (W.BLIZZARD, W.FOG): (W.SNOW, W.FOG),
    (W.BLIZZARD, W.DRIZZLE): (W.SNOW, W.CLOUDY, W.DRIZZLE),
    (W.BLIZZARD, W.RAIN): (W.SNOW, W.RAIN),
    (W.BLIZZARD, W.HEAVY_RAIN): (W.SNOW, W.RAIN, W.HEAVY_RAIN),
    (W.BLIZZARD, W.STORM): (W.SNOW, Via(W.STORM)),
    (W.BLIZZARD, W.DUSTY): (Via(W.CLEAR), W.DUSTY),
    (W.BLIZZARD, W.SANDSTORM): (Via(W.CLEAR), Via(W.SANDSTORM)),
    # Dusty
    (W.DUSTY, W.FOG): (W.CLEAR, W.FOG),
    (W.DUSTY, W.DRIZZLE): (W.CLOUDY, W.DRIZZLE),
    (W.DUSTY, W.RAIN): (W.CLOUDY, W.RAIN),
    (W.DUSTY, W.HEAVY_RAIN): (W.CLOUDY, W.RAIN, W.HEAVY_RAIN),
    (W.DUSTY, W.STORM): (W.CLOUDY, Via(W.STORM)),
    (W.DUSTY, W.LIGHT_SNOW): (W.CLEAR, W.LIGHT_SNOW),
    (W.DUSTY, W.SNOW): (W.CLOUDY, W.SNOW),
    (W.DUSTY, W.BLIZZARD): (W.CLOUDY, W.SNOW, W.BLIZZARD),
    # Sandstorm
    (W.SANDSTORM, W.CLEAR): (W.DUSTY, W.CLEAR),
    (W.SANDSTORM, W.CLOUDY): (W.DUSTY, W.CLOUDY),
    (W.SANDSTORM, W.FOG): (Via(W.CLEAR), W.FOG),
    (W.SANDSTORM, W.DRIZZLE): (Via(W.CLEAR), W.CLOUDY, W.DRIZZLE),
    (W.SANDSTORM, W.RAIN): (Via(W.CLEAR), W.CLOUDY, W.DRIZZLE, W.RAIN),
    (W.SANDSTORM, W.HEAVY_RAIN): (Via(W.RAIN), W.HEAVY_RAIN),
    (W.SANDSTORM, W.STORM): (Via(W.HEAVY_RAIN), W.STORM),
    (W.SANDSTORM, W.LIGHT_SNOW): (Via(W.CLEAR), W.LIGHT_SNOW),
    (W.SANDSTORM, W.SNOW): (W.DUSTY, W.CLOUDY, W.SNOW),
    (W.SANDSTORM, W.BLIZZARD): (W.DUSTY, W.CLOUDY, W.SNOW, W.BLIZZARD),
}
