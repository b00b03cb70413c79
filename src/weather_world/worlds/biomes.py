"""Shipped biome profiles."""

from __future__ import annotations

from weather_world.types import BiomeProfile, WeatherType

W = WeatherType


TEMPERATE = BiomeProfile(
    id="temperate",
    weights={
        W.CLEAR: 0.30,
        W.CLOUDY: 0.22,
        W.FOG: 0.06,
        W.DRIZZLE: 0.10,
        W.RAIN: 0.14,
        W.HEAVY_RAIN: 0.06,
        W.STORM: 0.04,
        W.LIGHT_SNOW: 0.04,
        W.SNOW: 0.03,
        W.BLIZZARD: 0.01,
    },
    dwell_minutes=(8.0, 20.0),
)

TROPICAL = BiomeProfile(
    id="tropical",
    weights={
        W.CLEAR: 0.35,
        W.CLOUDY: 0.20,
        W.FOG: 0.03,
        W.DRIZZLE: 0.10,
        W.RAIN: 0.15,
        W.HEAVY_RAIN: 0.10,
        W.STORM: 0.07,
    },
    dwell_minutes=(5.0, 15.0),
)

DESERT = BiomeProfile(
    id="desert",
    weights={
        W.CLEAR: 0.60,
        W.CLOUDY: 0.08,
        W.DRIZZLE: 0.02,
        W.DUSTY: 0.20,
        W.SANDSTORM: 0.10,
    },
    dwell_minutes=(10.0, 30.0),
)

ARCTIC = BiomeProfile(
    id="arctic",
    weights={
        W.CLEAR: 0.20,
        W.CLOUDY: 0.20,
        W.FOG: 0.10,
        W.LIGHT_SNOW: 0.20,
        W.SNOW: 0.20,
        W.BLIZZARD: 0.10,
    },
    dwell_minutes=(10.0, 25.0),
)

ALPINE = BiomeProfile(
    id="alpine",
    weights={
        W.CLEAR: 0.25,
        W.CLOUDY: 0.20,
        W.FOG: 0.10,
        W.RAIN: 0.05,
        W.STORM: 0.05,
        W.LIGHT_SNOW: 0.15,
        W.SNOW: 0.12,
        W.BLIZZARD: 0.08,
    },
    dwell_minutes=(6.0, 18.0),
)

COASTAL = BiomeProfile(
    id="coastal",
    weights={
        W.CLEAR: 0.28,
        W.CLOUDY: 0.22,
        W.FOG: 0.18,
        W.DRIZZLE: 0.14,
        W.RAIN: 0.12,
        W.HEAVY_RAIN: 0.04,
        W.STORM: 0.02,
    },
    dwell_minutes=(6.0, 16.0),
)

BIOME_PROFILES: dict[str, BiomeProfile] = {
    profile.id: profile
    for profile in (TEMPERATE, TROPICAL, DESERT, ARCTIC, ALPINE, COASTAL)
}
