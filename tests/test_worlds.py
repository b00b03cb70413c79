"""Tests for shipped tables and biome loading."""

from __future__ import annotations

import json

import pytest

from weather_world.types import BiomeProfile, ConfigurationError, WeatherType
from weather_world.worlds import BIOME_PROFILES, REGISTERED_ROUTES, BiomeLoader


class TestShippedTables:
    """Tests for the shipped weather tables."""

    def test_routes_cover_forbidden_pairs(self, adjacency):
        """Test a route is registered for every forbidden pair."""
        assert set(adjacency.forbidden_pairs()) <= set(REGISTERED_ROUTES)

    def test_biomes_valid(self):
        """Test shipped biomes have normalized distributions."""
        for profile in BIOME_PROFILES.values():
            assert sum(profile.weights.values()) == pytest.approx(1.0)
            low, high = profile.dwell_minutes
            assert 0 < low <= high

    def test_desert_is_dry(self):
        """Test the desert never snows or storms."""
        desert = BIOME_PROFILES["desert"]
        assert WeatherType.SANDSTORM in desert.states
        assert WeatherType.SNOW not in desert.states
        assert WeatherType.STORM not in desert.states

    def test_arctic_has_snow(self):
        """Test the arctic biome includes the snow family."""
        arctic = BIOME_PROFILES["arctic"]
        assert {WeatherType.LIGHT_SNOW, WeatherType.SNOW, WeatherType.BLIZZARD} <= set(arctic.states)


class TestBiomeLoader:
    """Tests for BiomeLoader."""

    def test_available_biomes(self):
        """Test the shipped biomes are available."""
        loader = BiomeLoader()
        assert set(loader.available_biomes) == {
            "temperate",
            "tropical",
            "desert",
            "arctic",
            "alpine",
            "coastal",
        }

    def test_load(self):
        """Test loading a biome by name."""
        profile = BiomeLoader().load("tropical")
        assert profile.id == "tropical"

    def test_load_unknown(self):
        """Test unknown names raise ValueError listing the options."""
        with pytest.raises(ValueError, match="Available"):
            BiomeLoader().load("lunar")

    def test_register_dict(self):
        """Test registering a biome from plain data."""
        loader = BiomeLoader()
        loader.register_biome(
            {"id": "moor", "weights": {"fog": 0.5, "drizzle": 0.5}, "dwell_minutes": [2, 4]}
        )
        assert loader.load("moor").weights[WeatherType.FOG] == 0.5

    def test_register_replaces(self):
        """Test a registered biome replaces one with the same id."""
        loader = BiomeLoader()
        loader.register_biome(
            BiomeProfile(id="desert", weights={"sandstorm": 1.0}, dwell_minutes=(1, 1))
        )
        assert loader.load("desert").states == [WeatherType.SANDSTORM]

    def test_loaders_are_independent(self):
        """Test registration does not leak into other loaders."""
        BiomeLoader().register_biome(
            {"id": "moor", "weights": {"fog": 1.0}, "dwell_minutes": [2, 4]}
        )
        assert "moor" not in BiomeLoader().available_biomes

    def test_load_file_list(self, tmp_path):
        """Test loading a JSON list of biomes."""
        path = tmp_path / "biomes.json"
        path.write_text(json.dumps([
            {"id": "moor", "weights": {"fog": 0.7, "drizzle": 0.3}, "dwell_minutes": [2, 4]},
            {"id": "dunes", "weights": {"dusty": 0.5, "sandstorm": 0.5}, "dwell_minutes": [5, 9]},
        ]))
        loader = BiomeLoader()
        profiles = loader.load_file(path)
        assert [p.id for p in profiles] == ["moor", "dunes"]
        assert loader.load("dunes").dwell_minutes == (5.0, 9.0)

    def test_load_file_mapping(self, tmp_path):
        """Test loading a JSON object with a biomes key."""
        path = tmp_path / "biomes.json"
        path.write_text(json.dumps({
            "biomes": [{"id": "moor", "weights": {"fog": 1.0}, "dwell_minutes": [2, 4]}]
        }))
        loader = BiomeLoader()
        loader.load_file(str(path))
        assert "moor" in loader.available_biomes

    def test_load_file_invalid_profile_registers_nothing(self, tmp_path):
        """Test one bad profile keeps the whole file out."""
        path = tmp_path / "biomes.json"
        path.write_text(json.dumps([
            {"id": "moor", "weights": {"fog": 1.0}, "dwell_minutes": [2, 4]},
            {"id": "bad", "weights": {"fog": 0.5}, "dwell_minutes": [2, 4]},
        ]))
        loader = BiomeLoader()
        with pytest.raises(ConfigurationError):
            loader.load_file(path)
        assert "moor" not in loader.available_biomes

    def test_load_file_missing(self, tmp_path):
        """Test unreadable files raise ConfigurationError."""
        with pytest.raises(ConfigurationError):
            BiomeLoader().load_file(tmp_path / "absent.json")

    def test_load_file_malformed_json(self, tmp_path):
        """Test malformed JSON raises ConfigurationError."""
        path = tmp_path / "biomes.json"
        path.write_text("{not json")
        with pytest.raises(ConfigurationError):
            BiomeLoader().load_file(path)

    def test_load_file_wrong_shape(self, tmp_path):
        """Test a JSON scalar is rejected."""
        path = tmp_path / "biomes.json"
        path.write_text("42")
        with pytest.raises(ConfigurationError):
            BiomeLoader().load_file(path)
