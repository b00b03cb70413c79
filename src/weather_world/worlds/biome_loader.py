"""Biome loading and management."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping, Union

from weather_world.types import BiomeProfile, ConfigurationError

from .biomes import BIOME_PROFILES


class BiomeLoader:
    """Loads and manages biome profiles."""

    def __init__(self):
        """Initialize the loader with the shipped biomes."""
        self._profiles: dict[str, BiomeProfile] = dict(BIOME_PROFILES)

    @property
    def available_biomes(self) -> list[str]:
        """Get list of available biome names.

        Returns:
            List of biome names.
        """
        return list(self._profiles.keys())

    def load(self, biome_name: str) -> BiomeProfile:
        """Load a biome by name.

        Args:
            biome_name: Name of the biome.

        Returns:
            The biome profile.

        Raises:
            ValueError: If the biome name is not found.
        """
        if biome_name not in self._profiles:
            raise ValueError(
                f"Unknown biome: {biome_name}. "
                f"Available: {', '.join(self.available_biomes)}"
            )

        return self._profiles[biome_name]

    def register_biome(self, profile: Union[BiomeProfile, Mapping[str, Any]]) -> BiomeProfile:
        """Register a biome, replacing any with the same id.

        Args:
            profile: A profile, or a dictionary accepted by BiomeProfile.from_dict.

        Returns:
            The registered profile.
        """
        if not isinstance(profile, BiomeProfile):
            profile = BiomeProfile.from_dict(profile)
        self._profiles[profile.id] = profile
        return profile

    def load_file(self, path: Union[str, Path]) -> list[BiomeProfile]:
        """Register every biome in a JSON file.

        The file holds either a list of profiles or ``{"biomes": [...]}``.
        Every profile is validated before any is registered.

        Args:
            path: Path to the JSON file.

        Returns:
            The registered profiles.

        Raises:
            ConfigurationError: If the file is unreadable or a profile is invalid.
        """
        try:
            data = json.loads(Path(path).read_text())
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigurationError(f"Cannot read biome file {path}: {e}") from e

        if isinstance(data, dict):
            data = data.get("biomes", [])
        if not isinstance(data, list):
            raise ConfigurationError(f"Biome file {path} must hold a list of profiles")

        profiles = [BiomeProfile.from_dict(entry) for entry in data]
        for profile in profiles:
            self._profiles[profile.id] = profile
        return profiles
